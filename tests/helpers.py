"""Page and transport builders shared by the tests."""

import httpx


def build_page(title=None, description=None, keywords=None, body="", description_first=False):
    """Assemble a minimal homepage."""
    head = []
    if title is not None:
        head.append(f"<title>{title}</title>")
    if description is not None:
        if description_first:
            head.append(f'<meta content="{description}" name="description">')
        else:
            head.append(f'<meta name="description" content="{description}">')
    if keywords is not None:
        head.append(f'<meta name="keywords" content="{keywords}">')
    return f"<html><head>{''.join(head)}</head><body>{body}</body></html>"


def html_transport(html, status_code=200, seen=None):
    """Transport that answers every request with the given page."""
    def handler(request):
        if seen is not None:
            seen.append(request)
        return httpx.Response(status_code, text=html)
    return httpx.MockTransport(handler)


def failing_transport():
    """Transport that can't connect to anything."""
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)
    return httpx.MockTransport(handler)
