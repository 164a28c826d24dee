"""Command-line interface for competitor discovery."""

import asyncio
import json
import logging

import click
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from .catalog.competitors import INDUSTRY_COMPETITORS, REGIONAL_OVERRIDES
from .catalog.industries import INDUSTRIES
from .config import DEFAULT_INDUSTRY, get_settings
from .models.discovery import DiscoveryStatus
from .services.discovery import CompetitorDiscoveryService
from .services.industry_classifier import IndustryClassifier

# Setup logging
logging.basicConfig(
    level=getattr(logging, get_settings().log_level.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Rich console for pretty output
console = Console()

STATUS_COLORS = {
    DiscoveryStatus.COMPLETE: "green",
    DiscoveryStatus.DEGRADED: "yellow",
    DiscoveryStatus.FAILED: "red",
}


@click.group()
@click.option('--debug/--no-debug', default=False, help='Enable debug logging')
def cli(debug):
    """Competitor discovery for website reports.

    Profiles a site's homepage, classifies its industry and suggests competitors.
    """
    if debug:
        logging.getLogger().setLevel(logging.DEBUG)


def _display_result(result):
    """Display one discovery result."""
    color = STATUS_COLORS.get(result.status, "white")
    profile = result.profile

    console.print(Panel.fit(
        f"[bold]{result.domain}[/bold]\n"
        f"Industry: {result.industry or 'N/A'}\n"
        f"Title: {(profile.title if profile else None) or 'N/A'}\n"
        f"Keywords: {', '.join(profile.keywords) if profile and profile.keywords else 'N/A'}\n"
        f"Status: [{color}]{result.status.value}[/{color}]"
        + (f"\nLookup: {result.lookup_source.value}" if result.lookup_source else "")
        + (f"\nFetch error: {profile.fetch_error}" if profile and profile.fetch_error else "")
        + (f"\nError: {result.error}" if result.error else ""),
        title="Site Profile",
        border_style=color
    ))

    if not result.competitors:
        console.print("[yellow]No competitor suggestions. Add competitors manually.")
        return

    table = Table(title=f"Suggested Competitors ({len(result.competitors)})", box=box.ROUNDED)
    table.add_column("#", style="dim", width=3)
    table.add_column("Name", style="cyan")
    table.add_column("Domain", style="green")
    table.add_column("Description")
    table.add_column("Similarity", justify="right", width=10)

    for i, competitor in enumerate(result.competitors, 1):
        table.add_row(
            str(i),
            competitor.name,
            competitor.domain,
            competitor.description or "-",
            f"{competitor.similarity:.2f}" if competitor.similarity is not None else "-"
        )

    console.print(table)


@cli.command()
@click.argument('domains', nargs=-1, required=True)
@click.option('--json', 'as_json', is_flag=True, help='Print results as JSON')
def discover(domains, as_json):
    """Suggest competitors for one or more DOMAINS."""
    service = CompetitorDiscoveryService()

    if as_json:
        results = asyncio.run(service.discover_many(domains))
        click.echo(json.dumps([result.to_dict() for result in results], indent=2))
        return

    with console.status(f"[bold green]Analyzing {len(domains)} site(s)..."):
        results = asyncio.run(service.discover_many(domains))

    for result in results:
        _display_result(result)


@cli.command()
@click.option('--title', default=None, help='Page title')
@click.option('--description', default=None, help='Meta description')
@click.option('--text', default=None, help='Body text')
@click.option('--domain', default=None, help='Domain name')
def classify(title, description, text, domain):
    """Show the industry score breakdown for some page text."""
    if not any([title, description, text, domain]):
        raise click.UsageError("Provide at least one of --title, --description, --text or --domain.")

    classifier = IndustryClassifier()
    matches = classifier.score(title, description, text, domain)

    if not matches:
        console.print(f"[yellow]No industry keywords matched. Industry: {DEFAULT_INDUSTRY}")
        return

    table = Table(title=f"Industry: {matches[0].name}", box=box.ROUNDED)
    table.add_column("Industry", style="cyan")
    table.add_column("Score", justify="right", style="green")
    table.add_column("Matched Keywords")

    for match in matches:
        table.add_row(match.name, f"{match.score:.1f}", ", ".join(match.matched_keywords))

    console.print(table)


@cli.command()
def industries():
    """List the industries the classifier knows about."""
    table = Table(title=f"Industries ({len(INDUSTRIES)})", box=box.ROUNDED)
    table.add_column("Industry", style="cyan")
    table.add_column("Weight", justify="right")
    table.add_column("Keywords", justify="right")
    table.add_column("Competitors")

    for industry in INDUSTRIES:
        if industry.name in REGIONAL_OVERRIDES:
            competitors = "[green]regional"
        elif industry.name in INDUSTRY_COMPETITORS:
            competitors = f"[green]{len(INDUSTRY_COMPETITORS[industry.name])}"
        else:
            competitors = "[dim]fallback"
        table.add_row(industry.name, f"{industry.weight:g}", str(len(industry.keywords)), competitors)

    console.print(table)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
