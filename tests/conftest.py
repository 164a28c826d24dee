"""Shared fixtures for competitor discovery tests."""

import pytest

from competitor_discovery.config import Settings

from .helpers import build_page


@pytest.fixture
def settings():
    return Settings(FETCH_TIMEOUT_SECONDS=1.0)


@pytest.fixture
def hvac_charleston_page():
    return build_page(
        title="Charleston Heating & Air | HVAC Repair",
        description="Heating and cooling services in Charleston",
        body="<h1>Comfort you can count on</h1><p>We repair furnace and heat pump systems.</p>",
    )
