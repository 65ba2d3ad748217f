"""Shared test fixtures for settings and sample Open States payloads."""

from typing import Any

import pytest

from legislator_lookup.core.config import Settings


@pytest.fixture
def settings() -> Settings:
    """Test application settings."""
    return Settings(
        _env_file=None,
        opencage_api_key="test-opencage-key",
        open_states_api_key="test-open-states-key",
        geocoder_timeout=2.0,
        open_states_timeout=2.0,
    )


@pytest.fixture
def senate_person() -> dict[str, Any]:
    """A state senator as returned by Open States /people.geo."""
    return {
        "id": "ocd-person/jane-doe",
        "name": "Jane Doe",
        "party": "Democratic",
        "current_role": {
            "title": "Senator",
            "org_classification": "upper",
            "district": "6",
        },
        "jurisdiction": {
            "id": "ocd-jurisdiction/country:us/state:ca/government",
            "name": "California",
            "classification": "state",
        },
        "links": [{"url": "https://twitter.com/janedoe"}],
    }


@pytest.fixture
def federal_person() -> dict[str, Any]:
    """A member of Congress, also returned by /people.geo."""
    return {
        "id": "ocd-person/john-roe",
        "name": "John Roe",
        "party": "Republican",
        "current_role": {
            "title": "Representative",
            "org_classification": "lower",
            "district": "CA-7",
        },
        "jurisdiction": {
            "id": "ocd-jurisdiction/country:us/government",
            "name": "United States",
            "classification": "country",
        },
        "links": [{"url": "https://twitter.com/johnroe"}],
    }
