"""FastAPI dependency injection for the geocoding and officials providers.

Providers are built lazily, on first use within a request, and closed once
the response is sent, so no client state is shared between requests and a
request rejected before any upstream call never needs configured providers.
"""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from loguru import logger

from legislator_lookup.core.config import Settings, get_settings
from legislator_lookup.lib.geocoder import BaseGeocoder, get_configured_geocoder
from legislator_lookup.lib.officials import BaseOfficialsProvider, get_configured_provider
from legislator_lookup.services.legislator_lookup_service import FailureKind, LookupFailure

NOT_CONFIGURED_MESSAGE = "Legislator lookup is not configured"


class LookupProviders:
    """Per-request holder that builds the lookup providers on demand.

    Args:
        settings: Application settings naming the providers and their keys.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._geocoder: BaseGeocoder | None = None
        self._officials_provider: BaseOfficialsProvider | None = None

    def geocoder(self) -> BaseGeocoder:
        """Return the configured geocoder, building it on first call.

        Raises:
            LookupFailure: If the geocoder's API key is not configured.
        """
        if self._geocoder is None:
            geocoder = get_configured_geocoder(self._settings)
            if geocoder is None:
                logger.error("Geocoder {!r} is missing its API key", self._settings.geocoder_provider)
                raise LookupFailure(FailureKind.UNEXPECTED, NOT_CONFIGURED_MESSAGE)
            self._geocoder = geocoder
        return self._geocoder

    def officials_provider(self) -> BaseOfficialsProvider:
        """Return the configured officials provider, building it on first call.

        Raises:
            LookupFailure: If the provider's API key is not configured.
        """
        if self._officials_provider is None:
            provider = get_configured_provider(self._settings)
            if provider is None:
                logger.error("Officials provider {!r} is missing its API key", self._settings.officials_provider)
                raise LookupFailure(FailureKind.UNEXPECTED, NOT_CONFIGURED_MESSAGE)
            self._officials_provider = provider
        return self._officials_provider

    async def close(self) -> None:
        """Close whichever providers were built."""
        if self._officials_provider is not None:
            await self._officials_provider.close()
        if self._geocoder is not None:
            await self._geocoder.close()


async def lookup_providers_dependency(
    settings: Annotated[Settings, Depends(get_settings)],
) -> AsyncGenerator[LookupProviders]:
    """Yield a lazy provider holder and close its providers after the request."""
    providers = LookupProviders(settings)
    try:
        yield providers
    finally:
        await providers.close()
