"""Geocoder library — pluggable address geocoding.

Public API:
    - BaseGeocoder: Abstract provider interface
    - GeocodingResult: Best-match coordinate dataclass
    - GeocodingProviderError: Provider-level error
    - OpenCageGeocoder: OpenCage provider
    - get_geocoder: Provider factory/registry
    - get_configured_geocoder: Build the provider named in settings
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from legislator_lookup.lib.geocoder.base import BaseGeocoder, GeocodingProviderError, GeocodingResult
from legislator_lookup.lib.geocoder.opencage import OpenCageGeocoder

if TYPE_CHECKING:
    from legislator_lookup.core.config import Settings

# Provider registry of all known providers
_PROVIDERS: dict[str, type[BaseGeocoder]] = {
    "opencage": OpenCageGeocoder,
}


def get_geocoder(provider: str = "opencage", **kwargs: Any) -> BaseGeocoder:
    """Get a geocoder instance by provider name.

    Args:
        provider: Provider name (e.g., "opencage").
        **kwargs: Additional arguments forwarded to the provider constructor
            (e.g., ``timeout=2.0``).

    Returns:
        An instance of the requested geocoder provider.

    Raises:
        ValueError: If the provider is not registered.
    """
    cls = _PROVIDERS.get(provider)
    if cls is None:
        msg = f"Unknown geocoder provider: {provider!r}. Available: {list(_PROVIDERS.keys())}"
        raise ValueError(msg)
    return cls(**kwargs)


def get_configured_geocoder(settings: Settings) -> BaseGeocoder | None:
    """Build the geocoder selected in settings, if it is fully configured.

    Args:
        settings: Application settings.

    Returns:
        A configured BaseGeocoder, or None when its API key is missing.

    Raises:
        ValueError: If the configured provider is not registered.
    """
    provider_kwargs: dict[str, dict[str, Any]] = {
        "opencage": {
            "api_key": settings.opencage_api_key or "",
            "timeout": settings.geocoder_timeout,
            "country_code": settings.geocoder_country_code,
        },
    }
    geocoder = get_geocoder(settings.geocoder_provider, **provider_kwargs.get(settings.geocoder_provider, {}))
    if not geocoder.is_configured:
        return None
    return geocoder


__all__ = [
    "BaseGeocoder",
    "GeocodingProviderError",
    "GeocodingResult",
    "OpenCageGeocoder",
    "get_configured_geocoder",
    "get_geocoder",
]
