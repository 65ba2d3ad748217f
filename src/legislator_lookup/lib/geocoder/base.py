"""Abstract base geocoder interface for pluggable provider support."""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class GeocodingResult:
    """Best-match coordinate for a geocoded address."""

    latitude: float
    longitude: float
    confidence_score: float | None = None
    matched_address: str | None = None

    def __post_init__(self) -> None:
        if not (math.isfinite(self.latitude) and math.isfinite(self.longitude)):
            msg = f"coordinates must be finite, got ({self.latitude}, {self.longitude})"
            raise ValueError(msg)
        if not (-90 <= self.latitude <= 90):
            msg = f"latitude must be between -90 and 90, got {self.latitude}"
            raise ValueError(msg)
        if not (-180 <= self.longitude <= 180):
            msg = f"longitude must be between -180 and 180, got {self.longitude}"
            raise ValueError(msg)
        if self.confidence_score is not None and not (0 <= self.confidence_score <= 1):
            msg = f"confidence_score must be between 0 and 1, got {self.confidence_score}"
            raise ValueError(msg)


class GeocodingProviderError(Exception):
    """Raised when a geocoding provider experiences a transport or service error.

    Distinguishes provider failures (timeout, HTTP error, connection error)
    from a successful response with no match (which returns None).

    Args:
        provider_name: Name of the failing provider.
        message: Human-readable error description.
        status_code: Optional HTTP status code from the provider.
        timed_out: Whether the request exceeded its timeout.
    """

    def __init__(
        self,
        provider_name: str,
        message: str,
        status_code: int | None = None,
        *,
        timed_out: bool = False,
    ) -> None:
        self.provider_name = provider_name
        self.message = message
        self.status_code = status_code
        self.timed_out = timed_out
        super().__init__(f"{provider_name}: {message}")

    @property
    def is_network_failure(self) -> bool:
        """True when the provider could not be reached at all."""
        return self.status_code is None and not self.timed_out


class BaseGeocoder(ABC):
    """Abstract geocoder interface. All providers must implement this."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Unique name identifying this geocoder provider."""

    @property
    def is_configured(self) -> bool:
        """Whether this provider has all required configuration (e.g., API keys)."""
        return True

    @abstractmethod
    async def geocode(self, address: str) -> GeocodingResult | None:
        """Geocode a single address.

        Args:
            address: Freeform address string.

        Returns:
            GeocodingResult for the first match, or None if the provider
            answered successfully without any match.

        Raises:
            GeocodingProviderError: On transport or service errors.
        """

    async def close(self) -> None:
        """Release provider resources. Stateless providers need nothing."""
