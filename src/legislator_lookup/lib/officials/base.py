"""Abstract base interface for elected-official data providers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class OfficialLink:
    """A web link attached to an official."""

    url: str | None = None


@dataclass(frozen=True)
class ContactDetail:
    """A typed contact entry (e.g. ``twitter``, ``email``)."""

    type: str | None = None
    value: str | None = None


@dataclass(frozen=True)
class OfficialIdentifier:
    """An external identifier for an official under some scheme."""

    scheme: str | None = None
    identifier: str | None = None


@dataclass(frozen=True)
class OfficialRecord:
    """Normalized, read-only representation of an official from any provider.

    Providers map their raw payloads into this shape so the legislator
    pipeline never sees provider-specific spellings. Every field is
    optional because upstream records routinely omit them.
    """

    # Identity
    source_record_id: str | None = None
    full_name: str | None = None

    # Current role
    org_classification: str | None = None
    district: str | None = None

    party: str | None = None

    # Jurisdiction
    jurisdiction_name: str | None = None
    jurisdiction_classification: str | None = None

    links: tuple[OfficialLink, ...] = ()
    contact_details: tuple[ContactDetail, ...] = ()
    identifiers: tuple[OfficialIdentifier, ...] = ()


class OfficialsProviderError(Exception):
    """Raised when a provider experiences a transport or service error.

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


class BaseOfficialsProvider(ABC):
    """Abstract interface for elected-official data providers.

    Concrete implementations (Open States, etc.) look up every official
    whose jurisdiction covers a geographic point.
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Unique short name for this provider (e.g. 'open_states')."""

    @property
    def is_configured(self) -> bool:
        """Whether this provider has all required configuration (e.g., API keys)."""
        return True

    @abstractmethod
    async def fetch_by_point(
        self,
        latitude: float,
        longitude: float,
    ) -> list[OfficialRecord]:
        """Fetch officials for a geographic point (geo-lookup).

        Args:
            latitude: WGS84 latitude.
            longitude: WGS84 longitude.

        Returns:
            List of normalized official records, in provider order.

        Raises:
            OfficialsProviderError: On transport or service errors.
        """

    async def close(self) -> None:
        """Release provider resources (HTTP clients, etc.)."""
