"""Legislator lookup service — address to state legislators with social handles.

Runs the single-pass pipeline: geocode the address, look up officials at
the coordinate, keep state chamber members, then label each chamber and
extract social identities. The first failure aborts the request; there are
no partial results and no retries.
"""

from enum import StrEnum

from loguru import logger

from legislator_lookup.lib.geocoder.base import BaseGeocoder, GeocodingProviderError
from legislator_lookup.lib.legislators import (
    Legislator,
    extract_social_entries,
    filter_state_legislators,
    get_chamber_label,
)
from legislator_lookup.lib.officials.base import BaseOfficialsProvider, OfficialRecord, OfficialsProviderError

MISSING_ADDRESS_MESSAGE = "Missing address"
NO_MATCH_MESSAGE = "Could not geocode that address"
GEOCODER_ERROR_MESSAGE = "Error calling geocoding service"
OFFICIALS_ERROR_MESSAGE = "Error calling Open States"
UNEXPECTED_ERROR_MESSAGE = "Unexpected server error"


class FailureKind(StrEnum):
    """Why a lookup request failed."""

    VALIDATION = "validation"
    NETWORK = "network"
    UPSTREAM = "upstream"
    NO_MATCH = "no_match"
    UNEXPECTED = "unexpected"


# Caller-side failures answer 400; everything else is a server-side 500
_HTTP_STATUS: dict[FailureKind, int] = {
    FailureKind.VALIDATION: 400,
    FailureKind.NO_MATCH: 400,
    FailureKind.NETWORK: 500,
    FailureKind.UPSTREAM: 500,
    FailureKind.UNEXPECTED: 500,
}


class LookupFailure(Exception):
    """A request-level failure of the legislator lookup.

    Args:
        kind: Failure category.
        message: Human-readable message safe to return to callers.
        upstream_status: HTTP status returned by the failing provider, if any.
    """

    def __init__(self, kind: FailureKind, message: str, upstream_status: int | None = None) -> None:
        self.kind = kind
        self.message = message
        self.upstream_status = upstream_status
        super().__init__(message)

    @property
    def http_status(self) -> int:
        """HTTP status class for this failure."""
        return _HTTP_STATUS[self.kind]


def _provider_failure(exc: GeocodingProviderError | OfficialsProviderError, message: str) -> LookupFailure:
    kind = FailureKind.NETWORK if exc.is_network_failure else FailureKind.UPSTREAM
    return LookupFailure(kind, message, upstream_status=exc.status_code)


def require_address(address: str | None) -> str:
    """Return the stripped address, rejecting a missing or blank one.

    Raises:
        LookupFailure: With kind ``VALIDATION`` when the address is absent or blank.
    """
    if address is None or not address.strip():
        raise LookupFailure(FailureKind.VALIDATION, MISSING_ADDRESS_MESSAGE)
    return address.strip()


def build_legislator(record: OfficialRecord) -> Legislator:
    """Assemble the output legislator for a filtered official record."""
    state = record.jurisdiction_name or ""
    chamber = record.org_classification or ""
    return Legislator(
        id=record.source_record_id or "",
        name=record.full_name or "",
        state=state,
        chamber=chamber,
        chamber_label=get_chamber_label(state, chamber),
        district=record.district or "",
        party=record.party or "",
        social=extract_social_entries(record),
    )


async def lookup_legislators(
    address: str | None,
    geocoder: BaseGeocoder,
    officials_provider: BaseOfficialsProvider,
) -> list[Legislator]:
    """Resolve an address to the state legislators representing it.

    Args:
        address: Freeform postal address.
        geocoder: Provider used to turn the address into a coordinate.
        officials_provider: Provider used to list officials at the coordinate.

    Returns:
        Legislators in provider order. An empty list is a valid result.

    Raises:
        LookupFailure: If the address is missing, cannot be geocoded, or
            either provider fails.
    """
    address = require_address(address)

    try:
        location = await geocoder.geocode(address)
    except GeocodingProviderError as e:
        raise _provider_failure(e, GEOCODER_ERROR_MESSAGE) from e

    if location is None:
        raise LookupFailure(FailureKind.NO_MATCH, NO_MATCH_MESSAGE)

    try:
        records = await officials_provider.fetch_by_point(location.latitude, location.longitude)
    except OfficialsProviderError as e:
        raise _provider_failure(e, OFFICIALS_ERROR_MESSAGE) from e

    legislators = [build_legislator(record) for record in filter_state_legislators(records)]
    logger.info(
        "Resolved {} state legislators from {} officials via {}",
        len(legislators),
        len(records),
        officials_provider.provider_name,
    )
    return legislators
