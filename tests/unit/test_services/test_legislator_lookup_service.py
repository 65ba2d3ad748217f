"""Unit tests for the legislator lookup service."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from legislator_lookup.lib.geocoder.base import GeocodingProviderError, GeocodingResult
from legislator_lookup.lib.legislators.types import SocialEntry, SocialPlatform
from legislator_lookup.lib.officials.base import (
    ContactDetail,
    OfficialLink,
    OfficialRecord,
    OfficialsProviderError,
)
from legislator_lookup.services.legislator_lookup_service import (
    FailureKind,
    LookupFailure,
    build_legislator,
    lookup_legislators,
    require_address,
)

_JANE = OfficialRecord(
    source_record_id="ocd-person/jane-doe",
    full_name="Jane Doe",
    org_classification="upper",
    district="6",
    party="Democratic",
    jurisdiction_name="California",
    jurisdiction_classification="state",
    links=(OfficialLink(url="https://twitter.com/janedoe"),),
)

_FEDERAL = OfficialRecord(
    source_record_id="ocd-person/john-roe",
    full_name="John Roe",
    org_classification="lower",
    district="CA-7",
    jurisdiction_name="United States",
    jurisdiction_classification="country",
)

_ASSEMBLY = OfficialRecord(
    source_record_id="ocd-person/al-b",
    full_name="Al B",
    org_classification="lower",
    district="7",
    jurisdiction_name="California",
    jurisdiction_classification="state",
    contact_details=(ContactDetail(type="twitter", value="alb"),),
)


def _geocoder(result: GeocodingResult | None = None, error: Exception | None = None) -> MagicMock:
    geocoder = MagicMock()
    geocoder.geocode = AsyncMock(return_value=result, side_effect=error)
    return geocoder


def _provider(records: list[OfficialRecord] | None = None, error: Exception | None = None) -> MagicMock:
    provider = MagicMock()
    provider.provider_name = "open_states"
    provider.fetch_by_point = AsyncMock(return_value=records or [], side_effect=error)
    return provider


_SACRAMENTO = GeocodingResult(latitude=38.58, longitude=-121.49)


class TestValidation:
    @pytest.mark.parametrize("address", [None, "", "   ", "\t\n"])
    async def test_missing_address_rejected_before_upstream_calls(self, address: str | None) -> None:
        geocoder = _geocoder(_SACRAMENTO)
        provider = _provider([_JANE])

        with pytest.raises(LookupFailure) as exc_info:
            await lookup_legislators(address, geocoder, provider)

        assert exc_info.value.kind == FailureKind.VALIDATION
        assert exc_info.value.message == "Missing address"
        assert exc_info.value.http_status == 400
        geocoder.geocode.assert_not_awaited()
        provider.fetch_by_point.assert_not_awaited()


class TestRequireAddress:
    def test_returns_stripped_address(self) -> None:
        assert require_address("  1315 10th St  ") == "1315 10th St"

    @pytest.mark.parametrize("address", [None, "", " \t "])
    def test_blank_is_validation_failure(self, address: str | None) -> None:
        with pytest.raises(LookupFailure) as exc_info:
            require_address(address)
        assert exc_info.value.kind == FailureKind.VALIDATION
        assert exc_info.value.http_status == 400


class TestGeocoderFailures:
    async def test_no_match_is_400(self) -> None:
        provider = _provider([_JANE])
        with pytest.raises(LookupFailure) as exc_info:
            await lookup_legislators("nowhere at all", _geocoder(None), provider)

        assert exc_info.value.kind == FailureKind.NO_MATCH
        assert exc_info.value.http_status == 400
        assert exc_info.value.message == "Could not geocode that address"
        provider.fetch_by_point.assert_not_awaited()

    async def test_upstream_error_is_500(self) -> None:
        error = GeocodingProviderError("opencage", "Provider returned HTTP 403", status_code=403)
        with pytest.raises(LookupFailure) as exc_info:
            await lookup_legislators("123 Main St", _geocoder(error=error), _provider())

        assert exc_info.value.kind == FailureKind.UPSTREAM
        assert exc_info.value.upstream_status == 403
        assert exc_info.value.http_status == 500
        assert exc_info.value.message == "Error calling geocoding service"
        assert exc_info.value.__cause__ is error

    async def test_network_error_is_500(self) -> None:
        error = GeocodingProviderError("opencage", "Connection failed")
        with pytest.raises(LookupFailure) as exc_info:
            await lookup_legislators("123 Main St", _geocoder(error=error), _provider())

        assert exc_info.value.kind == FailureKind.NETWORK
        assert exc_info.value.http_status == 500

    async def test_timeout_is_upstream(self) -> None:
        error = GeocodingProviderError("opencage", "timed out", timed_out=True)
        with pytest.raises(LookupFailure) as exc_info:
            await lookup_legislators("123 Main St", _geocoder(error=error), _provider())

        assert exc_info.value.kind == FailureKind.UPSTREAM


class TestOfficialsFailures:
    async def test_upstream_error_aborts_request(self) -> None:
        error = OfficialsProviderError("open_states", "HTTP 500: Internal Server Error", status_code=500)
        with pytest.raises(LookupFailure) as exc_info:
            await lookup_legislators("123 Main St", _geocoder(_SACRAMENTO), _provider(error=error))

        assert exc_info.value.kind == FailureKind.UPSTREAM
        assert exc_info.value.message == "Error calling Open States"
        assert exc_info.value.http_status == 500

    async def test_network_error(self) -> None:
        error = OfficialsProviderError("open_states", "Request failed")
        with pytest.raises(LookupFailure) as exc_info:
            await lookup_legislators("123 Main St", _geocoder(_SACRAMENTO), _provider(error=error))

        assert exc_info.value.kind == FailureKind.NETWORK


class TestLookupLegislators:
    async def test_sacramento_end_to_end(self) -> None:
        geocoder = _geocoder(_SACRAMENTO)
        provider = _provider([_JANE, _FEDERAL])

        legislators = await lookup_legislators("123 Main St, Sacramento, CA 95814", geocoder, provider)

        geocoder.geocode.assert_awaited_once_with("123 Main St, Sacramento, CA 95814")
        provider.fetch_by_point.assert_awaited_once_with(38.58, -121.49)
        assert len(legislators) == 1
        jane = legislators[0]
        assert jane.name == "Jane Doe"
        assert jane.chamber == "upper"
        assert jane.chamber_label == "State Senate"
        assert jane.state == "California"
        assert jane.district == "6"
        assert jane.party == "Democratic"
        assert jane.social == (
            SocialEntry(platform=SocialPlatform.TWITTER, url="https://twitter.com/janedoe", handle="@janedoe"),
        )

    async def test_order_preserved(self) -> None:
        legislators = await lookup_legislators(
            "123 Main St", _geocoder(_SACRAMENTO), _provider([_ASSEMBLY, _FEDERAL, _JANE])
        )
        assert [leg.name for leg in legislators] == ["Al B", "Jane Doe"]
        assert legislators[0].chamber_label == "State Assembly"

    async def test_no_state_legislators_is_empty_success(self) -> None:
        assert await lookup_legislators("123 Main St", _geocoder(_SACRAMENTO), _provider([_FEDERAL])) == []

    async def test_no_officials_is_empty_success(self) -> None:
        assert await lookup_legislators("123 Main St", _geocoder(_SACRAMENTO), _provider([])) == []

    async def test_address_is_trimmed(self) -> None:
        geocoder = _geocoder(_SACRAMENTO)
        await lookup_legislators("  123 Main St  ", geocoder, _provider())
        geocoder.geocode.assert_awaited_once_with("123 Main St")


class TestBuildLegislator:
    def test_missing_fields_become_empty_strings(self) -> None:
        legislator = build_legislator(
            OfficialRecord(org_classification="lower", jurisdiction_classification="state")
        )
        assert legislator.id == ""
        assert legislator.name == ""
        assert legislator.state == ""
        assert legislator.district == ""
        assert legislator.party == ""
        assert legislator.chamber_label == "State House of Representatives"
        assert legislator.social == ()

    def test_contact_detail_handle(self) -> None:
        legislator = build_legislator(_ASSEMBLY)
        assert legislator.social == (SocialEntry(platform=SocialPlatform.TWITTER, handle="@alb"),)
