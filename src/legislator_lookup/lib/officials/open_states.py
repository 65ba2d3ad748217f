"""Open States API v3 provider for state legislators."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

import httpx
from loguru import logger

from legislator_lookup.lib.officials.base import (
    BaseOfficialsProvider,
    ContactDetail,
    OfficialIdentifier,
    OfficialLink,
    OfficialRecord,
    OfficialsProviderError,
)

_BASE_URL = "https://v3.openstates.org"
DEFAULT_TIMEOUT = 10.0

# Extra person sections requested from /people.geo
_INCLUDES = ["links", "other_identifiers"]


def _text(value: Any) -> str | None:
    """Coerce scalar payload values to str; anything else becomes None."""
    if value is None or isinstance(value, (dict, list, bool)):
        return None
    return str(value)


def _section(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _entries(value: Any) -> list[Mapping[str, Any]]:
    """Keep only mapping entries of a list-shaped section."""
    if not isinstance(value, list):
        return []
    return [entry for entry in value if isinstance(entry, Mapping)]


class OpenStatesProvider(BaseOfficialsProvider):
    """Fetches state legislator data from Open States API v3.

    Args:
        api_key: Open States API key.
        timeout: Request timeout in seconds.
    """

    def __init__(self, api_key: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._api_key = api_key
        self._client = httpx.AsyncClient(
            base_url=_BASE_URL,
            headers={"X-API-KEY": api_key, "Accept": "application/json"},
            timeout=timeout,
        )

    @property
    def provider_name(self) -> str:
        return "open_states"

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    async def fetch_by_point(
        self,
        latitude: float,
        longitude: float,
    ) -> list[OfficialRecord]:
        """Fetch officials for a geographic point via Open States geo-lookup.

        Args:
            latitude: WGS84 latitude.
            longitude: WGS84 longitude.

        Returns:
            List of OfficialRecord for officials representing the point.
        """
        params: dict[str, Any] = {
            "lat": latitude,
            "lng": longitude,
            "include": _INCLUDES,
        }
        data = await self._request("/people.geo", params)
        people = self._people(data)
        if people:
            logger.bind(json_output=True, sample=people[0]).debug("Sample Open States person")
        return [self._map_person(person) for person in people]

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _request(self, path: str, params: dict[str, Any]) -> Any:
        """Make an authenticated GET request to the Open States API."""
        try:
            response = await self._client.get(path, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as exc:
            logger.error(
                "Open States API error: {} {} for {}",
                exc.response.status_code,
                exc.response.reason_phrase,
                path,
            )
            raise OfficialsProviderError(
                self.provider_name,
                f"HTTP {exc.response.status_code}: {exc.response.reason_phrase}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.TimeoutException as exc:
            logger.error("Open States request timed out for {}", path)
            raise OfficialsProviderError(
                self.provider_name,
                "Request timed out",
                timed_out=True,
            ) from exc
        except httpx.RequestError as exc:
            raise OfficialsProviderError(
                self.provider_name,
                f"Request failed: {exc}",
            ) from exc
        except json.JSONDecodeError as exc:
            logger.error("Open States returned non-JSON response for {}", path)
            raise OfficialsProviderError(
                self.provider_name,
                f"Invalid JSON response for {path}",
                status_code=response.status_code,
            ) from exc

    @staticmethod
    def _people(data: Any) -> list[Mapping[str, Any]]:
        """Normalize the response body to a list of person objects.

        Open States answers either with ``{"results": [...]}`` or with the
        bare list, depending on endpoint version.
        """
        if isinstance(data, Mapping):
            data = data.get("results")
        return _entries(data)

    def _map_person(self, person: Mapping[str, Any]) -> OfficialRecord:
        """Map an Open States person object to an OfficialRecord."""
        current_role = _section(person.get("current_role"))
        jurisdiction = _section(person.get("jurisdiction"))

        party = _text(_section(person.get("current_party")).get("name")) or _text(person.get("party"))

        return OfficialRecord(
            source_record_id=_text(person.get("id")),
            full_name=_text(person.get("name")),
            org_classification=_text(current_role.get("org_classification")),
            district=_text(current_role.get("district")),
            party=party,
            jurisdiction_name=_text(jurisdiction.get("name")),
            jurisdiction_classification=_text(jurisdiction.get("classification")),
            links=tuple(OfficialLink(url=_text(link.get("url"))) for link in _entries(person.get("links"))),
            contact_details=tuple(
                ContactDetail(type=_text(c.get("type")), value=_text(c.get("value")))
                for c in _entries(person.get("contact_details"))
            ),
            identifiers=self._identifiers(person),
        )

    @staticmethod
    def _identifiers(person: Mapping[str, Any]) -> tuple[OfficialIdentifier, ...]:
        """Collect identifiers from whichever section the person carries.

        ``ids`` may be a ``{scheme: identifier}`` mapping or a list of
        entries; list entries spell the scheme key either ``scheme`` or
        ``identifier_scheme``.
        """
        raw = person.get("ids") or person.get("identifiers") or person.get("other_identifiers")
        if isinstance(raw, Mapping):
            return tuple(
                OfficialIdentifier(scheme=_text(scheme), identifier=_text(value)) for scheme, value in raw.items()
            )
        return tuple(
            OfficialIdentifier(
                scheme=_text(entry.get("scheme") or entry.get("identifier_scheme")),
                identifier=_text(entry.get("identifier")),
            )
            for entry in _entries(raw)
        )
