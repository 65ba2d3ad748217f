"""OpenCage geocoder provider.

Uses the OpenCage Geocoding API (https://opencagedata.com/api) for
address-to-coordinate resolution. Requires an API key. Only the first
(best) result is requested and used.
"""

import httpx
from loguru import logger

from legislator_lookup.lib.geocoder.base import BaseGeocoder, GeocodingProviderError, GeocodingResult

OPENCAGE_API_URL = "https://api.opencagedata.com/geocode/v1/json"
DEFAULT_TIMEOUT = 10.0
DEFAULT_COUNTRY_CODE = "us"

# OpenCage confidence runs 0 (unknown) to 10 (most precise)
_MAX_CONFIDENCE = 10.0


class OpenCageGeocoder(BaseGeocoder):
    """OpenCage geocoder provider restricted to a single country."""

    def __init__(
        self,
        api_key: str,
        timeout: float = DEFAULT_TIMEOUT,
        country_code: str = DEFAULT_COUNTRY_CODE,
    ) -> None:
        self._api_key = api_key
        self._timeout = timeout
        self._country_code = country_code

    @property
    def provider_name(self) -> str:
        return "opencage"

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    async def geocode(self, address: str) -> GeocodingResult | None:
        """Geocode a single address using the OpenCage API.

        Args:
            address: Freeform address string.

        Returns:
            GeocodingResult or None if no match found.

        Raises:
            GeocodingProviderError: On transport or service errors.
        """
        params = {
            "q": address,
            "key": self._api_key,
            "countrycode": self._country_code,
            "limit": 1,
            "no_annotations": 1,
        }

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(OPENCAGE_API_URL, params=params)
                response.raise_for_status()

            data = response.json()
        except httpx.TimeoutException as e:
            logger.error("OpenCage geocoder timed out after {}s", self._timeout)
            raise GeocodingProviderError("opencage", "Geocoding request timed out", timed_out=True) from e
        except httpx.HTTPStatusError as e:
            logger.error("OpenCage error {}", e.response.status_code)
            raise GeocodingProviderError(
                "opencage",
                f"Provider returned HTTP {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.RequestError as e:
            raise GeocodingProviderError("opencage", "Connection to geocoding provider failed") from e
        except ValueError as e:
            logger.error("OpenCage returned a non-JSON response")
            raise GeocodingProviderError(
                "opencage", "Invalid JSON response", status_code=response.status_code
            ) from e

        results = data.get("results") if isinstance(data, dict) else None
        if not results:
            return None

        return self._parse_result(results[0], response.status_code)

    def _parse_result(self, result: dict, status_code: int) -> GeocodingResult:
        """Parse the first OpenCage result into a GeocodingResult."""
        try:
            geometry = result["geometry"]
            lat = float(geometry["lat"])
            lng = float(geometry["lng"])
            confidence = result.get("confidence")
            return GeocodingResult(
                latitude=lat,
                longitude=lng,
                confidence_score=min(float(confidence) / _MAX_CONFIDENCE, 1.0) if confidence is not None else None,
                matched_address=result.get("formatted"),
            )
        except (KeyError, ValueError, TypeError) as e:
            logger.error("Failed to parse OpenCage response: {}", e)
            raise GeocodingProviderError(
                "opencage", f"Failed to parse response: {e}", status_code=status_code
            ) from e
