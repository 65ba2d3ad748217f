"""Legislator lookup API endpoint — address to state legislators."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from loguru import logger

from legislator_lookup.core.dependencies import LookupProviders, lookup_providers_dependency
from legislator_lookup.schemas.common import ErrorResponse
from legislator_lookup.schemas.legislator import (
    LegislatorLookupRequest,
    LegislatorLookupResponse,
    LegislatorResponse,
)
from legislator_lookup.services.legislator_lookup_service import (
    UNEXPECTED_ERROR_MESSAGE,
    LookupFailure,
    lookup_legislators,
    require_address,
)

legislators_router = APIRouter(tags=["legislators"])


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build an ``{"error": ...}`` JSON response."""
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@legislators_router.post(
    "/lookup-legislators",
    response_model=LegislatorLookupResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def lookup_legislators_endpoint(
    request: LegislatorLookupRequest,
    providers: Annotated[LookupProviders, Depends(lookup_providers_dependency)],
) -> LegislatorLookupResponse | JSONResponse:
    """Resolve an address to its state legislators and their social handles.

    The address is used for this request only; it is neither stored nor logged.
    """
    try:
        address = require_address(request.address)
        legislators = await lookup_legislators(address, providers.geocoder(), providers.officials_provider())
    except LookupFailure as e:
        return error_response(e.http_status, e.message)
    except Exception:
        logger.exception("Unexpected error during legislator lookup")
        return error_response(500, UNEXPECTED_ERROR_MESSAGE)

    return LegislatorLookupResponse(
        legislators=[LegislatorResponse.from_legislator(legislator) for legislator in legislators],
    )
