"""Outreach API endpoint — fill a message template with legislator tags."""

from fastapi import APIRouter

from legislator_lookup.lib.legislators.types import SocialPlatform
from legislator_lookup.lib.outreach import compose_message, twitter_intent_url
from legislator_lookup.schemas.legislator import OutreachMessageRequest, OutreachMessageResponse

outreach_router = APIRouter(prefix="/outreach", tags=["outreach"])


@outreach_router.post(
    "/message",
    response_model=OutreachMessageResponse,
    response_model_exclude_none=True,
)
async def compose_outreach_message(request: OutreachMessageRequest) -> OutreachMessageResponse:
    """Substitute the legislators' tags into the template's ``{{handles}}`` placeholder."""
    legislators = [legislator.to_legislator() for legislator in request.legislators]
    message = compose_message(request.template, legislators, request.platform)
    return OutreachMessageResponse(
        message=message,
        intent_url=twitter_intent_url(message) if request.platform == SocialPlatform.TWITTER else None,
    )
