"""Compose outreach messages that tag a set of legislators."""

from collections.abc import Iterable
from urllib.parse import urlencode

from legislator_lookup.lib.legislators.types import Legislator, SocialPlatform

HANDLES_PLACEHOLDER = "{{handles}}"
TWITTER_INTENT_URL = "https://twitter.com/intent/tweet"


def build_handles(legislators: Iterable[Legislator], platform: SocialPlatform | str = SocialPlatform.TWITTER) -> str:
    """Join one tag per legislator with spaces.

    Only Twitter entries carry taggable handles; every other case falls
    back to the legislator's name.
    """
    tags: list[str] = []
    for legislator in legislators:
        entry = legislator.social_for(platform)
        if platform == SocialPlatform.TWITTER and entry is not None and entry.handle:
            tags.append(entry.handle)
        else:
            tags.append(legislator.name)
    return " ".join(tags)


def compose_message(
    template: str,
    legislators: Iterable[Legislator],
    platform: SocialPlatform | str = SocialPlatform.TWITTER,
) -> str:
    """Substitute the first ``{{handles}}`` placeholder in ``template``."""
    return template.replace(HANDLES_PLACEHOLDER, build_handles(legislators, platform), 1)


def twitter_intent_url(text: str) -> str:
    """Build a tweet-composer URL prefilled with ``text``."""
    return f"{TWITTER_INTENT_URL}?{urlencode({'text': text})}"
