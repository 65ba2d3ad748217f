"""Outreach library — message templates addressed to resolved legislators.

Public API:
    - build_handles: Space-joined tags for a set of legislators
    - compose_message: Fill the ``{{handles}}`` placeholder of a template
    - twitter_intent_url: Tweet-composer URL for a message
"""

from legislator_lookup.lib.outreach.message import (
    HANDLES_PLACEHOLDER,
    build_handles,
    compose_message,
    twitter_intent_url,
)

__all__ = [
    "HANDLES_PLACEHOLDER",
    "build_handles",
    "compose_message",
    "twitter_intent_url",
]
