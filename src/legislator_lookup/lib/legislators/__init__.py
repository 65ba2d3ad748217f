"""Legislators library — filtering, chamber labels and social identities.

Public API:
    - Legislator / SocialEntry / SocialPlatform: Output types
    - filter_state_legislators / is_state_legislator: Role filter
    - get_chamber_label / CHAMBER_LABELS / ChamberLabels: Chamber labeler
    - extract_social_entries / normalize_handle: Social identity extractor
"""

from legislator_lookup.lib.legislators.chambers import CHAMBER_LABELS, ChamberLabels, get_chamber_label
from legislator_lookup.lib.legislators.roles import filter_state_legislators, is_state_legislator
from legislator_lookup.lib.legislators.social import extract_social_entries, normalize_handle
from legislator_lookup.lib.legislators.types import Legislator, SocialEntry, SocialPlatform

__all__ = [
    "CHAMBER_LABELS",
    "ChamberLabels",
    "Legislator",
    "SocialEntry",
    "SocialPlatform",
    "extract_social_entries",
    "filter_state_legislators",
    "get_chamber_label",
    "is_state_legislator",
    "normalize_handle",
]
