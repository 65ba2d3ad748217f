"""Output types for resolved state legislators."""

from dataclasses import dataclass
from enum import StrEnum


class SocialPlatform(StrEnum):
    """Social-media platforms recognised in official records."""

    TWITTER = "twitter"
    FACEBOOK = "facebook"
    INSTAGRAM = "instagram"


@dataclass(frozen=True)
class SocialEntry:
    """One social-media presence for a legislator.

    Twitter entries carry a normalized ``@handle``; link-derived entries
    also carry the profile URL.
    """

    platform: SocialPlatform
    handle: str | None = None
    url: str | None = None


@dataclass(frozen=True)
class Legislator:
    """A state legislator resolved for an address."""

    id: str
    name: str
    state: str
    chamber: str
    chamber_label: str
    district: str
    party: str
    social: tuple[SocialEntry, ...] = ()

    def social_for(self, platform: SocialPlatform | str) -> SocialEntry | None:
        """Return the entry for ``platform``, if the legislator has one."""
        return next((entry for entry in self.social if entry.platform == platform), None)
