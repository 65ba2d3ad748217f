"""Extract one canonical social-media entry per platform from an official record.

Sources are scanned in a fixed order: links, then contact details, then
identifiers. The first entry found for a platform wins; later sources
never override it. Entries missing their url/value/identifier are skipped
one at a time without aborting the scan.
"""

from collections.abc import Iterable, Iterator

from legislator_lookup.lib.legislators.types import SocialEntry, SocialPlatform
from legislator_lookup.lib.officials.base import OfficialRecord

# Substring → platform, checked in this order for each link
_LINK_DOMAINS: tuple[tuple[str, SocialPlatform], ...] = (
    ("twitter.com", SocialPlatform.TWITTER),
    ("facebook.com", SocialPlatform.FACEBOOK),
    ("instagram.com", SocialPlatform.INSTAGRAM),
)

_TWITTER_SCHEME = "twitter"


def normalize_handle(value: str | None) -> str | None:
    """Trim a handle and prefix it with ``@``; blank input gives None.

    >>> normalize_handle("  janedoe ")
    '@janedoe'
    >>> normalize_handle("@janedoe")
    '@janedoe'
    """
    if not value:
        return None
    handle = value.strip()
    if not handle:
        return None
    if not handle.startswith("@"):
        handle = "@" + handle
    return handle


def handle_from_url(url: str) -> str:
    """Derive a handle from the last non-empty ``/``-separated segment of a profile URL."""
    return "@" + url.rstrip("/").split("/")[-1]


def _from_links(record: OfficialRecord) -> Iterator[SocialEntry]:
    for link in record.links:
        url = link.url
        if not url:
            continue
        for domain, platform in _LINK_DOMAINS:
            if domain in url:
                if platform is SocialPlatform.TWITTER:
                    yield SocialEntry(platform=platform, url=url, handle=handle_from_url(url))
                else:
                    yield SocialEntry(platform=platform, url=url)
                break


def _from_contact_details(record: OfficialRecord) -> Iterator[SocialEntry]:
    for contact in record.contact_details:
        if contact.type != _TWITTER_SCHEME:
            continue
        handle = normalize_handle(contact.value)
        if handle is not None:
            yield SocialEntry(platform=SocialPlatform.TWITTER, handle=handle)


def _from_identifiers(record: OfficialRecord) -> Iterator[SocialEntry]:
    for ident in record.identifiers:
        if ident.scheme != _TWITTER_SCHEME:
            continue
        handle = normalize_handle(ident.identifier)
        if handle is not None:
            yield SocialEntry(platform=SocialPlatform.TWITTER, handle=handle)


def dedupe_by_platform(entries: Iterable[SocialEntry]) -> tuple[SocialEntry, ...]:
    """Keep the first entry seen for each platform, preserving order."""
    by_platform: dict[SocialPlatform, SocialEntry] = {}
    for entry in entries:
        by_platform.setdefault(entry.platform, entry)
    return tuple(by_platform.values())


def extract_social_entries(record: OfficialRecord) -> tuple[SocialEntry, ...]:
    """Return the official's social-media entries, at most one per platform.

    Args:
        record: Normalized official record.

    Returns:
        Entries in discovery order; empty when the record has none.
    """

    def candidates() -> Iterator[SocialEntry]:
        yield from _from_links(record)
        yield from _from_contact_details(record)
        yield from _from_identifiers(record)

    return dedupe_by_platform(candidates())
