"""Narrow jurisdiction lookups down to state-level chamber members."""

from collections.abc import Iterable

from legislator_lookup.lib.officials.base import OfficialRecord

STATE_JURISDICTION = "state"
LEGISLATIVE_CHAMBERS = frozenset({"upper", "lower"})


def is_state_legislator(record: OfficialRecord) -> bool:
    """Whether the record is a member of a state's upper or lower chamber."""
    return (
        record.jurisdiction_classification == STATE_JURISDICTION
        and record.org_classification in LEGISLATIVE_CHAMBERS
    )


def filter_state_legislators(records: Iterable[OfficialRecord]) -> list[OfficialRecord]:
    """Drop federal, local, judicial and unclassified officials, keeping input order."""
    return [record for record in records if is_state_legislator(record)]
