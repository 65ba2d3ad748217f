"""Human-readable chamber names, with per-state overrides."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import NamedTuple


class ChamberLabels(NamedTuple):
    """Display names for a state's two chambers."""

    upper: str
    lower: str


DEFAULT_UPPER_LABEL = "State Senate"
DEFAULT_LOWER_LABEL = "State House of Representatives"

# States whose chamber names differ from the defaults
CHAMBER_LABELS: Mapping[str, ChamberLabels] = MappingProxyType(
    {
        "California": ChamberLabels(upper="State Senate", lower="State Assembly"),
        "Nevada": ChamberLabels(upper="State Senate", lower="Assembly"),
        "New Jersey": ChamberLabels(upper="State Senate", lower="General Assembly"),
        "New York": ChamberLabels(upper="State Senate", lower="Assembly"),
        "Wisconsin": ChamberLabels(upper="State Senate", lower="State Assembly"),
        "Maryland": ChamberLabels(upper="State Senate", lower="House of Delegates"),
        "Virginia": ChamberLabels(upper="State Senate", lower="House of Delegates"),
        "West Virginia": ChamberLabels(upper="State Senate", lower="House of Delegates"),
        # Nebraska has a unicameral legislature
        "Nebraska": ChamberLabels(upper="Unicameral Legislature", lower="Unicameral Legislature"),
    }
)


def get_chamber_label(
    state: str | None,
    chamber: str | None,
    table: Mapping[str, ChamberLabels] = CHAMBER_LABELS,
) -> str:
    """Return the display name for a state's chamber.

    Lookup order: the state's entry in ``table``, then the generic
    upper/lower defaults, then the chamber code itself (``""`` if absent).
    Never raises.

    Args:
        state: Jurisdiction name, e.g. "California".
        chamber: Chamber code, normally "upper" or "lower".
        table: State name to chamber labels mapping.

    Returns:
        The chamber label.
    """
    labels = table.get(state) if state else None
    if labels is not None and chamber in ChamberLabels._fields:
        label = getattr(labels, chamber)
        if label:
            return label

    if chamber == "upper":
        return DEFAULT_UPPER_LABEL
    if chamber == "lower":
        return DEFAULT_LOWER_LABEL
    return chamber or ""
