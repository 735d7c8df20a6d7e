"""Helpers for normalising free-text birth places into a rough UTC offset."""

from typing import Any, Dict, Optional, Tuple

# Checked in order; the first group with a matching substring wins.
PLACE_OFFSETS: Tuple[Tuple[Tuple[str, ...], float], ...] = (
    (("paris", "france", "europe"), 1.0),
    (("new york", "usa", "america"), -5.0),
    (("tokyo", "japan"), 9.0),
    (("london", "uk"), 0.0),
    (("sydney", "australia"), 10.0),
)

DEFAULT_OFFSET = 0.0


def clean_place(place: Optional[str]) -> Optional[str]:
    """Strip whitespace; empty strings count as no place at all."""

    if place is None:
        return None
    text = str(place).strip()
    return text or None


def utc_offset_for(place: Optional[str]) -> Tuple[float, Dict[str, Any]]:
    """Approximate UTC offset (hours) for a birth place and capture metadata flags."""

    flags: Dict[str, Any] = {
        "place_matched": False,
        "matched_token": None,
        "default_reason": None,
    }

    text = clean_place(place)
    if text is None:
        flags["default_reason"] = "missing_place"
        return DEFAULT_OFFSET, flags

    lowered = text.lower()
    for tokens, offset in PLACE_OFFSETS:
        for token in tokens:
            if token in lowered:
                flags.update({"place_matched": True, "matched_token": token})
                return offset, flags

    flags["default_reason"] = "unmapped_place"
    return DEFAULT_OFFSET, flags
