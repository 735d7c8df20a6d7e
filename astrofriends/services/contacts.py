"""Contact records supplied by the app and the feature ladder they unlock."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Dict, List, Optional, Tuple

from .natal_chart import NatalChart
from .util.place_defaults import clean_place

COMPLETION_LEVELS: Tuple[str, ...] = ("none", "basic", "extended", "full")

# feature -> required completion level
FEATURES: Dict[str, str] = {
    "Sun Sign Traits": "basic",
    "Basic Horoscope": "basic",
    "Overall Compatibility": "basic",
    "Weekly Horoscope": "basic",
    "Moon Sign Insights": "extended",
    "Personal Oracle": "extended",
    "Rising Sign": "full",
    "This Week Compatibility": "full",
    "Synastry Insights": "full",
    "Live Compatibility": "full",
}

UNLOCK_HINTS: Dict[str, str] = {
    "basic": "Add birthday",
    "extended": "Add birth time or place",
    "full": "Add both birth time and place",
}


@dataclass(frozen=True)
class Contact:
    name: str
    birthday: Optional[date] = None
    birth_time: Optional[time] = None
    birth_place: Optional[str] = None
    is_favorite: bool = False
    profile_image: Optional[bytes] = None

    @property
    def natal_chart(self) -> Optional[NatalChart]:
        if self.birthday is None:
            return None
        return NatalChart(self.birthday, self.birth_time, clean_place(self.birth_place))

    @property
    def sun_sign(self) -> Optional[str]:
        chart = self.natal_chart
        return chart.sun_sign if chart else None

    @property
    def moon_sign(self) -> Optional[str]:
        chart = self.natal_chart
        return chart.moon_sign if chart else None

    @property
    def rising_sign(self) -> Optional[str]:
        chart = self.natal_chart
        return chart.rising_sign if chart else None

    @property
    def chart_completeness(self) -> str:
        chart = self.natal_chart
        return chart.chart_completeness if chart else "sun_only"


def completion_level(contact: Contact) -> str:
    if contact.birthday is None:
        return "none"
    has_time = contact.birth_time is not None
    has_place = clean_place(contact.birth_place) is not None
    if has_time and has_place:
        return "full"
    if has_time or has_place:
        return "extended"
    return "basic"


def _rank(level: str) -> int:
    return COMPLETION_LEVELS.index(level)


def can_access(feature: str, contact: Contact) -> bool:
    required = FEATURES[feature]
    return _rank(completion_level(contact)) >= _rank(required)


def unlocked_features(contact: Contact) -> List[str]:
    return [feature for feature in FEATURES if can_access(feature, contact)]


def locked_features(contact: Contact) -> List[str]:
    return [feature for feature in FEATURES if not can_access(feature, contact)]


def next_unlocks(contact: Contact) -> List[Tuple[str, str]]:
    """Features gained at the next completion level, with what the user must add."""
    rank = _rank(completion_level(contact))
    if rank + 1 >= len(COMPLETION_LEVELS):
        return []
    target = COMPLETION_LEVELS[rank + 1]
    hint = UNLOCK_HINTS[target]
    return [(feature, hint) for feature, required in FEATURES.items() if required == target]
