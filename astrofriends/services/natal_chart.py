"""Approximate natal chart (Sun, Moon, Rising) from raw birth fields.

No ephemeris is consulted. The Moon is interpolated linearly from a reference
date and the Rising sign is stepped two hours per sign from an assumed 06:00
sunrise. The results are deliberately coarse.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, time
from typing import Dict, Optional

from .constants import sign_at, sign_index, sun_sign_for
from .util.place_defaults import clean_place, utc_offset_for

logger = logging.getLogger(__name__)

# On 2000-01-01 the Moon was approximately in Cancer.
NATAL_MOON_REFERENCE_DATE = date(2000, 1, 1)
NATAL_MOON_REFERENCE_SIGN = "Cancer"
SIDEREAL_LUNAR_CYCLE_DAYS = 27.3
DAYS_PER_MOON_SIGN = SIDEREAL_LUNAR_CYCLE_DAYS / 12.0

ASSUMED_SUNRISE_HOUR = 6.0
HOURS_PER_RISING_SIGN = 2.0

COMPLETENESS_LABELS: Dict[str, str] = {
    "sun_only": "Basic Chart (Sun sign only)",
    "partial": "Partial Chart (Sun + Moon)",
    "full": "Full Chart (Sun + Moon + Rising)",
}

COMPLETENESS_EMOJI: Dict[str, str] = {
    "sun_only": "☀️",
    "partial": "☀️🌙",
    "full": "☀️🌙⬆️",
}


def natal_moon_sign(birth_date: date, birth_time: Optional[time] = None) -> str:
    days = (birth_date - NATAL_MOON_REFERENCE_DATE).days
    signs_moved = int(days / DAYS_PER_MOON_SIGN)
    index = sign_index(NATAL_MOON_REFERENCE_SIGN) + signs_moved
    # The Moon covers about half a sign in twelve hours.
    if birth_time is not None and birth_time.hour >= 12:
        index += 1
    return sign_at(index)


def rising_sign(sun_sign: str, birth_time: time, birth_place: Optional[str] = None) -> str:
    decimal_hour = birth_time.hour + birth_time.minute / 60.0
    offset, flags = utc_offset_for(birth_place)
    if flags["default_reason"] == "unmapped_place":
        logger.debug("No timezone nudge for birth place %r", birth_place)
    hours_from_sunrise = decimal_hour + offset - ASSUMED_SUNRISE_HOUR
    signs_offset = int(hours_from_sunrise / HOURS_PER_RISING_SIGN)
    return sign_at(sign_index(sun_sign) + signs_offset)


def completeness_for(birth_time: Optional[time], birth_place: Optional[str]) -> str:
    has_place = clean_place(birth_place) is not None
    if birth_time is not None and has_place:
        return "full"
    if birth_time is not None:
        return "partial"
    return "sun_only"


@dataclass(frozen=True)
class NatalChart:
    """A person's birth chart, recomputed on demand from raw birth fields."""

    birth_date: date
    birth_time: Optional[time] = None
    birth_place: Optional[str] = None

    @property
    def sun_sign(self) -> str:
        return sun_sign_for(self.birth_date)

    @property
    def moon_sign(self) -> str:
        return natal_moon_sign(self.birth_date, self.birth_time)

    @property
    def rising_sign(self) -> Optional[str]:
        if self.birth_time is None:
            return None
        return rising_sign(self.sun_sign, self.birth_time, self.birth_place)

    @property
    def has_full_chart(self) -> bool:
        return self.chart_completeness == "full"

    @property
    def chart_completeness(self) -> str:
        return completeness_for(self.birth_time, self.birth_place)

    @property
    def description(self) -> str:
        lines = [f"☀️ Sun in {self.sun_sign}", f"🌙 Moon in {self.moon_sign}"]
        rising = self.rising_sign
        if rising:
            lines.append(f"⬆️ Rising in {rising}")
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, object]:
        completeness = self.chart_completeness
        return {
            "sun_sign": self.sun_sign,
            "moon_sign": self.moon_sign,
            "rising_sign": self.rising_sign,
            "chart_completeness": completeness,
            "completeness_label": COMPLETENESS_LABELS[completeness],
            "completeness_emoji": COMPLETENESS_EMOJI[completeness],
            "description": self.description,
        }
