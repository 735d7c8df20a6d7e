"""Current-sky lunar helpers.

Both calculators are linear approximations against a fixed epoch, so they are
pure functions of the calendar date and can be unit-tested without any
ephemeris data.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Dict, Tuple

from .constants import SIGN_NAMES

# 2000-01-06 was a New Moon; the transit Moon is taken to be entering Aries then.
LUNAR_EPOCH = date(2000, 1, 6)
SYNODIC_MONTH_DAYS = 29.53
SIDEREAL_MONTH_DAYS = 27.3
DAYS_PER_TRANSIT_SIGN = SIDEREAL_MONTH_DAYS / 12.0


@dataclass(frozen=True)
class MoonPhase:
    name: str
    emoji: str
    emotional_tone: str
    guidance: str


MOON_PHASES: Tuple[MoonPhase, ...] = (
    MoonPhase("New Moon", "🌑", "introspective and ready for fresh starts",
              "Set intentions and plant seeds for new beginnings."),
    MoonPhase("Waxing Crescent", "🌒", "hopeful and building momentum",
              "Take small steps toward your goals with faith."),
    MoonPhase("First Quarter", "🌓", "determined and action-oriented",
              "Push through obstacles; commitment brings rewards."),
    MoonPhase("Waxing Gibbous", "🌔", "refining your focus and trusting the process",
              "Fine-tune your approach and stay patient."),
    MoonPhase("Full Moon", "🌕", "emotionally heightened and illuminated",
              "Celebrate progress and release emotional blocks."),
    MoonPhase("Waning Gibbous", "🌖", "grateful and ready to share wisdom",
              "Share your knowledge and express gratitude."),
    MoonPhase("Last Quarter", "🌗", "reflective and releasing what no longer serves",
              "Let go of what's holding you back."),
    MoonPhase("Waning Crescent", "🌘", "surrendering and preparing for renewal",
              "Rest, reflect, and prepare for transformation."),
)

MOON_SIGN_FLAVOR: Dict[str, str] = {
    "Aries": "bold and impulsive",
    "Taurus": "grounded and sensual",
    "Gemini": "curious and communicative",
    "Cancer": "nurturing and nostalgic",
    "Leo": "expressive and warm-hearted",
    "Virgo": "practical and detail-oriented",
    "Libra": "harmonious and relationship-focused",
    "Scorpio": "intense and transformative",
    "Sagittarius": "adventurous and optimistic",
    "Capricorn": "disciplined and achievement-driven",
    "Aquarius": "innovative and humanitarian",
    "Pisces": "dreamy and deeply intuitive",
}


def days_since_epoch(on: date) -> int:
    return (on - LUNAR_EPOCH).days


def current_moon_phase(on: date) -> MoonPhase:
    """Moon phase for a date: position in a 29.53-day cycle split into 8 buckets."""

    days_into_cycle = days_since_epoch(on) % SYNODIC_MONTH_DAYS
    index = int(days_into_cycle / SYNODIC_MONTH_DAYS * 8) % 8
    return MOON_PHASES[index]


def current_moon_sign(on: date) -> str:
    """Sign the Moon is transiting on a date, advancing one sign every 27.3/12 days."""

    index = int(days_since_epoch(on) / DAYS_PER_TRANSIT_SIGN) % 12
    return SIGN_NAMES[index]


def moon_sign_flavor(sign: str) -> str:
    return MOON_SIGN_FLAVOR[sign]
