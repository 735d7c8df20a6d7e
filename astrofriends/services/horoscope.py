from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Any, Dict, Tuple

from .constants import element_of, normalize_sign_name
from .horoscope_data import (
    DEFAULT_READINGS,
    DEFAULT_TRANSIT_FLAVOR,
    ELEMENT_ADVICE,
    HOROSCOPE_READINGS,
    TRANSIT_FLAVOR,
    WEEKLY_TRANSITS,
    Horoscope,
    PlanetaryTransit,
)
from .lunar import MoonPhase, current_moon_phase, current_moon_sign, moon_sign_flavor

logger = logging.getLogger(__name__)


def week_of_year(on: date) -> int:
    """ISO-8601 week number (1-53)."""
    return on.isocalendar()[1]


def week_start(on: date) -> date:
    return on - timedelta(days=on.weekday())


def weekly_horoscope(sign: str, on: date) -> Horoscope:
    name = normalize_sign_name(sign)
    readings = HOROSCOPE_READINGS.get(name)
    if not readings:
        logger.debug("No horoscope entries for %r, using default", name)
        readings = DEFAULT_READINGS
    return readings[week_of_year(on) % len(readings)]


def current_transits(on: date) -> Tuple[PlanetaryTransit, ...]:
    return WEEKLY_TRANSITS[week_of_year(on) % len(WEEKLY_TRANSITS)]


def transit_flavor(transit: PlanetaryTransit) -> str:
    return TRANSIT_FLAVOR.get(transit.planet, DEFAULT_TRANSIT_FLAVOR)


def element_advice(sign: str, phase: MoonPhase, moon_sign: str) -> str:
    element = element_of(sign)
    if element == "Fire":
        favoured = phase.name in ("Full Moon", "Waxing Gibbous")
    elif element == "Earth":
        favoured = phase.name in ("New Moon", "Waxing Crescent")
    elif element == "Air":
        favoured = moon_sign in ("Gemini", "Libra", "Aquarius")
    elif element == "Water":
        favoured = phase.name == "Full Moon" or moon_sign in ("Cancer", "Scorpio", "Pisces")
    else:
        return phase.guidance
    favourable, otherwise = ELEMENT_ADVICE[element]
    return favourable if favoured else otherwise


def celestial_message(sign: str, on: date) -> str:
    """One-paragraph sky summary for a sign: Moon phase and sign, lead transit, element advice."""
    phase = current_moon_phase(on)
    moon_sign = current_moon_sign(on)
    message = (
        f"With the {phase.name} {phase.emoji} in {moon_sign}, "
        f"you may feel {moon_sign_flavor(moon_sign)}. "
    )
    transits = current_transits(on)
    if transits:
        lead = transits[0]
        message += f"{lead.planet} {lead.aspect} adds {transit_flavor(lead)}. "
    return message + element_advice(sign, phase, moon_sign)


def local_oracle(sign: str, on: date) -> Dict[str, Any]:
    """Weekly oracle assembled without any remote service.

    The horoscope reading is extended with Moon phase and Moon sign paragraphs;
    advice, lucky items, mood and best match come straight from the horoscope.
    """
    name = normalize_sign_name(sign)
    horoscope = weekly_horoscope(name, on)
    phase = current_moon_phase(on)
    moon_sign = current_moon_sign(on)

    reading = horoscope.weekly_reading
    reading += (
        f"\n\nWith the {phase.name} {phase.emoji} in the sky, "
        f"you may feel {phase.emotional_tone}. {phase.guidance}"
    )
    reading += f"\n\nThe Moon in {moon_sign} adds {moon_sign_flavor(moon_sign)} to your emotional landscape."
    insight = (
        f"The {phase.name} harmonizes with your {name} energy, creating a powerful time "
        f"for {element_of(name).lower()} sign activities."
    )
    return {
        "sign": name,
        "week_start": week_start(on).isoformat(),
        "weekly_reading": reading,
        "love_advice": horoscope.love_advice,
        "career_advice": horoscope.career_advice,
        "lucky_number": horoscope.lucky_number,
        "lucky_color": horoscope.lucky_color,
        "mood": horoscope.mood,
        "compatibility_sign": horoscope.compatibility,
        "celestial_insight": insight,
    }


def weekly_sky(on: date) -> Dict[str, Any]:
    phase = current_moon_phase(on)
    moon_sign = current_moon_sign(on)
    return {
        "date": on.isoformat(),
        "week_start": week_start(on).isoformat(),
        "week_of_year": week_of_year(on),
        "moon_phase": {
            "name": phase.name,
            "emoji": phase.emoji,
            "emotional_tone": phase.emotional_tone,
            "guidance": phase.guidance,
        },
        "moon_sign": {"sign": moon_sign, "emotional_flavor": moon_sign_flavor(moon_sign)},
        "transits": [transit_dict(t) for t in current_transits(on)],
    }


def transit_dict(transit: PlanetaryTransit) -> Dict[str, str]:
    return {
        "planet": transit.planet,
        "emoji": transit.emoji,
        "aspect": transit.aspect,
        "description": transit.description,
        "advice": transit.advice,
    }
