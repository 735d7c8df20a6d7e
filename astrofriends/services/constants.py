"""Zodiac sign catalog: wheel order, element/modality facts and trait phrases."""

from datetime import date
from typing import Dict, List

SIGN_NAMES: List[str] = [
    "Aries", "Taurus", "Gemini", "Cancer", "Leo", "Virgo",
    "Libra", "Scorpio", "Sagittarius", "Capricorn", "Aquarius", "Pisces",
]

ELEMENTS: List[str] = ["Fire", "Earth", "Air", "Water"]
MODALITIES: List[str] = ["Cardinal", "Fixed", "Mutable"]

MODALITY_DESCRIPTIONS: Dict[str, str] = {
    "Cardinal": "Initiators and leaders",
    "Fixed": "Stabilizers and persisters",
    "Mutable": "Adapters and changers",
}

SIGN_DATA: Dict[str, Dict[str, str]] = {
    "Aries": {
        "element": "Fire",
        "modality": "Cardinal",
        "date_range": "Mar 21 - Apr 19",
        "emoji": "♈️",
        "sun_traits": "courageous, pioneering, and action-oriented",
        "moon_traits": "emotionally direct, needs independence, quick to react",
        "rising_traits": "comes across as bold, direct, and energetic",
    },
    "Taurus": {
        "element": "Earth",
        "modality": "Fixed",
        "date_range": "Apr 20 - May 20",
        "emoji": "♉️",
        "sun_traits": "grounded, sensual, and steadfast",
        "moon_traits": "emotionally stable, needs security, slow to change",
        "rising_traits": "comes across as calm, reliable, and sensual",
    },
    "Gemini": {
        "element": "Air",
        "modality": "Mutable",
        "date_range": "May 21 - Jun 20",
        "emoji": "♊️",
        "sun_traits": "curious, communicative, and adaptable",
        "moon_traits": "emotionally curious, needs mental stimulation, changeable moods",
        "rising_traits": "comes across as witty, curious, and youthful",
    },
    "Cancer": {
        "element": "Water",
        "modality": "Cardinal",
        "date_range": "Jun 21 - Jul 22",
        "emoji": "♋️",
        "sun_traits": "nurturing, intuitive, and protective",
        "moon_traits": "emotionally deep, needs nurturing, highly intuitive",
        "rising_traits": "comes across as caring, approachable, and protective",
    },
    "Leo": {
        "element": "Fire",
        "modality": "Fixed",
        "date_range": "Jul 23 - Aug 22",
        "emoji": "♌️",
        "sun_traits": "creative, generous, and warm-hearted",
        "moon_traits": "emotionally warm, needs appreciation, generous with feelings",
        "rising_traits": "comes across as confident, dramatic, and charismatic",
    },
    "Virgo": {
        "element": "Earth",
        "modality": "Mutable",
        "date_range": "Aug 23 - Sep 22",
        "emoji": "♍️",
        "sun_traits": "analytical, helpful, and detail-oriented",
        "moon_traits": "emotionally reserved, needs order, processes through analysis",
        "rising_traits": "comes across as modest, helpful, and observant",
    },
    "Libra": {
        "element": "Air",
        "modality": "Cardinal",
        "date_range": "Sep 23 - Oct 22",
        "emoji": "♎️",
        "sun_traits": "diplomatic, harmonious, and partnership-focused",
        "moon_traits": "emotionally balanced, needs harmony, dislikes conflict",
        "rising_traits": "comes across as charming, graceful, and fair-minded",
    },
    "Scorpio": {
        "element": "Water",
        "modality": "Fixed",
        "date_range": "Oct 23 - Nov 21",
        "emoji": "♏️",
        "sun_traits": "intense, transformative, and deeply perceptive",
        "moon_traits": "emotionally intense, needs depth, all-or-nothing feelings",
        "rising_traits": "comes across as mysterious, intense, and magnetic",
    },
    "Sagittarius": {
        "element": "Fire",
        "modality": "Mutable",
        "date_range": "Nov 22 - Dec 21",
        "emoji": "♐️",
        "sun_traits": "adventurous, philosophical, and optimistic",
        "moon_traits": "emotionally free, needs adventure, optimistic outlook",
        "rising_traits": "comes across as friendly, enthusiastic, and philosophical",
    },
    "Capricorn": {
        "element": "Earth",
        "modality": "Cardinal",
        "date_range": "Dec 22 - Jan 19",
        "emoji": "♑️",
        "sun_traits": "ambitious, disciplined, and achievement-oriented",
        "moon_traits": "emotionally controlled, needs achievement, reserved expression",
        "rising_traits": "comes across as serious, capable, and professional",
    },
    "Aquarius": {
        "element": "Air",
        "modality": "Fixed",
        "date_range": "Jan 20 - Feb 18",
        "emoji": "♒️",
        "sun_traits": "innovative, humanitarian, and independent",
        "moon_traits": "emotionally detached, needs freedom, unconventional feelings",
        "rising_traits": "comes across as unique, friendly, and progressive",
    },
    "Pisces": {
        "element": "Water",
        "modality": "Mutable",
        "date_range": "Feb 19 - Mar 20",
        "emoji": "♓️",
        "sun_traits": "compassionate, imaginative, and spiritually attuned",
        "moon_traits": "emotionally boundless, needs creativity, absorbs others' emotions",
        "rising_traits": "comes across as dreamy, gentle, and artistic",
    },
}

# (month, last day of the sign that ends in that month, sign); the day after
# the cutoff belongs to the next sign on the wheel.
_SUN_SIGN_CUTOFFS = (
    (1, 19, "Capricorn"),
    (2, 18, "Aquarius"),
    (3, 20, "Pisces"),
    (4, 19, "Aries"),
    (5, 20, "Taurus"),
    (6, 20, "Gemini"),
    (7, 22, "Cancer"),
    (8, 22, "Leo"),
    (9, 22, "Virgo"),
    (10, 22, "Libra"),
    (11, 21, "Scorpio"),
    (12, 21, "Sagittarius"),
)


def normalize_sign_name(sign: str) -> str:
    """Normalize sign name to title case."""
    return str(sign).strip().title()


def is_sign(sign: str) -> bool:
    return normalize_sign_name(sign) in SIGN_DATA


def sign_index(sign: str) -> int:
    """Zodiac wheel index (0-11); raises ValueError for unknown names."""
    name = normalize_sign_name(sign)
    try:
        return SIGN_NAMES.index(name)
    except ValueError:
        raise ValueError(f"Unknown zodiac sign: {sign!r}") from None


def sign_at(index: int) -> str:
    return SIGN_NAMES[index % 12]


def element_of(sign: str) -> str:
    return SIGN_DATA[normalize_sign_name(sign)]["element"]


def modality_of(sign: str) -> str:
    return SIGN_DATA[normalize_sign_name(sign)]["modality"]


def trait(sign: str, kind: str) -> str:
    """Short descriptive phrase for a sign; kind is 'sun', 'moon' or 'rising'."""
    return SIGN_DATA[normalize_sign_name(sign)][f"{kind}_traits"]


def sun_sign_for(day: date) -> str:
    """Tropical sun sign for a calendar date (month/day only)."""
    for month, cutoff, sign in _SUN_SIGN_CUTOFFS:
        if day.month == month:
            if day.day <= cutoff:
                return sign
            return sign_at(sign_index(sign) + 1)
    return "Aries"
