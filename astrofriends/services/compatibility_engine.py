from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from . import content_library as content
from .compatibility_constants import (
    BASE_SCORE,
    HARMONY_LEVELS,
    OPPOSITE_BONUS,
    SAME_SIGN_BONUS,
    TRADITIONAL_MATCH_BONUS,
)
from .compatibility_helpers import (
    Dynamic,
    are_opposites,
    element_dynamic,
    is_traditional_match,
    modality_dynamic,
)
from .constants import normalize_sign_name, sign_index
from .natal_chart import NatalChart

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HarmonyLevel:
    key: str
    label: str
    emoji: str
    description: str


@dataclass(frozen=True)
class SignProfile:
    """Sun sign plus whichever Moon/Rising signs are known."""

    sun: str
    moon: Optional[str] = None
    rising: Optional[str] = None

    @classmethod
    def from_chart(cls, chart: Optional[NatalChart], sun_fallback: str) -> "SignProfile":
        if chart is None:
            return cls(sun=normalize_sign_name(sun_fallback))
        return cls(sun=chart.sun_sign, moon=chart.moon_sign, rising=chart.rising_sign)


def _clamp(score: int) -> int:
    return max(0, min(100, score))


def harmony_score(sign1: str, sign2: str) -> int:
    s1, s2 = normalize_sign_name(sign1), normalize_sign_name(sign2)
    # raises ValueError for names outside the catalog
    sign_index(s1)
    sign_index(s2)

    score = BASE_SCORE
    if s1 == s2:
        score += SAME_SIGN_BONUS
    score += element_dynamic(s1, s2).bonus
    score += modality_dynamic(s1, s2).bonus
    if is_traditional_match(s1, s2):
        score += TRADITIONAL_MATCH_BONUS
    if are_opposites(s1, s2):
        score += OPPOSITE_BONUS
    return _clamp(score)


def composite_score(a: SignProfile, b: SignProfile) -> int:
    """Sun score re-weighted by Moon (1/3) and then Rising (1/4) when both sides have them."""

    score = harmony_score(a.sun, b.sun)
    breakdown: Dict[str, int] = {"sun": score}
    if a.moon and b.moon:
        moon = harmony_score(a.moon, b.moon)
        score = (score * 2 + moon) // 3
        breakdown["moon"] = moon
    if a.rising and b.rising:
        rising = harmony_score(a.rising, b.rising)
        score = (score * 3 + rising) // 4
        breakdown["rising"] = rising
    score = _clamp(score)
    logger.debug("composite score %s vs %s: %s -> %d", a.sun, b.sun, breakdown, score)
    return score


def harmony_level(score: int) -> HarmonyLevel:
    for key, minimum, label, emoji, description in HARMONY_LEVELS:
        if score >= minimum:
            return HarmonyLevel(key=key, label=label, emoji=emoji, description=description)
    key, _, label, emoji, description = HARMONY_LEVELS[-1]
    return HarmonyLevel(key=key, label=label, emoji=emoji, description=description)


def dynamic_dict(dynamic: Dynamic) -> Dict[str, Any]:
    return {"key": dynamic.key, "bonus": dynamic.bonus, "description": dynamic.description}


def _level_dict(level: Optional[HarmonyLevel]) -> Optional[Dict[str, str]]:
    if level is None:
        return None
    return {"key": level.key, "label": level.label, "emoji": level.emoji, "description": level.description}


@dataclass(frozen=True)
class AstralCompatibility:
    person1: SignProfile
    person2: SignProfile

    @classmethod
    def from_signs(cls, sign1: str, sign2: str) -> "AstralCompatibility":
        return cls(SignProfile(normalize_sign_name(sign1)), SignProfile(normalize_sign_name(sign2)))

    @classmethod
    def from_charts(
        cls,
        chart1: Optional[NatalChart],
        chart2: Optional[NatalChart],
        sun_fallback1: str,
        sun_fallback2: str,
    ) -> "AstralCompatibility":
        return cls(
            SignProfile.from_chart(chart1, sun_fallback1),
            SignProfile.from_chart(chart2, sun_fallback2),
        )

    @property
    def has_deep_compatibility(self) -> bool:
        return self.person1.moon is not None or self.person2.moon is not None

    @property
    def has_rising_data(self) -> bool:
        return self.person1.rising is not None or self.person2.rising is not None

    @property
    def harmony_score(self) -> int:
        return composite_score(self.person1, self.person2)

    @property
    def harmony_level(self) -> HarmonyLevel:
        return harmony_level(self.harmony_score)

    @property
    def elemental_dynamic(self) -> Dynamic:
        return element_dynamic(self.person1.sun, self.person2.sun)

    @property
    def modality_dynamic(self) -> Dynamic:
        return modality_dynamic(self.person1.sun, self.person2.sun)

    # Moon: emotional bond

    @property
    def moon_compatibility(self) -> Optional[str]:
        if not (self.person1.moon and self.person2.moon):
            return None
        return content.moon_reading(self.person1.moon, self.person2.moon)

    @property
    def moon_harmony_level(self) -> Optional[HarmonyLevel]:
        if not (self.person1.moon and self.person2.moon):
            return None
        return harmony_level(harmony_score(self.person1.moon, self.person2.moon))

    # Rising: first impressions and lifestyle

    @property
    def rising_compatibility(self) -> Optional[str]:
        if not (self.person1.rising and self.person2.rising):
            return None
        return content.rising_reading(self.person1.rising, self.person2.rising)

    @property
    def rising_harmony_level(self) -> Optional[HarmonyLevel]:
        if not (self.person1.rising and self.person2.rising):
            return None
        return harmony_level(harmony_score(self.person1.rising, self.person2.rising))

    # Content

    @property
    def oracle_reading(self) -> str:
        return content.oracle_reading(self.person1.sun, self.person2.sun)

    @property
    def strengths(self) -> List[str]:
        return content.strengths(self.person1.sun, self.person2.sun)

    @property
    def growth_opportunities(self) -> List[str]:
        return content.growth_opportunities(self.person1.sun, self.person2.sun)

    @property
    def poetic_summary(self) -> str:
        return content.poetic_summary(self.person1.sun, self.person2.sun)

    @property
    def nurturing_advice(self) -> str:
        return content.nurturing_advice(self.person1.sun, self.person2.sun)

    def full_chart_reading(self) -> str:
        reading = self.oracle_reading
        moon = self.moon_compatibility
        if moon:
            reading += f"\n\n🌙 **Emotional Connection (Moon)**\n{moon}"
        rising = self.rising_compatibility
        if rising:
            reading += f"\n\n⬆️ **First Impressions & Lifestyle (Rising)**\n{rising}"
        return reading

    def to_dict(self) -> Dict[str, Any]:
        return {
            "person1": {"sun": self.person1.sun, "moon": self.person1.moon, "rising": self.person1.rising},
            "person2": {"sun": self.person2.sun, "moon": self.person2.moon, "rising": self.person2.rising},
            "harmony_score": self.harmony_score,
            "harmony_level": _level_dict(self.harmony_level),
            "elemental_dynamic": dynamic_dict(self.elemental_dynamic),
            "modality_dynamic": dynamic_dict(self.modality_dynamic),
            "has_deep_compatibility": self.has_deep_compatibility,
            "has_rising_data": self.has_rising_data,
            "moon_compatibility": self.moon_compatibility,
            "moon_harmony_level": _level_dict(self.moon_harmony_level),
            "rising_compatibility": self.rising_compatibility,
            "rising_harmony_level": _level_dict(self.rising_harmony_level),
            "oracle_reading": self.oracle_reading,
            "strengths": self.strengths,
            "growth_opportunities": self.growth_opportunities,
            "poetic_summary": self.poetic_summary,
            "nurturing_advice": self.nurturing_advice,
            "full_chart_reading": self.full_chart_reading(),
        }
