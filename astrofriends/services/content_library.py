"""Compatibility content: curated pair readings with templated fallbacks.

Lookups go through the sorted pair key so that ("Leo", "Aries") and
("Aries", "Leo") resolve to the same curated entry. Pairs without curated text
are rendered from Jinja templates selected by the pair's elemental dynamic.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Dict, List, Mapping, Optional

from jinja2 import Environment, Template

from .compatibility_content import (
    GROWTH_OPPORTUNITIES,
    NURTURING_ADVICE,
    ORACLE_READINGS,
    POETIC_SUMMARIES,
    STRENGTHS,
)
from .compatibility_helpers import element_dynamic, pair_key
from .constants import element_of, modality_of, normalize_sign_name, trait

logger = logging.getLogger(__name__)


READING_TEMPLATES: Dict[str, str] = {
    "same_element": (
        "When {{ sign1 }} meets {{ sign2 }}, there's an instant recognition—like two instruments "
        "playing in the same key. Your shared {{ element1 }} nature creates a foundation of mutual "
        "understanding. You speak the same emotional language, though you each have your own unique "
        "dialect. This connection invites you to explore the depths of your shared element while "
        "celebrating what makes each of you beautifully distinct."
    ),
    "complementary": (
        "The meeting of {{ sign1 }} and {{ sign2 }} creates a natural alchemy. Your {{ element1 }} "
        "energy finds a willing partner in their {{ element2 }} spirit—together, you can create "
        "something greater than either could alone. There's an ease to this connection, a sense that "
        "you naturally bring out hidden facets in each other. When you collaborate, magic often follows."
    ),
    "challenging": (
        "{{ sign1 }} and {{ sign2 }} come together like different seasons meeting at dawn. Your "
        "{{ element1 }} nature and their {{ element2 }} essence may seem worlds apart, yet this very "
        "difference holds profound potential for growth. You each carry wisdom the other needs. With "
        "patience and openness, you become each other's greatest teachers, expanding in ways you never "
        "imagined possible."
    ),
    "grounding": (
        "The connection between {{ sign1 }} and {{ sign2 }} offers a beautiful balance of energies. "
        "Where your {{ element1 }} nature flows, their {{ element2 }} presence provides a complementary "
        "rhythm. Together, you create a more complete picture of life's possibilities. This relationship "
        "invites both of you to appreciate perspectives beyond your natural inclinations."
    ),
}

GENERIC_STRENGTHS: Dict[str, List[str]] = {
    "same_element": [
        "Deep intuitive understanding of each other's needs",
        "Shared values and ways of processing emotions",
    ],
    "complementary": [
        "Natural synergy that amplifies both your gifts",
        "Easy communication and mutual inspiration",
    ],
    "challenging": [
        "Powerful potential for personal transformation",
        "Bringing unique perspectives that expand worldviews",
    ],
    "grounding": [
        "Balancing energies that create stability",
        "Learning from each other's different approaches",
    ],
}

SAME_MODALITY_STRENGTH = "Similar pace and approach to life's challenges"
MIXED_MODALITY_STRENGTH = "Complementary ways of initiating and sustaining projects"

GENERIC_GROWTH: Dict[str, List[str]] = {
    "same_element": [
        "Exploring perspectives outside your shared comfort zone",
        "Avoiding echo chambers by seeking diverse experiences together",
    ],
    "complementary": [
        "Ensuring both partners feel equally heard and valued",
        "Balancing excitement with grounded planning",
    ],
    "challenging": [
        "Practicing patience when your approaches differ",
        "Finding the gift in each other's contrasting viewpoints",
    ],
    "grounding": [
        "Appreciating each other's unique contributions",
        "Creating space for both action and reflection",
    ],
}

POETIC_TEMPLATES: Dict[str, str] = {
    "same_element": "Two souls swimming in the same cosmic river, discovering new depths together.",
    "complementary": "Like wind beneath wings, you lift each other toward unexplored horizons.",
    "challenging": "In the space between your differences, transformation blooms.",
    "grounding": "A dance of contrasts that creates its own beautiful rhythm.",
}

ADVICE_TEMPLATES: Dict[str, str] = {
    "same_element": (
        "Nurture this bond by occasionally stepping outside your shared element—try activities that "
        "neither of you would naturally choose. This keeps your connection fresh and growing."
    ),
    "complementary": (
        "Your natural harmony is a gift. Keep it vibrant by expressing gratitude often and creating "
        "rituals that celebrate what makes your connection special."
    ),
    "challenging": (
        "When friction arises, pause before reacting. Ask yourself: 'What can I learn here?' Your "
        "differences are doorways to growth, not walls to climb."
    ),
    "grounding": (
        "Honor both your need for action and reflection. Schedule time for both adventure and quiet "
        "connection—your bond thrives on this balance."
    ),
}

MOON_TEMPLATES: Dict[str, str] = {
    "same_element": (
        "Your emotional worlds speak the same language. With both Moons in {{ element1 }} signs, you "
        "instinctively understand how each other processes feelings. {{ sign1 }} Moon meets {{ sign2 }} "
        "Moon creates a safe emotional harbor where vulnerability flows naturally. You may finish each "
        "other's emotional sentences."
    ),
    "complementary": (
        "Your emotional natures feed each other beautifully. {{ sign1 }} Moon's {{ traits1 }} blends "
        "harmoniously with {{ sign2 }} Moon's {{ traits2 }}. Together, you create an emotional alchemy "
        "that neither could achieve alone—inspiring and uplifting each other through life's tides."
    ),
    "challenging": (
        "Your emotional languages differ, offering rich opportunities for growth. {{ sign1 }} Moon "
        "processes feelings through {{ element1|lower }} energy, while {{ sign2 }} Moon needs "
        "{{ element2|lower }} expression. With patience, these differences become your greatest "
        "teachers—each showing the other new ways to feel and heal."
    ),
    "grounding": (
        "Your Moons create a stabilizing emotional balance. {{ sign1 }} Moon brings {{ traits1 }}, while "
        "{{ sign2 }} Moon offers {{ traits2 }}. This combination grounds emotional extremes and provides "
        "a steady foundation for deep, lasting intimacy."
    ),
}

RISING_TEMPLATES: Dict[str, str] = {
    "same_element": (
        "You recognized something familiar in each other from the very first moment. With {{ sign1 }} "
        "Rising meeting {{ sign2 }} Rising, your approaches to life naturally align. You share similar "
        "lifestyles, social preferences, and ways of moving through the world. Others see you as a "
        "natural pair."
    ),
    "complementary": (
        "Your first impressions sparked an exciting curiosity. {{ sign1 }} Rising {{ traits1 }}, while "
        "{{ sign2 }} Rising {{ traits2 }}. Together, you present a dynamic duo to the world—your "
        "combined energies creating something greater than either alone."
    ),
    "challenging": (
        "Your initial meeting may have felt intriguing or even puzzling. {{ sign1 }} Rising's style "
        "contrasts with {{ sign2 }} Rising's approach to life. This tension creates magnetic "
        "attraction—you're drawn to qualities in each other that you're still developing in yourselves."
    ),
    "grounding": (
        "You bring out different sides of each other in social situations. {{ sign1 }} Rising and "
        "{{ sign2 }} Rising create a balanced presence together. Where one leads, the other supports, "
        "making you versatile partners in navigating life's varied landscapes."
    ),
}

FALLBACK_TEXT = "Your connection is a story still being written, one shared moment at a time."


_jinja_env: Optional[Environment] = None


def _get_jinja_env() -> Environment:
    global _jinja_env
    if _jinja_env is None:
        _jinja_env = Environment(autoescape=False, trim_blocks=True, lstrip_blocks=True)
    return _jinja_env


@lru_cache(maxsize=64)
def _compile_template(source: str) -> Template:
    return _get_jinja_env().from_string(source)


def _render(source: str, context: Mapping[str, Any], fallback: str = FALLBACK_TEXT) -> str:
    try:
        rendered = _compile_template(source).render(**context)
    except Exception:
        logger.exception("content_template_render_failed", extra={"template": source[:60]})
        return fallback
    cleaned = " ".join(rendered.split())
    return cleaned or fallback


def _context(sign1: str, sign2: str, trait_kind: str = "sun") -> Dict[str, str]:
    s1, s2 = normalize_sign_name(sign1), normalize_sign_name(sign2)
    return {
        "sign1": s1,
        "sign2": s2,
        "element1": element_of(s1),
        "element2": element_of(s2),
        "traits1": trait(s1, trait_kind),
        "traits2": trait(s2, trait_kind),
    }


# ---------------------------------------------------------------------------
# Sun-pair content
# ---------------------------------------------------------------------------

def oracle_reading(sign1: str, sign2: str) -> str:
    curated = ORACLE_READINGS.get(pair_key(sign1, sign2))
    if curated:
        return curated
    dynamic = element_dynamic(sign1, sign2).key
    logger.debug("Generated oracle reading for %s (%s)", pair_key(sign1, sign2), dynamic)
    return _render(READING_TEMPLATES[dynamic], _context(sign1, sign2))


def strengths(sign1: str, sign2: str) -> List[str]:
    curated = STRENGTHS.get(pair_key(sign1, sign2))
    if curated:
        return list(curated)
    dynamic = element_dynamic(sign1, sign2).key
    items = list(GENERIC_STRENGTHS[dynamic])
    if modality_of(sign1) == modality_of(sign2):
        items.append(SAME_MODALITY_STRENGTH)
    else:
        items.append(MIXED_MODALITY_STRENGTH)
    return items


def growth_opportunities(sign1: str, sign2: str) -> List[str]:
    curated = GROWTH_OPPORTUNITIES.get(pair_key(sign1, sign2))
    if curated:
        return list(curated)
    return list(GENERIC_GROWTH[element_dynamic(sign1, sign2).key])


def poetic_summary(sign1: str, sign2: str) -> str:
    curated = POETIC_SUMMARIES.get(pair_key(sign1, sign2))
    if curated:
        return curated
    return _render(POETIC_TEMPLATES[element_dynamic(sign1, sign2).key], _context(sign1, sign2))


def nurturing_advice(sign1: str, sign2: str) -> str:
    curated = NURTURING_ADVICE.get(pair_key(sign1, sign2))
    if curated:
        return curated
    return _render(ADVICE_TEMPLATES[element_dynamic(sign1, sign2).key], _context(sign1, sign2))


def is_curated(sign1: str, sign2: str) -> bool:
    return pair_key(sign1, sign2) in ORACLE_READINGS


# ---------------------------------------------------------------------------
# Moon / Rising pair readings
# ---------------------------------------------------------------------------

def moon_reading(moon1: str, moon2: str) -> str:
    """Emotional-bond reading for two Moon signs."""
    dynamic = element_dynamic(moon1, moon2).key
    return _render(MOON_TEMPLATES[dynamic], _context(moon1, moon2, "moon"))


def rising_reading(rising1: str, rising2: str) -> str:
    """First-impressions reading for two Rising signs."""
    dynamic = element_dynamic(rising1, rising2).key
    return _render(RISING_TEMPLATES[dynamic], _context(rising1, rising2, "rising"))
