"""
Compatibility Constants - Shared Data

Dynamic tables, classic sign pairs and harmony tiers used by both
compatibility_helpers and compatibility_engine.
"""

from typing import Dict, FrozenSet, Tuple

# Element dynamics: (score bonus, description)
ELEMENT_DYNAMICS: Dict[str, Tuple[int, str]] = {
    "same_element": (20, "You share the same elemental language, understanding each other intuitively"),
    "complementary": (15, "Your elements feed each other, creating natural synergy and excitement"),
    "grounding": (5, "Your different elements offer balance and perspective to one another"),
    "challenging": (0, "Your contrasting elements invite you both to grow beyond comfort zones"),
}

ELEMENT_PAIRS: Dict[FrozenSet[str], str] = {
    frozenset({"Fire", "Air"}): "complementary",
    frozenset({"Earth", "Water"}): "complementary",
    frozenset({"Fire", "Water"}): "challenging",
    frozenset({"Earth", "Air"}): "challenging",
    frozenset({"Fire", "Earth"}): "grounding",
    frozenset({"Air", "Water"}): "grounding",
}

# Modality dynamics: (score bonus, description)
MODALITY_DYNAMICS: Dict[str, Tuple[int, str]] = {
    "same_modality": (5, "You approach life with similar rhythms and timing"),
    "complementary": (10, "Your different approaches create a complete, balanced dynamic"),
    "mixed": (7, "You bring unique perspectives that enrich each other"),
}

MODALITY_COMPLEMENTARY: FrozenSet[FrozenSet[str]] = frozenset({
    frozenset({"Cardinal", "Fixed"}),
    frozenset({"Fixed", "Mutable"}),
})

BASE_SCORE = 50
SAME_SIGN_BONUS = 25
TRADITIONAL_MATCH_BONUS = 15
OPPOSITE_BONUS = 10

TRADITIONAL_MATCHES: FrozenSet[FrozenSet[str]] = frozenset(
    frozenset(pair)
    for pair in (
        ("Aries", "Leo"), ("Aries", "Sagittarius"),
        ("Taurus", "Virgo"), ("Taurus", "Capricorn"),
        ("Gemini", "Libra"), ("Gemini", "Aquarius"),
        ("Cancer", "Scorpio"), ("Cancer", "Pisces"),
        ("Leo", "Sagittarius"), ("Virgo", "Capricorn"),
        ("Libra", "Aquarius"), ("Scorpio", "Pisces"),
    )
)

OPPOSITES: FrozenSet[FrozenSet[str]] = frozenset(
    frozenset(pair)
    for pair in (
        ("Aries", "Libra"), ("Taurus", "Scorpio"), ("Gemini", "Sagittarius"),
        ("Cancer", "Capricorn"), ("Leo", "Aquarius"), ("Virgo", "Pisces"),
    )
)

# Harmony tiers, highest first: (key, minimum score, label, emoji, description)
HARMONY_LEVELS: Tuple[Tuple[str, int, str, str, str], ...] = (
    ("soul_resonance", 85, "Soul Resonance", "✨",
     "Your energies dance together in beautiful synchronicity"),
    ("deep_connection", 70, "Deep Connection", "💫",
     "A profound understanding flows naturally between you"),
    ("harmonious_flow", 55, "Harmonious Flow", "🌊",
     "Your connection carries an easy, supportive rhythm"),
    ("growth_partners", 40, "Growth Partners", "🌱",
     "Together, you inspire each other to evolve and expand"),
    ("dynamic_teachers", 0, "Dynamic Teachers", "⚡",
     "Your differences spark growth and valuable lessons"),
)
