"""
Helper functions for sign-pair relationships.
Includes elemental/modality dynamics, classic pairings and pair keys.
"""

from dataclasses import dataclass
from typing import Tuple

from .compatibility_constants import (
    ELEMENT_DYNAMICS,
    ELEMENT_PAIRS,
    MODALITY_COMPLEMENTARY,
    MODALITY_DYNAMICS,
    OPPOSITES,
    TRADITIONAL_MATCHES,
)
from .constants import element_of, modality_of, normalize_sign_name


@dataclass(frozen=True)
class Dynamic:
    """Classification of a pair of elements or modalities."""

    key: str
    bonus: int
    description: str


def classify_elements(elem1: str, elem2: str) -> str:
    """
    Classify an element pair.

    Returns one of "same_element", "complementary", "challenging", "grounding".
    Order of the arguments does not matter.
    """
    if elem1 == elem2:
        return "same_element"
    return ELEMENT_PAIRS.get(frozenset({elem1, elem2}), "grounding")


def classify_modalities(mod1: str, mod2: str) -> str:
    """Classify a modality pair as "same_modality", "complementary" or "mixed"."""
    if mod1 == mod2:
        return "same_modality"
    if frozenset({mod1, mod2}) in MODALITY_COMPLEMENTARY:
        return "complementary"
    return "mixed"


def element_dynamic(sign1: str, sign2: str) -> Dynamic:
    key = classify_elements(element_of(sign1), element_of(sign2))
    bonus, description = ELEMENT_DYNAMICS[key]
    return Dynamic(key=key, bonus=bonus, description=description)


def modality_dynamic(sign1: str, sign2: str) -> Dynamic:
    key = classify_modalities(modality_of(sign1), modality_of(sign2))
    bonus, description = MODALITY_DYNAMICS[key]
    return Dynamic(key=key, bonus=bonus, description=description)


def is_traditional_match(sign1: str, sign2: str) -> bool:
    return frozenset({normalize_sign_name(sign1), normalize_sign_name(sign2)}) in TRADITIONAL_MATCHES


def are_opposites(sign1: str, sign2: str) -> bool:
    return frozenset({normalize_sign_name(sign1), normalize_sign_name(sign2)}) in OPPOSITES


def sorted_pair(sign1: str, sign2: str) -> Tuple[str, str]:
    first, second = sorted((normalize_sign_name(sign1), normalize_sign_name(sign2)))
    return first, second


def pair_key(sign1: str, sign2: str) -> str:
    """Order-independent lookup key, e.g. ("Leo", "Aries") -> "Aries-Leo"."""
    return "-".join(sorted_pair(sign1, sign2))
