import logging
from itertools import combinations_with_replacement

from astrofriends.services import content_library
from astrofriends.services.compatibility_content import ORACLE_READINGS
from astrofriends.services.constants import SIGN_NAMES


def test_every_pair_resolves_to_content():
    pairs = list(combinations_with_replacement(SIGN_NAMES, 2))
    assert len(pairs) == 78
    for a, b in pairs:
        assert content_library.oracle_reading(a, b)
        assert content_library.strengths(a, b)
        assert content_library.growth_opportunities(a, b)
        assert content_library.poetic_summary(a, b)
        assert content_library.nurturing_advice(a, b)
        assert content_library.moon_reading(a, b)
        assert content_library.rising_reading(a, b)


def test_curated_keys_are_sorted_pairs():
    for key in ORACLE_READINGS:
        a, b = key.split("-")
        assert a <= b
        assert a in SIGN_NAMES and b in SIGN_NAMES


def test_curated_lookup_ignores_order():
    assert content_library.oracle_reading("Leo", "Aries") == ORACLE_READINGS["Aries-Leo"]
    assert content_library.oracle_reading("Taurus", "Cancer") == ORACLE_READINGS["Cancer-Taurus"]
    assert content_library.is_curated("Pisces", "Scorpio")
    assert not content_library.is_curated("Aries", "Cancer")


def test_generated_reading_uses_dynamic_template():
    reading = content_library.oracle_reading("Aries", "Cancer")
    assert reading.startswith("Aries and Cancer come together like different seasons")
    assert "Fire nature" in reading and "Water essence" in reading


def test_generated_output_is_deterministic():
    assert content_library.oracle_reading("Virgo", "Gemini") == content_library.oracle_reading("Virgo", "Gemini")


def test_generated_strengths_add_modality_line():
    same = content_library.strengths("Aries", "Cancer")
    assert same[-1] == content_library.SAME_MODALITY_STRENGTH
    mixed = content_library.strengths("Aries", "Pisces")
    assert mixed[-1] == content_library.MIXED_MODALITY_STRENGTH
    assert len(same) == 3


def test_generated_poetic_and_advice():
    assert content_library.poetic_summary("Gemini", "Aries").startswith("Like wind beneath wings")
    assert content_library.nurturing_advice("Aries", "Cancer").startswith("When friction arises")


def test_moon_reading_lowercases_elements():
    reading = content_library.moon_reading("Aries", "Cancer")
    assert "processes feelings through fire energy" in reading
    assert "needs water expression" in reading


def test_rising_reading_uses_traits():
    reading = content_library.rising_reading("Aries", "Gemini")
    assert "Aries Rising comes across as bold, direct, and energetic" in reading


def test_render_failure_falls_back(monkeypatch, caplog):
    def boom(source):
        raise RuntimeError("broken template")

    monkeypatch.setattr(content_library, "_compile_template", boom)
    with caplog.at_level(logging.ERROR, logger="astrofriends.services.content_library"):
        text = content_library.moon_reading("Aries", "Cancer")
    assert text == content_library.FALLBACK_TEXT
    assert "content_template_render_failed" in caplog.text
