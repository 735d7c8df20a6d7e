from datetime import date, time

import pytest

from astrofriends.services.natal_chart import (
    COMPLETENESS_LABELS,
    NatalChart,
    completeness_for,
    natal_moon_sign,
    rising_sign,
)
from astrofriends.services.util.place_defaults import clean_place, utc_offset_for


@pytest.mark.parametrize(
    "birth_time,birth_place,expected",
    [
        (None, None, "sun_only"),
        (None, "Paris", "sun_only"),
        (time(9, 0), None, "partial"),
        (time(9, 0), "Paris", "full"),
    ],
)
def test_completeness_combinations(birth_time, birth_place, expected):
    chart = NatalChart(date(1990, 4, 15), birth_time, birth_place)
    assert chart.chart_completeness == expected
    assert chart.has_full_chart == (expected == "full")


def test_blank_place_counts_as_absent():
    assert completeness_for(time(9, 0), "   ") == "partial"
    assert clean_place("") is None


def test_moon_reference_date():
    assert natal_moon_sign(date(2000, 1, 1)) == "Cancer"
    assert natal_moon_sign(date(2000, 1, 1), time(11, 59)) == "Cancer"
    assert natal_moon_sign(date(2000, 1, 1), time(12, 0)) == "Leo"


def test_moon_advances_with_days():
    # 9 days / 2.275 -> 3 signs past Cancer
    assert natal_moon_sign(date(2000, 1, 10)) == "Libra"


def test_moon_before_reference_date():
    assert natal_moon_sign(date(1999, 12, 31)) == "Cancer"
    assert natal_moon_sign(date(1999, 12, 29)) == "Gemini"
    # -3548 days -> -1559 signs, +1 for an afternoon birth
    assert natal_moon_sign(date(1990, 4, 15), time(15, 0)) == "Virgo"


def test_rising_requires_time():
    chart = NatalChart(date(1990, 4, 15), None, "Paris")
    assert chart.rising_sign is None
    assert chart.moon_sign


@pytest.mark.parametrize(
    "place,expected",
    [
        (None, "Leo"),
        ("Berlin", "Leo"),
        ("Paris, France", "Virgo"),
        ("New York, USA", "Gemini"),
        ("Tokyo", "Capricorn"),
        ("London", "Leo"),
        ("Sydney, Australia", "Capricorn"),
    ],
)
def test_rising_place_nudge(place, expected):
    # Aries sun, 15:00 -> (15 + offset - 6) / 2 signs
    assert rising_sign("Aries", time(15, 0), place) == expected


def test_rising_truncates_toward_zero():
    # (3 - 6) / 2 = -1.5 -> -1
    assert rising_sign("Aries", time(3, 0)) == "Pisces"


def test_place_matching_is_substring_and_ordered():
    offset, flags = utc_offset_for("Latin AMERICA")
    assert offset == -5.0
    assert flags["matched_token"] == "america"
    offset, flags = utc_offset_for("Kyiv, Ukraine")
    assert offset == 0.0 and flags["matched_token"] == "uk"
    offset, flags = utc_offset_for("Lima")
    assert offset == 0.0 and flags["default_reason"] == "unmapped_place"


def test_chart_to_dict_and_description():
    chart = NatalChart(date(1990, 4, 15), time(15, 0), "Paris, France")
    data = chart.to_dict()
    assert data["sun_sign"] == "Aries"
    assert data["rising_sign"] == "Virgo"
    assert data["chart_completeness"] == "full"
    assert data["completeness_label"] == COMPLETENESS_LABELS["full"]
    assert chart.description.splitlines() == [
        "☀️ Sun in Aries",
        f"🌙 Moon in {chart.moon_sign}",
        "⬆️ Rising in Virgo",
    ]
