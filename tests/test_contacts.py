from datetime import date, time

import pytest

from astrofriends.services.contacts import (
    FEATURES,
    Contact,
    can_access,
    completion_level,
    locked_features,
    next_unlocks,
    unlocked_features,
)


@pytest.mark.parametrize(
    "kwargs,expected",
    [
        ({}, "none"),
        ({"birth_time": time(9, 0), "birth_place": "Paris"}, "none"),
        ({"birthday": date(1990, 4, 15)}, "basic"),
        ({"birthday": date(1990, 4, 15), "birth_time": time(9, 0)}, "extended"),
        ({"birthday": date(1990, 4, 15), "birth_place": "Paris"}, "extended"),
        ({"birthday": date(1990, 4, 15), "birth_place": "  "}, "basic"),
        ({"birthday": date(1990, 4, 15), "birth_time": time(9, 0), "birth_place": "Paris"}, "full"),
    ],
)
def test_completion_level(kwargs, expected):
    assert completion_level(Contact(name="Sam", **kwargs)) == expected


def test_contact_without_birthday_has_no_chart():
    contact = Contact(name="Sam")
    assert contact.natal_chart is None
    assert contact.sun_sign is None
    assert contact.chart_completeness == "sun_only"
    assert unlocked_features(contact) == []
    assert len(locked_features(contact)) == len(FEATURES)


def test_contact_chart_fields():
    contact = Contact(name="Sam", birthday=date(1990, 4, 15), birth_time=time(15, 0), birth_place="Paris")
    assert contact.sun_sign == "Aries"
    assert contact.rising_sign == "Virgo"
    assert contact.moon_sign == contact.natal_chart.moon_sign
    assert contact.chart_completeness == "full"


def test_feature_ladder():
    basic = Contact(name="Sam", birthday=date(1990, 4, 15))
    extended = Contact(name="Sam", birthday=date(1990, 4, 15), birth_time=time(9, 0))
    full = Contact(name="Sam", birthday=date(1990, 4, 15), birth_time=time(9, 0), birth_place="Tokyo")

    assert can_access("Weekly Horoscope", basic)
    assert not can_access("Personal Oracle", basic)
    assert can_access("Personal Oracle", extended)
    assert not can_access("Synastry Insights", extended)
    assert set(unlocked_features(full)) == set(FEATURES)
    assert locked_features(full) == []


def test_next_unlocks():
    none = next_unlocks(Contact(name="Sam"))
    assert {f for f, _ in none} == {
        "Sun Sign Traits",
        "Basic Horoscope",
        "Overall Compatibility",
        "Weekly Horoscope",
    }
    assert all(hint == "Add birthday" for _, hint in none)

    basic = next_unlocks(Contact(name="Sam", birthday=date(1990, 4, 15)))
    assert basic == [
        ("Moon Sign Insights", "Add birth time or place"),
        ("Personal Oracle", "Add birth time or place"),
    ]

    extended = next_unlocks(Contact(name="Sam", birthday=date(1990, 4, 15), birth_place="Lima"))
    assert extended == [
        ("Rising Sign", "Add both birth time and place"),
        ("This Week Compatibility", "Add both birth time and place"),
        ("Synastry Insights", "Add both birth time and place"),
        ("Live Compatibility", "Add both birth time and place"),
    ]

    full = Contact(name="Sam", birthday=date(1990, 4, 15), birth_time=time(9, 0), birth_place="Tokyo")
    assert next_unlocks(full) == []
