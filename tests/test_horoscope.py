from datetime import date, timedelta

import pytest

from astrofriends.services import horoscope as horoscope_svc
from astrofriends.services.constants import SIGN_NAMES
from astrofriends.services.horoscope import (
    celestial_message,
    current_transits,
    element_advice,
    local_oracle,
    week_of_year,
    week_start,
    weekly_horoscope,
    weekly_sky,
)
from astrofriends.services.horoscope_data import (
    DEFAULT_READINGS,
    ELEMENT_ADVICE,
    HOROSCOPE_READINGS,
    WEEKLY_TRANSITS,
)
from astrofriends.services.lunar import MOON_PHASES


def test_week_of_year_is_iso():
    assert week_of_year(date(2024, 1, 1)) == 1
    assert week_of_year(date(2024, 1, 8)) == 2
    assert week_of_year(date(2021, 1, 1)) == 53
    assert week_start(date(2024, 1, 4)) == date(2024, 1, 1)


def test_every_sign_has_two_entries():
    assert set(HOROSCOPE_READINGS) == set(SIGN_NAMES)
    for sign, entries in HOROSCOPE_READINGS.items():
        assert len(entries) == 2
        assert all(e.sign == sign for e in entries)


def test_rotation_by_week():
    assert weekly_horoscope("Aries", date(2024, 1, 1)).mood == "Confident"
    assert weekly_horoscope("Aries", date(2024, 1, 8)).mood == "Adventurous"
    assert weekly_horoscope("aries", date(2024, 1, 8)).lucky_color == "Crimson"


@pytest.mark.parametrize("sign", SIGN_NAMES)
def test_rotation_period_is_entry_count(sign):
    on = date(2024, 3, 6)
    later = on + timedelta(weeks=len(HOROSCOPE_READINGS[sign]))
    assert weekly_horoscope(sign, on) == weekly_horoscope(sign, later)
    assert weekly_horoscope(sign, on) == weekly_horoscope(sign, on + timedelta(days=1))


def test_missing_sign_uses_default(monkeypatch):
    monkeypatch.delitem(horoscope_svc.HOROSCOPE_READINGS, "Leo")
    entry = weekly_horoscope("Leo", date(2024, 1, 1))
    assert entry == DEFAULT_READINGS[0]
    assert entry.mood == "Energetic"


def test_transit_rotation():
    assert current_transits(date(2024, 1, 1)) == WEEKLY_TRANSITS[1]
    assert current_transits(date(2024, 1, 29)) == WEEKLY_TRANSITS[0]
    assert current_transits(date(2021, 1, 1))[0].aspect == "sextile Mars"
    assert all(len(slot) == 2 for slot in WEEKLY_TRANSITS)


def test_celestial_message_known_date():
    message = celestial_message("Aries", date(2024, 1, 1))
    assert message == (
        "With the Waning Gibbous 🌖 in Aquarius, you may feel innovative and humanitarian. "
        "Mars sextile Jupiter adds dynamic energy to fuel your ambitions. "
        + ELEMENT_ADVICE["Fire"][1]
    )


def test_element_advice_follows_transit_moon_sign():
    # 2024-01-01: Waning Gibbous in Aquarius; 2024-01-02: Waning Gibbous in Pisces
    assert celestial_message("Libra", date(2024, 1, 1)).endswith(ELEMENT_ADVICE["Air"][0])
    assert celestial_message("Cancer", date(2024, 1, 1)).endswith(ELEMENT_ADVICE["Water"][1])
    assert celestial_message("Cancer", date(2024, 1, 2)).endswith(ELEMENT_ADVICE["Water"][0])


@pytest.mark.parametrize(
    "sign,phase_index,moon_sign,favoured",
    [
        ("Leo", 4, "Taurus", True),
        ("Leo", 3, "Taurus", True),
        ("Leo", 0, "Taurus", False),
        ("Virgo", 0, "Leo", True),
        ("Virgo", 1, "Leo", True),
        ("Virgo", 4, "Leo", False),
        ("Libra", 6, "Aquarius", True),
        ("Libra", 6, "Aries", False),
        ("Pisces", 4, "Aries", True),
        ("Pisces", 2, "Scorpio", True),
        ("Pisces", 2, "Aries", False),
    ],
)
def test_element_advice(sign, phase_index, moon_sign, favoured):
    element = {"Leo": "Fire", "Virgo": "Earth", "Libra": "Air", "Pisces": "Water"}[sign]
    expected = ELEMENT_ADVICE[element][0 if favoured else 1]
    assert element_advice(sign, MOON_PHASES[phase_index], moon_sign) == expected


def test_local_oracle():
    on = date(2024, 1, 1)
    oracle = local_oracle("cancer", on)
    entry = weekly_horoscope("Cancer", on)
    assert oracle["sign"] == "Cancer"
    assert oracle["week_start"] == "2024-01-01"
    assert oracle["weekly_reading"].startswith(entry.weekly_reading)
    assert "\n\nWith the Waning Gibbous 🌖 in the sky" in oracle["weekly_reading"]
    assert oracle["weekly_reading"].endswith(
        "The Moon in Aquarius adds innovative and humanitarian to your emotional landscape."
    )
    assert oracle["celestial_insight"] == (
        "The Waning Gibbous harmonizes with your Cancer energy, "
        "creating a powerful time for water sign activities."
    )
    assert oracle["compatibility_sign"] == entry.compatibility
    assert oracle["lucky_number"] == entry.lucky_number


def test_weekly_sky():
    sky = weekly_sky(date(2024, 1, 3))
    assert sky["week_start"] == "2024-01-01"
    assert sky["moon_phase"]["name"] in {p.name for p in MOON_PHASES}
    assert len(sky["transits"]) == 2
    assert sky["transits"][0]["planet"] == "Mars"
