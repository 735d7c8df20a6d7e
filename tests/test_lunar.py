from datetime import date, timedelta

import pytest

from astrofriends.services.lunar import (
    LUNAR_EPOCH,
    MOON_PHASES,
    MOON_SIGN_FLAVOR,
    current_moon_phase,
    current_moon_sign,
)


def test_epoch_is_new_moon_in_aries():
    assert current_moon_phase(LUNAR_EPOCH).name == "New Moon"
    assert current_moon_sign(LUNAR_EPOCH) == "Aries"


@pytest.mark.parametrize(
    "offset,expected",
    [(1, "New Moon"), (8, "First Quarter"), (15, "Full Moon"), (-1, "Waning Crescent")],
)
def test_phase_buckets(offset, expected):
    assert current_moon_phase(LUNAR_EPOCH + timedelta(days=offset)).name == expected


def test_moon_sign_before_epoch_wraps():
    assert current_moon_sign(LUNAR_EPOCH - timedelta(days=1)) == "Aries"
    assert current_moon_sign(LUNAR_EPOCH - timedelta(days=3)) == "Pisces"


def test_known_date():
    on = date(2024, 1, 1)
    assert current_moon_phase(on).name == "Waning Gibbous"
    assert current_moon_sign(on) == "Aquarius"


def test_moon_sign_advances_after_known_date():
    assert current_moon_sign(date(2024, 1, 2)) == "Pisces"


def test_idempotent():
    on = date(2031, 5, 17)
    assert current_moon_phase(on) == current_moon_phase(on)
    assert current_moon_sign(on) == current_moon_sign(on)


def test_sign_cycle_repeats_every_273_days():
    # 273 days = 120 signs = 10 full cycles
    start = LUNAR_EPOCH + timedelta(days=1)
    assert current_moon_sign(start) == current_moon_sign(start + timedelta(days=273))


def test_phase_cycle_repeats_every_2953_days():
    # 2953 days = 100 synodic months
    start = LUNAR_EPOCH + timedelta(days=1)
    assert current_moon_phase(start) == current_moon_phase(start + timedelta(days=2953))


def test_every_phase_and_sign_has_copy():
    assert len(MOON_PHASES) == 8
    assert all(p.emoji and p.emotional_tone and p.guidance for p in MOON_PHASES)
    assert len(MOON_SIGN_FLAVOR) == 12
