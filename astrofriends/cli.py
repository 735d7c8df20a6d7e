"""Command line front-end over the astrofriends services."""

from __future__ import annotations

import json
from dataclasses import asdict
from datetime import date, datetime, time
from typing import Any, Optional

import click

from .log import configure_logging
from .services.compatibility_engine import AstralCompatibility
from .services.constants import is_sign, normalize_sign_name
from .services.horoscope import celestial_message, week_of_year, weekly_horoscope
from .services.natal_chart import NatalChart
from .services.util.dates import today_utc


def _parse_date(value: str) -> date:
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError as exc:
        raise click.BadParameter(f"Invalid date '{value}', expected YYYY-MM-DD") from exc


def _parse_time(value: str) -> time:
    try:
        return datetime.strptime(value, "%H:%M").time()
    except ValueError as exc:
        raise click.BadParameter(f"Invalid time '{value}', expected HH:MM") from exc


def _sign(value: str) -> str:
    if not is_sign(value):
        raise click.BadParameter(f"Unknown zodiac sign '{value}'")
    return normalize_sign_name(value)


def _emit(payload: Any) -> None:
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@click.group()
@click.option("--log-level", default=None, help="Overrides ASTRO_LOG_LEVEL")
def main(log_level: Optional[str]) -> None:
    """AstroFriends compatibility and horoscope tools."""
    configure_logging(log_level)


@main.command("compat")
@click.argument("sign_a")
@click.argument("sign_b")
def compat(sign_a: str, sign_b: str) -> None:
    """Sun-sign compatibility between two signs."""
    _emit(AstralCompatibility.from_signs(_sign(sign_a), _sign(sign_b)).to_dict())


@main.command("chart")
@click.argument("birth_date")
@click.argument("birth_time", required=False)
@click.argument("birth_place", required=False)
def chart(birth_date: str, birth_time: Optional[str], birth_place: Optional[str]) -> None:
    """Approximate natal chart: YYYY-MM-DD [HH:MM] [PLACE]."""
    when = _parse_time(birth_time) if birth_time else None
    _emit(NatalChart(_parse_date(birth_date), when, birth_place).to_dict())


@main.command("horoscope")
@click.argument("sign")
@click.argument("on", required=False)
def horoscope(sign: str, on: Optional[str]) -> None:
    """Weekly horoscope for SIGN, optionally for a given YYYY-MM-DD."""
    name = _sign(sign)
    day = _parse_date(on) if on else today_utc()
    _emit(
        {
            "date": day.isoformat(),
            "week_of_year": week_of_year(day),
            "horoscope": asdict(weekly_horoscope(name, day)),
            "celestial_message": celestial_message(name, day),
        }
    )


if __name__ == "__main__":
    main()
