from dataclasses import asdict
from datetime import date
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from ..schemas import HoroscopeResponse, OracleResponse
from ..services.constants import is_sign, normalize_sign_name
from ..services.horoscope import celestial_message, local_oracle, week_of_year, weekly_horoscope
from ..services.util.dates import resolve_date

router = APIRouter(prefix="/v1/horoscope", tags=["horoscope"])


def _sign_or_422(sign: str) -> str:
    if not is_sign(sign):
        raise HTTPException(status_code=422, detail=f"Unknown zodiac sign: {sign}")
    return normalize_sign_name(sign)


@router.get("/{sign}", response_model=HoroscopeResponse)
def horoscope(sign: str, on: Optional[date] = Query(None, alias="date", description="YYYY-MM-DD, defaults to today (UTC)")):
    name = _sign_or_422(sign)
    on = resolve_date(on)
    return {
        "date": on.isoformat(),
        "week_of_year": week_of_year(on),
        "horoscope": asdict(weekly_horoscope(name, on)),
        "celestial_message": celestial_message(name, on),
    }


@router.get("/{sign}/oracle", response_model=OracleResponse)
def oracle(sign: str, on: Optional[date] = Query(None, alias="date", description="YYYY-MM-DD, defaults to today (UTC)")):
    name = _sign_or_422(sign)
    return local_oracle(name, resolve_date(on))
