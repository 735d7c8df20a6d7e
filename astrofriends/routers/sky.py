from datetime import date
from typing import Optional

from fastapi import APIRouter, Query

from ..schemas import SkyResponse
from ..services.horoscope import weekly_sky
from ..services.util.dates import resolve_date

router = APIRouter(prefix="/v1/sky", tags=["sky"])


@router.get("", response_model=SkyResponse)
def sky(on: Optional[date] = Query(None, alias="date", description="YYYY-MM-DD, defaults to today (UTC)")):
    return weekly_sky(resolve_date(on))
