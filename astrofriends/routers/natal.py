from fastapi import APIRouter

from ..schemas.natal import (
    BirthData,
    ContactProfileRequest,
    ContactProfileResponse,
    NatalChartResponse,
)
from ..services.contacts import (
    Contact,
    completion_level,
    locked_features,
    next_unlocks,
    unlocked_features,
)
from ..services.natal_chart import NatalChart

router = APIRouter(prefix="/v1/natal", tags=["natal"])


@router.post("/chart", response_model=NatalChartResponse)
def natal_chart(req: BirthData):
    chart = NatalChart(req.birth_date, req.birth_time, req.birth_place)
    return chart.to_dict()


@router.post("/profile", response_model=ContactProfileResponse)
def contact_profile(req: ContactProfileRequest):
    contact = Contact(
        name=req.name,
        birthday=req.birthday,
        birth_time=req.birth_time,
        birth_place=req.birth_place,
        is_favorite=req.is_favorite,
    )
    chart = contact.natal_chart
    return {
        "name": contact.name,
        "is_favorite": contact.is_favorite,
        "completion_level": completion_level(contact),
        "chart": chart.to_dict() if chart else None,
        "unlocked_features": unlocked_features(contact),
        "locked_features": locked_features(contact),
        "next_unlocks": [
            {"feature": feature, "requirement": hint} for feature, hint in next_unlocks(contact)
        ],
    }
