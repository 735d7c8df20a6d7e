from fastapi import APIRouter, Body, HTTPException, Query

from ..schemas import (
    CompatibilityChartsRequest,
    CompatibilityResponse,
    CompatibilitySignsRequest,
    DynamicsResponse,
)
from ..services.compatibility_engine import AstralCompatibility, SignProfile, dynamic_dict, harmony_score
from ..services.compatibility_helpers import element_dynamic, modality_dynamic
from ..services.constants import is_sign, normalize_sign_name
from ..services.natal_chart import NatalChart

router = APIRouter(prefix="/v1/compatibility", tags=["compatibility"])


@router.post("/signs", response_model=CompatibilityResponse)
def compatibility_from_signs(
    req: CompatibilitySignsRequest = Body(
        ...,
        example={
            "person_a": {"sun": "Aries", "moon": "Cancer", "rising": "Libra"},
            "person_b": {"sun": "Leo", "moon": "Scorpio", "rising": "Gemini"},
        },
    )
):
    compat = AstralCompatibility(
        SignProfile(req.person_a.sun, req.person_a.moon, req.person_a.rising),
        SignProfile(req.person_b.sun, req.person_b.moon, req.person_b.rising),
    )
    return compat.to_dict()


@router.post("/charts", response_model=CompatibilityResponse)
def compatibility_from_charts(
    req: CompatibilityChartsRequest = Body(
        ...,
        example={
            "person_a": {"birth_date": "1990-04-15", "birth_time": "14:30", "birth_place": "Paris"},
            "person_b": {"birth_date": "1992-08-03"},
        },
    )
):
    charts = []
    for person in (req.person_a, req.person_b):
        if person.birth_date is None:
            charts.append(None)
        else:
            charts.append(NatalChart(person.birth_date, person.birth_time, person.birth_place))
    compat = AstralCompatibility.from_charts(
        charts[0],
        charts[1],
        req.person_a.sun_sign or charts[0].sun_sign,
        req.person_b.sun_sign or charts[1].sun_sign,
    )
    return compat.to_dict()


@router.get("/dynamics", response_model=DynamicsResponse)
def dynamics(sign_a: str = Query(...), sign_b: str = Query(...)):
    for value in (sign_a, sign_b):
        if not is_sign(value):
            raise HTTPException(status_code=422, detail=f"Unknown zodiac sign: {value}")
    a, b = normalize_sign_name(sign_a), normalize_sign_name(sign_b)
    return {
        "sign_a": a,
        "sign_b": b,
        "harmony_score": harmony_score(a, b),
        "elemental_dynamic": dynamic_dict(element_dynamic(a, b)),
        "modality_dynamic": dynamic_dict(modality_dynamic(a, b)),
    }
