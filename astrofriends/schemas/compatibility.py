from datetime import date, time
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from ..services.constants import normalize_sign_name, sign_index


def _check_sign(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    sign_index(value)
    return normalize_sign_name(value)


class SignProfileIn(BaseModel):
    sun: str
    moon: Optional[str] = None
    rising: Optional[str] = None

    @field_validator("sun", "moon", "rising")
    @classmethod
    def _known_sign(cls, v):
        return _check_sign(v)


class CompatibilitySignsRequest(BaseModel):
    person_a: SignProfileIn
    person_b: SignProfileIn

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "person_a": {"sun": "Aries", "moon": "Cancer", "rising": "Libra"},
                "person_b": {"sun": "Leo", "moon": "Scorpio"},
            }
        }
    )


class ChartPersonIn(BaseModel):
    """Birth data for one person; sun_sign is used when no birth date is known."""

    birth_date: Optional[date] = None
    birth_time: Optional[time] = None
    birth_place: Optional[str] = None
    sun_sign: Optional[str] = None

    @field_validator("sun_sign")
    @classmethod
    def _known_sign(cls, v):
        return _check_sign(v)

    @model_validator(mode="after")
    def _needs_date_or_sign(self):
        if self.birth_date is None and self.sun_sign is None:
            raise ValueError("either birth_date or sun_sign is required")
        return self


class CompatibilityChartsRequest(BaseModel):
    person_a: ChartPersonIn
    person_b: ChartPersonIn


class ProfileOut(BaseModel):
    sun: str
    moon: Optional[str] = None
    rising: Optional[str] = None


class DynamicOut(BaseModel):
    key: str
    bonus: int
    description: str


class HarmonyLevelOut(BaseModel):
    key: str
    label: str
    emoji: str
    description: str


class CompatibilityResponse(BaseModel):
    person1: ProfileOut
    person2: ProfileOut
    harmony_score: int
    harmony_level: HarmonyLevelOut
    elemental_dynamic: DynamicOut
    modality_dynamic: DynamicOut
    has_deep_compatibility: bool
    has_rising_data: bool
    moon_compatibility: Optional[str] = None
    moon_harmony_level: Optional[HarmonyLevelOut] = None
    rising_compatibility: Optional[str] = None
    rising_harmony_level: Optional[HarmonyLevelOut] = None
    oracle_reading: str
    strengths: List[str]
    growth_opportunities: List[str]
    poetic_summary: str
    nurturing_advice: str
    full_chart_reading: str


class DynamicsResponse(BaseModel):
    sign_a: str
    sign_b: str
    harmony_score: int
    elemental_dynamic: DynamicOut
    modality_dynamic: DynamicOut
