from datetime import date, time
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict

ChartCompleteness = Literal["sun_only", "partial", "full"]
CompletionLevel = Literal["none", "basic", "extended", "full"]


class BirthData(BaseModel):
    birth_date: date  # YYYY-MM-DD
    birth_time: Optional[time] = None  # HH:MM
    birth_place: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"birth_date": "1990-04-15", "birth_time": "14:30", "birth_place": "Paris, France"}
        }
    )


class NatalChartResponse(BaseModel):
    sun_sign: str
    moon_sign: str
    rising_sign: Optional[str] = None
    chart_completeness: ChartCompleteness
    completeness_label: str
    completeness_emoji: str
    description: str


class ContactProfileRequest(BaseModel):
    name: str
    birthday: Optional[date] = None
    birth_time: Optional[time] = None
    birth_place: Optional[str] = None
    is_favorite: bool = False


class UnlockHint(BaseModel):
    feature: str
    requirement: str


class ContactProfileResponse(BaseModel):
    name: str
    is_favorite: bool
    completion_level: CompletionLevel
    chart: Optional[NatalChartResponse] = None
    unlocked_features: List[str]
    locked_features: List[str]
    next_unlocks: List[UnlockHint]
