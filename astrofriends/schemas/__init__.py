from .natal import (
    BirthData,
    NatalChartResponse,
    ContactProfileRequest,
    ContactProfileResponse,
    UnlockHint,
)
from .compatibility import (
    SignProfileIn,
    CompatibilitySignsRequest,
    ChartPersonIn,
    CompatibilityChartsRequest,
    CompatibilityResponse,
    DynamicsResponse,
)
from .horoscope import HoroscopeOut, HoroscopeResponse, OracleResponse, SkyResponse
