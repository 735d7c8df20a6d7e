from typing import List

from pydantic import BaseModel


class HoroscopeOut(BaseModel):
    sign: str
    weekly_reading: str
    love_advice: str
    career_advice: str
    lucky_number: int
    lucky_color: str
    compatibility: str
    mood: str
    celestial_insight: str


class HoroscopeResponse(BaseModel):
    date: str
    week_of_year: int
    horoscope: HoroscopeOut
    celestial_message: str


class OracleResponse(BaseModel):
    sign: str
    week_start: str
    weekly_reading: str
    love_advice: str
    career_advice: str
    lucky_number: int
    lucky_color: str
    mood: str
    compatibility_sign: str
    celestial_insight: str


class MoonPhaseOut(BaseModel):
    name: str
    emoji: str
    emotional_tone: str
    guidance: str


class MoonSignOut(BaseModel):
    sign: str
    emotional_flavor: str


class TransitOut(BaseModel):
    planet: str
    emoji: str
    aspect: str
    description: str
    advice: str


class SkyResponse(BaseModel):
    date: str
    week_start: str
    week_of_year: int
    moon_phase: MoonPhaseOut
    moon_sign: MoonSignOut
    transits: List[TransitOut]
