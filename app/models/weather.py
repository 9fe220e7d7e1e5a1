from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TempType(str, Enum):
    cold = "cold"
    moderate = "moderate"
    hot = "hot"


class Coordinate(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)


class ForecastPeriod(BaseModel):
    """One entry of properties.periods in an NWS forecast. Only the fields we use."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = ""
    is_daytime: bool = Field(default=False, alias="isDaytime")
    temperature: int
    # "F" or "C"; anything else is treated as Fahrenheit
    temperature_unit: str = Field(default="F", alias="temperatureUnit")
    short_forecast: str = Field(default="", alias="shortForecast")
    detailed_forecast: str = Field(default="", alias="detailedForecast")

    @field_validator("name", "short_forecast", "detailed_forecast", mode="before")
    @classmethod
    def _null_text(cls, v):
        return "" if v is None else v

    @field_validator("is_daytime", mode="before")
    @classmethod
    def _null_flag(cls, v):
        return False if v is None else v

    @field_validator("temperature_unit", mode="before")
    @classmethod
    def _unit(cls, v):
        if v is None:
            return "F"
        return str(v).strip().upper() or "F"


class Location(BaseModel):
    lat: float
    lng: float


class ForecastResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    location: Location
    forecast: str
    temp_f: int
    temp_type: TempType
    details: Optional[str] = None
    last_updated: str


class ErrorResult(BaseModel):
    error: str
    message: str


class HealthStatus(BaseModel):
    status: str = "ok"


class TempRanges(BaseModel):
    cold: str
    moderate: str
    hot: str


class ServiceInfo(BaseModel):
    name: str
    endpoints: List[str]
    temp_ranges: TempRanges
