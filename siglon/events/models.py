import math
from datetime import date
from pydantic import BaseModel, Field, model_validator
from typing import Optional

from .utils import parse_coordinates, UNKNOWN_PROVINCE

ADMIN_SOURCE = "Admin Input"


class OfficialEventCreate(BaseModel):
    location_name: str
    event_date: date
    latitude: float
    longitude: float
    deaths: int = 0
    injuries: int = 0
    damaged_homes: int = 0
    description: Optional[str] = None
    source: str
    province: str = UNKNOWN_PROVINCE


class OfficialEvent(OfficialEventCreate):
    id: int


class OfficialEventSubmit(BaseModel):
    """Admin form input. Accepts either a "lat, lng" string or explicit numbers."""
    location_name: str = Field(..., min_length=1)
    event_date: date
    coordinates: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    deaths: int = Field(0, ge=0)
    injuries: int = Field(0, ge=0)
    damaged_homes: int = Field(0, ge=0)
    description: Optional[str] = None

    @model_validator(mode="after")
    def resolve_point(self):
        if self.coordinates is not None:
            self.latitude, self.longitude = parse_coordinates(self.coordinates)
        if self.latitude is None or self.longitude is None:
            raise ValueError('Coordinates must be given as "latitude, longitude"')
        if not (math.isfinite(self.latitude) and math.isfinite(self.longitude)):
            raise ValueError("Coordinates must be finite numbers")
        return self


class MonthlyStat(BaseModel):
    name: str
    count: int


class ProvinceStat(BaseModel):
    name: str
    value: int


class EventStats(BaseModel):
    total_events: int
    total_deaths: int
    total_injuries: int
    total_damaged_homes: int
    affected_provinces: int
    year: int
    monthly: list[MonthlyStat]
    provinces: list[ProvinceStat]
