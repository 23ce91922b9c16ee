from __future__ import annotations
import re
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional
from pydantic import BaseModel, ConfigDict, field_serializer, field_validator

_HHMM_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")

class Surface(str, Enum):
    TURF = "turf"
    GRASS = "grass"

class SurfaceFilter(str, Enum):
    ANY = "any"
    TURF = "turf"
    GRASS = "grass"

class LatLng(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    lat: float
    lng: float

class DayHours(BaseModel):
    """Opening window for one weekday, both ends as 24h "HH:MM"."""
    model_config = ConfigDict(frozen=True)

    open: str
    close: str

    @field_validator("open", "close")
    @classmethod
    def _check_hhmm(cls, v: str) -> str:
        if not _HHMM_RE.match(v):
            raise ValueError(f"expected HH:MM, got {v!r}")
        return v

class Field(BaseModel):
    """One public sports field after a source adapter has normalised it.

    Built once per load and never mutated; a new load replaces the whole
    collection.
    """
    model_config = ConfigDict(frozen=True, validate_default=True)

    id: str
    name: str
    neighborhood: str = ""
    address: str = ""
    location: LatLng
    surface: Surface = Surface.GRASS
    has_lights: bool = False
    has_soccer_lines: bool = False
    has_goals: bool = False
    opening_hours: Mapping[str, DayHours] = {}
    short_desc: str = ""
    extra_desc: str = ""
    website: Optional[str] = None
    image_url: Optional[str] = None

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be blank")
        return v

    @field_validator("opening_hours")
    @classmethod
    def _freeze_hours(cls, v: Mapping[str, DayHours]) -> Mapping[str, DayHours]:
        return MappingProxyType(dict(v))

    @field_serializer("opening_hours")
    def _dump_hours(self, v: Mapping[str, DayHours]) -> Dict[str, Any]:
        return {k: h.model_dump() for k, h in v.items()}

class FilterState(BaseModel):
    model_config = ConfigDict(frozen=True)

    lights_only: bool = False
    soccer_lines_only: bool = False
    open_now_only: bool = False
    surface: SurfaceFilter = SurfaceFilter.ANY
    search: str = ""
