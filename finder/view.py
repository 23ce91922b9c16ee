"""Payloads handed to the map and list widgets.

Nothing here renders; the widgets receive plain pydantic models and decide
how to draw them. Markers are only built for finite coordinates, so a widget
never has to guard against NaN positions itself.
"""
from __future__ import annotations
import math
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from pydantic import BaseModel

from models import Field, LatLng
from .hours import format_today_hours, is_open_now

LOADING_MESSAGE = "Loading fields from city open-data API..."
MAP_EMPTY_MESSAGE = "No fields to show on the map for the current filters."
LIST_EMPTY_MESSAGE = (
    "No fields match your filters. Try relaxing a filter or clearing the search."
)


class MapMarker(BaseModel):
    id: str
    lat: float
    lng: float
    title: str
    popup_lines: List[str] = []


class MapView(BaseModel):
    center: LatLng
    markers: List[MapMarker] = []
    empty_message: Optional[str] = None


class FieldCard(BaseModel):
    id: str
    title: str
    subtitle: str
    meta: Dict[str, str] = {}
    description: str = ""
    open_now: bool = False
    status: str = ""
    today: str = ""
    website: Optional[str] = None
    image_url: Optional[str] = None


class ListView(BaseModel):
    cards: List[FieldCard] = []
    summary: str = ""
    empty_message: Optional[str] = None


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def build_map_view(fields: Iterable[Field], center: LatLng) -> MapView:
    markers = [
        MapMarker(
            id=f.id,
            lat=f.location.lat,
            lng=f.location.lng,
            title=f.name,
            popup_lines=[f.name, f.neighborhood, f.address],
        )
        for f in fields
        if math.isfinite(f.location.lat) and math.isfinite(f.location.lng)
    ]
    return MapView(
        center=center,
        markers=markers,
        empty_message=None if markers else MAP_EMPTY_MESSAGE,
    )


def build_field_card(field: Field, as_of: datetime) -> FieldCard:
    open_now = is_open_now(field, as_of)
    return FieldCard(
        id=field.id,
        title=field.name,
        subtitle=f"{field.neighborhood} · {field.address}",
        meta={
            "Surface": field.surface.value,
            "Lights": _yes_no(field.has_lights),
            "Mentions soccer": _yes_no(field.has_soccer_lines),
            "Goals": _yes_no(field.has_goals),
        },
        description=field.short_desc or field.extra_desc,
        open_now=open_now,
        status="Open now" if open_now else "Closed now",
        today=f"Today: {format_today_hours(field, as_of)}",
        website=field.website,
        image_url=field.image_url,
    )


def summary_text(count: int) -> str:
    return f"Showing {count} {'field' if count == 1 else 'fields'}."


def build_list_view(
    fields: Iterable[Field], as_of: Optional[datetime] = None, loading: bool = False
) -> ListView:
    as_of = as_of or datetime.now()
    cards = [build_field_card(f, as_of) for f in fields]
    return ListView(
        cards=cards,
        summary=summary_text(len(cards)),
        empty_message=LIST_EMPTY_MESSAGE if not cards and not loading else None,
    )
