from __future__ import annotations
from datetime import datetime
from typing import Iterable, List, Optional

from models import Field, FilterState, SurfaceFilter
from .hours import is_open_now


def matches_search(field: Field, query: str) -> bool:
    if not query.strip():
        return True
    q = query.lower()
    return q in field.name.lower() or q in field.neighborhood.lower()


def matches(field: Field, state: FilterState, as_of: datetime) -> bool:
    if state.lights_only and not field.has_lights:
        return False
    if state.soccer_lines_only and not field.has_soccer_lines:
        return False
    if state.surface != SurfaceFilter.ANY and field.surface.value != state.surface.value:
        return False
    if state.open_now_only and not is_open_now(field, as_of):
        return False
    return matches_search(field, state.search)


def apply_filters(
    fields: Iterable[Field], state: FilterState, as_of: Optional[datetime] = None
) -> List[Field]:
    """Keep the fields passing every active condition, in input order."""
    as_of = as_of or datetime.now()
    return [f for f in fields if matches(f, state, as_of)]
