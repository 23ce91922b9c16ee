"""Tests for the filter engine."""

from __future__ import annotations

from datetime import datetime

import pytest

from finder.filters import apply_filters
from finder.hours import default_hours
from models import DayHours, Field, FilterState, LatLng, Surface, SurfaceFilter

NOON = datetime(2026, 10, 18, 12, 0)
LATE = datetime(2026, 10, 18, 23, 0)
HERE = LatLng(lat=34.14, lng=-118.14)


def field(id_: str, **kw) -> Field:
    base = dict(id=id_, name=f"Field {id_}", neighborhood="Downtown", location=HERE,
                opening_hours=default_hours())
    base.update(kw)
    return Field(**base)


@pytest.fixture
def fields() -> list[Field]:
    return [
        field("1", name="Eaton Park", neighborhood="Pasadena", has_lights=True,
              surface=Surface.TURF, has_soccer_lines=True),
        field("2", name="Villa Parke", has_lights=False, surface=Surface.TURF),
        field("3", name="Brookside", has_lights=True, surface=Surface.GRASS,
              opening_hours={"sun": DayHours(open="16:00", close="20:00")}),
    ]


class TestApplyFilters:
    def test_no_filters_keeps_everything_in_order(self, fields) -> None:
        assert apply_filters(fields, FilterState(), NOON) == fields

    def test_conjunction_lights_and_surface(self) -> None:
        a = field("a", has_lights=True, surface=Surface.TURF)
        b = field("b", has_lights=False, surface=Surface.TURF)
        state = FilterState(lights_only=True, surface=SurfaceFilter.TURF)
        assert apply_filters([a, b], state, NOON) == [a]

    def test_soccer_lines(self, fields) -> None:
        out = apply_filters(fields, FilterState(soccer_lines_only=True), NOON)
        assert [f.id for f in out] == ["1"]

    def test_surface_grass(self, fields) -> None:
        out = apply_filters(fields, FilterState(surface=SurfaceFilter.GRASS), NOON)
        assert [f.id for f in out] == ["3"]

    def test_open_now(self, fields) -> None:
        state = FilterState(open_now_only=True)
        assert [f.id for f in apply_filters(fields, state, NOON)] == ["1", "2"]
        assert apply_filters(fields, state, LATE) == []

    @pytest.mark.parametrize("query", ["eaton", "EATON", "pasa", "eaton park"])
    def test_search_name_or_neighborhood(self, fields, query) -> None:
        out = apply_filters(fields, FilterState(search=query), NOON)
        assert [f.id for f in out] == ["1"]

    def test_search_whitespace_is_part_of_query(self, fields) -> None:
        assert apply_filters(fields, FilterState(search="eaton park "), NOON) == []
        assert apply_filters(fields, FilterState(search=" eaton"), NOON) == []

    def test_search_no_match(self, fields) -> None:
        assert apply_filters(fields, FilterState(search="zzz"), NOON) == []

    def test_blank_search_ignored(self, fields) -> None:
        assert len(apply_filters(fields, FilterState(search="   "), NOON)) == 3

    def test_idempotent(self, fields) -> None:
        state = FilterState(lights_only=True, search="park")
        first = apply_filters(fields, state, NOON)
        assert apply_filters(fields, state, NOON) == first
        assert apply_filters(first, state, NOON) == first
