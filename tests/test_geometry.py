"""Tests for geometry reduction.

Run with:  python -m pytest tests/ -v
"""

from __future__ import annotations

import pytest

from finder.geometry import reduce_geometry, ring_centroid
from models import LatLng

CENTER = LatLng(lat=34.1478, lng=-118.1445)


class TestReduceGeometry:
    """Point / Polygon / MultiPolygon reduction and fallbacks."""

    def test_point_swaps_to_lat_lng(self) -> None:
        pos = reduce_geometry({"type": "Point", "coordinates": [-118.12, 34.13]}, CENTER)
        assert pos == LatLng(lat=34.13, lng=-118.12)

    def test_polygon_centroid_is_vertex_mean(self) -> None:
        geom = {"type": "Polygon", "coordinates": [[[0, 0], [0, 2], [2, 2], [2, 0]]]}
        assert reduce_geometry(geom, CENTER) == LatLng(lat=1, lng=1)

    def test_multipolygon_uses_first_member_outer_ring(self) -> None:
        geom = {
            "type": "MultiPolygon",
            "coordinates": [
                [[[0, 0], [0, 4], [4, 4], [4, 0]]],
                [[[100, 50], [100, 60], [110, 60]]],
            ],
        }
        assert reduce_geometry(geom, CENTER) == LatLng(lat=2, lng=2)

    def test_polygon_skips_bad_vertices(self) -> None:
        ring = [[0, 0], "junk", [float("nan"), 1], [2], [True, False], [2, 2]]
        geom = {"type": "Polygon", "coordinates": [ring]}
        assert reduce_geometry(geom, CENTER) == LatLng(lat=1, lng=1)

    @pytest.mark.parametrize(
        "geom",
        [
            None,
            {},
            "Point",
            {"type": "LineString", "coordinates": [[0, 0], [1, 1]]},
            {"type": "Point", "coordinates": [None, 3]},
            {"type": "Point", "coordinates": [float("inf"), 3]},
            {"type": "Point"},
            {"type": "Polygon", "coordinates": []},
            {"type": "Polygon", "coordinates": [[]]},
            {"type": "Polygon", "coordinates": [[["a", "b"], [None, None]]]},
            {"type": "MultiPolygon", "coordinates": []},
            {"type": "MultiPolygon", "coordinates": [[]]},
        ],
    )
    def test_falls_back_to_center(self, geom) -> None:
        assert reduce_geometry(geom, CENTER) == CENTER

    def test_ring_centroid_empty(self) -> None:
        assert ring_centroid([], CENTER) == CENTER

    def test_overflowing_ring_falls_back(self) -> None:
        geom = {"type": "Polygon", "coordinates": [[[1e308, 1e308], [1e308, 1e308]]]}
        assert reduce_geometry(geom, CENTER) == CENTER
