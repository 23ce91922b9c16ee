"""Reduce GeoJSON-like geometries to one representative coordinate.

Coordinates arrive as ``[lng, lat]`` pairs; the result is always a
:class:`models.LatLng`. Every malformed input falls back to the caller's
center, so :func:`reduce_geometry` never raises.
"""
from __future__ import annotations
import math
from typing import Any, Optional

from models import LatLng


def _finite_number(v: Any) -> bool:
    # bool is an int subclass but never a coordinate
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        return False
    try:
        return math.isfinite(v)
    except OverflowError:
        return False


def _pair_to_latlng(pair: Any) -> Optional[LatLng]:
    if not isinstance(pair, (list, tuple)) or len(pair) < 2:
        return None
    lng, lat = pair[0], pair[1]
    if not (_finite_number(lat) and _finite_number(lng)):
        return None
    return LatLng(lat=float(lat), lng=float(lng))


def ring_centroid(ring: Any, fallback_center: LatLng) -> LatLng:
    """Unweighted mean of the ring's valid vertices.

    Not an area centroid: for small park polygons the vertex mean is close
    enough and keeps marker positions stable.
    """
    if not isinstance(ring, (list, tuple)) or not ring:
        return fallback_center
    sum_lat = sum_lng = 0.0
    count = 0
    for pair in ring:
        pos = _pair_to_latlng(pair)
        if pos is None:
            continue
        sum_lat += pos.lat
        sum_lng += pos.lng
        count += 1
    if count == 0:
        return fallback_center
    lat, lng = sum_lat / count, sum_lng / count
    # huge vertices can overflow the running sums
    if not (math.isfinite(lat) and math.isfinite(lng)):
        return fallback_center
    return LatLng(lat=lat, lng=lng)


def _first(seq: Any) -> Any:
    if isinstance(seq, (list, tuple)) and seq:
        return seq[0]
    return None


def reduce_geometry(geometry: Any, fallback_center: LatLng) -> LatLng:
    if not isinstance(geometry, dict):
        return fallback_center
    gtype = geometry.get("type")
    coords = geometry.get("coordinates")
    if not isinstance(coords, (list, tuple)):
        return fallback_center

    if gtype == "Point":
        return _pair_to_latlng(coords) or fallback_center
    if gtype == "Polygon":
        # outer ring only
        return ring_centroid(_first(coords), fallback_center)
    if gtype == "MultiPolygon":
        # outer ring of the first member
        return ring_centroid(_first(_first(coords)), fallback_center)
    return fallback_center
