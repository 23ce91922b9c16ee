from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping

from models import LatLng
from .adapters import BaseAdapter, IrvineAdapter, PasadenaAdapter

_ARCGIS_QUERY = "query?outFields=*&where=1%3D1&f=geojson"

PASADENA_CENTER = LatLng(lat=34.1478, lng=-118.1445)
IRVINE_CENTER = LatLng(lat=33.6846, lng=-117.8265)

DEFAULT_CITY = "pasadena"


@dataclass(frozen=True)
class CityConfig:
    id: str
    label: str
    endpoint: str
    center: LatLng
    adapter: BaseAdapter


class UnknownCityError(KeyError):
    pass


# Registry of supported cities – add new sources here.
CITY_CONFIGS: Mapping[str, CityConfig] = MappingProxyType({
    "pasadena": CityConfig(
        id="pasadena",
        label="Pasadena, CA",
        endpoint=(
            "https://services2.arcgis.com/zNjnZafDYCAJAbN0/arcgis/rest/services/"
            f"Parks/FeatureServer/0/{_ARCGIS_QUERY}"
        ),
        center=PASADENA_CENTER,
        adapter=PasadenaAdapter(PASADENA_CENTER),
    ),
    "irvine": CityConfig(
        id="irvine",
        label="Irvine, CA",
        endpoint=(
            "https://services2.arcgis.com/3mkVbLdbLBFHrfbK/arcgis/rest/services/"
            f"Irvine_Parks/FeatureServer/8/{_ARCGIS_QUERY}"
        ),
        center=IRVINE_CENTER,
        adapter=IrvineAdapter(IRVINE_CENTER),
    ),
})


def available_cities() -> List[str]:
    return sorted(CITY_CONFIGS)


def lookup(city_id: str) -> CityConfig:
    """Return the config for *city_id*.

    Raises :class:`UnknownCityError` for identifiers that are not registered.
    """
    try:
        return CITY_CONFIGS[city_id]
    except KeyError:
        available = ", ".join(available_cities())
        raise UnknownCityError(
            f"Unknown city '{city_id}'. Available: {available}"
        ) from None
