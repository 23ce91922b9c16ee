from __future__ import annotations
import uuid
from typing import Any, Dict, List, Optional

from models import Field, LatLng, Surface
from .geometry import reduce_geometry
from .hours import default_hours

# Adapter pattern: one subclass per city, each only lists the property keys
# its upstream schema uses. Shared extraction lives in BaseAdapter.

UNNAMED = "Unnamed park"

LIGHTS_WORDS = ("lighted", "lights")
SOCCER_WORDS = ("soccer", "multi-purpose field")
GOAL_WORDS = ("goal", "goals")


def _text(value: Any) -> str:
    if value is None or isinstance(value, (dict, list)):
        return ""
    return str(value).strip()


def first_present(props: Dict[str, Any], keys: List[str]) -> str:
    for k in keys:
        v = _text(props.get(k))
        if v:
            return v
    return ""


def secure_url(url: str) -> Optional[str]:
    if not url:
        return None
    if url[:7].lower() == "http://":
        return "https://" + url[7:]
    return url


def _mentions(text: str, words) -> bool:
    return any(w in text for w in words)


class BaseAdapter:
    neighborhood: str = ""
    name_keys: List[str] = ["NAME"]
    address_keys: List[str] = ["Address"]
    description_keys: List[str] = []
    short_desc_keys: List[str] = []
    extra_desc_keys: List[str] = []
    website_keys: List[str] = ["Website"]
    image_keys: List[str] = ["Image_URL"]
    lights_key: Optional[str] = None
    sport_key: Optional[str] = None

    def __init__(self, fallback_center: LatLng):
        self.fallback_center = fallback_center

    def adapt(self, feature: Any) -> Field:
        """Map one raw GeoJSON feature to a :class:`Field`.

        Never raises on malformed input; missing pieces fall back to
        placeholders and the city center.
        """
        if not isinstance(feature, dict):
            feature = {}
        props = feature.get("properties")
        if not isinstance(props, dict):
            props = {}

        desc_text = " ".join(
            t for t in (_text(props.get(k)) for k in self.description_keys) if t
        ).lower()

        return Field(
            id=self.field_id(feature, props),
            name=first_present(props, self.name_keys) or UNNAMED,
            neighborhood=self.neighborhood,
            address=first_present(props, self.address_keys),
            location=reduce_geometry(feature.get("geometry"), self.fallback_center),
            surface=Surface.GRASS,  # no source publishes surfacing
            has_lights=self.detect_lights(props, desc_text),
            has_soccer_lines=self.detect_soccer(props, desc_text),
            has_goals=_mentions(desc_text, GOAL_WORDS),
            opening_hours=default_hours(),
            short_desc=first_present(props, self.short_desc_keys),
            extra_desc=first_present(props, self.extra_desc_keys),
            website=secure_url(first_present(props, self.website_keys)),
            image_url=secure_url(first_present(props, self.image_keys)),
        )

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def field_id(feature: Dict[str, Any], props: Dict[str, Any]) -> str:
        for raw in (props.get("OBJECTID"), feature.get("id")):
            v = _text(raw)
            if v:
                return v
        return uuid.uuid4().hex

    def detect_lights(self, props: Dict[str, Any], desc_text: str) -> bool:
        if self.lights_key and "yes" in _text(props.get(self.lights_key)).lower():
            return True
        return _mentions(desc_text, LIGHTS_WORDS)

    def detect_soccer(self, props: Dict[str, Any], desc_text: str) -> bool:
        if self.sport_key and "soccer" in _text(props.get(self.sport_key)).lower():
            return True
        return _mentions(desc_text, SOCCER_WORDS)


class PasadenaAdapter(BaseAdapter):
    """Pasadena open data portal, Parks layer."""
    neighborhood = "Pasadena"
    name_keys = ["NAME"]
    address_keys = ["Address"]
    description_keys = ["Short_Desc", "Desc1"]
    short_desc_keys = ["Short_Desc"]
    extra_desc_keys = ["Desc1"]


class IrvineAdapter(BaseAdapter):
    # Irvine_Parks layer 8; the schema is loosely documented, hence the
    # long candidate lists.
    neighborhood = "Irvine"
    name_keys = ["NAME", "PARK_NAME", "Park", "Name"]
    address_keys = ["Address", "ADDRESS", "SITE_ADDR", "LOCATION"]
    description_keys = ["Short_Desc", "Desc1", "DESCRIPT", "DESCRIPTION", "TYPE"]
    short_desc_keys = ["Short_Desc", "DESCRIPT", "DESCRIPTION", "TYPE"]
    extra_desc_keys = ["Desc1"]
    lights_key = "LIGHTS"
    sport_key = "SPORT"
