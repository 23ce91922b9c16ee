from __future__ import annotations
import logging
import uuid
from enum import Enum
from typing import Any, List, Optional, Tuple

import httpx
from pydantic import BaseModel, ConfigDict

from models import Field
from .cities import CityConfig
from .config import Settings, load_settings

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "Failed to load fields from the city open-data API."
USER_AGENT = "open-fields-finder/0.1"


class LoadState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


class LoadResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    city_id: str
    fields: Tuple[Field, ...] = ()
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def extract_features(payload: Any) -> List[Any]:
    """Return the ``features`` list, or an empty list for any other shape."""
    if not isinstance(payload, dict):
        return []
    features = payload.get("features")
    return features if isinstance(features, list) else []


def unique_ids(fields: List[Field]) -> List[Field]:
    seen: set[str] = set()
    out: List[Field] = []
    for f in fields:
        if f.id in seen:
            f = f.model_copy(update={"id": uuid.uuid4().hex})
        seen.add(f.id)
        out.append(f)
    return out


class FieldLoader:
    """Fetch one city's feature collection and run it through its adapter.

    Every call re-fetches; nothing is cached or retried.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or load_settings()
        self.transport = transport

    async def fetch(self, url: str) -> Any:
        async with httpx.AsyncClient(
            http2=self.settings.http2,
            timeout=self.settings.request_timeout,
            transport=self.transport,
            follow_redirects=True,
        ) as client:
            r = await client.get(
                url, headers={"Accept": "application/json", "User-Agent": USER_AGENT}
            )
            r.raise_for_status()
            return r.json()

    async def load(self, city: CityConfig) -> LoadResult:
        try:
            payload = await self.fetch(city.endpoint)
        except (httpx.HTTPError, ValueError) as e:
            # ValueError covers bodies that are not JSON
            logger.error("Error loading fields for %s: %s", city.id, e)
            return LoadResult(city_id=city.id, error=LOAD_ERROR_MESSAGE)

        features = extract_features(payload)
        try:
            fields = unique_ids([city.adapter.adapt(ft) for ft in features])
        except Exception:
            logger.exception("Error mapping features for %s", city.id)
            return LoadResult(city_id=city.id, error=LOAD_ERROR_MESSAGE)

        logger.info("Loaded %d fields for %s", len(fields), city.id)
        return LoadResult(city_id=city.id, fields=tuple(fields))
