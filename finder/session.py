from __future__ import annotations
import logging
from datetime import datetime
from typing import List, Optional, Tuple

from models import Field, FilterState
from .cities import CityConfig, lookup
from .config import Settings, load_settings
from .filters import apply_filters
from .loader import FieldLoader, LoadResult, LoadState
from .utils import init_logger
from .view import ListView, MapView, build_list_view, build_map_view

logger = logging.getLogger(__name__)


class FinderSession:
    """State behind one finder screen: selected city, loaded fields, filters.

    Each load gets a generation number. When a response arrives for an
    older generation than the latest request it is dropped, so the most
    recently selected city always wins.
    """

    def __init__(
        self,
        loader: Optional[FieldLoader] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or load_settings()
        init_logger("finder", self.settings.log_level)
        self.loader = loader or FieldLoader(self.settings)
        self.city: CityConfig = lookup(self.settings.default_city)
        self.fields: Tuple[Field, ...] = ()
        self.state = LoadState.IDLE
        self.error: Optional[str] = None
        self.filters = FilterState()
        self._generation = 0

    @property
    def loading(self) -> bool:
        return self.state == LoadState.LOADING

    async def select_city(self, city_id: str) -> Optional[LoadResult]:
        """Switch city and load it. Returns ``None`` if superseded meanwhile."""
        self.city = lookup(city_id)
        return await self._load(self.city)

    async def refresh(self) -> Optional[LoadResult]:
        return await self._load(self.city)

    async def _load(self, city: CityConfig) -> Optional[LoadResult]:
        self._generation += 1
        generation = self._generation
        self.state = LoadState.LOADING
        self.error = None

        result = await self.loader.load(city)

        if generation != self._generation:
            logger.debug(
                "Discarding stale result for %s (generation %d, latest %d)",
                city.id, generation, self._generation,
            )
            return None

        self.fields = result.fields
        self.error = result.error
        self.state = LoadState.LOADED if result.ok else LoadState.ERROR
        return result

    def update_filters(self, **changes) -> FilterState:
        # rebuild rather than model_copy so the changes are validated
        self.filters = FilterState(**{**self.filters.model_dump(), **changes})
        return self.filters

    def visible_fields(self, as_of: Optional[datetime] = None) -> List[Field]:
        return apply_filters(self.fields, self.filters, as_of)

    def map_view(self, as_of: Optional[datetime] = None) -> MapView:
        return build_map_view(self.visible_fields(as_of), self.city.center)

    def list_view(self, as_of: Optional[datetime] = None) -> ListView:
        return build_list_view(self.visible_fields(as_of), as_of, loading=self.loading)
