from __future__ import annotations
import os
from dataclasses import dataclass

from .cities import DEFAULT_CITY

_TRUE = {"1", "true", "True", "yes"}


@dataclass(frozen=True)
class Settings:
    request_timeout: float = 20.0
    http2: bool = True
    log_level: str = "INFO"
    default_city: str = DEFAULT_CITY


def load_settings() -> Settings:
    return Settings(
        request_timeout=float(os.getenv("FINDER_REQUEST_TIMEOUT", "20")),
        http2=os.getenv("FINDER_HTTP2", "1") in _TRUE,
        log_level=os.getenv("FINDER_LOG_LEVEL", "INFO"),
        default_city=os.getenv("FINDER_DEFAULT_CITY", DEFAULT_CITY),
    )
