"""Dependency providers for the web API."""

from __future__ import annotations

from functools import lru_cache

from ..config import Config
from ..pipeline import ParsePipeline


@lru_cache
def get_config() -> Config:
    """Return the configuration named by ``TIBPARSER_CONFIG`` (or the defaults)."""

    return Config.from_env()


@lru_cache
def get_pipeline() -> ParsePipeline:
    """Return the process-wide :class:`ParsePipeline`."""

    return ParsePipeline.from_config(get_config())
