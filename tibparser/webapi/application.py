"""Application factory for the FastAPI backend."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import Config
from ..exceptions import EmptyPhraseError
from ..pipeline import ParsePipeline
from .dependencies import get_config, get_pipeline
from .routes import health_router, router

LOGGER = logging.getLogger(__name__)


async def _handle_empty_phrase(request: Request, exc: EmptyPhraseError) -> JSONResponse:
    return JSONResponse(status_code=exc.status, content=exc.to_dict())


def _pipeline_provider(config: Config):
    pipeline: list[ParsePipeline] = []

    def provide() -> ParsePipeline:
        if not pipeline:
            pipeline.append(ParsePipeline.from_config(config))
        return pipeline[0]

    return provide


def create_app(config: Optional[Config] = None) -> FastAPI:
    """Create the API application.

    Args:
        config: Configuration to serve with. Defaults to the file named by
            ``TIBPARSER_CONFIG``, or the built-in defaults.
    """

    app = FastAPI(title="Tibetan Phrase Parser API", version=__version__)
    if config is not None:
        app.dependency_overrides[get_config] = lambda: config
        app.dependency_overrides[get_pipeline] = _pipeline_provider(config)
    else:
        config = get_config()

    LOGGER.info(
        "Serving %s/parse against %s dictionary",
        config.server.route_prefix,
        config.dictionary.backend,
    )
    app.include_router(router, prefix=config.server.route_prefix)
    app.include_router(health_router)
    app.add_exception_handler(EmptyPhraseError, _handle_empty_phrase)
    return app
