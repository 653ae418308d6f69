"""Route handlers for phrase parsing."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict
from urllib.parse import parse_qsl

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool

from ..pipeline import ParsePipeline, is_debug_flag
from .dependencies import get_pipeline
from .schemas import ErrorResponse, ParseResponse

router = APIRouter()
health_router = APIRouter()
logger = logging.getLogger(__name__)


async def _collect_params(request: Request) -> Dict[str, Any]:
    """Merge query parameters with a JSON or form-encoded POST body."""

    params: Dict[str, Any] = dict(request.query_params)
    if request.method != "POST":
        return params

    body = await request.body()
    if not body:
        return params
    content_type = request.headers.get("content-type", "").lower()
    if "application/json" in content_type:
        try:
            data = json.loads(body)
        except ValueError:
            logger.debug("Ignoring malformed JSON body on parse request")
            data = None
        if isinstance(data, dict):
            params.update(data)
    elif "application/x-www-form-urlencoded" in content_type:
        params.update(parse_qsl(body.decode("utf-8", errors="replace"), keep_blank_values=True))
    return params


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


@router.api_route(
    "/parse",
    methods=["GET", "POST"],
    response_model=ParseResponse,
    response_model_exclude_unset=True,
    responses={400: {"model": ErrorResponse}},
)
async def parse_phrase(
    request: Request,
    pipeline: ParsePipeline = Depends(get_pipeline),
) -> ParseResponse:
    """Split a Tibetan or Wylie phrase into dictionary headwords."""

    params = await _collect_params(request)
    text = _as_text(params.get("text"))
    dicts = _as_text(params.get("dicts")).strip()
    debug = is_debug_flag(params.get("debug"))

    result = await run_in_threadpool(pipeline.parse, text, debug, dicts or None)
    return ParseResponse(**result.to_dict(include_debug=debug))


@health_router.get("/health")
def health() -> Dict[str, str]:
    """Liveness probe."""

    return {"status": "ok"}
