"""Schemas for the phrase parsing endpoint."""

from __future__ import annotations

from typing import Any, List, Literal, Optional

from pydantic import BaseModel


class MatchPayload(BaseModel):
    """One recognized or residual unit of the parsed phrase."""

    id: Optional[str] = None
    tibetan: Optional[str] = None
    wylie: Optional[str] = None
    matched: bool


class ParseResponse(BaseModel):
    """Response payload for a parsed phrase."""

    original_phrase: str
    script_type: Literal["tibetan", "wylie"]
    parsed: List[MatchPayload]
    debug: Optional[List[Any]] = None


class ErrorResponse(BaseModel):
    """Structured client error."""

    code: str
    message: str
    data: dict
