"""Data models for the phrase parser."""

from dataclasses import dataclass, field
from typing import Any, Literal, Optional

ScriptType = Literal["tibetan", "wylie"]

TIBETAN = "tibetan"
WYLIE = "wylie"


@dataclass
class Match:
    """One recognized (or residual) unit of a parsed phrase."""

    id: Optional[str]
    tibetan: Optional[str]
    wylie: Optional[str]
    matched: bool

    @classmethod
    def residual(cls, text: str) -> "Match":
        """Build the unmatched placeholder for text the dictionary could not resolve."""
        return cls(id=None, tibetan=text, wylie=text, matched=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "tibetan": self.tibetan,
            "wylie": self.wylie,
            "matched": self.matched,
        }


@dataclass
class ParseResult:
    """Result of parsing one phrase."""

    original_phrase: str
    script_type: ScriptType
    parsed: list[Match] = field(default_factory=list)
    debug: Optional[list[Any]] = None

    def to_dict(self, include_debug: bool = False) -> dict[str, Any]:
        """Shape the result as the JSON payload returned by the API.

        Args:
            include_debug: Attach the trace entries under ``debug``

        Returns:
            Dictionary with ``original_phrase``, ``script_type``, ``parsed``
            and optionally ``debug``
        """
        payload: dict[str, Any] = {
            "original_phrase": self.original_phrase,
            "script_type": self.script_type,
            "parsed": [match.to_dict() for match in self.parsed],
        }
        if include_debug:
            payload["debug"] = list(self.debug or [])
        return payload
