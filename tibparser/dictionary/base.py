"""Base class for dictionary backends."""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from ..models import Match, ScriptType
from ..trace import DebugTrace
from .query import WYLIE_TERMINATOR


class DictionaryClient(ABC):
    """Base class for dictionary lookups.

    A backend answers one candidate at a time with the top hit for that
    candidate, or None. Backends must not raise on lookup failures: a failed
    lookup is reported as a miss so segmentation can carry on narrowing the
    candidate.
    """

    @abstractmethod
    def lookup(
        self,
        candidate: str,
        script: ScriptType,
        trace: Optional[DebugTrace] = None,
    ) -> Optional[Match]:
        """Look up a candidate string.

        Args:
            candidate: Text to resolve
            script: ``"tibetan"`` or ``"wylie"``
            trace: Optional per-request debug trace

        Returns:
            A matched Match, or None when nothing was found or the lookup failed
        """
        pass

    def close(self) -> None:
        """Release resources."""

    def __enter__(self) -> "DictionaryClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()


def first_value(value: Any) -> Optional[str]:
    """Read a possibly multi-valued field.

    Returns the first element of a list (empty string for an empty list),
    the value itself for scalars and None when the field is missing.
    """
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return str(value[0]) if value else ""
    return str(value)


def match_from_doc(doc: Mapping[str, Any], candidate: str) -> Match:
    """Map a dictionary document to a matched Match.

    Args:
        doc: Document with ``id``, ``name_tibt`` and ``name_latin`` fields
        candidate: The looked-up string, used when no Wylie form is stored

    Returns:
        Match with the Wylie terminator stripped
    """
    doc_id = doc.get("id")
    wylie = first_value(doc.get("name_latin"))
    if wylie is None:
        wylie = candidate
    return Match(
        id=str(doc_id) if doc_id is not None else None,
        tibetan=first_value(doc.get("name_tibt")),
        wylie=wylie.rstrip(WYLIE_TERMINATOR),
        matched=True,
    )
