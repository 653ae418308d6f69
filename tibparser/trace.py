"""Per-request debug trace."""

from typing import Any, Optional

from .models import Match


class DebugTrace:
    """Collects human-readable diagnostics for a single parse request.

    A trace is created by the pipeline for each request and handed down to
    the segmenter and the dictionary client. It is never shared between
    requests. When ``enabled`` is False, entries are discarded.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._entries: list[Any] = []

    def add(self, entry: Any) -> None:
        if self.enabled:
            self._entries.append(entry)

    def add_results(self, results: list[Match]) -> None:
        """Record a snapshot of the matches accumulated so far."""
        if self.enabled:
            self._entries.append([match.to_dict() for match in results])

    @property
    def entries(self) -> list[Any]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


def record(trace: Optional[DebugTrace], entry: Any) -> None:
    """Add an entry to ``trace`` if one was supplied."""
    if trace is not None:
        trace.add(entry)
