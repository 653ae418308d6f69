"""Offline dictionary backend over an in-memory wordlist."""

import logging
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional

import pandas as pd

from ..exceptions import ConfigError
from ..models import TIBETAN, WYLIE, Match, ScriptType
from ..trace import DebugTrace, record
from .base import DictionaryClient, match_from_doc
from .query import SCRIPT_FIELDS, WYLIE_TERMINATOR, query_variants

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("id", "name_tibt", "name_latin")


def _values(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value if v not in (None, "")]
    return [str(value)] if value != "" else []


class WordlistDictionary(DictionaryClient):
    """Answer lookups from a list of dictionary documents.

    Documents use the same shape as the Solr index: ``id``, ``name_tibt`` and
    ``name_latin``, each field single- or multi-valued. Lookups try the same
    suffix variants as the Solr query, in order, and return the first entry
    found. When two entries share a form, the earlier one wins.
    """

    def __init__(self, docs: Iterable[Mapping[str, Any]]):
        self._index: dict[str, dict[str, Mapping[str, Any]]] = {TIBETAN: {}, WYLIE: {}}
        count = 0
        for doc in docs:
            count += 1
            for form in _values(doc.get(SCRIPT_FIELDS[TIBETAN])):
                self._index[TIBETAN].setdefault(form, doc)
            for form in _values(doc.get(SCRIPT_FIELDS[WYLIE])):
                if not form.endswith(WYLIE_TERMINATOR):
                    form += WYLIE_TERMINATOR
                self._index[WYLIE].setdefault(form, doc)
        self.size = count
        logger.debug("Loaded wordlist with %d entries", count)

    @classmethod
    def from_csv(cls, path: str | Path) -> "WordlistDictionary":
        """Load entries from a CSV file with id, name_tibt and name_latin columns.

        Raises:
            ConfigError: If the file cannot be read or lacks a required column
        """
        try:
            df = pd.read_csv(path, dtype=str, keep_default_na=False)
        except (OSError, ValueError) as e:
            raise ConfigError(f"Cannot read wordlist {path}: {e}") from e

        missing = [column for column in REQUIRED_COLUMNS if column not in df.columns]
        if missing:
            raise ConfigError(f"Wordlist {path} is missing columns: {', '.join(missing)}")

        docs = [
            {
                "id": row["id"] or None,
                "name_tibt": _values(row["name_tibt"]),
                "name_latin": _values(row["name_latin"]),
            }
            for row in df[list(REQUIRED_COLUMNS)].to_dict(orient="records")
        ]
        return cls(docs)

    def lookup(
        self,
        candidate: str,
        script: ScriptType,
        trace: Optional[DebugTrace] = None,
    ) -> Optional[Match]:
        index = self._index[script]
        for variant in query_variants(candidate, script):
            doc = index.get(variant)
            if doc is not None:
                record(trace, f"Wordlist hit: {variant}")
                return match_from_doc(doc, candidate)
        record(trace, f"Wordlist miss: {candidate}")
        return None
