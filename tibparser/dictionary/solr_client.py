"""Solr-backed dictionary client."""

import logging
from typing import Any, Mapping, Optional, Sequence
from urllib.parse import urlencode

import requests

from ..config import DictionaryConfig
from ..exceptions import DictionaryLookupError
from ..models import Match, ScriptType
from ..trace import DebugTrace, record
from .base import DictionaryClient, match_from_doc
from .query import build_query

logger = logging.getLogger(__name__)

DEFAULT_FIELDS = ("uid", "id", "header", "name_tibt", "name_latin")
FORBIDDEN_BODY_PREVIEW = 1000


class SolrDictionaryClient(DictionaryClient):
    """Look up candidates in a Solr full-text index over HTTP."""

    def __init__(
        self,
        base_url: str,
        *,
        session: Optional[requests.Session] = None,
        timeout_seconds: float = 10.0,
        fields: Sequence[str] = DEFAULT_FIELDS,
        rows: int = 1,
        headers: Optional[Mapping[str, str]] = None,
        verify_ssl: bool = True,
    ):
        """Initialize the client.

        Args:
            base_url: Solr ``select`` handler URL
            session: Optional requests session for connection pooling
            timeout_seconds: Timeout applied to every lookup
            fields: Field list requested from Solr
            rows: Number of documents requested
            headers: Extra request headers
            verify_ssl: Verify TLS certificates
        """
        self.base_url = base_url
        self.timeout = timeout_seconds
        self.fields = list(fields)
        self.rows = rows
        self.headers = dict(headers or {})
        self.verify_ssl = verify_ssl
        self._session = session or requests.Session()
        self._owns_session = session is None

    @classmethod
    def from_config(
        cls, config: DictionaryConfig, session: Optional[requests.Session] = None
    ) -> "SolrDictionaryClient":
        return cls(
            config.base_url,
            session=session,
            timeout_seconds=config.timeout_seconds,
            fields=config.fields,
            rows=config.rows,
            headers=config.headers,
            verify_ssl=config.verify_ssl,
        )

    def build_params(self, candidate: str, script: ScriptType) -> dict[str, Any]:
        """Query string parameters for one candidate."""
        return {
            "q": build_query(candidate, script),
            "fl": ",".join(self.fields),
            "wt": "json",
            "rows": self.rows,
        }

    def lookup(
        self,
        candidate: str,
        script: ScriptType,
        trace: Optional[DebugTrace] = None,
    ) -> Optional[Match]:
        try:
            docs = self._fetch_docs(candidate, script, trace)
        except DictionaryLookupError as e:
            logger.warning("Dictionary lookup for %r failed: %s", candidate, e)
            record(trace, f"Lookup failed: {e}")
            return None

        if not docs:
            logger.debug("No dictionary entry for %r", candidate)
            return None
        return match_from_doc(docs[0], candidate)

    def _fetch_docs(
        self, candidate: str, script: ScriptType, trace: Optional[DebugTrace]
    ) -> list[Mapping[str, Any]]:
        """Run the HTTP request and return the ``response.docs`` list.

        Raises:
            DictionaryLookupError: On transport errors, non-2xx statuses or
                payloads without a docs list
        """
        params = self.build_params(candidate, script)
        url = f"{self.base_url}?{urlencode(params)}"
        logger.debug("Querying %s", url)
        record(trace, f"URL: {url}")

        try:
            response = self._session.get(
                self.base_url,
                params=params,
                headers=self.headers,
                timeout=self.timeout,
                allow_redirects=True,
                verify=self.verify_ssl,
            )
        except requests.RequestException as e:
            raise DictionaryLookupError(f"Request error: {e}") from e

        status = response.status_code
        record(trace, f"HTTP status code: {status}")
        if status == 403:
            record(
                trace,
                "Response body (first %d chars): %s"
                % (FORBIDDEN_BODY_PREVIEW, response.text[:FORBIDDEN_BODY_PREVIEW]),
            )
            raise DictionaryLookupError("403 Forbidden - server blocked the request")
        if not 200 <= status < 300:
            raise DictionaryLookupError(f"HTTP error {status}")

        record(trace, f"Response body length: {len(response.content)}")
        try:
            payload = response.json()
        except ValueError as e:
            raise DictionaryLookupError(f"Malformed JSON response: {e}") from e

        body = payload.get("response") if isinstance(payload, dict) else None
        if not isinstance(body, dict):
            raise DictionaryLookupError("Malformed response: missing 'response' object")
        docs = body.get("docs")
        if docs is None:
            return []
        if not isinstance(docs, list) or not all(isinstance(doc, dict) for doc in docs):
            raise DictionaryLookupError("Malformed response: docs is not a list of objects")
        return docs

    def close(self) -> None:
        if self._owns_session:
            self._session.close()
