"""Greedy longest-match segmentation of sub-phrases against a dictionary."""

import logging
from typing import Optional, Sequence

from .dictionary import DictionaryClient
from .dictionary.query import WYLIE_TERMINATOR
from .models import TIBETAN, Match, ScriptType
from .trace import DebugTrace, record
from .utils.particles import advance, strip_trailing_tsheg
from .utils.script import WORD_BOUNDARY

logger = logging.getLogger(__name__)

DEFAULT_MAX_ITERATIONS = 100


def matched_width(match: Match, script: ScriptType) -> str:
    """Return the text a dictionary hit accounts for at the start of the anchor.

    Tibetan input is measured by the canonical Tibetan form, Wylie input by
    the canonical transliteration without its trailing slash.
    """
    word = match.tibetan if script == TIBETAN else match.wylie
    if isinstance(word, (list, tuple)):
        word = word[0] if word else ""
    word = word or ""
    if script != TIBETAN:
        word = word.rstrip(WYLIE_TERMINATOR)
    return word


def already_found(subphrase: str, *seen: Sequence[Match]) -> bool:
    """Return True if ``subphrase`` is the Tibetan form of any recorded match."""
    return any(match.tibetan == subphrase for matches in seen for match in matches)


class PhraseSegmenter:
    """Split sub-phrases into dictionary headwords.

    For each sub-phrase the segmenter looks up the whole remaining text. On a
    miss it drops the last word-boundary delimiter and everything after it and
    retries; on a hit it consumes the matched headword from the anchor (the
    remaining text when the current cut started), strips a trailing particle,
    and starts again on the rest. Text with no delimiter left and no hit is
    emitted as an unmatched residual token.
    """

    def __init__(
        self,
        dictionary: DictionaryClient,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
    ):
        """Initialize segmenter.

        Args:
            dictionary: Backend used for every candidate lookup
            max_iterations: Safety cap on loop iterations per sub-phrase
        """
        self.dictionary = dictionary
        self.max_iterations = max_iterations

    def segment(
        self,
        subphrase: str,
        script: ScriptType,
        already_parsed: Optional[Sequence[Match]] = None,
        trace: Optional[DebugTrace] = None,
    ) -> list[Match]:
        """Segment one sub-phrase.

        Args:
            subphrase: Text produced by the phrase splitter
            script: ``"tibetan"`` or ``"wylie"``
            already_parsed: Matches from earlier sub-phrases of the same
                request; a remaining span equal to one of their Tibetan forms
                is consumed without a lookup
            trace: Optional per-request debug trace

        Returns:
            Matches in left-to-right order. If the iteration cap is reached,
            the matches found so far.
        """
        already_parsed = already_parsed if already_parsed is not None else []
        delimiter = WORD_BOUNDARY[script]
        results: list[Match] = []

        subphrase = strip_trailing_tsheg(subphrase)
        anchor = subphrase
        iterations = 0

        while subphrase:
            iterations += 1
            if iterations > self.max_iterations:
                logger.warning(
                    "Iteration cap (%d) reached; returning %d partial matches for %r",
                    self.max_iterations,
                    len(results),
                    anchor,
                )
                record(trace, f"Iteration cap reached at: {subphrase}")
                break

            record(trace, f"subphrase: {subphrase}")
            if trace is not None:
                trace.add_results(results)

            if already_found(subphrase, already_parsed, results):
                # The whole current span is taken as consumed, whatever the
                # length of the earlier match it equals.
                subphrase = anchor = advance(anchor, subphrase)
                continue

            match = self.dictionary.lookup(subphrase, script, trace)
            if match is not None:
                results.append(match)
                subphrase = anchor = advance(anchor, matched_width(match, script) or subphrase)
                continue

            cut = subphrase.rfind(delimiter)
            if cut > 0:
                subphrase = subphrase[:cut]
            else:
                results.append(Match.residual(subphrase))
                subphrase = anchor = advance(anchor, subphrase)

        return results
