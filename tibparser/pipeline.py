"""Phrase parsing pipeline."""

import json
import logging
from pathlib import Path
from typing import Any, Optional

import pandas as pd
from tqdm import tqdm

from .config import Config
from .dictionary import DictionaryClient, create_dictionary_client
from .exceptions import EmptyPhraseError
from .models import Match, ParseResult
from .segmenter import DEFAULT_MAX_ITERATIONS, PhraseSegmenter
from .trace import DebugTrace
from .utils import detect_script, split_phrase, trim_leading_noise

logger = logging.getLogger(__name__)

DEBUG_FLAG_VALUES = {"1", "true", "on", "yes", "debug"}

BATCH_COLUMNS = [
    "Source_Line_Number",
    "Phrase",
    "Script_Type",
    "Match_Order",
    "Id",
    "Tibetan",
    "Wylie",
    "Matched",
]


def is_debug_flag(value: Any) -> bool:
    """Interpret a request's ``debug`` parameter."""
    if value is True:
        return True
    if isinstance(value, str):
        return value.strip().lower() in DEBUG_FLAG_VALUES
    return False


def read_phrases(path: Path) -> list[tuple[int, str]]:
    """Read phrases from a text or JSONL file.

    Lines holding a JSON object contribute their ``text`` (or ``content``)
    field; other lines are taken verbatim. Blank entries are skipped.

    Args:
        path: Input file

    Returns:
        List of (line_number, phrase) tuples, 1-based
    """
    phrases = []
    with open(path, "r", encoding="utf-8") as f:
        for line_num, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue
            if line.startswith("{"):
                try:
                    record = json.loads(line)
                except json.JSONDecodeError:
                    record = None
                if isinstance(record, dict):
                    line = str(record.get("text") or record.get("content") or "").strip()
            if line:
                phrases.append((line_num, line))
    return phrases


class ParsePipeline:
    """Parse phrases into dictionary headwords."""

    def __init__(
        self,
        dictionary: DictionaryClient,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
    ):
        self.dictionary = dictionary
        self.segmenter = PhraseSegmenter(dictionary, max_iterations=max_iterations)

    @classmethod
    def from_config(cls, config: Config) -> "ParsePipeline":
        """Build a pipeline with the dictionary backend named in ``config``."""
        return cls(
            create_dictionary_client(config.dictionary),
            max_iterations=config.segmentation.max_iterations,
        )

    def parse(
        self,
        text: Optional[str],
        debug: bool = False,
        dicts: Optional[str] = None,
    ) -> ParseResult:
        """Parse one phrase.

        Sub-phrases are segmented in order; each one sees the matches of the
        sub-phrases before it, so repeated spans are not looked up again.

        Args:
            text: Phrase in Tibetan script or Wylie
            debug: Collect a trace and attach it to the result
            dicts: Dictionary filter; accepted and recorded, not applied

        Returns:
            ParseResult for the phrase

        Raises:
            EmptyPhraseError: If ``text`` is empty or whitespace
        """
        trace = DebugTrace(enabled=debug)
        phrase = (text or "").strip()
        trace.add(phrase)
        if not phrase:
            raise EmptyPhraseError()
        if dicts:
            trace.add(f"dicts: {dicts.strip()}")

        script = detect_script(phrase)
        phrase = trim_leading_noise(phrase)
        subphrases = split_phrase(phrase, script)
        logger.debug("Parsing %r as %s in %d sub-phrases", phrase, script, len(subphrases))

        parsed: list[Match] = []
        for subphrase in subphrases:
            trace.add(f"Doing: {subphrase}")
            parsed.extend(self.segmenter.segment(subphrase, script, parsed, trace))

        return ParseResult(
            original_phrase=phrase,
            script_type=script,
            parsed=parsed,
            debug=trace.entries if debug else None,
        )

    def process_file(
        self, input_path: Path, output_path: Path, show_progress: bool = True
    ) -> int:
        """Parse every phrase in a file and write one CSV row per match.

        Args:
            input_path: Text or JSONL file with one phrase per line
            output_path: CSV file to write
            show_progress: Display a progress bar

        Returns:
            Number of phrases parsed
        """
        logger.info("Reading from: %s", input_path)
        phrases = read_phrases(input_path)

        rows = []
        parsed_count = 0
        for line_num, phrase in tqdm(
            phrases, desc="Parsing phrases", disable=not show_progress
        ):
            try:
                result = self.parse(phrase)
            except EmptyPhraseError:
                continue
            parsed_count += 1
            for order, match in enumerate(result.parsed, 1):
                rows.append({
                    "Source_Line_Number": line_num,
                    "Phrase": result.original_phrase,
                    "Script_Type": result.script_type,
                    "Match_Order": order,
                    "Id": match.id,
                    "Tibetan": match.tibetan,
                    "Wylie": match.wylie,
                    "Matched": match.matched,
                })

        output_path.parent.mkdir(parents=True, exist_ok=True)
        df = pd.DataFrame(rows, columns=BATCH_COLUMNS)
        df.to_csv(output_path, index=False, encoding="utf-8")
        logger.info("Wrote %d matches for %d phrases to %s", len(rows), parsed_count, output_path)
        return parsed_count

    def close(self) -> None:
        self.dictionary.close()
