"""Dictionary-driven segmentation of Tibetan and Wylie phrases."""

__version__ = "0.1.0"

from .config import Config
from .exceptions import ConfigError, DictionaryLookupError, EmptyPhraseError, TibParserError
from .models import Match, ParseResult
from .pipeline import ParsePipeline
from .segmenter import PhraseSegmenter

__all__ = [
    "Config",
    "ConfigError",
    "DictionaryLookupError",
    "EmptyPhraseError",
    "TibParserError",
    "Match",
    "ParseResult",
    "ParsePipeline",
    "PhraseSegmenter",
]
