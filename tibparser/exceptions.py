"""Exceptions raised by the phrase parser."""


class TibParserError(Exception):
    """Base class for parser errors."""


class EmptyPhraseError(TibParserError):
    """Raised when a request carries no phrase to parse."""

    code = "empty_phrase"
    status = 400

    def __init__(self, message: str = "Phrase is empty"):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message, "data": {"status": self.status}}


class DictionaryLookupError(TibParserError):
    """Raised by a dictionary backend when a single lookup cannot be completed."""


class ConfigError(TibParserError):
    """Raised for unusable configuration values."""
