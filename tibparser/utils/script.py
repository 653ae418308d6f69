"""Script detection and Tibetan character constants."""

import re

from ..models import TIBETAN, WYLIE, ScriptType

# Tibetan Unicode Constants
TSHEG = "\u0F0B"  # tsheg
TIBETAN_SHAD = "\u0F0D"  # shad
TIBETAN_DOUBLE_SHAD = "\u0F0E"  # double shad
TER_TSHEG = "\u0F14"  # gter tsheg
GIGU = "\u0F72"  # vowel sign i
NARO = "\u0F7C"  # vowel sign o
A_CHUNG = "\u0F60"  # letter -a

# Delimiter used to narrow a candidate after a dictionary miss
WORD_BOUNDARY = {TIBETAN: TSHEG, WYLIE: " "}

TIBETAN_PATTERN = re.compile(r"[\u0F00-\u0FFF]")

# Head marks, shads, Tibetan digits and other signs in U+0F00-U+0F3F,
# plus whitespace, underscore and slash
LEADING_NOISE_PATTERN = re.compile(r"^[\u0F00-\u0F3F\s_/]+")


def is_tibetan(text: str) -> bool:
    """Return True if any character of ``text`` lies in the Tibetan block."""
    return TIBETAN_PATTERN.search(text) is not None


def detect_script(text: str) -> ScriptType:
    """Classify a phrase as Tibetan script or Wylie transliteration.

    Args:
        text: Input phrase

    Returns:
        ``"tibetan"`` if any code point falls in U+0F00-U+0FFF, else ``"wylie"``
    """
    return TIBETAN if is_tibetan(text) else WYLIE


def trim_leading_noise(text: str) -> str:
    """Drop leading Tibetan punctuation, digits, whitespace, underscores and slashes."""
    return LEADING_NOISE_PATTERN.sub("", text, count=1)
