"""Split raw phrases into independently parsed sub-phrases."""

import re

from ..models import TIBETAN, ScriptType

# Shads (U+0F0D, U+0F0F-U+0F12), gter tsheg (U+0F14), head mark (U+0F08),
# whitespace and comma. Tsheg is not a split point: sub-phrases keep their
# syllable boundaries so the segmenter can try multi-syllable candidates.
TIBETAN_SPLIT_PATTERN = re.compile(r"[\u0F0D\u0F0F\u0F14\u0F10\u0F12\u0F11\u0F08\s,]+")

# Spaces are kept inside Wylie sub-phrases for the same reason.
WYLIE_SPLIT_PATTERN = re.compile(r"[;:\[\]|/!_,]+")


def split_phrase(phrase: str, script: ScriptType) -> list[str]:
    """Split a phrase on the delimiter set of its script.

    Args:
        phrase: Phrase with leading noise already trimmed
        script: ``"tibetan"`` or ``"wylie"``

    Returns:
        Non-empty, whitespace-trimmed sub-phrases in their original order
    """
    pattern = TIBETAN_SPLIT_PATTERN if script == TIBETAN else WYLIE_SPLIT_PATTERN
    parts = (part.strip() for part in pattern.split(phrase))
    return [part for part in parts if part]
