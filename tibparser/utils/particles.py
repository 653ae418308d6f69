"""Cursor advancement over matched text and trailing grammatical particles."""

import re

from .script import A_CHUNG, GIGU, NARO, TIBETAN_SHAD, TSHEG

# Optional case-marker vowel (gigu, naro, or a-chung + gigu) followed by at
# least one tsheg, shad or whitespace character.
LEADING_PARTICLE_PATTERN = re.compile(
    f"^(?:[{GIGU}{NARO}]|{A_CHUNG}{GIGU})?[{TSHEG}{TIBETAN_SHAD}\\s]+(.*)$",
    re.DOTALL,
)

TRAILING_TSHEG_PATTERN = re.compile(f"{TSHEG}+$")


def strip_leading_particle(text: str) -> str:
    """Remove a leading genitive/final vowel and the delimiters that follow it.

    Args:
        text: Remainder of a sub-phrase after a consumed unit

    Returns:
        ``text`` without the particle and delimiter run, or ``text`` unchanged
        when it does not start with one
    """
    found = LEADING_PARTICLE_PATTERN.match(text)
    if found:
        return found.group(1)
    return text


def advance(anchor: str, consumed: str) -> str:
    """Return what is left of ``anchor`` after consuming ``consumed``.

    The width is counted in code points, so multi-byte Tibetan text is cut
    on character boundaries.

    Args:
        anchor: Text the cut is measured from
        consumed: Unit that was resolved at the start of ``anchor``

    Returns:
        The remainder, with any leading particle stripped
    """
    return strip_leading_particle(anchor[len(consumed):])


def strip_trailing_tsheg(text: str) -> str:
    return TRAILING_TSHEG_PATTERN.sub("", text)
