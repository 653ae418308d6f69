"""Utility functions."""

from .particles import advance, strip_leading_particle, strip_trailing_tsheg
from .script import detect_script, is_tibetan, trim_leading_noise
from .splitter import split_phrase

__all__ = [
    "advance",
    "strip_leading_particle",
    "strip_trailing_tsheg",
    "detect_script",
    "is_tibetan",
    "trim_leading_noise",
    "split_phrase",
]
