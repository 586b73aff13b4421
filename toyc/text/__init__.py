"""Byte offsets and ranges into source text."""

from toyc.text.text import ZERO, TextRange, TextSize, slice_text_range

__all__ = [
    "ZERO",
    "TextRange",
    "TextSize",
    "slice_text_range",
]
