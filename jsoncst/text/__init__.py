"""Character offsets and ranges into source text."""

from jsoncst.text.text import TextRange, TextSize, slice_text_range

__all__ = [
    "TextRange",
    "TextSize",
    "slice_text_range",
]
