"""
Blank detection shared by classification and rendering.

Spreadsheet exports fill empty cells with a handful of placeholder tokens;
those count as no content at all.
"""

from typing import Optional

BLANK_TOKENS = frozenset({"n/a", "na", "null", "undefined"})


def is_blank(value: Optional[str]) -> bool:
    if value is None:
        return True
    stripped = str(value).strip()
    return not stripped or stripped.lower() in BLANK_TOKENS


def content_length(value: Optional[str]) -> int:
    """Character count of a text slot, 0 when blank."""
    if is_blank(value):
        return 0
    return len(str(value))


def clean_text(value: Optional[str]) -> str:
    """Text as it should appear in a slot; placeholders become empty."""
    return "" if is_blank(value) else str(value)


def single_line(value: Optional[str]) -> str:
    """Text for heading lines; line breaks and runs of whitespace collapse to one space."""
    return " ".join(clean_text(value).split())
