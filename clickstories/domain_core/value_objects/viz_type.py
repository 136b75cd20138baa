"""
Visualization type value object.
"""

from enum import Enum
from typing import Optional


class VizType(Enum):
    EMBED = "embed"
    IMAGE_LINK = "image-link"
    IMAGE = "image"
    HIGHCHART = "highchart"

    @classmethod
    def parse(cls, value: str) -> Optional["VizType"]:
        """Return the matching member, or None for types this version does not know."""
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return None
