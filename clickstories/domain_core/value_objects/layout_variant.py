"""
Layout variant value objects.

A LayoutVariant is derived from a panel on every render and never stored.
Its key ("short-vertical", "embed-only", ...) is what templates and the
CSS class on each slide heading are named after.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SizeClass(Enum):
    EMBED_ONLY = "embed-only"
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class SpaceClass(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    SIMILAR = "similar"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["SpaceClass"]:
        """Blank means the default; unknown values return None."""
        if value is None or not str(value).strip():
            return cls.HORIZONTAL
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class LayoutVariant:
    size: SizeClass
    space: Optional[SpaceClass] = None

    def __post_init__(self):
        if self.size is SizeClass.EMBED_ONLY and self.space is not None:
            raise ValueError("embed-only layouts carry no space class")
        if self.size is not SizeClass.EMBED_ONLY and self.space is None:
            raise ValueError(f"{self.size.value} layouts need a space class")

    @property
    def is_embed_only(self) -> bool:
        return self.size is SizeClass.EMBED_ONLY

    @property
    def key(self) -> str:
        if self.space is None:
            return self.size.value
        return f"{self.size.value}-{self.space.value}"

    def __str__(self) -> str:
        return self.key


EMBED_ONLY = LayoutVariant(SizeClass.EMBED_ONLY)
