"""
Layout classification.

The classifier is the single source of truth for which template a panel
gets: three text sizes times three visualization shapes, plus embed-only
for panels with no text at all.
"""

from typing import Optional, Union

from clickstories.domain_core.entities.panel import Panel
from clickstories.domain_core.value_objects.layout_variant import (
    EMBED_ONLY,
    LayoutVariant,
    SizeClass,
    SpaceClass,
)
from clickstories.domain_core.value_objects.text_content import (
    content_length,
    is_blank,
)

SHORT_LIMIT = 300
MEDIUM_LIMIT = 500


def size_for_length(total: int) -> SizeClass:
    if total < SHORT_LIMIT:
        return SizeClass.SHORT
    if total < MEDIUM_LIMIT:
        return SizeClass.MEDIUM
    return SizeClass.LONG


def classify(
    takeaway: Optional[str],
    text: Optional[str],
    space: Union[SpaceClass, str, None] = None,
) -> LayoutVariant:
    """Pick the layout variant for a panel's text and visualization shape.

    Unknown space values fall back to horizontal, the same as blank ones.
    """
    if is_blank(takeaway) and is_blank(text):
        return EMBED_ONLY

    if not isinstance(space, SpaceClass):
        space = SpaceClass.parse(space) or SpaceClass.HORIZONTAL

    total = content_length(takeaway) + content_length(text)
    return LayoutVariant(size_for_length(total), space)


def classify_panel(panel: Panel) -> LayoutVariant:
    return classify(panel.takeaway, panel.text, panel.viz_space)
