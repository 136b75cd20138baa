"""
Template table keyed by layout variant.

Text columns get narrower as the text grows for tall and square
visualizations; long takeaways drop a heading level and their text is
boxed, since the text block dominates those slides.
"""

from dataclasses import dataclass
from typing import Dict

from clickstories.domain_core.exceptions import LayoutTemplateError
from clickstories.domain_core.value_objects.layout_variant import LayoutVariant

COLUMNS_TEMPLATE = "panel_columns.qmd.j2"
GRID_TEMPLATE = "panel_grid.qmd.j2"
BACKGROUND_TEMPLATE = "panel_background.qmd.j2"


@dataclass(frozen=True)
class LayoutTemplate:
    template_file: str
    text_width: int = 45
    viz_width: int = 55
    heading: str = "###"
    boxed: bool = False

    @property
    def text_span(self) -> int:
        """Width in columns of a 12-column grid."""
        return max(1, round(self.text_width * 12 / 100))

    @property
    def viz_span(self) -> int:
        return max(1, round(self.viz_width * 12 / 100))


LAYOUT_TEMPLATES: Dict[str, LayoutTemplate] = {
    "short-horizontal": LayoutTemplate(GRID_TEMPLATE, 100, 100),
    "medium-horizontal": LayoutTemplate(COLUMNS_TEMPLATE, 45, 55),
    "long-horizontal": LayoutTemplate(COLUMNS_TEMPLATE, 50, 50, "####", True),
    "short-similar": LayoutTemplate(COLUMNS_TEMPLATE, 50, 50),
    "medium-similar": LayoutTemplate(COLUMNS_TEMPLATE, 45, 55),
    "long-similar": LayoutTemplate(COLUMNS_TEMPLATE, 30, 70, "####", True),
    "short-vertical": LayoutTemplate(COLUMNS_TEMPLATE, 45, 55),
    "medium-vertical": LayoutTemplate(COLUMNS_TEMPLATE, 30, 70),
    "long-vertical": LayoutTemplate(COLUMNS_TEMPLATE, 20, 80, "####", True),
    "embed-only": LayoutTemplate(BACKGROUND_TEMPLATE, 0, 100, ""),
}


def template_for(variant: LayoutVariant) -> LayoutTemplate:
    try:
        return LAYOUT_TEMPLATES[variant.key]
    except KeyError:
        raise LayoutTemplateError(variant.key) from None
