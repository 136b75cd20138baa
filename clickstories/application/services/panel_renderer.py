"""
Panel rendering: one panel in, one markup block out.
"""

import html
from typing import List, Optional, Tuple

from clickstories.application.ports import AssetResolverPort, TemplateServicePort
from clickstories.application.services.embed_normalizer import (
    FIXED_SCALING_PARAM,
    ensure_query_param,
    extract_embed_url,
)
from clickstories.application.services.layout_classifier import classify_panel
from clickstories.application.services.layout_templates import template_for
from clickstories.application.services.markup import as_block, quote_attr
from clickstories.domain_core.entities.panel import Panel
from clickstories.domain_core.value_objects.layout_variant import SpaceClass
from clickstories.domain_core.value_objects.text_content import (
    clean_text,
    is_blank,
    single_line,
)
from clickstories.domain_core.value_objects.viz_type import VizType
from clickstories.infra.config.logging_config import get_logger

logger = get_logger(__name__)


class PanelRenderer:
    def __init__(
        self,
        templates: TemplateServicePort,
        asset_resolver: Optional[AssetResolverPort] = None,
        images_dir: str = "images",
        chart_engine: str = "r",
    ):
        self.templates = templates
        self.asset_resolver = asset_resolver
        self.images_dir = images_dir
        self.chart_engine = chart_engine

    def render(
        self, panel: Panel, asset_resolver: Optional[AssetResolverPort] = None
    ) -> str:
        """Render one panel as a markup block ending in a blank line."""
        resolver = asset_resolver or self.asset_resolver
        variant = classify_panel(panel)
        logger.debug("panel.rendering", panel=panel.name, layout=variant.key)

        if SpaceClass.parse(panel.viz_space) is None:
            logger.warning(
                "panel.viz_space_unknown",
                panel=panel.name,
                viz_space=panel.viz_space,
                fallback=SpaceClass.HORIZONTAL.value,
            )

        image_path = self._stage_image(panel, resolver)
        viz_content = self.viz_content(panel, image_path)
        layout = template_for(variant)

        context = {
            "name": panel.name,
            "layout_class": f"layout-{variant.key}",
            "menu_title": panel.menu_title,
            "takeaway": single_line(panel.takeaway),
            "text": clean_text(panel.text),
            "viz_content": viz_content,
            "layout": layout,
            "background": [],
        }
        if variant.is_embed_only:
            context["background"] = self.background_attributes(panel, image_path)

        return as_block(self.templates.render(layout.template_file, context))

    def viz_content(self, panel: Panel, image_path: Optional[str] = None) -> str:
        """Markup for the visualization slot; empty when there is nothing to show."""
        kind = panel.kind
        alt = clean_text(panel.alt)

        if kind is VizType.EMBED:
            return panel.viz
        if kind is VizType.IMAGE_LINK:
            return f'<img src="{html.escape(panel.viz.strip(), quote=True)}" alt="{html.escape(alt, quote=True)}" />'
        if kind is VizType.IMAGE:
            if image_path is None:
                return ""
            return f'![]({image_path}){{fig-alt="{quote_attr(alt)}"}}'
        if kind is VizType.HIGHCHART:
            if is_blank(panel.viz):
                return ""
            return (
                f"```{{{self.chart_engine}}}\n"
                "#| echo: false\n"
                f"{panel.viz.strip()}\n"
                "```"
            )

        logger.warning(
            "panel.viz_type_unknown", panel=panel.name, viz_type=panel.viz_type
        )
        return ""

    def background_attributes(
        self, panel: Panel, image_path: Optional[str] = None
    ) -> List[Tuple[str, str]]:
        """Slide attributes that turn the visualization into the slide background."""
        kind = panel.kind
        if kind is VizType.EMBED:
            url = extract_embed_url(panel.viz)
            if url:
                return [
                    ("background-iframe", ensure_query_param(url, *FIXED_SCALING_PARAM)),
                    ("background-interactive", "true"),
                ]
        elif kind is VizType.IMAGE_LINK and not is_blank(panel.viz):
            return [
                ("background-image", panel.viz.strip()),
                ("background-size", "contain"),
            ]
        elif kind is VizType.IMAGE and image_path is not None:
            return [
                ("background-image", image_path),
                ("background-size", "contain"),
            ]
        return []

    def _stage_image(
        self, panel: Panel, resolver: Optional[AssetResolverPort]
    ) -> Optional[str]:
        """Copy a local image next to the document; None when it cannot be found."""
        if panel.kind is not VizType.IMAGE:
            return None
        source = panel.viz.strip()
        if not source or resolver is None or not resolver.exists(source):
            logger.warning("panel.viz_missing", panel=panel.name, path=source)
            return None
        return resolver.copy_into(source, self.images_dir)

