"""
Document assembly: header plus one block per panel, in input order.

The assembler is a pure function of its inputs apart from whatever the
asset resolver does to stage local images. It never writes the document.
"""

from typing import Any, Iterable, Mapping, Optional, Union

from clickstories.application.ports import AssetResolverPort, TemplateServicePort
from clickstories.application.services.markup import as_block
from clickstories.application.services.panel_renderer import PanelRenderer
from clickstories.domain_core.entities.render_options import RenderOptions
from clickstories.domain_core.validators.panel_validators import PanelValidators
from clickstories.infra.config.logging_config import get_logger

HEADER_TEMPLATE = "header.qmd.j2"

logger = get_logger(__name__)


class DocumentAssembler:
    def __init__(
        self,
        templates: TemplateServicePort,
        renderer: PanelRenderer,
        engine: str = "knitr",
    ):
        self.templates = templates
        self.renderer = renderer
        self.engine = engine

    def build_header(
        self,
        title: str,
        subtitle: Optional[str] = None,
        logo: Optional[str] = None,
        options: Optional[RenderOptions] = None,
    ) -> str:
        return as_block(
            self.templates.render(
                HEADER_TEMPLATE,
                {
                    "title": title,
                    "subtitle": subtitle or "",
                    "logo": logo or "",
                    "engine": self.engine,
                    "options": options or RenderOptions(),
                },
            )
        )

    def assemble(
        self,
        title: str,
        panels: Iterable[Any],
        subtitle: Optional[str] = None,
        logo: Optional[str] = None,
        options: Union[RenderOptions, Mapping[str, Any], None] = None,
        asset_resolver: Optional[AssetResolverPort] = None,
    ) -> str:
        """Compile panels into one document.

        Args:
            title: Story title.
            panels: Panels or panel mappings, in slide order.
            subtitle: Optional subtitle.
            logo: Logo path relative to the document, or None for no logo.
            options: Render options or a mapping of recognized option keys.
            asset_resolver: Overrides the renderer's resolver for local images.

        Returns:
            str: The complete document text.

        Raises:
            PanelValidationError: Missing fields, blank or duplicate names.
            RenderOptionsError: Unknown or malformed options.
        """
        validated = PanelValidators.validate_panels(panels)
        if not isinstance(options, RenderOptions):
            options = RenderOptions.from_mapping(options)

        parts = [self.build_header(title, subtitle, logo, options)]
        if not validated:
            logger.info("story.no_panels", title=title)

        for panel in validated:
            parts.append(self.renderer.render(panel, asset_resolver))

        return "".join(parts)


def assemble(
    title: str,
    panels: Iterable[Any],
    subtitle: Optional[str] = None,
    logo: Optional[str] = None,
    options: Union[RenderOptions, Mapping[str, Any], None] = None,
    asset_resolver: Optional[AssetResolverPort] = None,
) -> str:
    """Assemble a document with the configured templates (convenience function)."""
    from clickstories.infra.config.dependencies import build_assembler

    return build_assembler().assemble(
        title,
        panels,
        subtitle=subtitle,
        logo=logo,
        options=options,
        asset_resolver=asset_resolver,
    )
