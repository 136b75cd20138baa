"""
Story builder - turns panels into a story directory on disk.

Layout of a story::

    <output_dir>/<name>/
        <name>.qmd
        styles.scss        (when a style file was given)
        images/            (logo and local panel images)
"""

from pathlib import Path
from typing import Any, Callable, Iterable, List, Mapping, Optional, Union

from clickstories.application.ports import AssetResolverPort, DocumentRendererPort
from clickstories.application.services.document_assembler import DocumentAssembler
from clickstories.application.services.embed_normalizer import EmbedNormalizer
from clickstories.domain_core.entities.panel import Panel
from clickstories.domain_core.entities.render_options import RenderOptions
from clickstories.domain_core.entities.story_result import StoryResult
from clickstories.domain_core.exceptions import (
    DocumentRenderError,
    RenderOptionsError,
)
from clickstories.domain_core.validators.panel_validators import PanelValidators
from clickstories.domain_core.value_objects.viz_type import VizType
from clickstories.infra.config.logging_config import (
    bind_context,
    clear_context,
    get_logger,
)

STYLE_FILENAME = "styles.scss"

logger = get_logger(__name__)


class StoryBuilder:
    """
    Application service that writes a complete story.

    Everything that can be rejected (panels, options) is checked before the
    first directory is created, so a failed run leaves nothing behind.
    """

    def __init__(
        self,
        assembler: DocumentAssembler,
        resolver_factory: Callable[[Path], AssetResolverPort],
        document_renderer: Optional[DocumentRendererPort] = None,
        normalizer: Optional[EmbedNormalizer] = None,
        normalize_embeds: bool = True,
        images_dir: str = "images",
    ):
        self.assembler = assembler
        self.resolver_factory = resolver_factory
        self.document_renderer = document_renderer
        self.normalizer = normalizer or EmbedNormalizer()
        self.normalize_embeds = normalize_embeds
        self.images_dir = images_dir

    def create_story(
        self,
        title: str,
        panels: Iterable[Any],
        output_dir: Union[str, Path] = ".",
        name: str = "story",
        subtitle: Optional[str] = None,
        logo: Optional[str] = None,
        style: Optional[str] = None,
        render_html: bool = False,
        options: Optional[Mapping[str, Any]] = None,
    ) -> StoryResult:
        """
        Compile panels into ``<output_dir>/<name>/<name>.qmd``.

        Args:
            title: Story title.
            panels: Panels or panel mappings in slide order.
            output_dir: Parent directory of the story folder.
            name: Story folder and document name.
            subtitle: Optional subtitle.
            logo: Local logo image; ignored when the file does not exist.
            style: Local SCSS theme; ignored when the file does not exist.
            render_html: Also render HTML with the document renderer.
            options: Extra recognized render options.

        Returns:
            StoryResult: Paths of the written document and rendered HTML.

        Raises:
            PanelValidationError: Before anything is written.
            RenderOptionsError: Before anything is written.
            DocumentRenderError: After the .qmd has been written.
        """
        if not isinstance(render_html, bool):
            raise RenderOptionsError("render_html must be a single boolean value")

        validated = PanelValidators.validate_panels(panels)
        if self.normalize_embeds:
            validated = self._normalize_embeds(validated)

        target_dir = Path(output_dir).expanduser() / name
        resolver = self.resolver_factory(target_dir)
        has_style = bool(style) and resolver.exists(style)

        option_values = dict(options or {})
        option_values["self_contained"] = render_html
        if has_style:
            option_values["style"] = STYLE_FILENAME
        render_options = RenderOptions.from_mapping(option_values)

        bind_context(story=name)
        try:
            (target_dir / self.images_dir).mkdir(parents=True, exist_ok=True)

            logo_ref = ""
            if logo and resolver.exists(logo):
                suffix = Path(logo).suffix or ".png"
                logo_ref = resolver.copy_as(logo, f"{self.images_dir}/logo{suffix}")
            elif logo:
                logger.warning("story.logo_missing", logo=logo)

            if has_style:
                resolver.copy_as(style, STYLE_FILENAME)
            elif style:
                logger.warning("story.style_missing", style=style)

            content = self.assembler.assemble(
                title,
                validated,
                subtitle=subtitle,
                logo=logo_ref,
                options=render_options,
                asset_resolver=resolver,
            )

            qmd_file = target_dir / f"{name}.qmd"
            qmd_file.write_text(content, encoding="utf-8")
            logger.info("story.written", path=str(qmd_file), panels=len(validated))

            html_file = None
            if render_html:
                if self.document_renderer is None:
                    raise DocumentRenderError(
                        str(qmd_file), "no document renderer configured"
                    )
                html_file = self.document_renderer.render(qmd_file)
                logger.info("story.rendered", path=str(html_file))

            return StoryResult(qmd_file=qmd_file, html_file=html_file)
        finally:
            clear_context()

    def _normalize_embeds(self, panels: List[Panel]) -> List[Panel]:
        normalized = []
        for panel in panels:
            if panel.kind is VizType.EMBED and self.normalizer.is_prototype_embed(
                panel.viz
            ):
                viz = self.normalizer.normalize(panel.viz)
                logger.debug("panel.embed_normalized", panel=panel.name)
                panel = panel.model_copy(update={"viz": viz})
            normalized.append(panel)
        return normalized
