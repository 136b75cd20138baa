"""
Wiring of services from settings.
"""

from typing import Optional

from clickstories.application.services.document_assembler import DocumentAssembler
from clickstories.application.services.embed_normalizer import EmbedNormalizer
from clickstories.application.services.panel_renderer import PanelRenderer
from clickstories.application.services.story_builder import StoryBuilder
from clickstories.infra.assets.file_asset_resolver import FileAssetResolver
from clickstories.infra.assets.template_service import TemplateService
from clickstories.infra.config.settings import Settings, get_settings
from clickstories.infra.rendering.quarto_renderer import QuartoRenderer


def build_assembler(settings: Optional[Settings] = None) -> DocumentAssembler:
    settings = settings or get_settings()
    templates = TemplateService(settings.template_dir)
    renderer = PanelRenderer(
        templates,
        images_dir=settings.images_dir,
        chart_engine=settings.chart_engine,
    )
    return DocumentAssembler(templates, renderer, engine=settings.document_engine)


def build_story_builder(settings: Optional[Settings] = None) -> StoryBuilder:
    settings = settings or get_settings()
    return StoryBuilder(
        assembler=build_assembler(settings),
        resolver_factory=FileAssetResolver,
        document_renderer=QuartoRenderer(
            settings.quarto_binary, settings.quarto_timeout
        ),
        normalizer=EmbedNormalizer(),
        normalize_embeds=settings.normalize_embeds,
        images_dir=settings.images_dir,
    )
