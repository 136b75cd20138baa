"""
Pytest configuration and fixtures.
"""

import logging

import pytest
import structlog

from clickstories.application.services.document_assembler import DocumentAssembler
from clickstories.application.services.panel_renderer import PanelRenderer
from clickstories.domain_core.entities.panel import Panel
from clickstories.infra.assets.template_service import TemplateService
from tests._helpers.fakes import FakeAssetResolver


@pytest.fixture
def template_service():
    """Template service over the packaged templates."""
    return TemplateService()


@pytest.fixture
def asset_resolver():
    """Resolver that knows one local chart image."""
    return FakeAssetResolver(existing={"/data/charts/chart.png"})


@pytest.fixture
def panel_renderer(template_service, asset_resolver):
    return PanelRenderer(template_service, asset_resolver=asset_resolver)


@pytest.fixture
def assembler(template_service, panel_renderer):
    return DocumentAssembler(template_service, panel_renderer)


@pytest.fixture
def make_panel():
    """Factory for panels with sensible defaults."""

    def _make(name="panel", **overrides):
        values = {
            "name": name,
            "takeaway": "Vaccination rates rose.",
            "text": "Every county improved between 2019 and 2023.",
            "vizType": "image-link",
            "viz": "https://example.org/chart.png",
            "alt": "Line chart of vaccination rates",
        }
        values.update(overrides)
        return Panel.model_validate(values)

    return _make


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo setup_logging so handlers never point at a finished test's stderr."""
    yield
    logging.getLogger().handlers.clear()
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
