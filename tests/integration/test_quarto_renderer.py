"""
Tests for the quarto CLI wrapper with subprocess patched out.
"""

import subprocess
from types import SimpleNamespace

import pytest

from clickstories.domain_core.exceptions import DocumentRenderError
from clickstories.infra.rendering import quarto_renderer
from clickstories.infra.rendering.quarto_renderer import QuartoRenderer


@pytest.fixture
def source(tmp_path):
    qmd = tmp_path / "story.qmd"
    qmd.write_text("---\ntitle: 'T'\n---\n", encoding="utf-8")
    return qmd


def test_render_runs_quarto_in_story_directory(monkeypatch, source):
    calls = []

    def fake_run(command, **kwargs):
        calls.append((command, kwargs))
        return SimpleNamespace(returncode=0, stdout="", stderr="")

    monkeypatch.setattr(quarto_renderer.subprocess, "run", fake_run)

    output = QuartoRenderer(binary="quarto", timeout=30).render(source)

    assert output == source.with_suffix(".html")
    command, kwargs = calls[0]
    assert command == ["quarto", "render", "story.qmd", "--to", "html"]
    assert kwargs["cwd"] == str(source.parent)
    assert kwargs["timeout"] == 30


def test_nonzero_exit_raises(monkeypatch, source):
    monkeypatch.setattr(
        quarto_renderer.subprocess,
        "run",
        lambda command, **kwargs: SimpleNamespace(returncode=1, stdout="", stderr="ERROR: bad yaml"),
    )

    with pytest.raises(DocumentRenderError, match="bad yaml"):
        QuartoRenderer(binary="quarto").render(source)
    assert source.exists()


def test_missing_binary_raises(monkeypatch, source):
    def fake_run(command, **kwargs):
        raise FileNotFoundError(command[0])

    monkeypatch.setattr(quarto_renderer.subprocess, "run", fake_run)

    with pytest.raises(DocumentRenderError, match="not found"):
        QuartoRenderer(binary="no-such-quarto").render(source)


def test_timeout_raises(monkeypatch, source):
    def fake_run(command, **kwargs):
        raise subprocess.TimeoutExpired(command, kwargs["timeout"])

    monkeypatch.setattr(quarto_renderer.subprocess, "run", fake_run)

    with pytest.raises(DocumentRenderError, match="timed out"):
        QuartoRenderer(binary="quarto", timeout=5).render(source)
