"""
Quarto CLI wrapper.
"""

import subprocess
from pathlib import Path
from typing import Optional

from clickstories.application.ports import DocumentRendererPort
from clickstories.domain_core.exceptions import DocumentRenderError
from clickstories.infra.config.logging_config import get_logger
from clickstories.infra.config.settings import get_settings


class QuartoRenderer(DocumentRendererPort):
    """Renders a .qmd document to HTML with ``quarto render``.

    Failures are reported, never retried; the source document stays on disk.
    """

    def __init__(self, binary: Optional[str] = None, timeout: Optional[int] = None):
        settings = get_settings()
        self.binary = binary or settings.quarto_binary
        self.timeout = timeout or settings.quarto_timeout
        self._log = get_logger("infra.quarto_renderer")

    def render(self, source: Path) -> Path:
        source = Path(source)
        command = [self.binary, "render", source.name, "--to", "html"]
        self._log.info("render.started", source=str(source), command=" ".join(command))

        try:
            result = subprocess.run(
                command,
                cwd=str(source.parent),
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            self._log.error("render.failed", source=str(source), reason="binary not found")
            raise DocumentRenderError(
                str(source), f"'{self.binary}' was not found on PATH"
            ) from e
        except subprocess.TimeoutExpired as e:
            self._log.error("render.failed", source=str(source), reason="timeout")
            raise DocumentRenderError(
                str(source), f"timed out after {self.timeout}s"
            ) from e

        if result.returncode != 0:
            detail = (result.stderr or result.stdout or "").strip()
            self._log.error(
                "render.failed", source=str(source), returncode=result.returncode
            )
            raise DocumentRenderError(
                str(source), f"exit status {result.returncode}: {detail[-500:]}"
            )

        output = source.with_suffix(".html")
        self._log.info("render.finished", output=str(output))
        return output
