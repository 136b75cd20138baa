"""
Domain error taxonomy.

Every error raised on purpose by the compiler derives from
ClickStoriesError and carries a short machine-readable code, so callers
(the CLI, tests) can branch on the kind of failure without parsing text.
"""

from typing import Iterable, Optional


class ClickStoriesError(Exception):
    """Base class for domain-specific errors."""

    def __init__(self, message: str, code: str = "CLICKSTORIES_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class PanelValidationError(ClickStoriesError):
    """Raised before rendering when panels are incomplete or clash."""

    def __init__(self, reason: str, names: Optional[Iterable[str]] = None):
        self.names = list(names or [])
        message = f"Invalid panels: {reason}"
        if self.names:
            message += f" ({', '.join(self.names)})"
        super().__init__(message, "PANEL_VALIDATION")


class RenderOptionsError(ClickStoriesError):
    """Raised when rendering options have the wrong shape or unknown keys."""

    def __init__(self, reason: str):
        super().__init__(f"Invalid render options: {reason}", "RENDER_OPTIONS")


class LayoutTemplateError(ClickStoriesError):
    """Raised when a layout variant has no template. This is a programming error."""

    def __init__(self, layout: str, reason: str = "no template registered"):
        self.layout = layout
        super().__init__(
            f"Unexpected layout '{layout}': {reason}", "LAYOUT_TEMPLATE"
        )


class PanelSourceError(ClickStoriesError):
    """Raised when panel records cannot be read from a tabular file."""

    def __init__(self, reason: str):
        super().__init__(f"Cannot read panels: {reason}", "PANEL_SOURCE")


class DocumentRenderError(ClickStoriesError):
    """Raised when the external document renderer fails."""

    def __init__(self, source: str, reason: str):
        self.source = source
        super().__init__(
            f"Failed to render {source}: {reason}", "DOCUMENT_RENDER"
        )


class TemplateExistsError(ClickStoriesError):
    """Raised when copying the input template would overwrite a file."""

    def __init__(self, destination: str):
        self.destination = destination
        super().__init__(
            f"File already exists at {destination}. Use overwrite to replace it.",
            "TEMPLATE_EXISTS",
        )
