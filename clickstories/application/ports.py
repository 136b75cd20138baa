"""
Application ports - abstract interfaces for external dependencies.

The compiler only needs three things from the outside world: a way to
stage local images next to the document, a way to decide which table
column feeds which panel field, and a way to turn the finished document
into HTML.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence


class AssetResolverPort(ABC):
    """Checks for and copies local files into the story's asset directory."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return True if the local file can be copied."""
        pass

    @abstractmethod
    def copy_into(self, path: str, target_dir: str = "images") -> str:
        """Copy the file and return its path relative to the document."""
        pass

    @abstractmethod
    def copy_as(self, path: str, target: str) -> str:
        """Copy the file to an exact relative path (e.g. images/logo.png) and return it."""
        pass


class ColumnMappingResolverPort(ABC):
    """Maps panel field names to the columns of a tabular source."""

    @abstractmethod
    def resolve_mapping(
        self,
        required_fields: Sequence[str],
        available_columns: List[str],
        mapping: Optional[Mapping[str, str]] = None,
        optional_fields: Sequence[str] = (),
    ) -> Dict[str, str]:
        """Return a mapping covering every required field and any optional field found."""
        pass


class DocumentRendererPort(ABC):
    """Turns a written source document into a rendered artifact."""

    @abstractmethod
    def render(self, source: Path) -> Path:
        """Render the document and return the output path."""
        pass


class TemplateServicePort(ABC):
    """Renders named markup templates."""

    @abstractmethod
    def render(self, template_filename: str, context: Mapping[str, object]) -> str:
        """Render a template with the given context."""
        pass
