"""Fake port implementations for testing."""

from pathlib import Path, PurePosixPath
from typing import Iterable, List, Optional, Tuple

from clickstories.application.ports import AssetResolverPort, DocumentRendererPort
from clickstories.domain_core.exceptions import DocumentRenderError


class FakeAssetResolver(AssetResolverPort):
    """In-memory asset resolver: knows a fixed set of paths and records copies."""

    def __init__(self, existing: Iterable[str] = ()) -> None:
        self.existing = set(existing)
        self.copies: List[Tuple[str, str]] = []

    def exists(self, path: str) -> bool:
        return path in self.existing

    def copy_into(self, path: str, target_dir: str = "images") -> str:
        return self.copy_as(path, str(PurePosixPath(target_dir, PurePosixPath(path).name)))

    def copy_as(self, path: str, target: str) -> str:
        if path not in self.existing:
            raise FileNotFoundError(path)
        self.copies.append((path, target))
        return target


class FakeDocumentRenderer(DocumentRendererPort):
    """Records render calls; optionally fails like a broken quarto install."""

    def __init__(self, fail_with: Optional[str] = None) -> None:
        self.fail_with = fail_with
        self.rendered: List[Path] = []

    def render(self, source: Path) -> Path:
        self.rendered.append(source)
        if self.fail_with:
            raise DocumentRenderError(str(source), self.fail_with)
        output = source.with_suffix(".html")
        output.write_text("<html></html>", encoding="utf-8")
        return output
