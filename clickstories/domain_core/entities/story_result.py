from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class StoryResult:
    qmd_file: Path
    html_file: Optional[Path] = None
