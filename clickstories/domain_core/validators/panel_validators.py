"""
Domain validators for panel lists.

All checks run before any rendering so that a bad input never produces a
partial document.
"""

from collections import Counter
from typing import Any, Iterable, List, Mapping

from pydantic import ValidationError

from clickstories.domain_core.entities.panel import Panel
from clickstories.domain_core.exceptions import PanelValidationError


class PanelValidators:
    REQUIRED_FIELDS = ("name", "takeaway", "vizType", "viz")

    @staticmethod
    def coerce_panel(raw: Any, position: int) -> Panel:
        """Turn a mapping into a Panel, reporting problems by 1-based position."""
        if isinstance(raw, Panel):
            return raw
        if not isinstance(raw, Mapping):
            raise PanelValidationError(
                f"panel {position} must be a mapping, got {type(raw).__name__}"
            )
        label = raw.get("name") or f"#{position}"
        try:
            return Panel.model_validate(dict(raw))
        except ValidationError as e:
            missing = [
                str(err["loc"][0]) for err in e.errors() if err["type"] == "missing"
            ]
            if missing:
                raise PanelValidationError(
                    f"panel {position} is missing required fields: {', '.join(missing)}",
                    names=[str(label)],
                ) from e
            reasons = "; ".join(err["msg"] for err in e.errors())
            raise PanelValidationError(
                f"panel {position}: {reasons}", names=[str(label)]
            ) from e

    @staticmethod
    def validate_unique_names(panels: Iterable[Panel]) -> None:
        """Names are slide anchors, so they must be unique (case-sensitive)."""
        counts = Counter(panel.name for panel in panels)
        duplicates = [name for name, count in counts.items() if count > 1]
        if duplicates:
            raise PanelValidationError(
                "each panel name must be unique", names=duplicates
            )

    @classmethod
    def validate_panels(cls, panels: Iterable[Any]) -> List[Panel]:
        coerced = [
            cls.coerce_panel(raw, position)
            for position, raw in enumerate(panels, start=1)
        ]
        cls.validate_unique_names(coerced)
        return coerced
