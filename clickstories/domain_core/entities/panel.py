"""
Panel domain entity: one slide's worth of content.
"""

import math
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from clickstories.domain_core.value_objects.text_content import single_line
from clickstories.domain_core.value_objects.viz_type import VizType


class Panel(BaseModel):
    """A takeaway, supporting text and a visualization.

    Field names follow Python conventions; the camelCase names used in
    panel spreadsheets (``vizType``, ``vizSpace``) are accepted as aliases.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    name: str
    takeaway: str
    text: str = ""
    viz_type: str = Field(alias="vizType")
    viz: str
    viz_space: str = Field("horizontal", alias="vizSpace")
    alt: str = ""

    @field_validator(
        "name", "takeaway", "text", "viz_type", "viz", "viz_space", "alt", mode="before"
    )
    @classmethod
    def _coerce_cell(cls, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, float):
            if math.isnan(value):
                return ""
            if value.is_integer():
                return str(int(value))
        return str(value)

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Panel name cannot be empty")
        return value

    @field_validator("viz_type", "viz_space")
    @classmethod
    def _normalize_token(cls, value: str) -> str:
        return value.strip().lower()

    @property
    def kind(self) -> Optional[VizType]:
        return VizType.parse(self.viz_type)

    @property
    def menu_title(self) -> str:
        """Label shown in the slide menu; falls back to the name for embed-only slides."""
        return single_line(self.takeaway) or self.name
