"""
Presentation engine options written into the document header.
"""

from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from clickstories.domain_core.exceptions import RenderOptionsError


class RenderOptions(BaseModel):
    """The recognized reveal.js options. Unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    menu: bool = False
    style: Optional[str] = None
    code_block_height: str = Field("750px", pattern=r"^\d+(\.\d+)?(px|em|rem|vh|%)$")
    width: int = Field(1260, gt=0)
    height: int = Field(750, gt=0)
    controls: bool = True
    scrollable: bool = False
    self_contained: bool = False
    preload_iframes: bool = True
    view_distance: int = Field(3, gt=0)

    @classmethod
    def from_mapping(cls, values: Optional[Mapping[str, Any]] = None) -> "RenderOptions":
        """Build options from a plain mapping, accepting ``self-contained`` style keys."""
        if values is None:
            return cls()
        if not isinstance(values, Mapping):
            raise RenderOptionsError(
                f"expected a mapping, got {type(values).__name__}"
            )
        normalized = {str(key).replace("-", "_"): value for key, value in values.items()}
        try:
            return cls.model_validate(normalized)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'options'}: {err['msg']}"
                for err in e.errors()
            )
            raise RenderOptionsError(problems) from e
