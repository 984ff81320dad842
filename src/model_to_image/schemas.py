"""Pydantic schemas for runtime validation of rendering options."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from model_to_image.types import DMN_VIEWS


class RenderOptionsConfig(BaseModel):
    """Validated rendering options, before they are frozen into ``RenderOptions``."""

    model_config = ConfigDict(extra="forbid")

    title: bool = True
    footer: bool = True
    scale: float = Field(default=1.0, gt=0.0, allow_inf_nan=False)
    min_width: int = Field(default=400, gt=0)
    min_height: int = Field(default=300, gt=0)
    dmn_view: str = "drd"

    @field_validator("dmn_view")
    @classmethod
    def _validate_dmn_view(cls, value: str) -> str:
        if value not in DMN_VIEWS:
            raise ValueError(
                f"dmn_view must be one of {', '.join(DMN_VIEWS)}; got '{value}'."
            )
        return value
