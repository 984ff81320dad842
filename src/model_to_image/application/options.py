"""Typed option objects shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass

from model_to_image.types import DmnView

DEFAULT_MIN_DIMENSIONS = "400x300"
DEFAULT_SCALE = 1.0
DEFAULT_DMN_VIEW: DmnView = "drd"


@dataclass(frozen=True)
class MinDimensions:
    """Minimum canvas size in pixels."""

    width: int = 400
    height: int = 300

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


@dataclass(frozen=True)
class RenderOptions:
    """Rendering options built once per invocation and shared by every job."""

    title: bool = True
    footer: bool = True
    scale: float = DEFAULT_SCALE
    min_dimensions: MinDimensions = MinDimensions()
    dmn_view: DmnView = DEFAULT_DMN_VIEW
