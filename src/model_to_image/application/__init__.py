"""Application-layer use-cases and option objects."""

from __future__ import annotations

import os

from model_to_image.application.jobs import (
    BpmnBatch,
    ConversionJob,
    ConversionPlan,
    ConversionRequest,
    DmnStep,
)
from model_to_image.application.options import MinDimensions, RenderOptions
from model_to_image.application.results import ConversionResult


def build_render_options(
    *,
    min_dimensions: str = "400x300",
    title: bool = True,
    footer: bool = True,
    scale: float = 1.0,
    dmn_view: str = "drd",
) -> RenderOptions:
    """Build typed render options via lazy use-case import."""
    from model_to_image.application.use_cases import build_render_options as _impl

    return _impl(
        min_dimensions=min_dimensions,
        title=title,
        footer=footer,
        scale=scale,
        dmn_view=dmn_view,
    )


def build_conversion_job(raw: str, delimiter: str = os.pathsep) -> ConversionJob:
    """Parse one positional argument via lazy use-case import."""
    from model_to_image.application.use_cases import build_conversion_job as _impl

    return _impl(raw, delimiter)


__all__ = [
    "BpmnBatch",
    "ConversionJob",
    "ConversionPlan",
    "ConversionRequest",
    "ConversionResult",
    "DmnStep",
    "MinDimensions",
    "RenderOptions",
    "build_conversion_job",
    "build_render_options",
]
