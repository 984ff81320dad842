"""Public conversion API (delegates to application use-cases)."""

from __future__ import annotations

import asyncio
import os
from collections.abc import Iterable, Sequence

from model_to_image.application.jobs import ConversionJob
from model_to_image.application.options import RenderOptions
from model_to_image.application.results import ConversionResult
from model_to_image.application.use_cases import build_conversion_job
from model_to_image.application.use_cases import build_render_options
from model_to_image.application.use_cases import run_conversions


def convert_jobs(
    jobs: Sequence[ConversionJob],
    options: RenderOptions,
) -> list[ConversionResult]:
    """Render already-resolved jobs, DMN first-come and BPMN as one batch."""
    return asyncio.run(run_conversions(jobs, options))


def convert_diagrams(
    conversions: Iterable[str],
    *,
    min_dimensions: str = "400x300",
    title: bool = True,
    footer: bool = True,
    scale: float = 1.0,
    dmn_view: str = "drd",
    delimiter: str = os.pathsep,
) -> list[ConversionResult]:
    """Convert ``<diagramFile><DELIM><outputConfig>`` arguments to images."""
    jobs = [build_conversion_job(raw, delimiter) for raw in conversions]
    options = build_render_options(
        min_dimensions=min_dimensions,
        title=title,
        footer=footer,
        scale=scale,
        dmn_view=dmn_view,
    )
    return convert_jobs(jobs, options)
