"""Top-level API for BPMN and DMN diagram-to-image conversion."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from pathlib import Path

from model_to_image.application.jobs import ConversionJob
from model_to_image.application.options import MinDimensions

__version__ = "0.1.0"


async def render_dmn(
    input_path: Path,
    outputs: Sequence[Path],
    *,
    title: bool = True,
    min_dimensions: MinDimensions = MinDimensions(),
    view: str = "drd",
) -> list[Path]:
    """Render a single DMN diagram to all given outputs.

    Parameters
    ----------
    input_path : Path
        DMN file to render.
    outputs : Sequence[Path]
        Output paths; the extension picks the format.
    title : bool, default=True
        Draw the diagram name above the drawing.
    min_dimensions : MinDimensions
        Smallest canvas size in pixels.
    view : {"drd", "decision", "literalExpression"}, default="drd"
        Which part of the DMN model to draw.

    Returns
    -------
    list[Path]
        Written output paths.
    """
    from .renderers.dmn_renderer import render_dmn_file as _impl

    return await asyncio.to_thread(
        _impl,
        input_path,
        tuple(outputs),
        title=title,
        min_dimensions=min_dimensions,
        view=view,
    )


async def convert_all(
    jobs: Sequence[ConversionJob],
    *,
    min_dimensions: MinDimensions = MinDimensions(),
    title: bool = True,
    footer: bool = True,
    device_scale_factor: float = 1.0,
) -> list[Path]:
    """Render a batch of BPMN diagrams, in order.

    Parameters
    ----------
    jobs : Sequence[ConversionJob]
        BPMN inputs with their outputs.
    min_dimensions : MinDimensions
        Smallest canvas size in pixels.
    title : bool, default=True
        Draw the diagram name above each drawing.
    footer : bool, default=True
        Draw a footer band naming the source file.
    device_scale_factor : float, default=1.0
        Pixel density of raster and PDF outputs.

    Returns
    -------
    list[Path]
        Every written output path, job by job.
    """
    from .renderers.bpmn_renderer import render_bpmn_file as _impl

    written: list[Path] = []
    for job in jobs:
        written.extend(
            await asyncio.to_thread(
                _impl,
                job.input_path,
                job.outputs,
                title=title,
                footer=footer,
                min_dimensions=min_dimensions,
                device_scale_factor=device_scale_factor,
            )
        )
    return written


__all__ = [
    "convert_all",
    "render_dmn",
]
