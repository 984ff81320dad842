"""Render BPMN diagrams to image files."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from model_to_image.application.options import MinDimensions
from model_to_image.diagram import read_diagram
from model_to_image.errors import DiagramParseError
from model_to_image.export import export_svg, output_format
from model_to_image.svg import draw_diagram

logger = logging.getLogger(__name__)


def render_bpmn_file(
    input_path: Path,
    outputs: Sequence[Path],
    *,
    title: bool = True,
    footer: bool = True,
    min_dimensions: MinDimensions = MinDimensions(),
    device_scale_factor: float = 1.0,
) -> list[Path]:
    """Render one BPMN file to every output.

    Parameters
    ----------
    input_path : Path
        BPMN 2.0 XML file with diagram interchange coordinates.
    outputs : Sequence[Path]
        Output files; ``.svg``, ``.png`` or ``.pdf``.
    title : bool, default=True
        Draw the diagram name above the diagram.
    footer : bool, default=True
        Draw a footer band naming the source file.
    min_dimensions : MinDimensions
        Smallest canvas size in pixels.
    device_scale_factor : float, default=1.0
        Pixel density of raster and PDF outputs.

    Returns
    -------
    list[Path]
        Written output paths, in order.
    """
    for output in outputs:
        output_format(output)

    diagram = read_diagram(input_path)
    if diagram.kind != "bpmn":
        raise DiagramParseError(f"{input_path} is a {diagram.kind.upper()} file, not BPMN.")

    svg_text = draw_diagram(
        diagram,
        title=diagram.name if title else None,
        footer_text=input_path.name if footer else None,
        min_dimensions=min_dimensions,
    )
    written = [export_svg(svg_text, output, scale=device_scale_factor) for output in outputs]
    logger.info("rendered %s -> %s", input_path, ", ".join(str(p) for p in written))
    return written
