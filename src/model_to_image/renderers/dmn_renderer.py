"""Render DMN diagrams to image files in one of three views."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from model_to_image.application.options import MinDimensions
from model_to_image.diagram import Diagram, read_diagram
from model_to_image.errors import DiagramParseError, InvalidOptionError, RenderError
from model_to_image.export import export_svg, output_format
from model_to_image.svg import (
    draw_decision_tables,
    draw_diagram,
    draw_literal_expressions,
)
from model_to_image.types import DMN_VIEWS

logger = logging.getLogger(__name__)


def _draw(diagram: Diagram, view: str, title: str | None, min_dimensions: MinDimensions) -> str:
    if view == "drd":
        return draw_diagram(
            diagram, title=title, footer_text=None, min_dimensions=min_dimensions
        )
    if view == "decision":
        if not diagram.decision_tables:
            raise RenderError(f"'{diagram.name}' has no decision table to render.")
        return draw_decision_tables(diagram, title=title, min_dimensions=min_dimensions)
    if not diagram.literal_expressions:
        raise RenderError(f"'{diagram.name}' has no literal expression to render.")
    return draw_literal_expressions(diagram, title=title, min_dimensions=min_dimensions)


def render_dmn_file(
    input_path: Path,
    outputs: Sequence[Path],
    *,
    title: bool = True,
    min_dimensions: MinDimensions = MinDimensions(),
    view: str = "drd",
) -> list[Path]:
    """Render one DMN file to every output using the requested view."""
    if view not in DMN_VIEWS:
        raise InvalidOptionError(f"Unknown DMN view '{view}'. Use one of {', '.join(DMN_VIEWS)}.")
    for output in outputs:
        output_format(output)

    diagram = read_diagram(input_path)
    if diagram.kind != "dmn":
        raise DiagramParseError(f"{input_path} is a {diagram.kind.upper()} file, not DMN.")

    svg_text = _draw(diagram, view, diagram.name if title else None, min_dimensions)
    written = [export_svg(svg_text, output) for output in outputs]
    logger.info("rendered %s (%s view) -> %s", input_path, view, ", ".join(str(p) for p in written))
    return written
