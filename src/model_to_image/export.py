"""Write SVG documents to SVG, PNG or PDF outputs."""

from __future__ import annotations

import logging
from pathlib import Path

from model_to_image.errors import RenderError, UnsupportedFormatError
from model_to_image.types import OUTPUT_FORMATS

logger = logging.getLogger(__name__)


def output_format(output_path: Path) -> str:
    """Return the export format named by the output extension.

    Raises
    ------
    UnsupportedFormatError
        If the extension is not one of ``svg``, ``png`` or ``pdf``.
    """
    fmt = output_path.suffix.lower().lstrip(".")
    if fmt not in OUTPUT_FORMATS:
        raise UnsupportedFormatError(
            f"Unsupported output format '{output_path.suffix}' for {output_path}. "
            f"Supported: {', '.join(OUTPUT_FORMATS)}."
        )
    return fmt


def export_svg(svg_text: str, output_path: Path, *, scale: float = 1.0) -> Path:
    """Export an SVG document to ``output_path``.

    Parameters
    ----------
    svg_text : str
        Complete SVG document.
    output_path : Path
        Destination; its extension picks the format.
    scale : float, default=1.0
        Pixel density factor for raster and PDF output. SVG output is
        written as-is.

    Returns
    -------
    Path
        The written output path.
    """
    fmt = output_format(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    if fmt == "svg":
        output_path.write_text(svg_text, encoding="utf-8")
        logger.info("exported %s", output_path)
        return output_path

    try:
        import cairosvg
    except (ImportError, OSError) as exc:
        raise RenderError(
            f"PNG/PDF export requires cairosvg and the cairo library: {exc}"
        ) from exc

    writer = cairosvg.svg2png if fmt == "png" else cairosvg.svg2pdf
    try:
        writer(
            bytestring=svg_text.encode("utf-8"),
            write_to=str(output_path),
            scale=scale,
        )
    except Exception as exc:
        raise RenderError(f"Failed to write {output_path}: {exc}") from exc
    logger.info("exported %s", output_path)
    return output_path
