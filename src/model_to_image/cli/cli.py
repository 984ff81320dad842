#!/usr/bin/env python3
"""
model_to_image.cli.cli

Typer-based CLI converting BPMN and DMN diagrams to SVG, PNG and PDF images.

Every positional argument names a diagram and its outputs, separated by the
platform path-list delimiter (``:`` on POSIX, ``;`` on Windows). Outputs are
comma-separated; a bare extension reuses the previous output's base name.

Examples
--------
Export BPMN to diagram.png:

    model-to-image diagram.bpmn:diagram.png

Export BPMN to diagram.png and /tmp/diagram.pdf:

    model-to-image diagram.bpmn:diagram.png,/tmp/diagram.pdf

Export with a minimum size of 500x300 pixels and no title:

    model-to-image --min-dimensions=500x300 --no-title diagram.bpmn:png

Export the decision table of a DMN diagram:

    model-to-image --dmn-view=decision decision.dmn:png,pdf
"""

from __future__ import annotations

import logging
import os
import traceback
from enum import Enum
from pathlib import Path

import typer

from model_to_image.application.jobs import ConversionJob
from model_to_image.errors import (
    InvalidDimensionsError,
    InvalidOptionError,
    MalformedArgumentError,
    ModelToImageError,
)
from model_to_image.logging_setup import configure_logging

logger = logging.getLogger(__name__)

DELIMITER = os.pathsep
CONVERSION_METAVAR = f"<diagramFile>{DELIMITER}<outputConfig>..."

app = typer.Typer(
    name="model-to-image",
    help="Convert BPMN and DMN diagrams to images (SVG, PNG, PDF).",
    add_completion=False,
)


class DmnViewChoice(str, Enum):
    """DMN view choices accepted on the command line."""

    drd = "drd"
    decision = "decision"
    literal_expression = "literalExpression"


def _print_conversion_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly conversion error.

    Parameters
    ----------
    exc : Exception
        Exception raised during conversion.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _show_help_and_exit(ctx: typer.Context) -> None:
    typer.echo(ctx.get_help(), err=True)
    raise typer.Exit(code=1)


def _parse_conversions(ctx: typer.Context, conversions: list[str]) -> list[ConversionJob]:
    from model_to_image.application import build_conversion_job

    jobs: list[ConversionJob] = []
    for raw in conversions:
        try:
            jobs.append(build_conversion_job(raw, DELIMITER))
        except MalformedArgumentError as exc:
            typer.echo(f"  Error: {exc}", err=True)
            _show_help_and_exit(ctx)
    return jobs


@app.command()
def main(
    ctx: typer.Context,
    conversions: list[str] | None = typer.Argument(
        None,
        metavar=CONVERSION_METAVAR,
        help="Diagram file and a comma-separated list of extensions or output paths.",
        show_default=False,
    ),
    min_dimensions: str = typer.Option(
        "400x300",
        "--min-dimensions",
        help="Minimum size in pixels (<width>x<height>).",
    ),
    title: bool = typer.Option(
        True, "--title/--no-title", help="Display the diagram name on the exported image."
    ),
    footer: bool = typer.Option(
        True, "--footer/--no-footer", help="Display the footer band on exported BPMN images."
    ),
    scale: float = typer.Option(1.0, "--scale", help="Scale factor for images."),
    dmn_view: DmnViewChoice = typer.Option(
        DmnViewChoice.drd, "--dmn-view", help="DMN view: drd | decision | literalExpression."
    ),
    log_dir: Path = typer.Option(
        Path("."),
        "--log-dir",
        envvar="MODEL_TO_IMAGE_LOG_DIR",
        help="Directory receiving stdout.log and stderr.log.",
    ),
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
) -> None:
    """Convert BPMN and DMN diagrams to images.

    Parameters
    ----------
    ctx : typer.Context
        Typer context, used to print help on malformed input.
    conversions : list[str] | None
        ``<diagramFile><DELIM><outputConfig>`` arguments.
    min_dimensions : str, default="400x300"
        Minimum canvas size.
    title : bool, default=True
        Whether to draw the diagram name.
    footer : bool, default=True
        Whether to draw the footer band on BPMN images.
    scale : float, default=1.0
        Scale factor of raster and PDF outputs.
    dmn_view : DmnViewChoice, default=drd
        Which DMN view to render.
    log_dir : Path, default="."
        Where the run logs are written.
    debug : bool, default=False
        Whether to print tracebacks on failure.
    """
    if not conversions:
        _show_help_and_exit(ctx)

    jobs = _parse_conversions(ctx, conversions or [])

    from model_to_image.application import build_render_options

    try:
        options = build_render_options(
            min_dimensions=min_dimensions,
            title=title,
            footer=footer,
            scale=scale,
            dmn_view=dmn_view.value,
        )
    except (InvalidDimensionsError, InvalidOptionError) as exc:
        raise typer.BadParameter(str(exc)) from exc

    configure_logging(log_dir, debug=debug)

    try:
        from model_to_image.api import convert_jobs

        results = convert_jobs(jobs, options)
    except ModelToImageError as exc:
        logger.exception("failed to export diagram(s)")
        raise typer.Exit(code=_print_conversion_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still log it and show a clean message.
        logger.exception("failed to export diagram(s)")
        raise typer.Exit(code=_print_conversion_error(exc, debug))

    for result in results:
        for output in result.outputs:
            typer.echo(f"✓ Saved: {output}")


if __name__ == "__main__":
    app()
