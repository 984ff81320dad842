"""Renderer adapters implementing application ports."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from model_to_image.application.jobs import ConversionJob
from model_to_image.application.options import RenderOptions


class DmnRendererImpl:
    """Render DMN jobs through ``model_to_image.render_dmn``."""

    async def render(
        self,
        input_path: Path,
        outputs: Sequence[Path],
        options: RenderOptions,
    ) -> None:
        """Render one DMN diagram.

        Parameters
        ----------
        input_path : Path
            DMN diagram file.
        outputs : Sequence[Path]
            Output files to write.
        options : RenderOptions
            Run-wide options; ``title``, ``min_dimensions`` and ``dmn_view``
            apply to DMN.
        """
        from model_to_image import render_dmn

        await render_dmn(
            input_path,
            outputs,
            title=options.title,
            min_dimensions=options.min_dimensions,
            view=options.dmn_view,
        )


class BpmnBatchRendererImpl:
    """Render the BPMN batch through ``model_to_image.convert_all``."""

    async def render_all(
        self,
        jobs: Sequence[ConversionJob],
        options: RenderOptions,
    ) -> None:
        """Render every BPMN job with the run-wide options."""
        from model_to_image import convert_all

        await convert_all(
            jobs,
            min_dimensions=options.min_dimensions,
            title=options.title,
            footer=options.footer,
            device_scale_factor=options.scale,
        )
