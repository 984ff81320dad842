"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from model_to_image.application.jobs import ConversionJob
from model_to_image.application.options import RenderOptions


class DmnRenderer(Protocol):
    """Render a single DMN diagram to every requested output."""

    async def render(
        self,
        input_path: Path,
        outputs: Sequence[Path],
        options: RenderOptions,
    ) -> None:
        """Render and write all outputs; raise on failure."""


class BpmnBatchRenderer(Protocol):
    """Render a batch of BPMN jobs in one call."""

    async def render_all(
        self,
        jobs: Sequence[ConversionJob],
        options: RenderOptions,
    ) -> None:
        """Render every job in order; raise on the first failure."""
