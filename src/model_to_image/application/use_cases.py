"""Application use-cases orchestrating diagram conversion runs."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Sequence
from pathlib import Path, PurePath

from pydantic import ValidationError

from model_to_image.application.jobs import (
    BpmnBatch,
    ConversionJob,
    ConversionPlan,
    ConversionRequest,
    DmnStep,
    PlanStep,
)
from model_to_image.application.options import (
    DEFAULT_DMN_VIEW,
    DEFAULT_MIN_DIMENSIONS,
    DEFAULT_SCALE,
    MinDimensions,
    RenderOptions,
)
from model_to_image.application.ports import BpmnBatchRenderer, DmnRenderer
from model_to_image.application.results import ConversionResult
from model_to_image.errors import (
    InvalidDimensionsError,
    InvalidOptionError,
    MalformedArgumentError,
)
from model_to_image.schemas import RenderOptionsConfig
from model_to_image.types import DiagramKind

logger = logging.getLogger(__name__)


def parse_conversion_argument(
    raw: str, delimiter: str = os.pathsep
) -> ConversionRequest:
    """Split ``<diagramFile><DELIM><outputConfig>`` on the first delimiter.

    Raises
    ------
    MalformedArgumentError
        If the delimiter is missing, or the input or an output token is empty.
    """
    if delimiter not in raw:
        raise MalformedArgumentError(
            f"no <diagramFile>{delimiter}<outputConfig> param provided: '{raw}'",
            argument=raw,
        )
    input_part, output_config = raw.split(delimiter, 1)
    if not input_part:
        raise MalformedArgumentError(f"missing <diagramFile> in '{raw}'", argument=raw)
    request = ConversionRequest(input=input_part, output_config=output_config)
    if any(not token for token in request.tokens):
        raise MalformedArgumentError(
            f"empty entry in <outputConfig> of '{raw}'", argument=raw
        )
    return request


def _strip_extension(file_name: str) -> str:
    stem, dot, _ = file_name.rpartition(".")
    return stem if dot else file_name


def resolve_outputs(input_path: str | PurePath, tokens: Sequence[str]) -> tuple[Path, ...]:
    """Expand bare extensions into file names; keep literal paths unchanged.

    A bare extension (no ``.``) takes the base name of the previous resolved
    output, or of the input for the first token, and swaps its extension.
    The resulting name has no directory, so it lands in the working directory.
    """
    outputs: list[Path] = []
    for idx, token in enumerate(tokens):
        if "." in token:
            outputs.append(Path(token))
            continue
        source = outputs[idx - 1] if idx > 0 else Path(input_path)
        base_name = _strip_extension(PurePath(source).name)
        outputs.append(Path(f"{base_name}.{token}"))
    return tuple(outputs)


def build_conversion_job(raw: str, delimiter: str = os.pathsep) -> ConversionJob:
    """Parse one positional argument into a fully resolved job."""
    request = parse_conversion_argument(raw, delimiter)
    return ConversionJob(
        input_path=Path(request.input),
        outputs=resolve_outputs(request.input, request.tokens),
    )


def parse_min_dimensions(value: str) -> MinDimensions:
    """Parse ``WxH`` into positive integer dimensions."""
    parts = value.strip().lower().split("x")
    if len(parts) != 2:
        raise InvalidDimensionsError(
            f"Invalid minimum dimensions '{value}'. Use <width>x<height>, e.g. 400x300."
        )
    parts = [part.strip() for part in parts]
    if not all(part.isascii() and part.isdigit() for part in parts):
        raise InvalidDimensionsError(
            f"Invalid minimum dimensions '{value}': width and height must be integers."
        )
    width, height = (int(part) for part in parts)
    if width <= 0 or height <= 0:
        raise InvalidDimensionsError(
            f"Invalid minimum dimensions '{value}': width and height must be positive."
        )
    return MinDimensions(width=width, height=height)


def build_render_options(
    *,
    min_dimensions: str = DEFAULT_MIN_DIMENSIONS,
    title: bool = True,
    footer: bool = True,
    scale: float = DEFAULT_SCALE,
    dmn_view: str = DEFAULT_DMN_VIEW,
) -> RenderOptions:
    """Build the typed option object from command/API params."""
    dimensions = parse_min_dimensions(min_dimensions)
    try:
        config = RenderOptionsConfig(
            title=title,
            footer=footer,
            scale=scale,
            min_width=dimensions.width,
            min_height=dimensions.height,
            dmn_view=dmn_view,
        )
    except ValidationError as exc:
        raise InvalidOptionError(f"Invalid rendering options: {exc}") from exc

    return RenderOptions(
        title=config.title,
        footer=config.footer,
        scale=config.scale,
        min_dimensions=MinDimensions(width=config.min_width, height=config.min_height),
        dmn_view=config.dmn_view,  # type: ignore[arg-type]
    )


def is_dmn(path: PurePath) -> bool:
    return path.suffix.lower() == ".dmn"


def is_bpmn(path: PurePath) -> bool:
    return path.suffix.lower() == ".bpmn"


def classify_job(job: ConversionJob) -> DiagramKind:
    """Pick the rendering path of a job from its input extension.

    Only ``.dmn`` routes to the DMN renderer; ``.bpmn`` and any other
    extension go to the BPMN batch.
    """
    return "dmn" if is_dmn(job.input_path) else "bpmn"


def plan_conversions(jobs: Iterable[ConversionJob]) -> ConversionPlan:
    """Fold jobs into DMN steps in place plus one trailing BPMN batch."""
    steps: list[PlanStep] = []
    bpmn_queue: list[ConversionJob] = []
    for job in jobs:
        if classify_job(job) == "dmn":
            steps.append(DmnStep(job=job))
        else:
            if not is_bpmn(job.input_path):
                logger.warning("%s is not a .bpmn file; rendering it as BPMN", job.input_path)
            bpmn_queue.append(job)
    if bpmn_queue:
        steps.append(BpmnBatch(jobs=tuple(bpmn_queue)))
    return ConversionPlan(steps=tuple(steps))


async def run_conversions(
    jobs: Iterable[ConversionJob],
    options: RenderOptions,
    *,
    dmn_renderer: DmnRenderer | None = None,
    bpmn_renderer: BpmnBatchRenderer | None = None,
) -> list[ConversionResult]:
    """Use-case: render a mixed run of DMN and BPMN jobs.

    DMN jobs are awaited one by one in command-line order. BPMN jobs are
    dispatched afterwards as a single batch. The first failure propagates and
    nothing after it is attempted.
    """
    if dmn_renderer is None or bpmn_renderer is None:
        from model_to_image.adapters.renderers import (
            BpmnBatchRendererImpl,
            DmnRendererImpl,
        )

        dmn_renderer = dmn_renderer or DmnRendererImpl()
        bpmn_renderer = bpmn_renderer or BpmnBatchRendererImpl()

    plan = plan_conversions(jobs)
    logger.info("Starting conversions...")
    logger.info("Footer: %s", options.footer)
    logger.info("Title: %s", options.title)
    logger.info("Scale: %s", options.scale)
    logger.info("Min Dimensions: %s", options.min_dimensions)
    logger.info("DMN View: %s", options.dmn_view)

    results: list[ConversionResult] = []
    for step in plan.steps:
        if isinstance(step, DmnStep):
            job = step.job
            await dmn_renderer.render(job.input_path, job.outputs, options)
            results.append(
                ConversionResult(input_path=job.input_path, outputs=job.outputs, kind="dmn")
            )
        else:
            logger.info("Rendering %d BPMN diagram(s) in one batch", len(step.jobs))
            await bpmn_renderer.render_all(step.jobs, options)
            results.extend(
                ConversionResult(input_path=job.input_path, outputs=job.outputs, kind="bpmn")
                for job in step.jobs
            )
    return results
