"""Conversion requests, jobs and the plan steps they are scheduled into."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from model_to_image.errors import MalformedArgumentError


@dataclass(frozen=True)
class ConversionRequest:
    """One positional argument split into its input and raw output config.

    Parameters
    ----------
    input : str
        Diagram path as typed by the user.
    output_config : str
        Comma-separated output tokens (bare extensions or paths).
    """

    input: str
    output_config: str

    @property
    def tokens(self) -> tuple[str, ...]:
        """Raw output tokens in command-line order."""
        return tuple(self.output_config.split(","))


@dataclass(frozen=True)
class ConversionJob:
    """A diagram together with every output path it renders to."""

    input_path: Path
    outputs: tuple[Path, ...]

    def __post_init__(self) -> None:
        if not self.outputs:
            raise MalformedArgumentError(f"conversion of {self.input_path} has no outputs.")


@dataclass(frozen=True)
class DmnStep:
    """A DMN job, rendered as soon as the scheduler reaches it."""

    job: ConversionJob


@dataclass(frozen=True)
class BpmnBatch:
    """All BPMN jobs of a run, rendered together in one call."""

    jobs: tuple[ConversionJob, ...]


type PlanStep = DmnStep | BpmnBatch


@dataclass(frozen=True)
class ConversionPlan:
    """Ordered steps of a run; at most one trailing ``BpmnBatch``."""

    steps: tuple[PlanStep, ...] = ()

    @property
    def dmn_jobs(self) -> tuple[ConversionJob, ...]:
        return tuple(step.job for step in self.steps if isinstance(step, DmnStep))

    @property
    def bpmn_jobs(self) -> tuple[ConversionJob, ...]:
        for step in self.steps:
            if isinstance(step, BpmnBatch):
                return step.jobs
        return ()
