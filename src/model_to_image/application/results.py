"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from model_to_image.types import DiagramKind


@dataclass(frozen=True)
class ConversionResult:
    """Structured outcome of one settled conversion job."""

    input_path: Path
    outputs: tuple[Path, ...]
    kind: DiagramKind
