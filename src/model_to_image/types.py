"""Shared type aliases for diagram conversion modules."""

from __future__ import annotations

from typing import Literal

type DiagramKind = Literal["bpmn", "dmn"]
type DmnView = Literal["drd", "decision", "literalExpression"]
type OutputFormat = Literal["svg", "png", "pdf"]

DMN_VIEWS: tuple[str, ...] = ("drd", "decision", "literalExpression")
OUTPUT_FORMATS: tuple[str, ...] = ("svg", "png", "pdf")
