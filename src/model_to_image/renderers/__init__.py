"""Diagram renderers behind the ``convert_all`` and ``render_dmn`` entry points."""

from __future__ import annotations

from model_to_image.renderers.bpmn_renderer import render_bpmn_file
from model_to_image.renderers.dmn_renderer import render_dmn_file

__all__ = ["render_bpmn_file", "render_dmn_file"]
