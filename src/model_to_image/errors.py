"""Domain errors raised by argument parsing, option validation and rendering."""

from __future__ import annotations


class ModelToImageError(Exception):
    """Base class for all user-facing conversion failures."""

    exit_code = 1


class MalformedArgumentError(ModelToImageError):
    """A positional argument does not follow ``<diagramFile><DELIM><outputs>``."""

    def __init__(self, message: str, argument: str | None = None) -> None:
        super().__init__(message)
        self.argument = argument


class InvalidDimensionsError(ModelToImageError):
    """The minimum dimensions are not two positive integers (``WxH``)."""


class InvalidOptionError(ModelToImageError):
    """A rendering option is outside its accepted range or choices."""


class DiagramParseError(ModelToImageError):
    """A diagram file could not be read as BPMN or DMN XML."""


class RenderError(ModelToImageError):
    """Rendering or exporting a diagram failed."""


class UnsupportedFormatError(RenderError):
    """The requested output extension has no exporter."""
