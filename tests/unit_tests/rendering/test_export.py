"""Unit tests for SVG/PNG/PDF export."""

from __future__ import annotations

import sys
import types
from pathlib import Path

import pytest

from model_to_image.errors import RenderError, UnsupportedFormatError
from model_to_image.export import export_svg, output_format

SVG = '<svg xmlns="http://www.w3.org/2000/svg" width="10" height="10"/>'


@pytest.mark.parametrize(
    ("name", "fmt"), [("a.svg", "svg"), ("a.PNG", "png"), ("dir/a.pdf", "pdf")]
)
def test_output_format(name: str, fmt: str) -> None:
    """Pick the format from the extension, case-insensitively."""
    assert output_format(Path(name)) == fmt


def test_unsupported_format() -> None:
    """Reject extensions without an exporter."""
    with pytest.raises(UnsupportedFormatError, match="jpeg"):
        output_format(Path("a.jpeg"))


def test_svg_is_written_verbatim(tmp_path: Path) -> None:
    """SVG output is the document itself; parent folders are created."""
    target = tmp_path / "nested" / "out.svg"

    assert export_svg(SVG, target) == target
    assert target.read_text(encoding="utf-8") == SVG


@pytest.mark.parametrize(("name", "writer"), [("out.png", "svg2png"), ("out.pdf", "svg2pdf")])
def test_raster_and_pdf_use_cairosvg(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, name: str, writer: str
) -> None:
    """PNG and PDF go through cairosvg with the scale factor."""
    calls: list[tuple[str, dict[str, object]]] = []

    def _record(label: str):
        def _write(**kwargs: object) -> None:
            calls.append((label, kwargs))

        return _write

    fake = types.ModuleType("cairosvg")
    fake.svg2png = _record("svg2png")  # type: ignore[attr-defined]
    fake.svg2pdf = _record("svg2pdf")  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "cairosvg", fake)

    export_svg(SVG, tmp_path / name, scale=2.0)

    assert calls == [
        (
            writer,
            {"bytestring": SVG.encode("utf-8"), "write_to": str(tmp_path / name), "scale": 2.0},
        )
    ]


def test_writer_failure_is_a_render_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Backend exceptions are reported as render errors."""

    def _fail(**_: object) -> None:
        raise ValueError("broken svg")

    fake = types.ModuleType("cairosvg")
    fake.svg2png = _fail  # type: ignore[attr-defined]
    fake.svg2pdf = _fail  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "cairosvg", fake)

    with pytest.raises(RenderError, match="broken svg"):
        export_svg(SVG, tmp_path / "out.png")
