"""Unit tests for the BPMN and DMN renderers and their async entry points."""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from model_to_image import convert_all, render_dmn
from model_to_image.adapters.renderers import BpmnBatchRendererImpl, DmnRendererImpl
from model_to_image.application.jobs import ConversionJob
from model_to_image.application.options import MinDimensions, RenderOptions
from model_to_image.errors import (
    DiagramParseError,
    InvalidOptionError,
    RenderError,
    UnsupportedFormatError,
)
from model_to_image.renderers import render_bpmn_file, render_dmn_file


def test_bpmn_to_svg(bpmn_file: Path, tmp_path: Path) -> None:
    """Render a BPMN file with title and footer."""
    out = tmp_path / "out" / "order.svg"

    written = render_bpmn_file(bpmn_file, [out])

    assert written == [out]
    content = out.read_text(encoding="utf-8")
    assert "Order Handling" in content
    assert "order.bpmn" in content


def test_bpmn_without_title_and_footer(bpmn_file: Path, tmp_path: Path) -> None:
    """Title and footer can be switched off."""
    out = tmp_path / "order.svg"

    render_bpmn_file(bpmn_file, [out], title=False, footer=False)

    content = out.read_text(encoding="utf-8")
    assert "Order Handling" not in content
    assert "order.bpmn" not in content


def test_bpmn_rejects_unknown_format_before_writing(bpmn_file: Path, tmp_path: Path) -> None:
    """Every output format is checked before anything is written."""
    first = tmp_path / "order.svg"

    with pytest.raises(UnsupportedFormatError):
        render_bpmn_file(bpmn_file, [first, tmp_path / "order.gif"])

    assert not first.exists()


def test_bpmn_renderer_rejects_dmn(dmn_file: Path, tmp_path: Path) -> None:
    """A DMN file on the BPMN path is reported, not drawn."""
    with pytest.raises(DiagramParseError, match="not BPMN"):
        render_bpmn_file(dmn_file, [tmp_path / "x.svg"])


@pytest.mark.parametrize(
    ("view", "expected"),
    [("drd", "Season"), ("decision", '"Roastbeef"'), ("literalExpression", "Hello")],
)
def test_dmn_views(dmn_file: Path, tmp_path: Path, view: str, expected: str) -> None:
    """Each DMN view draws its own part of the model."""
    out = tmp_path / f"{view}.svg"

    render_dmn_file(dmn_file, [out], view=view)

    assert expected in out.read_text(encoding="utf-8")


def test_dmn_view_without_content(dmn_file: Path, tmp_path: Path) -> None:
    """Asking for a view the model does not contain fails."""
    dmn_file.write_text(
        dmn_file.read_text(encoding="utf-8").replace("decisionTable", "context"),
        encoding="utf-8",
    )

    with pytest.raises(RenderError, match="no decision table"):
        render_dmn_file(dmn_file, [tmp_path / "x.svg"], view="decision")


def test_dmn_unknown_view(dmn_file: Path, tmp_path: Path) -> None:
    """Unknown views are rejected."""
    with pytest.raises(InvalidOptionError):
        render_dmn_file(dmn_file, [tmp_path / "x.svg"], view="table")


def test_async_entry_points(bpmn_file: Path, dmn_file: Path, tmp_path: Path) -> None:
    """``render_dmn`` and ``convert_all`` write every output."""
    dmn_out = tmp_path / "dish.svg"
    bpmn_outs = (tmp_path / "a.svg", tmp_path / "b.svg")

    asyncio.run(render_dmn(dmn_file, [dmn_out], view="drd"))
    written = asyncio.run(
        convert_all(
            [ConversionJob(input_path=bpmn_file, outputs=bpmn_outs)],
            min_dimensions=MinDimensions(800, 600),
            title=True,
            footer=False,
            device_scale_factor=1.0,
        )
    )

    assert dmn_out.exists()
    assert written == list(bpmn_outs)
    assert all(path.exists() for path in bpmn_outs)
    assert 'width="800"' in bpmn_outs[0].read_text(encoding="utf-8")


def test_adapters_forward_run_options(
    bpmn_file: Path, dmn_file: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Adapters translate ``RenderOptions`` into collaborator keywords."""
    import model_to_image

    seen: dict[str, object] = {}

    async def fake_render_dmn(input_path: Path, outputs: object, **kwargs: object) -> list[Path]:
        seen["dmn"] = (input_path, outputs, kwargs)
        return []

    async def fake_convert_all(jobs: object, **kwargs: object) -> list[Path]:
        seen["bpmn"] = (jobs, kwargs)
        return []

    monkeypatch.setattr(model_to_image, "render_dmn", fake_render_dmn)
    monkeypatch.setattr(model_to_image, "convert_all", fake_convert_all)
    options = RenderOptions(
        title=False, footer=False, scale=2.0, min_dimensions=MinDimensions(500, 300), dmn_view="decision"
    )
    job = ConversionJob(input_path=bpmn_file, outputs=(tmp_path / "o.png",))

    asyncio.run(DmnRendererImpl().render(dmn_file, (tmp_path / "d.png",), options))
    asyncio.run(BpmnBatchRendererImpl().render_all([job], options))

    assert seen["dmn"] == (
        dmn_file,
        (tmp_path / "d.png",),
        {"title": False, "min_dimensions": MinDimensions(500, 300), "view": "decision"},
    )
    assert seen["bpmn"] == (
        [job],
        {
            "min_dimensions": MinDimensions(500, 300),
            "title": False,
            "footer": False,
            "device_scale_factor": 2.0,
        },
    )
