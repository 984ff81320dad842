"""Draw diagrams as standalone SVG documents.

The drawing follows the DI coordinates stored in the diagram file; nothing
is laid out here. Decision tables and literal expressions, which carry no
coordinates, are stacked vertically.
"""

from __future__ import annotations

import textwrap
from collections.abc import Sequence
from xml.sax.saxutils import escape, quoteattr

from model_to_image.application.options import MinDimensions
from model_to_image.diagram import Bounds, DecisionTable, Diagram, Edge, Shape

PADDING = 20
TITLE_HEIGHT = 40
FOOTER_HEIGHT = 28
FONT_SIZE = 12
CHAR_WIDTH = 7
LINE_HEIGHT = 14
ROW_HEIGHT = 24
STROKE = "#22242a"
FONT = "Arial, Helvetica, sans-serif"

EVENT_KINDS = {
    "startEvent",
    "endEvent",
    "intermediateCatchEvent",
    "intermediateThrowEvent",
    "boundaryEvent",
}
ARROW_KINDS = {
    "sequenceFlow",
    "messageFlow",
    "informationRequirement",
    "knowledgeRequirement",
    "requirement",
}
DASHED_KINDS = {"messageFlow", "knowledgeRequirement"}
DOTTED_KINDS = {"association", "dataInputAssociation", "dataOutputAssociation", "authorityRequirement"}

HIT_POLICY_LETTERS = {
    "UNIQUE": "U",
    "FIRST": "F",
    "PRIORITY": "P",
    "ANY": "A",
    "COLLECT": "C",
    "RULE ORDER": "R",
    "OUTPUT ORDER": "O",
}


def _fmt(value: float) -> str:
    return f"{value:.2f}".rstrip("0").rstrip(".")


def _text(
    x: float,
    y: float,
    content: str,
    *,
    font_size: int = FONT_SIZE,
    font_family: str = FONT,
    **attrs: str,
) -> str:
    extra = "".join(f" {key.replace('_', '-')}={quoteattr(val)}" for key, val in attrs.items())
    return (
        f'<text x="{_fmt(x)}" y="{_fmt(y)}" font-family={quoteattr(font_family)} '
        f'font-size="{font_size}"{extra}>{escape(content)}</text>'
    )


def _wrap(label: str, width: float) -> list[str]:
    columns = max(int(width // CHAR_WIDTH), 4)
    lines: list[str] = []
    for paragraph in label.splitlines() or [""]:
        lines.extend(textwrap.wrap(paragraph, columns) or [""])
    return lines


def _centered_label(label: str, box: Bounds) -> list[str]:
    if not label:
        return []
    lines = _wrap(label, box.width)
    top = box.y + box.height / 2 - (len(lines) - 1) * LINE_HEIGHT / 2 + FONT_SIZE / 3
    return [
        _text(box.x + box.width / 2, top + idx * LINE_HEIGHT, line, text_anchor="middle")
        for idx, line in enumerate(lines)
    ]


def _shape_outline(shape: Shape) -> str:
    b = shape.bounds
    x, y, w, h = _fmt(b.x), _fmt(b.y), _fmt(b.width), _fmt(b.height)
    style = f'fill="white" stroke="{STROKE}" stroke-width="2"'
    kind = shape.kind

    if kind in EVENT_KINDS:
        cx, cy, r = b.x + b.width / 2, b.y + b.height / 2, min(b.width, b.height) / 2
        width = "4" if kind == "endEvent" else "2"
        outline = (
            f'<circle cx="{_fmt(cx)}" cy="{_fmt(cy)}" r="{_fmt(r)}" '
            f'fill="white" stroke="{STROKE}" stroke-width="{width}"/>'
        )
        if kind.startswith("intermediate") or kind == "boundaryEvent":
            outline += (
                f'<circle cx="{_fmt(cx)}" cy="{_fmt(cy)}" r="{_fmt(r - 3)}" '
                f'fill="none" stroke="{STROKE}" stroke-width="1.5"/>'
            )
        return outline

    if kind.endswith("Gateway"):
        cx, cy = b.x + b.width / 2, b.y + b.height / 2
        points = f"{_fmt(cx)},{_fmt(b.y)} {_fmt(b.right)},{_fmt(cy)} {_fmt(cx)},{_fmt(b.bottom)} {_fmt(b.x)},{_fmt(cy)}"
        outline = f'<polygon points="{points}" {style}/>'
        q = b.width / 4
        if kind == "parallelGateway":
            outline += (
                f'<path d="M {_fmt(cx)} {_fmt(cy - q)} V {_fmt(cy + q)} '
                f'M {_fmt(cx - q)} {_fmt(cy)} H {_fmt(cx + q)}" stroke="{STROKE}" stroke-width="3"/>'
            )
        elif kind == "exclusiveGateway":
            d = q * 0.7
            outline += (
                f'<path d="M {_fmt(cx - d)} {_fmt(cy - d)} L {_fmt(cx + d)} {_fmt(cy + d)} '
                f'M {_fmt(cx + d)} {_fmt(cy - d)} L {_fmt(cx - d)} {_fmt(cy + d)}" '
                f'stroke="{STROKE}" stroke-width="3"/>'
            )
        return outline

    if kind in {"participant", "lane"}:
        return f'<rect x="{x}" y="{y}" width="{w}" height="{h}" fill="none" stroke="{STROKE}" stroke-width="1.5"/>'

    if kind == "textAnnotation":
        return (
            f'<path d="M {_fmt(b.x + 10)} {y} H {x} V {_fmt(b.bottom)} H {_fmt(b.x + 10)}" '
            f'fill="none" stroke="{STROKE}" stroke-width="1.5"/>'
        )

    if kind == "group":
        return (
            f'<rect x="{x}" y="{y}" width="{w}" height="{h}" rx="10" fill="none" '
            f'stroke="{STROKE}" stroke-width="1.5" stroke-dasharray="10,5,2,5"/>'
        )

    if kind == "inputData":
        return f'<rect x="{x}" y="{y}" width="{w}" height="{h}" rx="{_fmt(b.height / 2)}" {style}/>'

    if kind == "businessKnowledgeModel":
        c = 10
        points = (
            f"{_fmt(b.x + c)},{y} {_fmt(b.right)},{y} {_fmt(b.right)},{_fmt(b.bottom - c)} "
            f"{_fmt(b.right - c)},{_fmt(b.bottom)} {x},{_fmt(b.bottom)} {x},{_fmt(b.y + c)}"
        )
        return f'<polygon points="{points}" {style}/>'

    if kind == "knowledgeSource":
        wave = b.height / 8
        return (
            f'<path d="M {x} {y} H {_fmt(b.right)} V {_fmt(b.bottom - wave)} '
            f'Q {_fmt(b.x + b.width * 0.75)} {_fmt(b.bottom - 3 * wave)} {_fmt(b.x + b.width / 2)} {_fmt(b.bottom - wave)} '
            f'T {x} {_fmt(b.bottom - wave)} Z" {style}/>'
        )

    if kind == "decision" or kind == "dataStoreReference" or kind == "dataObjectReference":
        return f'<rect x="{x}" y="{y}" width="{w}" height="{h}" {style}/>'

    return f'<rect x="{x}" y="{y}" width="{w}" height="{h}" rx="10" {style}/>'


def _shape_label(shape: Shape) -> list[str]:
    if shape.kind == "participant":
        # horizontal pools carry their name vertically in the left band
        b = shape.bounds
        cx, cy = b.x + 15, b.y + b.height / 2
        return [
            _text(cx, cy, shape.label, text_anchor="middle", transform=f"rotate(-90 {_fmt(cx)} {_fmt(cy)})")
        ] if shape.label else []
    if shape.kind == "lane":
        return []
    if shape.label_bounds is not None:
        return _centered_label(shape.label, shape.label_bounds)
    if shape.kind in EVENT_KINDS or shape.kind.endswith("Gateway"):
        b = shape.bounds
        below = Bounds(b.x - 30, b.bottom + 4, b.width + 60, LINE_HEIGHT * 2)
        return _centered_label(shape.label, below)
    return _centered_label(shape.label, shape.bounds)


def _edge(edge: Edge) -> list[str]:
    if len(edge.waypoints) < 2:
        return []
    points = " ".join(f"{_fmt(x)},{_fmt(y)}" for x, y in edge.waypoints)
    attrs = f'fill="none" stroke="{STROKE}" stroke-width="1.5"'
    if edge.kind in DASHED_KINDS:
        attrs += ' stroke-dasharray="8,5"'
    elif edge.kind in DOTTED_KINDS:
        attrs += ' stroke-dasharray="2,4"'
    if edge.kind in ARROW_KINDS:
        attrs += ' marker-end="url(#arrow)"'
    parts = [f'<polyline points="{points}" {attrs}/>']
    if edge.label and edge.label_bounds is not None:
        parts.extend(_centered_label(edge.label, edge.label_bounds))
    return parts


def _document(
    body: Sequence[str],
    content: Bounds,
    *,
    title: str | None,
    footer_text: str | None,
    min_dimensions: MinDimensions,
) -> str:
    top_band = TITLE_HEIGHT if title else 0
    bottom_band = FOOTER_HEIGHT if footer_text else 0
    width = max(content.width + 2 * PADDING, min_dimensions.width)
    height = max(content.height + 2 * PADDING + top_band + bottom_band, min_dimensions.height)
    offset_x = (width - content.width) / 2 - content.x
    offset_y = top_band + PADDING - content.y

    parts = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        (
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{_fmt(width)}" '
            f'height="{_fmt(height)}" viewBox="0 0 {_fmt(width)} {_fmt(height)}">'
        ),
        (
            '<defs><marker id="arrow" viewBox="0 0 10 10" refX="10" refY="5" '
            'markerWidth="8" markerHeight="8" orient="auto-start-reverse">'
            f'<path d="M 0 0 L 10 5 L 0 10 z" fill="{STROKE}"/></marker></defs>'
        ),
        f'<rect width="{_fmt(width)}" height="{_fmt(height)}" fill="white"/>',
    ]
    if title:
        parts.append(
            _text(PADDING, TITLE_HEIGHT * 0.7, title, font_size=18, font_weight="bold")
        )
    parts.append(f'<g transform="translate({_fmt(offset_x)} {_fmt(offset_y)})">')
    parts.extend(body)
    parts.append("</g>")
    if footer_text:
        parts.append(
            f'<line x1="0" y1="{_fmt(height - FOOTER_HEIGHT)}" x2="{_fmt(width)}" '
            f'y2="{_fmt(height - FOOTER_HEIGHT)}" stroke="#d0d3d9"/>'
        )
        parts.append(_text(PADDING, height - FOOTER_HEIGHT / 2 + 4, footer_text, fill="#5b5f66"))
    parts.append("</svg>")
    return "\n".join(parts)


def draw_diagram(
    diagram: Diagram,
    *,
    title: str | None,
    footer_text: str | None,
    min_dimensions: MinDimensions,
) -> str:
    """Draw BPMN processes or a DMN requirements diagram (DRD)."""
    # containers first so nodes and flows stay on top
    ordered = sorted(diagram.shapes, key=lambda s: s.kind not in {"participant", "lane", "group"})
    body: list[str] = []
    for shape in ordered:
        body.append(_shape_outline(shape))
    for edge in diagram.edges:
        body.extend(_edge(edge))
    for shape in ordered:
        body.extend(_shape_label(shape))
    content = diagram.bounds() or Bounds(0, 0, 0, 0)
    return _document(
        body, content, title=title, footer_text=footer_text, min_dimensions=min_dimensions
    )


def _rule_cells(table: DecisionTable, rule: Sequence[str]) -> list[str]:
    # one cell per input and output column, so annotations stay in their column
    count = len(table.inputs) + len(table.outputs)
    return [*rule, *[""] * (count - len(rule))][:count]


def _column_widths(table: DecisionTable) -> list[float]:
    headers = [*table.inputs, *table.outputs, "Annotation"]
    columns: list[list[str]] = [[header] for header in headers]
    for rule, annotation in zip(table.rules, table.annotations or [""] * len(table.rules)):
        for idx, cell in enumerate([*_rule_cells(table, rule), annotation]):
            columns[idx].append(cell)
    return [max(80, max(len(text) for text in column) * CHAR_WIDTH + 16) for column in columns]


def _decision_table(table: DecisionTable, top: float) -> tuple[list[str], float, float]:
    widths = [30.0, *_column_widths(table)]
    total = sum(widths)
    parts = [
        _text(0, top + FONT_SIZE + 4, table.name, font_weight="bold"),
    ]
    y = top + ROW_HEIGHT
    headers = [
        HIT_POLICY_LETTERS.get(table.hit_policy.upper(), table.hit_policy[:1]),
        *table.inputs,
        *table.outputs,
        "Annotation",
    ]
    n_inputs = len(table.inputs)
    rows: list[list[str]] = [headers]
    annotations = table.annotations or tuple("" for _ in table.rules)
    for number, (rule, annotation) in enumerate(zip(table.rules, annotations), start=1):
        rows.append([str(number), *_rule_cells(table, rule), annotation])

    for row_idx, row in enumerate(rows):
        x = 0.0
        for col_idx, width in enumerate(widths):
            cell = row[col_idx] if col_idx < len(row) else ""
            if row_idx == 0 and 1 <= col_idx <= n_inputs:
                fill = "#e8f0fb"
            elif row_idx == 0:
                fill = "#f3f4f6"
            else:
                fill = "white"
            parts.append(
                f'<rect x="{_fmt(x)}" y="{_fmt(y)}" width="{_fmt(width)}" height="{ROW_HEIGHT}" '
                f'fill="{fill}" stroke="{STROKE}" stroke-width="1"/>'
            )
            weight = {"font_weight": "bold"} if row_idx == 0 else {}
            parts.append(_text(x + 8, y + ROW_HEIGHT / 2 + FONT_SIZE / 3, cell, **weight))
            x += width
        y += ROW_HEIGHT
    return parts, total, y - top


def draw_decision_tables(
    diagram: Diagram,
    *,
    title: str | None,
    min_dimensions: MinDimensions,
) -> str:
    """Draw every decision table of a DMN diagram, one below the other."""
    body: list[str] = []
    top = 0.0
    width = 0.0
    for table in diagram.decision_tables:
        parts, table_width, table_height = _decision_table(table, top)
        body.extend(parts)
        width = max(width, table_width)
        top += table_height + 30
    height = max(top - 30, 0)
    return _document(
        body,
        Bounds(0, 0, width, height),
        title=title,
        footer_text=None,
        min_dimensions=min_dimensions,
    )


def draw_literal_expressions(
    diagram: Diagram,
    *,
    title: str | None,
    min_dimensions: MinDimensions,
) -> str:
    """Draw every literal expression decision as a titled text box."""
    body: list[str] = []
    top = 0.0
    width = 0.0
    for expression in diagram.literal_expressions:
        lines = expression.text.splitlines() or [""]
        header = expression.name + (f" : {expression.type_ref}" if expression.type_ref else "")
        box_width = max(200, max(len(line) for line in [header, *lines]) * CHAR_WIDTH + 24)
        box_height = ROW_HEIGHT + len(lines) * LINE_HEIGHT + 16
        body.append(
            f'<rect x="0" y="{_fmt(top)}" width="{_fmt(box_width)}" height="{_fmt(box_height)}" '
            f'fill="white" stroke="{STROKE}" stroke-width="1.5"/>'
        )
        body.append(
            f'<rect x="0" y="{_fmt(top)}" width="{_fmt(box_width)}" height="{ROW_HEIGHT}" '
            f'fill="#f3f4f6" stroke="{STROKE}" stroke-width="1.5"/>'
        )
        body.append(_text(12, top + ROW_HEIGHT / 2 + FONT_SIZE / 3, header, font_weight="bold"))
        for idx, line in enumerate(lines):
            body.append(
                _text(12, top + ROW_HEIGHT + 8 + (idx + 1) * LINE_HEIGHT - 3, line, font_family="monospace")
            )
        width = max(width, box_width)
        top += box_height + 30
    height = max(top - 30, 0)
    return _document(
        body,
        Bounds(0, 0, width, height),
        title=title,
        footer_text=None,
        min_dimensions=min_dimensions,
    )
