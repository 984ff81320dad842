"""Read BPMN and DMN files into a flat, drawable diagram model.

Only what is needed for drawing is kept: the diagram interchange (DI) bounds
of every shape, the waypoints of every edge, and, for DMN, the content of
decision tables and literal expressions. Tags are matched by local name so
that BPMN 2.0 and every DMN revision (1.1 ``biodi`` extensions included) are
read by the same code.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from xml.etree import ElementTree as ET

from model_to_image.errors import DiagramParseError
from model_to_image.types import DiagramKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned rectangle in diagram coordinates."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass(frozen=True)
class Shape:
    """A drawable node: task, event, gateway, decision, input data..."""

    element_id: str
    kind: str
    label: str
    bounds: Bounds
    label_bounds: Bounds | None = None


@dataclass(frozen=True)
class Edge:
    """A drawable connection through explicit waypoints."""

    element_id: str
    kind: str
    label: str
    waypoints: tuple[tuple[float, float], ...]
    label_bounds: Bounds | None = None


@dataclass(frozen=True)
class DecisionTable:
    """Content of a DMN decision table, cells as plain text."""

    name: str
    hit_policy: str
    inputs: tuple[str, ...]
    outputs: tuple[str, ...]
    rules: tuple[tuple[str, ...], ...]
    annotations: tuple[str, ...] = ()


@dataclass(frozen=True)
class LiteralExpression:
    """A DMN decision whose logic is a single literal expression."""

    name: str
    text: str
    type_ref: str = ""


@dataclass(frozen=True)
class Diagram:
    """Everything the SVG drawer needs from one diagram file."""

    kind: DiagramKind
    name: str
    shapes: tuple[Shape, ...] = ()
    edges: tuple[Edge, ...] = ()
    decision_tables: tuple[DecisionTable, ...] = field(default_factory=tuple)
    literal_expressions: tuple[LiteralExpression, ...] = field(default_factory=tuple)

    def bounds(self) -> Bounds | None:
        """Smallest rectangle containing every shape, label and waypoint."""
        xs: list[float] = []
        ys: list[float] = []
        for shape in self.shapes:
            for box in (shape.bounds, shape.label_bounds):
                if box is not None:
                    xs.extend((box.x, box.right))
                    ys.extend((box.y, box.bottom))
        for edge in self.edges:
            for x, y in edge.waypoints:
                xs.append(x)
                ys.append(y)
            if edge.label_bounds is not None:
                xs.extend((edge.label_bounds.x, edge.label_bounds.right))
                ys.extend((edge.label_bounds.y, edge.label_bounds.bottom))
        if not xs:
            return None
        return Bounds(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _namespace(tag: str) -> str:
    return tag[1:].split("}", 1)[0] if tag.startswith("{") else ""


def _children(element: ET.Element, name: str) -> list[ET.Element]:
    return [child for child in element if _local(child.tag) == name]


def _child(element: ET.Element, name: str) -> ET.Element | None:
    for child in element:
        if _local(child.tag) == name:
            return child
    return None


def _child_text(element: ET.Element | None, name: str = "text") -> str:
    if element is None:
        return ""
    node = _child(element, name)
    return (node.text or "").strip() if node is not None else ""


def _parse_bounds(element: ET.Element | None) -> Bounds | None:
    if element is None:
        return None
    try:
        return Bounds(
            x=float(element.get("x", "0")),
            y=float(element.get("y", "0")),
            width=float(element.get("width", "0")),
            height=float(element.get("height", "0")),
        )
    except ValueError as exc:
        raise DiagramParseError(f"Invalid bounds {dict(element.attrib)}") from exc


def _parse_waypoints(elements: list[ET.Element]) -> tuple[tuple[float, float], ...]:
    try:
        return tuple((float(p.get("x", "0")), float(p.get("y", "0"))) for p in elements)
    except ValueError as exc:
        raise DiagramParseError("Invalid waypoint coordinates") from exc


def _label_of(element: ET.Element | None) -> str:
    if element is None:
        return ""
    name = element.get("name")
    if name:
        return name.strip()
    # text annotations carry their content in a child element
    return _child_text(element)


def _label_bounds(di_element: ET.Element, label_tag: str) -> Bounds | None:
    label = _child(di_element, label_tag)
    return _parse_bounds(_child(label, "Bounds")) if label is not None else None


def _detect_kind(root: ET.Element) -> DiagramKind:
    if _local(root.tag) != "definitions":
        raise DiagramParseError(
            f"Expected a <definitions> root element, found <{_local(root.tag)}>."
        )
    namespace = _namespace(root.tag)
    if "BPMN" in namespace.upper():
        return "bpmn"
    if "DMN" in namespace.upper():
        return "dmn"
    raise DiagramParseError(f"Unknown diagram namespace '{namespace}'.")


def _index_elements(root: ET.Element) -> dict[str, ET.Element]:
    return {
        element_id: element
        for element in root.iter()
        if (element_id := element.get("id"))
    }


def _di_nodes(root: ET.Element, diagram_tag: str) -> list[ET.Element]:
    """Nodes of the first diagram only.

    Modelers store each collapsed sub-process (or extra DRD) as a further
    diagram sharing the coordinate space of the first one.
    """
    for node in root.iter():
        if _local(node.tag) == diagram_tag:
            return list(node.iter())
    return []


def _read_bpmn(root: ET.Element, name: str) -> Diagram:
    elements = _index_elements(root)
    shapes: list[Shape] = []
    edges: list[Edge] = []
    for node in _di_nodes(root, "BPMNDiagram"):
        tag = _local(node.tag)
        if tag == "BPMNShape":
            ref = elements.get(node.get("bpmnElement", ""))
            bounds = _parse_bounds(_child(node, "Bounds"))
            if bounds is None:
                continue
            shapes.append(
                Shape(
                    element_id=node.get("bpmnElement", ""),
                    kind=_local(ref.tag) if ref is not None else "unknown",
                    label=_label_of(ref),
                    bounds=bounds,
                    label_bounds=_label_bounds(node, "BPMNLabel"),
                )
            )
        elif tag == "BPMNEdge":
            ref = elements.get(node.get("bpmnElement", ""))
            edges.append(
                Edge(
                    element_id=node.get("bpmnElement", ""),
                    kind=_local(ref.tag) if ref is not None else "unknown",
                    label=_label_of(ref),
                    waypoints=_parse_waypoints(_children(node, "waypoint")),
                    label_bounds=_label_bounds(node, "BPMNLabel"),
                )
            )
    return Diagram(kind="bpmn", name=name, shapes=tuple(shapes), edges=tuple(edges))


def _read_decision_table(decision: ET.Element, table: ET.Element) -> DecisionTable:
    inputs = tuple(
        item.get("label")
        or _child_text(_child(item, "inputExpression"))
        or item.get("id", "")
        for item in _children(table, "input")
    )
    outputs = tuple(
        item.get("label") or item.get("name") or item.get("id", "")
        for item in _children(table, "output")
    )
    rules = []
    annotations = []
    for rule in _children(table, "rule"):
        cells = [_child_text(entry) for entry in _children(rule, "inputEntry")]
        cells.extend(_child_text(entry) for entry in _children(rule, "outputEntry"))
        rules.append(tuple(cells))
        # DMN 1.3 uses <annotationEntry>, older revisions a rule <description>
        annotation = _child(rule, "annotationEntry")
        description = _child(rule, "description")
        if annotation is not None:
            annotations.append(_child_text(annotation))
        elif description is not None:
            annotations.append((description.text or "").strip())
        else:
            annotations.append("")
    return DecisionTable(
        name=_label_of(decision) or decision.get("id", ""),
        hit_policy=table.get("hitPolicy", "UNIQUE"),
        inputs=inputs,
        outputs=outputs,
        rules=tuple(rules),
        annotations=tuple(annotations),
    )


def _read_dmn(root: ET.Element, name: str) -> Diagram:
    elements = _index_elements(root)
    shapes: list[Shape] = []
    edges: list[Edge] = []
    tables: list[DecisionTable] = []
    literals: list[LiteralExpression] = []

    for node in _di_nodes(root, "DMNDiagram"):
        tag = _local(node.tag)
        if tag == "DMNShape":
            ref_id = node.get("dmnElementRef", "")
            ref = elements.get(ref_id)
            bounds = _parse_bounds(_child(node, "Bounds"))
            if bounds is None:
                continue
            shapes.append(
                Shape(
                    element_id=ref_id,
                    kind=_local(ref.tag) if ref is not None else "unknown",
                    label=_label_of(ref),
                    bounds=bounds,
                    label_bounds=_label_bounds(node, "DMNLabel"),
                )
            )
        elif tag == "DMNEdge":
            ref_id = node.get("dmnElementRef", "")
            ref = elements.get(ref_id)
            edges.append(
                Edge(
                    element_id=ref_id,
                    kind=_local(ref.tag) if ref is not None else "unknown",
                    label="",
                    waypoints=_parse_waypoints(_children(node, "waypoint")),
                )
            )

    drg_elements = [child for child in root if child.get("id")]
    for element in drg_elements:
        # DMN 1.1 keeps DI inside <extensionElements> via the biodi namespace
        extensions = _child(element, "extensionElements")
        if extensions is not None:
            legacy_bounds = _parse_bounds(_child(extensions, "bounds"))
            if legacy_bounds is not None:
                shapes.append(
                    Shape(
                        element_id=element.get("id", ""),
                        kind=_local(element.tag),
                        label=_label_of(element),
                        bounds=legacy_bounds,
                    )
                )
            for edge in _children(extensions, "edge"):
                edges.append(
                    Edge(
                        element_id=f"{edge.get('source', '')}->{element.get('id', '')}",
                        kind="requirement",
                        label="",
                        waypoints=_parse_waypoints(_children(edge, "waypoints")),
                    )
                )

        if _local(element.tag) != "decision":
            continue
        table = _child(element, "decisionTable")
        if table is not None:
            tables.append(_read_decision_table(element, table))
        literal = _child(element, "literalExpression")
        if literal is not None:
            variable = _child(element, "variable")
            literals.append(
                LiteralExpression(
                    name=_label_of(element) or element.get("id", ""),
                    text=_child_text(literal),
                    type_ref=(variable.get("typeRef", "") if variable is not None else ""),
                )
            )

    return Diagram(
        kind="dmn",
        name=name,
        shapes=tuple(shapes),
        edges=tuple(edges),
        decision_tables=tuple(tables),
        literal_expressions=tuple(literals),
    )


def _diagram_name(root: ET.Element, fallback: str) -> str:
    if root.get("name"):
        return root.get("name", "").strip()
    for tag in ("participant", "process"):
        for node in root.iter():
            if _local(node.tag) == tag and node.get("name"):
                return node.get("name", "").strip()
    return fallback


def read_diagram_text(text: str | bytes, *, fallback_name: str = "diagram") -> Diagram:
    """Parse BPMN or DMN XML content.

    Raises
    ------
    DiagramParseError
        If the content is not well-formed XML or not a BPMN/DMN document.
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise DiagramParseError(f"Invalid diagram XML: {exc}") from exc

    kind = _detect_kind(root)
    name = _diagram_name(root, fallback_name)
    if kind == "bpmn":
        return _read_bpmn(root, name)
    return _read_dmn(root, name)


def read_diagram(path: Path) -> Diagram:
    """Read a BPMN or DMN diagram file."""
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise DiagramParseError(f"Cannot read diagram '{path}': {exc}") from exc
    diagram = read_diagram_text(data, fallback_name=path.stem)
    logger.debug(
        "read %s diagram %s: %d shapes, %d edges",
        diagram.kind,
        path,
        len(diagram.shapes),
        len(diagram.edges),
    )
    return diagram
