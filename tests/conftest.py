"""Shared pytest configuration, marker assignment and diagram fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

SAMPLE_BPMN = """<?xml version="1.0" encoding="UTF-8"?>
<bpmn:definitions xmlns:bpmn="http://www.omg.org/spec/BPMN/20100524/MODEL"
                  xmlns:bpmndi="http://www.omg.org/spec/BPMN/20100524/DI"
                  xmlns:dc="http://www.omg.org/spec/DD/20100524/DC"
                  xmlns:di="http://www.omg.org/spec/DD/20100524/DI"
                  id="Definitions_1" targetNamespace="http://bpmn.io/schema/bpmn">
  <bpmn:process id="Process_1" name="Order Handling" isExecutable="false">
    <bpmn:startEvent id="Start_1" name="Order received" />
    <bpmn:task id="Task_1" name="Check stock" />
    <bpmn:exclusiveGateway id="Gateway_1" name="In stock?" />
    <bpmn:endEvent id="End_1" name="Done" />
    <bpmn:sequenceFlow id="Flow_1" sourceRef="Start_1" targetRef="Task_1" />
    <bpmn:sequenceFlow id="Flow_2" sourceRef="Task_1" targetRef="Gateway_1" />
    <bpmn:sequenceFlow id="Flow_3" name="yes" sourceRef="Gateway_1" targetRef="End_1" />
  </bpmn:process>
  <bpmndi:BPMNDiagram id="Diagram_1">
    <bpmndi:BPMNPlane id="Plane_1" bpmnElement="Process_1">
      <bpmndi:BPMNShape id="Start_1_di" bpmnElement="Start_1">
        <dc:Bounds x="100" y="100" width="36" height="36" />
        <bpmndi:BPMNLabel><dc:Bounds x="80" y="143" width="76" height="14" /></bpmndi:BPMNLabel>
      </bpmndi:BPMNShape>
      <bpmndi:BPMNShape id="Task_1_di" bpmnElement="Task_1">
        <dc:Bounds x="190" y="78" width="100" height="80" />
      </bpmndi:BPMNShape>
      <bpmndi:BPMNShape id="Gateway_1_di" bpmnElement="Gateway_1" isMarkerVisible="true">
        <dc:Bounds x="345" y="93" width="50" height="50" />
      </bpmndi:BPMNShape>
      <bpmndi:BPMNShape id="End_1_di" bpmnElement="End_1">
        <dc:Bounds x="452" y="100" width="36" height="36" />
      </bpmndi:BPMNShape>
      <bpmndi:BPMNEdge id="Flow_1_di" bpmnElement="Flow_1">
        <di:waypoint x="136" y="118" />
        <di:waypoint x="190" y="118" />
      </bpmndi:BPMNEdge>
      <bpmndi:BPMNEdge id="Flow_2_di" bpmnElement="Flow_2">
        <di:waypoint x="290" y="118" />
        <di:waypoint x="345" y="118" />
      </bpmndi:BPMNEdge>
      <bpmndi:BPMNEdge id="Flow_3_di" bpmnElement="Flow_3">
        <di:waypoint x="395" y="118" />
        <di:waypoint x="452" y="118" />
        <bpmndi:BPMNLabel><dc:Bounds x="415" y="100" width="18" height="14" /></bpmndi:BPMNLabel>
      </bpmndi:BPMNEdge>
    </bpmndi:BPMNPlane>
  </bpmndi:BPMNDiagram>
</bpmn:definitions>
"""

SAMPLE_DMN = """<?xml version="1.0" encoding="UTF-8"?>
<definitions xmlns="https://www.omg.org/spec/DMN/20191111/MODEL/"
             xmlns:dmndi="https://www.omg.org/spec/DMN/20191111/DMNDI/"
             xmlns:dc="http://www.omg.org/spec/DMN/20180521/DC/"
             xmlns:di="http://www.omg.org/spec/DMN/20180521/DI/"
             id="Definitions_dish" name="Dish Decisions" namespace="http://camunda.org/schema/1.0/dmn">
  <decision id="Decision_dish" name="Dish">
    <informationRequirement id="Req_1">
      <requiredInput href="#Input_season" />
    </informationRequirement>
    <decisionTable id="Table_dish" hitPolicy="FIRST">
      <input id="In_season" label="Season">
        <inputExpression id="Expr_season" typeRef="string"><text>season</text></inputExpression>
      </input>
      <output id="Out_dish" label="Dish" name="dish" typeRef="string" />
      <rule id="Rule_1">
        <inputEntry id="Entry_1"><text>"Winter"</text></inputEntry>
        <outputEntry id="Entry_2"><text>"Roastbeef"</text></outputEntry>
        <annotationEntry><text>warm</text></annotationEntry>
      </rule>
      <rule id="Rule_2">
        <inputEntry id="Entry_3"><text>-</text></inputEntry>
        <outputEntry id="Entry_4"><text>"Salad"</text></outputEntry>
      </rule>
    </decisionTable>
  </decision>
  <decision id="Decision_greeting" name="Greeting">
    <variable id="Var_greeting" name="greeting" typeRef="string" />
    <literalExpression id="Literal_1"><text>"Hello " + name</text></literalExpression>
  </decision>
  <inputData id="Input_season" name="Season" />
  <dmndi:DMNDI>
    <dmndi:DMNDiagram id="DMNDiagram_1">
      <dmndi:DMNShape id="Shape_dish" dmnElementRef="Decision_dish">
        <dc:Bounds x="160" y="80" width="180" height="80" />
      </dmndi:DMNShape>
      <dmndi:DMNShape id="Shape_greeting" dmnElementRef="Decision_greeting">
        <dc:Bounds x="400" y="80" width="180" height="80" />
      </dmndi:DMNShape>
      <dmndi:DMNShape id="Shape_season" dmnElementRef="Input_season">
        <dc:Bounds x="187" y="250" width="125" height="45" />
      </dmndi:DMNShape>
      <dmndi:DMNEdge id="Edge_1" dmnElementRef="Req_1">
        <di:waypoint x="250" y="250" />
        <di:waypoint x="250" y="160" />
      </dmndi:DMNEdge>
    </dmndi:DMNDiagram>
  </dmndi:DMNDI>
</definitions>
"""


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def bpmn_file(tmp_path: Path) -> Path:
    """Write the sample BPMN process to a temporary file."""
    path = tmp_path / "order.bpmn"
    path.write_text(SAMPLE_BPMN, encoding="utf-8")
    return path


@pytest.fixture
def dmn_file(tmp_path: Path) -> Path:
    """Write the sample DMN model to a temporary file."""
    path = tmp_path / "dish.dmn"
    path.write_text(SAMPLE_DMN, encoding="utf-8")
    return path
