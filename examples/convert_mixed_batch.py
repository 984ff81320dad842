"""Convert a DMN and a BPMN diagram in one run through the Python API.

Usage:
    python examples/convert_mixed_batch.py path/to/process.bpmn path/to/decision.dmn
"""

from __future__ import annotations

import os
import sys

from model_to_image.api import convert_diagrams


def main() -> int:
    if len(sys.argv) != 3:
        print(__doc__)
        return 1
    bpmn_path, dmn_path = sys.argv[1], sys.argv[2]

    results = convert_diagrams(
        [f"{dmn_path}{os.pathsep}svg,png", f"{bpmn_path}{os.pathsep}svg,pdf"],
        min_dimensions="800x600",
        dmn_view="drd",
    )
    for result in results:
        print(f"{result.kind}: {result.input_path} -> {', '.join(map(str, result.outputs))}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
