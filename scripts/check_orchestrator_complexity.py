#!/usr/bin/env python3
"""Keep the conversion use-cases (parsing, planning, scheduling) short.

Each top-level function in ``application/use_cases.py`` may hold at most
``MAX_STATEMENTS`` direct statements; rendering details belong in adapters.
"""

from __future__ import annotations

import ast
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
USE_CASES = ROOT / "src/model_to_image/application/use_cases.py"
MAX_STATEMENTS = 40


def _oversized(module: ast.Module) -> list[tuple[str, int]]:
    return [
        (node.name, len(node.body))
        for node in module.body
        if isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef))
        and len(node.body) > MAX_STATEMENTS
    ]


def main() -> None:
    """Exit non-zero when a conversion use-case grows past the limit."""
    module = ast.parse(USE_CASES.read_text(encoding="utf-8"), filename=str(USE_CASES))
    oversized = _oversized(module)
    if oversized:
        lines = [f"- {name}: {count} statements (max {MAX_STATEMENTS})" for name, count in oversized]
        raise SystemExit(
            f"Conversion use-cases in {USE_CASES.relative_to(ROOT)} are too long:\n"
            + "\n".join(lines)
        )
    print(f"Conversion use-cases within {MAX_STATEMENTS} statements.")


if __name__ == "__main__":
    main()
