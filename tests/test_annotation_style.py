"""Annotation conventions for the hexcore sources."""

from __future__ import annotations

import ast
import re
import tomllib
from pathlib import Path

PACKAGE = Path("hexcore")

_LEGACY_OPTIONAL = [
    re.compile(r"\bOptional\["),
    re.compile(r"\btyping\.Optional\b"),
    re.compile(r"\bUnion\[[^\]]*\bNone\b"),
]


def _modules() -> list[Path]:
    return sorted(p for p in PACKAGE.glob("*.py") if p.name != "__init__.py")


def test_nullable_values_use_union_operator() -> None:
    offending = {
        str(path): [p.pattern for p in _LEGACY_OPTIONAL if p.search(path.read_text(encoding="utf-8"))]
        for path in [*_modules(), *Path("tests").glob("*.py")]
        if path.name != Path(__file__).name
    }
    offending = {name: hits for name, hits in offending.items() if hits}
    assert not offending, f"use `X | None` instead: {offending}"


def test_modules_postpone_annotation_evaluation() -> None:
    missing = []
    for path in _modules():
        tree = ast.parse(path.read_text(encoding="utf-8"))
        futures = {
            alias.name
            for node in tree.body
            if isinstance(node, ast.ImportFrom) and node.module == "__future__"
            for alias in node.names
        }
        if "annotations" not in futures:
            missing.append(path.name)
    assert not missing, f"missing `from __future__ import annotations`: {missing}"


def test_python_floor_supports_union_operator_at_runtime() -> None:
    # pydantic evaluates `X | None` field annotations, which needs 3.10+;
    # tomllib in the test suite needs 3.11
    with Path("pyproject.toml").open("rb") as handle:
        python = tomllib.load(handle)["tool"]["poetry"]["dependencies"]["python"]
    assert python == "^3.11"
