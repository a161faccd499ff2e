"""Tests for ensuring project packaging metadata stays consistent."""

from __future__ import annotations

import tomllib
from pathlib import Path

import hexcore


def _load_pyproject() -> dict:
    with Path("pyproject.toml").open("rb") as handle:
        return tomllib.load(handle)


def test_pyproject_declares_expected_metadata() -> None:
    pyproject = _load_pyproject()
    poetry = pyproject["tool"]["poetry"]

    assert poetry["name"] == "hexcore"
    assert poetry["version"] == hexcore.__version__
    assert {"include": "hexcore"} in poetry["packages"]

    dependencies = poetry["dependencies"]
    for dependency in ("pydantic", "numpy"):
        assert dependency in dependencies, f"missing dependency declaration for {dependency}"
    assert "pytest" in pyproject["tool"]["poetry"]["extras"]["test"]


def test_public_names_resolve() -> None:
    missing = [name for name in hexcore.__all__ if not hasattr(hexcore, name)]
    assert not missing
