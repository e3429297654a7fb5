"""Tests for ensuring project packaging metadata stays consistent."""

from __future__ import annotations

import sys
import tomllib
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import cereal_storage


def _load_pyproject() -> dict:
    with (ROOT / "pyproject.toml").open("rb") as handle:
        return tomllib.load(handle)


def test_pyproject_declares_expected_metadata() -> None:
    pyproject = _load_pyproject()
    poetry = pyproject["tool"]["poetry"]

    assert poetry["name"] == "cereal-storage"
    assert poetry["version"] == cereal_storage.__version__

    dependencies = poetry["dependencies"]
    for dependency in ("pydantic", "rich"):
        assert dependency in dependencies, f"missing dependency declaration for {dependency}"
    assert "pytest" in poetry["extras"]["test"]


def test_lazy_exports_resolve() -> None:
    for name in cereal_storage.__all__:
        assert getattr(cereal_storage, name) is not None
    assert "CerealStorageImpl" in dir(cereal_storage)
