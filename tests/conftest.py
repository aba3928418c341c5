"""Shared fixtures for cutr tests.

Provides factory fixtures for writing input and config files and for invoking
the CLI entry point programmatically.
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from cutr.cli import main

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def make_input(tmp_path: Path):
    """Factory fixture: write an input file into the test's tmp_path."""

    def _factory(name: str = "input.txt", content: str | bytes = "placeholder\n") -> Path:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _factory


@pytest.fixture
def make_yaml(tmp_path: Path):
    """Factory fixture: write a YAML config file into the test's tmp_path."""

    def _factory(yaml_text: str, name: str = "cutr.yaml") -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(yaml_text))
        return path

    return _factory


@pytest.fixture
def run_cutr(monkeypatch):
    """Factory fixture: invoke ``cutr.cli.main()`` and return its exit code."""
    monkeypatch.delenv("CUTR_CONFIG", raising=False)

    def _factory(*args: str) -> int:
        return main([str(arg) for arg in args])

    return _factory
