"""Pytest configuration and fixtures for interface_processor tests."""

import importlib
import sys
import textwrap
from pathlib import Path
from typing import Callable, Dict, Set

import pytest


@pytest.fixture
def make_package(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Callable[[Dict[str, str]], Path]:
    """
    Write a throwaway package tree and make it importable.

    Takes a mapping of relative file path to module source. Every top-level
    package written is removed from sys.modules after the test.
    """
    roots: Set[str] = set()
    monkeypatch.syspath_prepend(str(tmp_path))

    def _make(files: Dict[str, str]) -> Path:
        for relative, source in files.items():
            path = tmp_path / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(textwrap.dedent(source))
            roots.add(Path(relative).parts[0].removesuffix(".py"))
        importlib.invalidate_caches()
        return tmp_path

    yield _make

    for name in list(sys.modules):
        if name.split(".")[0] in roots:
            del sys.modules[name]
