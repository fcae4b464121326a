from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

FIXTURES = Path(__file__).resolve().parent / "fixtures"

ProjectFactory = Callable[[dict[str, str]], Path]


@pytest.fixture(scope="session")
def fixture_project() -> Path:
    return FIXTURES / "project"


@pytest.fixture
def make_project(tmp_path: Path) -> ProjectFactory:
    """
    Build a project tree under `tmp_path` from `{relative path: contents}`.

    The views root always exists, even when no templates are given.
    """

    def _make(files: dict[str, str]) -> Path:
        root = tmp_path / "project"
        (root / "resources" / "views").mkdir(parents=True, exist_ok=True)
        for rel, text in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        return root

    return _make
