"""Shared fixtures and helpers for tests."""

from collections.abc import Callable
from pathlib import Path

import pytest
from tree_sitter import Parser
from tree_sitter_language_pack import get_parser

from pythcheck.core.extract import FunctionNode, extract
from pythcheck.core.parser import SyntaxTree, parse
from pythcheck.models import SourceFile

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def python_parser() -> Parser:
    """Return a tree-sitter parser for Python."""
    return get_parser("python")


@pytest.fixture
def parse_source() -> Callable[..., SyntaxTree]:
    """Parse a source string as if it came from ``path``."""

    def _parse(text: str, path: str = "module.py") -> SyntaxTree:
        return parse(SourceFile(path=Path(path), text=text))

    return _parse


@pytest.fixture
def functions_of(parse_source: Callable[..., SyntaxTree]) -> Callable[[str], list[FunctionNode]]:
    """Extract the function views of a source string."""

    def _extract(text: str) -> list[FunctionNode]:
        return extract(parse_source(text))

    return _extract


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write ``content`` to ``tmp_path / relative`` and return the path."""

    def _write(relative: str, content: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
