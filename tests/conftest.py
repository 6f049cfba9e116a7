"""Shared pytest fixtures for the diagram_ast test suite.

Provides reusable fixtures for:
- The sample diagram fixture file and its text
- Small inline diagrams built with textwrap
- Environment isolation for ParserConfig.from_env
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest


# ---------------------------------------------------------------------------
# Sample diagrams
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_diagram() -> str:
    """Path to the sample-diagram.mmd fixture file."""
    path = Path(__file__).parent / "fixtures" / "sample-diagram.mmd"
    assert path.exists(), f"Sample diagram fixture not found at {path}"
    return str(path)


@pytest.fixture
def sample_diagram_text(sample_diagram: str) -> str:
    """Raw text of the sample diagram."""
    return Path(sample_diagram).read_text(encoding="utf-8")


@pytest.fixture
def classes_only_diagram() -> str:
    """Two class blocks, no relations."""
    return textwrap.dedent("""\
        classDiagram
        class Author {
            string name
            int age
            string describe()
        }
        class Book {
            string title
            double price
            Author writer
        }
    """)


@pytest.fixture
def diagram_file(tmp_path: Path):
    """Factory writing diagram text to a temporary ``.mmd`` file."""

    def _write(text: str, name: str = "diagram.mmd") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every DIAGRAM_AST_* variable so from_env sees defaults."""
    for name in (
        "DIAGRAM_AST_SECTION_MARKER",
        "DIAGRAM_AST_FLUSH_UNTERMINATED",
        "DIAGRAM_AST_PRESERVE_MEMBER_CASE",
        "DIAGRAM_AST_FK_SUFFIX",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
