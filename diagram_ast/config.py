"""Diagram AST configuration.

Typed parser settings as a Pydantic v2 model so they can be validated at
construction time and serialised to/from JSON or environment variables
without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator


_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool | None:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    return raw.strip().lower() in _TRUTHY


class ParserConfig(BaseModel):
    """Tuning knobs for the class-diagram parser.

    The defaults reproduce the reference behaviour: trailing unterminated
    class blocks are dropped and synthesized relation fields end in ``_fk``.
    """

    section_marker: str = Field(
        default="classdiagram",
        min_length=1,
        description="Root declaration keyword; lines containing it are skipped",
    )
    flush_unterminated_class: bool = Field(
        default=False,
        description="Keep a class block still open at end of input instead of dropping it",
    )
    preserve_member_case: bool = Field(
        default=True,
        description="Keep member names as written; False lower-cases them",
    )
    foreign_key_suffix: str = Field(
        default="_fk", description="Suffix for synthesized relation attribute names"
    )

    @field_validator("section_marker")
    @classmethod
    def _lower_marker(cls, value: str) -> str:
        return value.strip().lower()

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file. Parent directories are created.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "ParserConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "ParserConfig":
        """Build a ``ParserConfig`` from environment variables.

        Recognised variables (all optional):
            DIAGRAM_AST_SECTION_MARKER, DIAGRAM_AST_FLUSH_UNTERMINATED,
            DIAGRAM_AST_PRESERVE_MEMBER_CASE, DIAGRAM_AST_FK_SUFFIX.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("DIAGRAM_AST_SECTION_MARKER"):
            kwargs["section_marker"] = os.environ["DIAGRAM_AST_SECTION_MARKER"]
        flush = _env_flag("DIAGRAM_AST_FLUSH_UNTERMINATED")
        if flush is not None:
            kwargs["flush_unterminated_class"] = flush
        preserve = _env_flag("DIAGRAM_AST_PRESERVE_MEMBER_CASE")
        if preserve is not None:
            kwargs["preserve_member_case"] = preserve
        if "DIAGRAM_AST_FK_SUFFIX" in os.environ:
            kwargs["foreign_key_suffix"] = os.environ["DIAGRAM_AST_FK_SUFFIX"]
        return cls(**kwargs)
