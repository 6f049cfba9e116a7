"""Class-diagram parse state machine.

Consumes diagram text line by line, keeping at most one "open" class that
receives member lines until its closing ``}``. Relation lines (``--``) are
resolved independently of the class state and may create classes or inject
foreign-key attributes into classes already in the result.

The parser is pure: no I/O, no shared state between calls. Every call to
:func:`parse_diagram` builds a fresh :class:`DiagramParser`.
"""

from __future__ import annotations

import asyncio
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from diagram_ast.config import ParserConfig
from diagram_ast.utils import read_text_file

from .classifier import (
    CLASS_CLOSE,
    LineKind,
    classify,
    extract_class_names,
    is_class_open,
    is_relation_line,
    parse_member,
    split_class_line,
)
from .models import ClassDef, DataType, RelationDecl
from .relations import apply_relation, parse_relation_line


class ParserState(str, Enum):
    """Whether a class block is currently open."""
    IDLE = "idle"
    IN_CLASS = "in_class"


class DiagramParser:
    """Line-driven builder of the ``{NAME: ClassDef}`` mapping."""

    def __init__(self, config: Optional[ParserConfig] = None) -> None:
        self.config = config or ParserConfig()
        self.result: dict[str, ClassDef] = {}
        self.relations: list[RelationDecl] = []
        self._open_class = ClassDef.empty()
        self._reopened: Optional[ClassDef] = None
        self._state = ParserState.IDLE

    @property
    def state(self) -> ParserState:
        return self._state

    @property
    def open_class(self) -> ClassDef:
        return self._open_class

    # ------------------------------------------------------------------
    # Line handling
    # ------------------------------------------------------------------

    def feed_line(self, line: str, line_number: Optional[int] = None) -> None:
        """Apply one line of diagram text to the parser state."""
        kind = classify(line, self.config.section_marker)
        if kind is LineKind.SECTION_MARKER:
            return

        if kind is LineKind.CLASS_CLOSE:
            head = line[: line.index(CLASS_CLOSE)]
            if is_class_open(head):
                # Single-line block: class Foo { string name }
                self._open(head)
            elif self._state is ParserState.IN_CLASS:
                self._collect_member(head)
            self._close()
        elif kind is LineKind.CLASS_OPEN:
            self._open(line)
        elif self._state is ParserState.IN_CLASS:
            self._collect_member(line)

        if is_relation_line(line):
            relation = parse_relation_line(line, line_number)
            self.relations.append(relation)
            apply_relation(self.result, relation, self.config.foreign_key_suffix)

    def _open(self, line: str) -> None:
        # With several names on one line only the last one's effect survives.
        for name in extract_class_names(line):
            if name in self.result:
                self._open_class = self.result.pop(name)
                self._reopened = self._open_class.model_copy(deep=True)
            else:
                self._open_class.name = name
        self._state = ParserState.IN_CLASS

        _, inline_body = split_class_line(line)
        if inline_body.strip():
            self._collect_member(inline_body)

    def _collect_member(self, segment: str) -> None:
        member = parse_member(segment)
        if member is None:
            return
        data_type = DataType.from_token(member.type_token)
        name = member.name if self.config.preserve_member_case else member.name.lower()
        if member.is_function:
            self._open_class.add_function(data_type, name)
        else:
            self._open_class.add_attribute(data_type, name)

    def _close(self) -> None:
        if self._state is ParserState.IN_CLASS and self._open_class.name:
            self.result[self._open_class.name] = self._open_class
        self._open_class = ClassDef.empty()
        self._reopened = None
        self._state = ParserState.IDLE

    # ------------------------------------------------------------------
    # Whole-document driver
    # ------------------------------------------------------------------

    def finish(self) -> dict[str, ClassDef]:
        """End of input. An unterminated class is dropped unless configured otherwise.

        Dropping a re-opened class only discards the members added since it
        was re-opened; the definition closed earlier is restored.
        """
        if self._state is ParserState.IN_CLASS:
            if self.config.flush_unterminated_class:
                self._close()
            elif self._reopened is not None:
                self._restore(self._reopened)
        return self.result

    def _restore(self, class_def: ClassDef) -> None:
        # A relation seen while the class was open may have re-created it.
        created = self.result.get(class_def.name)
        if created is not None:
            class_def.attributes.extend(created.attributes)
            class_def.functions.extend(created.functions)
        self.result[class_def.name] = class_def

    def parse(self, text: str) -> dict[str, ClassDef]:
        for line_number, line in enumerate(text.split("\n"), start=1):
            self.feed_line(line.rstrip("\r"), line_number)
        return self.finish()


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_diagram(text: str, config: Optional[ParserConfig] = None) -> dict[str, ClassDef]:
    """Parse class-diagram text into a mapping of upper-cased name to ``ClassDef``.

    Args:
        text: The full diagram text.
        config: Optional parser settings; defaults to ``ParserConfig()``.

    Returns:
        The complete class mapping. There is no partial result: any error
        aborts the whole parse.

    Raises:
        CardinalityError: A relation uses an unrecognised cardinality token.
        MalformedRelationError: A ``--`` line has fewer than five tokens.
        InternalConsistencyError: The parser lost track of a class (a bug).
    """
    return DiagramParser(config).parse(text)


async def parse_diagram_file(
    path: str | Path, config: Optional[ParserConfig] = None
) -> dict[str, ClassDef]:
    """Read a diagram file in a worker thread and parse it.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file extension is not a diagram/text extension.
    """
    text = await asyncio.to_thread(read_text_file, path)
    return parse_diagram(text, config)


def result_to_dict(result: dict[str, ClassDef]) -> dict[str, Any]:
    """JSON-ready view of a parse result."""
    return {name: cls.model_dump(mode="json") for name, cls in result.items()}
