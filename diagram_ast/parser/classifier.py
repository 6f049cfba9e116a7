"""Line classification for class-diagram markup.

Each check is an independent pattern test on a single line. The state
machine applies them in a fixed priority order (see :func:`classify`);
relation detection runs independently of that order.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

DEFAULT_SECTION_MARKER = "classdiagram"
CLASS_CLOSE = "}"
CLASS_OPEN_BRACE = "{"
RELATION_MARKER = "--"

_CLASS_TOKEN_PATTERN = re.compile(r"\bclass\b")
_CLASS_NAME_PATTERN = re.compile(r"(\w+)\s*\{")
_MEMBER_PATTERN = re.compile(r"(\w+)[ \t]+(\w+)[ \t]*(\(.*\))?")


class LineKind(str, Enum):
    """Verdict for a single line, in priority order."""
    SECTION_MARKER = "section_marker"
    CLASS_CLOSE = "class_close"
    CLASS_OPEN = "class_open"
    OTHER = "other"


@dataclass(frozen=True)
class MemberDecl:
    """A ``type name`` or ``type name(...)`` member line."""

    type_token: str
    name: str
    is_function: bool = False


# ---------------------------------------------------------------------------
# Individual checks
# ---------------------------------------------------------------------------

def is_section_marker(line: str, marker: str = DEFAULT_SECTION_MARKER) -> bool:
    pattern = rf"\b{re.escape(marker.lower())}\b"
    return re.search(pattern, line.lower()) is not None


def is_class_close(line: str) -> bool:
    return CLASS_CLOSE in line


def is_class_open(line: str) -> bool:
    return _CLASS_TOKEN_PATTERN.search(line.lower()) is not None


def is_relation_line(line: str) -> bool:
    return RELATION_MARKER in line


def extract_class_names(line: str) -> list[str]:
    """Return every ``Name {`` / ``Name{`` occurrence, upper-cased, in order.

    Examples::

        extract_class_names("class Customer {") -> ["CUSTOMER"]
        extract_class_names("class Order{")     -> ["ORDER"]
        extract_class_names("class Orphan")     -> []
    """
    return [
        m.group(1).strip("{ \t").upper()
        for m in _CLASS_NAME_PATTERN.finditer(line)
    ]


def parse_member(segment: str) -> Optional[MemberDecl]:
    """Match ``type name`` with an optional parenthesized parameter group.

    The parameter list of a function is discarded; only the bare name is
    kept. Returns ``None`` when the segment does not look like a member.
    """
    match = _MEMBER_PATTERN.search(segment)
    if match is None:
        return None
    type_token, name, params = match.group(1), match.group(2), match.group(3)
    if params is not None:
        # TODO: parse parameter lists once FunctionDef.params has a use downstream
        return MemberDecl(type_token=type_token, name=name, is_function=True)
    return MemberDecl(type_token=type_token, name=name)


def classify(line: str, marker: str = DEFAULT_SECTION_MARKER) -> LineKind:
    """Classify a line by the first matching check.

    Relation lines are not part of this ordering; use
    :func:`is_relation_line` for them.
    """
    if is_section_marker(line, marker):
        return LineKind.SECTION_MARKER
    if is_class_close(line):
        return LineKind.CLASS_CLOSE
    if is_class_open(line):
        return LineKind.CLASS_OPEN
    return LineKind.OTHER


def split_class_line(line: str) -> tuple[str, str]:
    """Split a class-open line into its header and inline body.

    ``"class Foo { string name"`` -> ``("class Foo {", " string name")``.
    The body starts after the last ``{``; a line without one has no inline body.
    """
    brace = line.rfind(CLASS_OPEN_BRACE)
    if brace < 0:
        return line, ""
    return line[: brace + 1], line[brace + 1:]
