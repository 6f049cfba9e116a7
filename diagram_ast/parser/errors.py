"""Exceptions raised by the diagram parser.

User-input problems (bad cardinality tokens, truncated relation lines) derive
from ``DiagramParseError``. ``InternalConsistencyError`` signals a defect in
the parser itself and is kept distinct so callers never mistake it for a
problem with their diagram.
"""

from __future__ import annotations

from typing import Optional


class DiagramParseError(Exception):
    """Base class for every failure that aborts a parse."""

    def __init__(self, message: str, line_number: Optional[int] = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class CardinalityError(DiagramParseError):
    """A relation cardinality token is not one of the recognised forms."""

    def __init__(self, token: str, line_number: Optional[int] = None) -> None:
        self.token = token
        super().__init__(f"Entity relation error, no such relation {token}", line_number)


class MalformedRelationError(DiagramParseError):
    """A ``--`` line does not have the five tokens a relation needs."""

    def __init__(self, line: str, line_number: Optional[int] = None) -> None:
        self.line = line
        super().__init__(
            f"Malformed relation, expected 'Left \"card\" -- \"card\" Right': {line.strip()!r}",
            line_number,
        )


class InternalConsistencyError(RuntimeError):
    """The class mapping lost a key the parser had just ensured was present."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Internal error: inconsistent class mapping, missing key {key!r}")
