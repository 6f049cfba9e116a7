"""Cardinality token resolution for relation lines."""

from __future__ import annotations

from typing import Optional

from .errors import CardinalityError
from .models import ManyKind, RelationEndpoint


_CARDINALITIES: dict[str, RelationEndpoint] = {
    "0": RelationEndpoint.zero(),
    "1": RelationEndpoint.one(),
    "N": RelationEndpoint.many(ManyKind.UNKNOWN),
    "M": RelationEndpoint.many(ManyKind.UNKNOWN),
    "0..N": RelationEndpoint.many(ManyKind.ZERO_TO_MANY),
    "0..M": RelationEndpoint.many(ManyKind.ZERO_TO_MANY),
    "1..N": RelationEndpoint.many(ManyKind.ONE_TO_MANY),
    "1..M": RelationEndpoint.many(ManyKind.ONE_TO_MANY),
    # Optional single reference is still classified as a "many" side.
    "0..1": RelationEndpoint.many(ManyKind.ZERO_TO_ONE),
}


def resolve_cardinality(token: str) -> Optional[RelationEndpoint]:
    """Map a cardinality token (``'1'``, ``'0..N'``, ...) to an endpoint.

    Returns ``None`` for anything unrecognised.
    """
    return _CARDINALITIES.get(token.strip())


def require_cardinality(token: str, line_number: Optional[int] = None) -> RelationEndpoint:
    """Like :func:`resolve_cardinality` but raises ``CardinalityError`` on failure."""
    endpoint = resolve_cardinality(token)
    if endpoint is None:
        raise CardinalityError(token, line_number)
    return endpoint
