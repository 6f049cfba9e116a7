"""Relation line parsing and foreign-key injection.

A relation line has the shape ``Left "card" <label> "card" Right``, e.g.
``Customer "1" -- "N" Order``. Resolving it may create the referenced
classes and appends a synthesized attribute to one side.
"""

from __future__ import annotations

from typing import Optional

from .cardinality import require_cardinality
from .errors import InternalConsistencyError, MalformedRelationError
from .models import ClassDef, DataType, RelationDecl


_MIN_RELATION_TOKENS = 5
DEFAULT_FK_SUFFIX = "_fk"


def _tokenize_relation(line: str) -> list[str]:
    """Whitespace-split, drop empties, trim, upper-case, strip quotes."""
    return [token.strip().upper().replace('"', "") for token in line.split() if token]


def parse_relation_line(line: str, line_number: Optional[int] = None) -> RelationDecl:
    """Parse one ``--`` line into a :class:`RelationDecl`.

    Raises:
        MalformedRelationError: Fewer than five tokens on the line.
        CardinalityError: A cardinality token is not recognised.
    """
    tokens = _tokenize_relation(line)
    if len(tokens) < _MIN_RELATION_TOKENS:
        raise MalformedRelationError(line, line_number)

    left, left_token, label, right_token, right = tokens[:_MIN_RELATION_TOKENS]
    return RelationDecl(
        left=left,
        left_cardinality=require_cardinality(left_token, line_number),
        label=label,
        right_cardinality=require_cardinality(right_token, line_number),
        right=right,
    )


def _class_for(result: dict[str, ClassDef], name: str) -> ClassDef:
    try:
        return result[name]
    except KeyError:
        raise InternalConsistencyError(name) from None


def apply_relation(
    result: dict[str, ClassDef],
    relation: RelationDecl,
    fk_suffix: str = DEFAULT_FK_SUFFIX,
) -> Optional[ClassDef]:
    """Apply a relation to the class mapping in place.

    Both classes are created empty if absent. Then, by which sides are
    "many":

    * one -> many: the right class gets ``FOREIGN_KEY(left)``
    * many -> one: the left class gets ``FOREIGN_KEY(right)``
    * many -> many: the left class gets ``MANY_TO_MANY(right)``
    * one -> one: nothing is injected

    Returns:
        The class that received an attribute, or ``None``.
    """
    for name in (relation.left, relation.right):
        if name not in result:
            result[name] = ClassDef.empty(name)

    left_many = relation.left_cardinality.is_many
    right_many = relation.right_cardinality.is_many

    if not left_many and right_many:
        target = _class_for(result, relation.right)
        target.add_attribute(
            DataType.foreign_key(relation.left), f"{relation.left}{fk_suffix}"
        )
    elif left_many and not right_many:
        target = _class_for(result, relation.left)
        target.add_attribute(
            DataType.foreign_key(relation.right), f"{relation.right}{fk_suffix}"
        )
    elif left_many and right_many:
        target = _class_for(result, relation.left)
        target.add_attribute(
            DataType.many_to_many(relation.right), f"{relation.right}{fk_suffix}"
        )
    else:
        return None
    return target
