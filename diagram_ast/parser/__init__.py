"""Class-diagram parser.

Turns ``classDiagram`` markup into a mapping of upper-cased class name to
``ClassDef``, with foreign-key and many-to-many attributes synthesized from
relation lines.

Usage::

    from diagram_ast.parser import parse_diagram

    classes = parse_diagram(text)
    print(classes["CUSTOMER"].attributes)
"""

from diagram_ast.parser.errors import (
    CardinalityError,
    DiagramParseError,
    InternalConsistencyError,
    MalformedRelationError,
)
from diagram_ast.parser.models import (
    AttributeDef,
    ClassDef,
    DataType,
    DataTypeKind,
    EndpointKind,
    FunctionDef,
    ManyKind,
    RelationDecl,
    RelationEndpoint,
)
from diagram_ast.parser.cardinality import resolve_cardinality
from diagram_ast.parser.state_machine import (
    DiagramParser,
    ParserState,
    parse_diagram,
    parse_diagram_file,
    result_to_dict,
)

__all__ = [
    "parse_diagram",
    "parse_diagram_file",
    "result_to_dict",
    "resolve_cardinality",
    "DiagramParser",
    "ParserState",
    "AttributeDef",
    "ClassDef",
    "DataType",
    "DataTypeKind",
    "EndpointKind",
    "FunctionDef",
    "ManyKind",
    "RelationDecl",
    "RelationEndpoint",
    "DiagramParseError",
    "CardinalityError",
    "MalformedRelationError",
    "InternalConsistencyError",
]
