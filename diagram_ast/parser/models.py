"""Pydantic v2 models for the class-diagram AST.

Defines the entity types produced by the diagram parser: data types, class
members, class definitions, and the relation endpoints used while resolving
``--`` relation lines into synthesized foreign-key fields.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class DataTypeKind(str, Enum):
    """Primitive kinds plus the two relation-derived kinds."""
    STRING = "STRING"
    FLOAT = "FLOAT"
    INTEGER = "INTEGER"
    BOOL = "BOOL"
    DATETIME = "DATETIME"
    DOUBLE = "DOUBLE"
    CHAR = "CHAR"
    FOREIGN_KEY = "FOREIGN_KEY"
    MANY_TO_MANY = "MANY_TO_MANY"


class ManyKind(str, Enum):
    """Sub-classification of a "many" relation side."""
    UNKNOWN = "UNKNOWN"
    ZERO_TO_MANY = "ZERO_TO_MANY"
    ONE_TO_MANY = "ONE_TO_MANY"
    ZERO_TO_ONE = "ZERO_TO_ONE"


class EndpointKind(str, Enum):
    """Cardinality of one side of a relation."""
    ZERO = "ZERO"
    ONE = "ONE"
    MANY = "MANY"


# Type tokens as written in a diagram (lower-cased) -> primitive kind.
PRIMITIVE_TYPES: dict[str, DataTypeKind] = {
    "string": DataTypeKind.STRING,
    "float": DataTypeKind.FLOAT,
    "int": DataTypeKind.INTEGER,
    "bool": DataTypeKind.BOOL,
    "datetime": DataTypeKind.DATETIME,
    "double": DataTypeKind.DOUBLE,
    "char": DataTypeKind.CHAR,
}


# ---------------------------------------------------------------------------
# Data types
# ---------------------------------------------------------------------------

class DataType(BaseModel):
    """A member type.

    ``target`` names the referenced class and is only set for
    ``FOREIGN_KEY`` and ``MANY_TO_MANY``.
    """
    model_config = ConfigDict(frozen=True)

    kind: DataTypeKind = Field(..., description="Primitive or relation-derived kind")
    target: Optional[str] = Field(
        default=None, description="Referenced class name for relation kinds"
    )

    @classmethod
    def primitive(cls, kind: DataTypeKind) -> DataType:
        return cls(kind=kind)

    @classmethod
    def foreign_key(cls, target: str) -> DataType:
        return cls(kind=DataTypeKind.FOREIGN_KEY, target=target)

    @classmethod
    def many_to_many(cls, target: str) -> DataType:
        return cls(kind=DataTypeKind.MANY_TO_MANY, target=target)

    @classmethod
    def from_token(cls, token: str) -> DataType:
        """Resolve a type token such as ``'int'`` or ``'Customer'``.

        Primitive names match case-insensitively. Anything else is treated as
        a reference to a class of that (lower-cased) name, which need not
        exist yet.
        """
        lowered = token.strip().lower()
        kind = PRIMITIVE_TYPES.get(lowered)
        if kind is not None:
            return cls.primitive(kind)
        return cls.foreign_key(lowered)

    @property
    def is_relation(self) -> bool:
        return self.kind in (DataTypeKind.FOREIGN_KEY, DataTypeKind.MANY_TO_MANY)

    def __str__(self) -> str:
        if self.target is not None:
            return f"{self.kind.value}({self.target})"
        return self.kind.value


# ---------------------------------------------------------------------------
# Class members
# ---------------------------------------------------------------------------

class AttributeDef(BaseModel):
    """A field on a class."""
    model_config = ConfigDict(frozen=True)

    data_type: DataType = Field(..., description="Field type")
    name: str = Field(..., description="Field name")


class FunctionDef(BaseModel):
    """A method signature. Parameters are never parsed, so ``params`` stays empty."""
    model_config = ConfigDict(frozen=True)

    return_type: DataType = Field(..., description="Declared return type")
    name: str = Field(..., description="Method name without the parameter list")
    params: list[AttributeDef] = Field(default_factory=list, description="Unused")


class ClassDef(BaseModel):
    """A class definition keyed by its upper-cased name."""
    name: str = Field(..., description="Upper-cased class name")
    attributes: list[AttributeDef] = Field(
        default_factory=list, description="Fields in declaration order"
    )
    functions: list[FunctionDef] = Field(
        default_factory=list, description="Methods in declaration order"
    )

    @classmethod
    def empty(cls, name: str = "") -> ClassDef:
        return cls(name=name.upper())

    def add_attribute(self, data_type: DataType, name: str) -> AttributeDef:
        attribute = AttributeDef(data_type=data_type, name=name)
        self.attributes.append(attribute)
        return attribute

    def add_function(self, return_type: DataType, name: str) -> FunctionDef:
        function = FunctionDef(return_type=return_type, name=name)
        self.functions.append(function)
        return function


# ---------------------------------------------------------------------------
# Relations
# ---------------------------------------------------------------------------

class RelationEndpoint(BaseModel):
    """One side of a relation's cardinality."""
    model_config = ConfigDict(frozen=True)

    kind: EndpointKind = Field(..., description="ZERO, ONE or MANY")
    many_kind: Optional[ManyKind] = Field(
        default=None, description="Set only when kind is MANY"
    )

    @classmethod
    def zero(cls) -> RelationEndpoint:
        return cls(kind=EndpointKind.ZERO)

    @classmethod
    def one(cls) -> RelationEndpoint:
        return cls(kind=EndpointKind.ONE)

    @classmethod
    def many(cls, many_kind: ManyKind = ManyKind.UNKNOWN) -> RelationEndpoint:
        return cls(kind=EndpointKind.MANY, many_kind=many_kind)

    @property
    def is_many(self) -> bool:
        return self.kind == EndpointKind.MANY


class RelationDecl(BaseModel):
    """A parsed ``Left "card" -- "card" Right`` line."""
    model_config = ConfigDict(frozen=True)

    left: str = Field(..., description="Upper-cased left class name")
    left_cardinality: RelationEndpoint
    label: str = Field(default="--", description="Arrow/label token, not interpreted")
    right_cardinality: RelationEndpoint
    right: str = Field(..., description="Upper-cased right class name")
