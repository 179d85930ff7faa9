"""Schema types describing how SCALE-encoded data is laid out."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List, Union


class TypeKind(str, enum.Enum):
    STRUCT = "struct"
    TUPLE = "tuple"
    ENUM_SIMPLE = "enum_simple"
    ENUM_COMPLEX = "enum_complex"
    IMPORT = "import"
    VEC = "vec"
    OPTION = "option"
    ARRAY = "array"
    REF = "ref"
    BIT_FLAGS = "bit_flags"


@dataclass
class NamedMember:
    """A named field of a struct or a variant of a complex enum."""

    name: str
    type: "Type"


@dataclass
class Struct:
    fields: List[NamedMember] = field(default_factory=list)

    @property
    def kind(self) -> TypeKind:
        return TypeKind.STRUCT


@dataclass
class Tuple:
    fields: List["Type"] = field(default_factory=list)

    @property
    def kind(self) -> TypeKind:
        return TypeKind.TUPLE


@dataclass
class EnumSimple:
    """An enum whose variants carry no data; decoded by variant name."""

    variants: List[str] = field(default_factory=list)

    @property
    def kind(self) -> TypeKind:
        return TypeKind.ENUM_SIMPLE


@dataclass
class EnumComplex:
    """An enum whose variants each carry a value of their own type."""

    variants: List[NamedMember] = field(default_factory=list)

    @property
    def kind(self) -> TypeKind:
        return TypeKind.ENUM_COMPLEX


@dataclass
class Import:
    module: str
    item: str

    @property
    def kind(self) -> TypeKind:
        return TypeKind.IMPORT


@dataclass
class Vec:
    type: "Type"

    @property
    def kind(self) -> TypeKind:
        return TypeKind.VEC


@dataclass
class Option:
    type: "Type"

    @property
    def kind(self) -> TypeKind:
        return TypeKind.OPTION


@dataclass
class Array:
    type: "Type"
    length: int

    @property
    def kind(self) -> TypeKind:
        return TypeKind.ARRAY


@dataclass
class Ref:
    """A reference to a named type, such as a primitive like ``u32``."""

    name: str

    @property
    def kind(self) -> TypeKind:
        return TypeKind.REF


@dataclass
class BitFlag:
    name: str
    value: int


@dataclass
class BitFlags:
    bit_length: int
    flags: List[BitFlag] = field(default_factory=list)

    @property
    def kind(self) -> TypeKind:
        return TypeKind.BIT_FLAGS


Type = Union[Struct, Tuple, EnumSimple, EnumComplex, Import, Vec, Option, Array, Ref, BitFlags]