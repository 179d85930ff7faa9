"""A small syntax tree for Rust type expressions."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List, Optional, Union


class RustTypeKind(enum.IntEnum):
    BASE = 0
    TUPLE = 1
    ARRAY = 2


@dataclass
class Base:
    """A path such as ``foo::Bar`` with optional generic parameters."""

    path: List[str]
    generics: Optional[List["RustType"]] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.path = list(self.path)
        self.generics = list(self.generics) if self.generics else []

    @property
    def kind(self) -> RustTypeKind:
        return RustTypeKind.BASE

    def __str__(self) -> str:
        path = "::".join(self.path)
        if not self.generics:
            return path
        params = ", ".join(str(param) for param in self.generics)
        return f"{path}<{params}>"


@dataclass
class Tuple:
    """A tuple type such as ``(A, B)``; ``()`` when it has no elements."""

    elements: Optional[List["RustType"]] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.elements = list(self.elements) if self.elements else []

    @property
    def kind(self) -> RustTypeKind:
        return RustTypeKind.TUPLE

    def __str__(self) -> str:
        return "(" + ", ".join(str(element) for element in self.elements) + ")"


@dataclass
class Array:
    """A fixed-length array such as ``[u8; 32]``."""

    base: "RustType"
    length: int

    @property
    def kind(self) -> RustTypeKind:
        return RustTypeKind.ARRAY

    def __str__(self) -> str:
        return f"[{self.base}; {self.length}]"


RustType = Union[Base, Tuple, Array]