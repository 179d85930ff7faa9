"""Simplifying Rust type names from chain metadata into decodable types."""

from __future__ import annotations

import re

from submarine.rust_types.parser import RustTypesParser
from submarine.rust_types.types import Array, Base, RustType, Tuple

_WHITESPACE = re.compile(r"[\t\n\f\r ]+")


def parse_and_sanitize(type_name: str) -> RustType:
    """Normalise, strip ``as Trait`` casts, parse and sanitise a type name."""
    # Spaces must be normalised before the "as" casts can be found.
    type_name = normalize_spaces(type_name)
    type_name = remove_as_trait(type_name)
    return sanitize_rust_type(parse_rust_type(type_name))


def normalize_spaces(text: str) -> str:
    """Collapse every run of whitespace into a single space."""
    return _WHITESPACE.sub(" ", text)


def remove_as_trait(text: str) -> str:
    """Rewrite ``<Foo as Trait>::Bar`` into ``Foo::Bar``, repeatedly."""
    while True:
        close = text.find(">::")
        if close <= 0:
            return text
        depth = 0
        open_pos = -1
        for pos in range(close, -1, -1):
            if text[pos] == ">":
                depth += 1
            elif text[pos] == "<":
                depth -= 1
            if depth == 0:
                open_pos = pos
                break
        if open_pos < 0:
            raise ValueError(f"unbalanced angle brackets in {text!r}")
        inside = text[open_pos + 1:close]
        source = inside.partition(" as ")[0]
        text = text[:open_pos] + source + text[close + 1:]


def parse_rust_type(text: str) -> RustType:
    """Parse a type name; raises ValueError when it is not valid."""
    return RustTypesParser(text).parse()


def _sanitize_single(rust_type: Base) -> RustType:
    name = rust_type.path[0]
    generics = rust_type.generics

    if name == "Box":
        if not generics:
            raise ValueError("Box requires a generic parameter")
        return sanitize_rust_type(generics[0])
    if name == "Compact":
        return Base(["compact"])
    if name == "PairOf":
        return Tuple(generics)
    if name.endswith("Of"):
        return Base([name[: -len("Of")]])
    if name.startswith("Bounded"):
        if not generics:
            raise ValueError(f"{name} requires a size parameter")
        # The last parameter of a bounded collection is its size bound.
        return Base([name[len("Bounded"):]], generics[:-1])
    if name.startswith("Weak"):
        return Base([name[len("Weak"):]], generics)
    if str(rust_type) == "String":
        return Base(["text"])

    if name == "VecDeque":
        name = "Vec"
    if name in ("Vec", "Option"):
        return Base([name], [sanitize_rust_type(param) for param in generics])
    return Base([name])


def sanitize_rust_type(rust_type: RustType) -> RustType:
    """Map a parsed type onto the names and shapes the decoder understands."""
    if isinstance(rust_type, Base):
        path = rust_type.path
        if len(path) == 1:
            return _sanitize_single(rust_type)
        if path[0] == "T":
            return sanitize_rust_type(Base(path[1:], rust_type.generics))
        if path[-1] == "PhantomData":
            return Base(["empty"])
        return Base(path)

    if isinstance(rust_type, Array):
        return Array(sanitize_rust_type(rust_type.base), rust_type.length)

    if isinstance(rust_type, Tuple):
        return Tuple([sanitize_rust_type(element) for element in rust_type.elements])

    raise TypeError(f"not a rust type: {rust_type!r}")