"""Conversion of parsed Rust types into SCALE schema types."""

from __future__ import annotations

from typing import Optional

from submarine.errors import SpanError
from submarine.rust_types.types import Array, Base, RustType, Tuple
from submarine.scale import schema as s


def to_scale_schema(rust_type: Optional[RustType]) -> s.Type:
    """Turn a Rust type into the schema used for decoding; raises SpanError."""
    if rust_type is None:
        raise SpanError("rust_type cannot be None")

    if isinstance(rust_type, Array):
        try:
            element = to_scale_schema(rust_type.base)
        except SpanError as exc:
            raise exc.with_path("element")
        return s.Array(type=element, length=rust_type.length)

    if isinstance(rust_type, Base):
        return _convert_base(rust_type)

    if isinstance(rust_type, Tuple):
        fields = []
        for index, element in enumerate(rust_type.elements):
            try:
                fields.append(to_scale_schema(element))
            except SpanError as exc:
                raise exc.with_path(index)
        return s.Tuple(fields=fields)

    raise SpanError("unexpected rust type kind").with_path(
        f"kind={type(rust_type).__name__}"
    )


def _convert_single_generic(base: Base, name: str) -> s.Type:
    if len(base.generics) != 1:
        raise (
            SpanError(f"{name} requires exactly one generic parameter")
            .with_path(f"generics_count={len(base.generics)}")
            .with_path(name)
        )
    try:
        return to_scale_schema(base.generics[0])
    except SpanError as exc:
        raise exc.with_path("generic_param").with_path(name)


def _convert_base(base: Base) -> s.Type:
    path = base.path

    if path == ["Vec"]:
        return s.Vec(type=_convert_single_generic(base, "Vec"))

    if path == ["Option"]:
        return s.Option(type=_convert_single_generic(base, "Option"))

    if base.generics:
        raise (
            SpanError("generic types other than Vec and Option are not supported")
            .with_path(f"type={path[0]}")
            .with_path(f"generics_count={len(base.generics)}")
        )

    return s.Ref(name="::".join(path))