"""Decoding SCALE data into plain Python values by following a schema.

Decoded values use Python's own types: ``None`` for the unit type, ``int``
for every integer, ``bool``, ``bytes``, ``str``, ``list`` for tuples and
sequences, and ``dict`` for structs, enum variants with data and bit flags.
"""

from __future__ import annotations

from typing import Any, Callable, Dict

from submarine.errors import SpanError
from submarine.scale import base
from submarine.scale.reader import Reader
from submarine.scale.schema import (
    Array,
    BitFlags,
    EnumComplex,
    EnumSimple,
    Import,
    Option,
    Ref,
    Struct,
    Tuple,
    Type,
    Vec,
)

_PRIMITIVES: Dict[str, Callable[[Reader], Any]] = {
    "u8": base.decode_u8,
    "u16": base.decode_u16,
    "u32": base.decode_u32,
    "u64": base.decode_u64,
    "u128": base.decode_u128,
    "u256": base.decode_u256,
    "i8": base.decode_i8,
    "i16": base.decode_i16,
    "i32": base.decode_i32,
    "i64": base.decode_i64,
    "i128": base.decode_i128,
    "i256": base.decode_i256,
    "bool": base.decode_bool,
    "text": base.decode_text,
    "bytes": base.decode_bytes,
    "compact": base.decode_compact,
}

# Unsigned readers used for bit flags, chosen by the smallest width that fits.
_FLAG_WIDTHS = (
    (8, base.decode_u8),
    (16, base.decode_u16),
    (32, base.decode_u32),
    (64, base.decode_u64),
    (128, base.decode_u128),
    (256, base.decode_u256),
)


def _span(exc: ValueError) -> SpanError:
    return SpanError(str(exc))


def _is_u8(schema: Type) -> bool:
    return isinstance(schema, Ref) and schema.name == "u8"


def decode_ref(reader: Reader, ref_type: str) -> Any:
    """Decode a primitive type given by name; ``empty`` decodes to None."""
    if ref_type == "empty":
        return None
    decoder = _PRIMITIVES.get(ref_type)
    if decoder is None:
        raise SpanError(f"unknown primitive type: {ref_type}")
    try:
        return decoder(reader)
    except ValueError as exc:
        raise _span(exc) from exc


def _decode_struct(reader: Reader, schema: Struct) -> Dict[str, Any]:
    result: Dict[str, Any] = {}
    for member in schema.fields:
        try:
            result[member.name] = decode_with_schema(reader, member.type)
        except SpanError as exc:
            raise exc.with_path(member.name)
    return result


def _decode_tuple(reader: Reader, schema: Tuple) -> list:
    result = []
    for index, field_type in enumerate(schema.fields):
        try:
            result.append(decode_with_schema(reader, field_type))
        except SpanError as exc:
            raise exc.with_path(index)
    return result


def _variant_index(reader: Reader, count: int) -> int:
    try:
        index = base.decode_u8(reader)
    except ValueError as exc:
        raise _span(exc).with_path("index") from exc
    if index >= count:
        raise SpanError(
            f"enum index {index} out of bounds (max {count - 1})"
        ).with_path("index")
    return index


def _decode_enum_simple(reader: Reader, schema: EnumSimple) -> str:
    return schema.variants[_variant_index(reader, len(schema.variants))]


def _decode_enum_complex(reader: Reader, schema: EnumComplex) -> Dict[str, Any]:
    variant = schema.variants[_variant_index(reader, len(schema.variants))]
    try:
        value = decode_with_schema(reader, variant.type)
    except SpanError as exc:
        raise exc.with_path(variant.name)
    return {variant.name: value}


def _decode_vec(reader: Reader, schema: Vec) -> Any:
    if _is_u8(schema.type):
        try:
            return base.decode_bytes(reader)
        except ValueError as exc:
            raise _span(exc) from exc
    try:
        length = base.decode_compact(reader)
    except ValueError as exc:
        raise _span(exc).with_path("length") from exc
    result = []
    for index in range(length):
        try:
            result.append(decode_with_schema(reader, schema.type))
        except SpanError as exc:
            raise exc.with_path(index)
    return result


def _decode_option(reader: Reader, schema: Option) -> Any:
    try:
        present = base.decode_bool(reader)
    except ValueError as exc:
        raise _span(exc).with_path("flag") from exc
    if not present:
        return {}
    return decode_with_schema(reader, schema.type)


def _decode_array(reader: Reader, schema: Array) -> Any:
    if _is_u8(schema.type):
        try:
            return reader.read_bytes(schema.length)
        except ValueError as exc:
            raise _span(exc) from exc
    result = []
    for index in range(schema.length):
        try:
            result.append(decode_with_schema(reader, schema.type))
        except SpanError as exc:
            raise exc.with_path(index)
    return result


def _decode_bit_flags(reader: Reader, schema: BitFlags) -> Dict[str, bool]:
    decoder = next(
        (dec for width, dec in _FLAG_WIDTHS if schema.bit_length <= width), None
    )
    if decoder is None:
        raise SpanError(f"unsupported bit length: {schema.bit_length}")
    try:
        raw = decoder(reader)
    except ValueError as exc:
        raise _span(exc) from exc
    return {flag.name: (raw & flag.value) != 0 for flag in schema.flags}


def _decode_import(reader: Reader, schema: Import) -> Any:
    raise SpanError(
        f"import types not supported: module: {schema.module} item: {schema.item}"
    )


def _decode_ref(reader: Reader, schema: Ref) -> Any:
    return decode_ref(reader, schema.name)


_HANDLERS: Dict[type, Callable[[Reader, Any], Any]] = {
    Struct: _decode_struct,
    Tuple: _decode_tuple,
    EnumSimple: _decode_enum_simple,
    EnumComplex: _decode_enum_complex,
    Vec: _decode_vec,
    Option: _decode_option,
    Array: _decode_array,
    Ref: _decode_ref,
    BitFlags: _decode_bit_flags,
    Import: _decode_import,
}


def decode_with_schema(reader: Reader, schema: Type) -> Any:
    """Decode one value described by ``schema``; raises SpanError on failure."""
    handler = _HANDLERS.get(type(schema))
    if handler is None:
        kind = getattr(schema, "kind", type(schema).__name__)
        raise SpanError(f"unknown type kind: {kind}")
    return handler(reader, schema)