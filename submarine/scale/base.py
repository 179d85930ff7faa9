"""Decoders for the primitive SCALE types."""

from __future__ import annotations

from typing import Callable, Optional, TypeVar

from submarine.scale.reader import Reader

T = TypeVar("T")


def decode_compact(reader: Reader) -> int:
    """Decode a SCALE compact-encoded unsigned integer."""
    first = reader.read_byte()
    mode = first & 0b11
    if mode == 0:
        return first >> 2
    if mode == 1:
        try:
            second = reader.read_byte()
        except ValueError as exc:
            raise ValueError(f"compact[1]: {exc}") from exc
        return (first >> 2) | (second << 6)
    if mode == 2:
        try:
            rest = reader.read_bytes(3)
        except ValueError as exc:
            raise ValueError(f"compact[2]: {exc}") from exc
        return (first >> 2) | (rest[0] << 6) | (rest[1] << 14) | (rest[2] << 22)
    length = (first >> 2) + 4
    try:
        rest = reader.read_bytes(length)
    except ValueError as exc:
        raise ValueError(f"compact[3]: {exc}") from exc
    return int.from_bytes(rest, "little")


def _fixed(reader: Reader, size: int, label: str, signed: bool) -> int:
    try:
        raw = reader.read_bytes(size)
    except ValueError as exc:
        raise ValueError(f"{label}: {exc}") from exc
    return int.from_bytes(raw, "little", signed=signed)


def decode_u8(reader: Reader) -> int:
    return reader.read_byte()


def decode_u16(reader: Reader) -> int:
    return _fixed(reader, 2, "u16", False)


def decode_u32(reader: Reader) -> int:
    return _fixed(reader, 4, "u32", False)


def decode_u64(reader: Reader) -> int:
    return _fixed(reader, 8, "u64", False)


def decode_u128(reader: Reader) -> int:
    return _fixed(reader, 16, "u128", False)


def decode_u256(reader: Reader) -> int:
    return _fixed(reader, 32, "u256", False)


def decode_i8(reader: Reader) -> int:
    return _fixed(reader, 1, "i8", True)


def decode_i16(reader: Reader) -> int:
    return _fixed(reader, 2, "i16", True)


def decode_i32(reader: Reader) -> int:
    return _fixed(reader, 4, "i32", True)


def decode_i64(reader: Reader) -> int:
    return _fixed(reader, 8, "i64", True)


def decode_i128(reader: Reader) -> int:
    return _fixed(reader, 16, "i128", True)


def decode_i256(reader: Reader) -> int:
    return _fixed(reader, 32, "i256", True)


def decode_bool(reader: Reader) -> bool:
    """Decode a bool; only 0x00 and 0x01 are valid."""
    value = reader.read_byte()
    if value == 0x00:
        return False
    if value == 0x01:
        return True
    raise ValueError(f"bool? {value:x}")


def decode_bytes(reader: Reader) -> bytes:
    """Decode a compact length followed by that many bytes."""
    try:
        length = decode_compact(reader)
    except ValueError as exc:
        raise ValueError(f"bytes.len: {exc}") from exc
    try:
        return reader.read_bytes(length)
    except ValueError as exc:
        raise ValueError(f"bytes: {exc}") from exc


def decode_text(reader: Reader) -> str:
    """Decode a length-prefixed UTF-8 string."""
    try:
        length = decode_compact(reader)
    except ValueError as exc:
        raise ValueError(f"text.len: {exc}") from exc
    try:
        raw = reader.read_bytes(length)
    except ValueError as exc:
        raise ValueError(f"text: {exc}") from exc
    return raw.decode("utf-8", errors="replace")


def decode_vec(reader: Reader, decoder: Callable[[Reader], T]) -> list[T]:
    """Decode a compact length followed by that many items."""
    try:
        length = decode_compact(reader)
    except ValueError as exc:
        raise ValueError(f"vec.len: {exc}") from exc
    items: list[T] = []
    for index in range(length):
        try:
            items.append(decoder(reader))
        except ValueError as exc:
            raise ValueError(f"vec[{index}]: {exc}") from exc
    return items


def decode_option(reader: Reader, decoder: Callable[[Reader], T]) -> Optional[T]:
    """Decode an optional value; returns None when absent."""
    try:
        present = decode_bool(reader)
    except ValueError as exc:
        raise ValueError(f"option.flag: {exc}") from exc
    if not present:
        return None
    try:
        return decoder(reader)
    except ValueError as exc:
        raise ValueError(f"option.value: {exc}") from exc