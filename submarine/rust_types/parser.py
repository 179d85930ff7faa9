"""A recursive-descent parser for Rust type expressions."""

from __future__ import annotations

from typing import List

from submarine.rust_types.types import Array, Base, RustType, Tuple


def _is_ident_char(char: str) -> bool:
    return char.isalpha() or "0" <= char <= "9" or char == "_"


class RustTypesParser:
    """Parses paths, generics, tuples and arrays such as ``Vec<[u8; 32]>``.

    Errors are raised as ``ValueError`` naming the offset where parsing failed.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def advance(self) -> str:
        """Return the current character and move past it; empty at the end."""
        if self._pos >= len(self._text):
            return ""
        char = self._text[self._pos]
        self._pos += 1
        return char

    def peek(self) -> str:
        """Return the current character without moving; empty at the end."""
        if self._pos >= len(self._text):
            return ""
        return self._text[self._pos]

    def matches(self, prefix: str) -> bool:
        """Whether the remaining input starts with ``prefix``."""
        return self._text.startswith(prefix, self._pos)

    def consume(self, prefix: str) -> bool:
        """Move past ``prefix`` if the remaining input starts with it."""
        if self.matches(prefix):
            self._pos += len(prefix)
            return True
        return False

    def skip(self, n: int) -> None:
        """Move ``n`` characters ahead, stopping at the end of the input."""
        self._pos = min(self._pos + n, len(self._text))

    def parse(self) -> RustType:
        """Parse one type from the current position."""
        self._skip_whitespace()
        return self._parse_type()

    def _skip_whitespace(self) -> None:
        while self._pos < len(self._text) and self._text[self._pos].isspace():
            self._pos += 1

    def _parse_ident(self) -> str:
        start = self._pos
        while self._pos < len(self._text) and _is_ident_char(self._text[self._pos]):
            self._pos += 1
        return self._text[start:self._pos]

    def _expect(self, char: str) -> None:
        if self.peek() != char:
            raise ValueError(f"expected '{char}' at position {self._pos}")
        self.advance()

    def _parse_type(self) -> RustType:
        self._skip_whitespace()

        if self.peek() == "(":
            return self._parse_tuple()
        if self.peek() == "[":
            return self._parse_array()

        ident = self._parse_ident()
        if not ident:
            raise ValueError(f"expected identifier at position {self._pos}")
        segments = [ident]
        self._skip_whitespace()

        while self.consume("::"):
            self._skip_whitespace()
            ident = self._parse_ident()
            if not ident:
                raise ValueError(
                    f"expected identifier after :: at position {self._pos}"
                )
            segments.append(ident)
            self._skip_whitespace()

        if self.peek() == "<":
            self.advance()
            self._skip_whitespace()
            params = self._parse_list()
            self._skip_whitespace()
            self._expect(">")
            return Base(segments, params)

        return Base(segments)

    def _parse_list(self) -> List[RustType]:
        items = [self._parse_type()]
        self._skip_whitespace()
        while self.peek() == ",":
            self.advance()
            self._skip_whitespace()
            items.append(self._parse_type())
            self._skip_whitespace()
        return items

    def _parse_tuple(self) -> RustType:
        self._expect("(")
        self._skip_whitespace()

        if self.peek() == ")":
            self.advance()
            return Tuple([])

        elements = self._parse_list()
        self._skip_whitespace()
        self._expect(")")
        return Tuple(elements)

    def _parse_array(self) -> RustType:
        self._expect("[")
        self._skip_whitespace()

        base = self._parse_type()
        self._skip_whitespace()
        self._expect(";")
        self._skip_whitespace()

        start = self._pos
        while self._pos < len(self._text) and "0" <= self._text[self._pos] <= "9":
            self._pos += 1
        if start == self._pos:
            raise ValueError(f"expected array length at position {self._pos}")
        length = int(self._text[start:self._pos])

        self._skip_whitespace()
        self._expect("]")
        return Array(base, length)