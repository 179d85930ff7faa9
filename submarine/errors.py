"""Errors that carry the path to the place where decoding or conversion failed."""

from __future__ import annotations

from typing import Iterable, Union

PathSegment = Union[str, int]


class SpanError(Exception):
    """An error with a path of segments leading to where it happened.

    Segments are added from the innermost place outwards, so each call to
    :meth:`with_path` puts its segment in front of the ones already there.
    """

    def __init__(self, message: str, path: Iterable[PathSegment] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.path: list[PathSegment] = list(path)

    def with_path(self, segment: PathSegment) -> "SpanError":
        """Prepend a path segment and return the same error."""
        self.path.insert(0, segment)
        return self

    def path_text(self) -> str:
        """The path as dot-separated text, empty when there is no path."""
        return ".".join(str(segment) for segment in self.path)

    def __str__(self) -> str:
        if not self.path:
            return self.message
        return f"{self.path_text()}: {self.message}"