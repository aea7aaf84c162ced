"""Shared domain models used across span-core."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Dict, Optional, Tuple, Type

from .errors import InvalidSpanError


class IndexSpace(str, Enum):
    """Coordinate systems a span can be expressed in.

    ``BMP`` counts UTF-16 code units, so supplementary characters take two
    positions. ``UTF8`` counts code points of the UTF-8 text, one position per
    character however many bytes encode it. ``BYTES`` counts raw UTF-8 bytes.
    """

    BMP = "bmp"
    UTF8 = "utf8"
    BYTES = "bytes"


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open ``[start, end)`` interval of offsets in one index space."""

    start: int
    end: int

    space: ClassVar[Optional[IndexSpace]] = None

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < 0:
            raise InvalidSpanError(f"Span offsets must be non-negative: ({self.start}, {self.end})")
        if self.start > self.end:
            raise InvalidSpanError(f"Span start exceeds end: ({self.start}, {self.end})")

    def length(self) -> int:
        return self.end - self.start

    def is_empty(self) -> bool:
        return self.start == self.end

    def as_tuple(self) -> Tuple[int, int]:
        return self.start, self.end


class BMPSpan(Span):
    """Span measured in UTF-16 code units."""

    __slots__ = ()
    space = IndexSpace.BMP


class UTF8Span(Span):
    """Span measured in code points of the UTF-8 text."""

    __slots__ = ()
    space = IndexSpace.UTF8


class ByteSpan(Span):
    """Span measured in UTF-8 bytes."""

    __slots__ = ()
    space = IndexSpace.BYTES


_SPAN_TYPES: Dict[IndexSpace, Type[Span]] = {
    IndexSpace.BMP: BMPSpan,
    IndexSpace.UTF8: UTF8Span,
    IndexSpace.BYTES: ByteSpan,
}


def span_type(space: IndexSpace | str) -> Type[Span]:
    return _SPAN_TYPES[IndexSpace(space)]


def make_span(space: IndexSpace | str, start: int, end: int) -> Span:
    """Build the tagged span class for ``space``."""

    return span_type(space)(start, end)


def coerce_span(value: Span | Tuple[int, int], space: IndexSpace) -> Span:
    """Interpret ``value`` as a span in ``space``.

    Plain ``(start, end)`` pairs and untagged :class:`Span` instances are taken
    to be in ``space``. A tagged span from another space is rejected so that
    offsets from different encodings are never mixed silently.
    """

    if isinstance(value, Span):
        if value.space is not None and value.space is not space:
            raise InvalidSpanError(
                f"Expected a {space.value} span but got a {value.space.value} span: {value.as_tuple()}"
            )
        start, end = value.as_tuple()
    else:
        try:
            start, end = value
        except (TypeError, ValueError) as exc:
            raise InvalidSpanError(f"Span must be a (start, end) pair: {value!r}") from exc
    if not isinstance(start, int) or not isinstance(end, int) or isinstance(start, bool) or isinstance(end, bool):
        raise InvalidSpanError(f"Span offsets must be integers: {value!r}")
    return make_span(space, start, end)


@dataclass(frozen=True, slots=True)
class CodePointRun:
    """Widths of a single code point in every index space."""

    char: str
    utf8_width: int
    bmp_width: int

    @property
    def codepoint(self) -> int:
        return ord(self.char)

    @property
    def is_supplementary(self) -> bool:
        return self.bmp_width == 2

    def width(self, space: IndexSpace) -> int:
        if space is IndexSpace.BMP:
            return self.bmp_width
        if space is IndexSpace.BYTES:
            return self.utf8_width
        return 1


__all__ = [
    "IndexSpace",
    "Span",
    "BMPSpan",
    "UTF8Span",
    "ByteSpan",
    "CodePointRun",
    "span_type",
    "make_span",
    "coerce_span",
]
