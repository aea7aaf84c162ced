"""Text ingestion and code-point width helpers shared across modules."""
from __future__ import annotations

from typing import Iterator, List

import regex

from ..errors import MalformedTextError
from ..models import CodePointRun, IndexSpace

_SURROGATE = regex.compile(r"[\uD800-\uDFFF]")


def to_text(data: str | bytes) -> str:
    """Decode ``data`` into a string of Unicode scalar values.

    Bytes must be valid UTF-8 and strings must not carry lone surrogates,
    which have no UTF-8 encoding.
    """

    if isinstance(data, (bytes, bytearray, memoryview)):
        try:
            return bytes(data).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedTextError(
                f"Text is not valid UTF-8 at byte {exc.start}: {exc.reason}"
            ) from exc
    if not isinstance(data, str):
        raise TypeError(f"Expected str or bytes, got {type(data).__name__}")
    match = _SURROGATE.search(data)
    if match is not None:
        raise MalformedTextError(f"Text contains a lone surrogate at index {match.start()}")
    return data


def bmp_width(codepoint: int) -> int:
    return 2 if codepoint > 0xFFFF else 1


def utf8_width(codepoint: int) -> int:
    if codepoint < 0x80:
        return 1
    if codepoint < 0x800:
        return 2
    if codepoint < 0x10000:
        return 3
    return 4


def iter_code_points(text: str) -> Iterator[CodePointRun]:
    """Yield the widths of each code point of an already decoded ``text``."""

    for char in text:
        codepoint = ord(char)
        yield CodePointRun(char=char, utf8_width=utf8_width(codepoint), bmp_width=bmp_width(codepoint))


def text_length(text: str, space: IndexSpace) -> int:
    if space is IndexSpace.UTF8:
        return len(text)
    return sum(run.width(space) for run in iter_code_points(text))


def boundary_offsets(text: str, space: IndexSpace) -> List[int]:
    """Return the offset of every code-point boundary of ``text`` in ``space``.

    The list starts at ``0`` and ends with the total length, so it holds one
    more entry than ``text`` has code points.
    """

    offsets: List[int] = [0]
    index = 0
    for run in iter_code_points(text):
        index += run.width(space)
        offsets.append(index)
    return offsets


__all__ = [
    "to_text",
    "bmp_width",
    "utf8_width",
    "iter_code_points",
    "text_length",
    "boundary_offsets",
]
