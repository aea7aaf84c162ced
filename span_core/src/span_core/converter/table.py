"""Precomputed boundary tables for converting many spans over one text."""
from __future__ import annotations

from bisect import bisect_right
from typing import Dict, List, Literal, Mapping, Sequence, Tuple

from ..errors import InvalidSpanError, MisalignedOffsetError
from ..models import IndexSpace, Span, coerce_span, make_span
from ..utils.text import iter_code_points, to_text

Alignment = Literal["strict", "floor"]
ALIGNMENT_POLICIES: Tuple[str, ...] = ("strict", "floor")


def check_alignment(alignment: str) -> str:
    if alignment not in ALIGNMENT_POLICIES:
        raise ValueError(
            f"Unknown alignment policy: {alignment!r} (expected one of {', '.join(ALIGNMENT_POLICIES)})"
        )
    return alignment


class OffsetTable:
    """Code-point boundary offsets of a text in every index space.

    Entry ``i`` of each table is the offset of the ``i``-th code point, and
    the final entry is the text length, so the same index addresses the same
    boundary in every space.
    """

    __slots__ = ("_offsets", "_alignment")

    def __init__(self, offsets: Mapping[IndexSpace, Sequence[int]], alignment: Alignment = "strict") -> None:
        self._offsets: Dict[IndexSpace, Tuple[int, ...]] = {
            IndexSpace(space): tuple(values) for space, values in offsets.items()
        }
        self._alignment = check_alignment(alignment)

    @classmethod
    def build(cls, text: str | bytes, *, alignment: Alignment = "strict") -> "OffsetTable":
        decoded = to_text(text)
        offsets: Dict[IndexSpace, List[int]] = {space: [0] for space in IndexSpace}
        for run in iter_code_points(decoded):
            for space, values in offsets.items():
                values.append(values[-1] + run.width(space))
        return cls(offsets, alignment=alignment)

    @property
    def code_point_count(self) -> int:
        return len(self._offsets[IndexSpace.UTF8]) - 1

    def length(self, space: IndexSpace | str) -> int:
        return self._offsets[IndexSpace(space)][-1]

    def offsets(self, space: IndexSpace | str) -> Tuple[int, ...]:
        return self._offsets[IndexSpace(space)]

    def boundary_index(self, offset: int, space: IndexSpace | str) -> int:
        """Return which code-point boundary ``offset`` refers to in ``space``."""

        space = IndexSpace(space)
        table = self._offsets[space]
        if offset < 0 or offset > table[-1]:
            raise InvalidSpanError(f"Offset {offset} exceeds text length {table[-1]} in {space.value} space")
        index = bisect_right(table, offset) - 1
        if table[index] != offset and self._alignment == "strict":
            raise MisalignedOffsetError(
                f"Offset {offset} falls inside a code point spanning "
                f"[{table[index]}, {table[index + 1]}) in {space.value} space"
            )
        return index

    def convert(
        self,
        span: Span | Tuple[int, int],
        source: IndexSpace | str,
        target: IndexSpace | str,
    ) -> Span:
        source = IndexSpace(source)
        target = IndexSpace(target)
        source_span = coerce_span(span, source)
        start = self.boundary_index(source_span.start, source)
        end = self.boundary_index(source_span.end, source)
        targets = self._offsets[target]
        return make_span(target, targets[start], targets[end])


__all__ = ["Alignment", "ALIGNMENT_POLICIES", "OffsetTable", "check_alignment"]
