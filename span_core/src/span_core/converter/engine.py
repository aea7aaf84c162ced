"""Single-pass conversion of spans between index spaces."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, cast

import structlog

from ..errors import InvalidSpanError, MisalignedOffsetError, SpanError
from ..models import BMPSpan, IndexSpace, Span, UTF8Span, coerce_span, make_span
from ..utils.text import iter_code_points, to_text
from .table import ALIGNMENT_POLICIES, Alignment, OffsetTable, check_alignment

logger = structlog.get_logger(__name__)

SpanLike = Span | Tuple[int, int]


@dataclass(slots=True)
class ConverterConfig:
    """Tunables for :class:`IndexConverter`.

    ``alignment`` decides what happens to an offset that lands inside a code
    point: ``"strict"`` rejects it, ``"floor"`` moves it to the start of that
    code point.
    """

    alignment: Alignment = "strict"

    def __post_init__(self) -> None:
        check_alignment(self.alignment)


class IndexConverter:
    """Map spans from one index space to another over a given text."""

    def __init__(self, config: ConverterConfig | None = None) -> None:
        self.config = config or ConverterConfig()

    def convert(
        self,
        text: str | bytes,
        span: SpanLike,
        source: IndexSpace | str,
        target: IndexSpace | str,
    ) -> Span:
        source = IndexSpace(source)
        target = IndexSpace(target)
        try:
            decoded = to_text(text)
            source_span = coerce_span(span, source)
            result = self._scan(decoded, source_span, source, target)
        except SpanError as exc:
            logger.warning(
                "converter.rejected",
                source=source.value,
                target=target.value,
                span=repr(span),
                error=str(exc),
            )
            raise
        logger.debug(
            "converter.convert",
            source=source.value,
            target=target.value,
            start=source_span.start,
            end=source_span.end,
            out_start=result.start,
            out_end=result.end,
        )
        return result

    def _scan(self, text: str, span: Span, source: IndexSpace, target: IndexSpace) -> Span:
        source_index = 0
        target_index = 0
        out_start: Optional[int] = None
        out_end: Optional[int] = None
        for run in iter_code_points(text):
            next_source = source_index + run.width(source)
            if out_start is None and span.start < next_source:
                out_start = self._resolve(span.start, source_index, next_source, target_index, source)
            if out_end is None and span.end < next_source:
                out_end = self._resolve(span.end, source_index, next_source, target_index, source)
            source_index = next_source
            target_index += run.width(target)

        # Bounds not matched inside the text can only sit at its end.
        for offset in (span.start, span.end):
            if offset > source_index:
                raise InvalidSpanError(
                    f"Offset {offset} exceeds text length {source_index} in {source.value} space"
                )
        if out_start is None:
            out_start = target_index
        if out_end is None:
            out_end = target_index
        return make_span(target, out_start, out_end)

    def _resolve(self, offset: int, run_start: int, run_end: int, target_index: int, space: IndexSpace) -> int:
        if offset != run_start and self.config.alignment == "strict":
            raise MisalignedOffsetError(
                f"Offset {offset} falls inside a code point spanning [{run_start}, {run_end}) in {space.value} space"
            )
        return target_index


def convert_span(
    text: str | bytes,
    span: SpanLike,
    source: IndexSpace | str,
    target: IndexSpace | str,
    *,
    converter: IndexConverter | None = None,
    config: ConverterConfig | None = None,
) -> Span:
    runner = converter or IndexConverter(config)
    if config is not None:
        runner.config = config
    return runner.convert(text, span, source, target)


def convert_indices_bmp_to_utf8(
    text: str | bytes, span: SpanLike, *, config: ConverterConfig | None = None
) -> UTF8Span:
    """Map a span of UTF-16 code units onto code-point positions of the UTF-8 text."""

    return cast(UTF8Span, convert_span(text, span, IndexSpace.BMP, IndexSpace.UTF8, config=config))


def convert_indices_utf8_to_bmp(
    text: str | bytes, span: SpanLike, *, config: ConverterConfig | None = None
) -> BMPSpan:
    """Inverse of :func:`convert_indices_bmp_to_utf8`."""

    return cast(BMPSpan, convert_span(text, span, IndexSpace.UTF8, IndexSpace.BMP, config=config))


def convert_spans(
    text: str | bytes,
    spans: Sequence[SpanLike],
    source: IndexSpace | str,
    target: IndexSpace | str,
    *,
    config: ConverterConfig | None = None,
) -> List[Span]:
    """Convert many spans over the same text with one precomputed table."""

    settings = config or ConverterConfig()
    source = IndexSpace(source)
    target = IndexSpace(target)
    try:
        table = OffsetTable.build(text, alignment=settings.alignment)
        converted = [table.convert(span, source, target) for span in spans]
    except SpanError as exc:
        logger.warning("converter.rejected", source=source.value, target=target.value, error=str(exc))
        raise
    logger.debug("converter.convert_spans", source=source.value, target=target.value, count=len(converted))
    return converted


__all__ = [
    "Alignment",
    "ALIGNMENT_POLICIES",
    "ConverterConfig",
    "IndexConverter",
    "convert_span",
    "convert_indices_bmp_to_utf8",
    "convert_indices_utf8_to_bmp",
    "convert_spans",
]
