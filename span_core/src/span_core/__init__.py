"""Conversion of text spans between UTF-16, code-point and UTF-8 byte offsets."""
from .converter import (
    ConverterConfig,
    IndexConverter,
    OffsetTable,
    convert_indices_bmp_to_utf8,
    convert_indices_utf8_to_bmp,
    convert_span,
    convert_spans,
)
from .errors import InvalidSpanError, MalformedTextError, MisalignedOffsetError, SpanError
from .models import BMPSpan, ByteSpan, CodePointRun, IndexSpace, Span, UTF8Span
from .version import __version__

__all__ = [
    "BMPSpan",
    "ByteSpan",
    "CodePointRun",
    "ConverterConfig",
    "IndexConverter",
    "IndexSpace",
    "InvalidSpanError",
    "MalformedTextError",
    "MisalignedOffsetError",
    "OffsetTable",
    "Span",
    "SpanError",
    "UTF8Span",
    "convert_indices_bmp_to_utf8",
    "convert_indices_utf8_to_bmp",
    "convert_span",
    "convert_spans",
    "__version__",
]
