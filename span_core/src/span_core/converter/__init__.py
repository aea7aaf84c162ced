"""Converter package exports."""
from .engine import (
    ALIGNMENT_POLICIES,
    ConverterConfig,
    IndexConverter,
    convert_indices_bmp_to_utf8,
    convert_indices_utf8_to_bmp,
    convert_span,
    convert_spans,
)
from .table import OffsetTable

__all__ = [
    "ALIGNMENT_POLICIES",
    "ConverterConfig",
    "IndexConverter",
    "OffsetTable",
    "convert_indices_bmp_to_utf8",
    "convert_indices_utf8_to_bmp",
    "convert_span",
    "convert_spans",
]
