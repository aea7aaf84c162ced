"""Typed exceptions for span validation and text ingestion."""


class SpanError(ValueError):
    """Base class for span related errors."""


class InvalidSpanError(SpanError):
    """Raised when span coordinates are invalid or out of bounds."""


class MisalignedOffsetError(InvalidSpanError):
    """Raised when an offset falls strictly inside a code point."""


class MalformedTextError(SpanError):
    """Raised when text cannot be treated as well-formed UTF-8."""
