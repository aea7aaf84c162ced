"""Utility exports."""
from .text import boundary_offsets, bmp_width, iter_code_points, text_length, to_text, utf8_width
from .validation import resolve_and_check_path

__all__ = [
    "boundary_offsets",
    "bmp_width",
    "iter_code_points",
    "text_length",
    "to_text",
    "utf8_width",
    "resolve_and_check_path",
]
