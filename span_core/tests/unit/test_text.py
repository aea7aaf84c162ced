import pytest

from span_core.errors import MalformedTextError
from span_core.models import CodePointRun, IndexSpace
from span_core.utils.text import (
    bmp_width,
    boundary_offsets,
    iter_code_points,
    text_length,
    to_text,
    utf8_width,
)


@pytest.mark.parametrize(
    ("char", "expected_utf8", "expected_bmp"),
    [
        ("a", 1, 1),
        ("\u007f", 1, 1),
        ("é", 2, 1),
        ("\u07ff", 2, 1),
        ("€", 3, 1),
        ("\uffff", 3, 1),
        ("\U00010000", 4, 2),
        ("😁", 4, 2),
        ("\U0010ffff", 4, 2),
    ],
)
def test_code_point_widths(char: str, expected_utf8: int, expected_bmp: int) -> None:
    assert utf8_width(ord(char)) == expected_utf8 == len(char.encode("utf-8"))
    assert bmp_width(ord(char)) == expected_bmp == len(char.encode("utf-16-le")) // 2


def test_iter_code_points_reports_every_width() -> None:
    runs = list(iter_code_points("a😁"))
    assert runs == [
        CodePointRun(char="a", utf8_width=1, bmp_width=1),
        CodePointRun(char="😁", utf8_width=4, bmp_width=2),
    ]
    assert runs[1].codepoint == 0x1F601
    assert runs[1].is_supplementary
    assert [run.width(IndexSpace.UTF8) for run in runs] == [1, 1]


def test_boundary_offsets_per_space() -> None:
    text = "é€😁a"
    assert boundary_offsets(text, IndexSpace.UTF8) == [0, 1, 2, 3, 4]
    assert boundary_offsets(text, IndexSpace.BMP) == [0, 1, 2, 4, 5]
    assert boundary_offsets(text, IndexSpace.BYTES) == [0, 2, 5, 9, 10]


def test_text_length() -> None:
    text = "😁 Hello World."
    assert text_length(text, IndexSpace.UTF8) == 14
    assert text_length(text, IndexSpace.BMP) == 15
    assert text_length(text, IndexSpace.BYTES) == len(text.encode("utf-8"))


def test_to_text_decodes_bytes() -> None:
    assert to_text("😁".encode("utf-8")) == "😁"
    assert to_text(bytearray(b"abc")) == "abc"


@pytest.mark.parametrize("data", [b"\xff", b"\xe2\x82", b"\xed\xa0\x80", "x\udc00y"])
def test_to_text_rejects_malformed_input(data) -> None:
    with pytest.raises(MalformedTextError):
        to_text(data)


def test_to_text_rejects_other_types() -> None:
    with pytest.raises(TypeError):
        to_text(42)  # type: ignore[arg-type]
