import json
import logging

import pytest
import structlog

from span_core.logging import configure_logging, resolve_level


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


@pytest.mark.parametrize(
    ("name", "expected"),
    [("debug", logging.DEBUG), ("INFO", logging.INFO), (None, logging.WARNING), ("verbose", logging.WARNING)],
)
def test_resolve_level(name, expected):
    assert resolve_level(name) == expected


def test_configure_logging_emits_json_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("info")
    structlog.get_logger("span_core.converter.engine").info("converter.convert", start=0, end=1)
    structlog.get_logger("span_core.cli.main").debug("cli.convert")
    captured = capsys.readouterr()
    assert captured.out == ""
    lines = captured.err.strip().splitlines()
    assert len(lines) == 1
    record = json.loads(lines[0])
    assert record["msg"] == "converter.convert"
    assert record["level"] == "info"
    assert record["component"] == "span_core.converter.engine"
    assert record["start"] == 0
    assert "ts" in record
