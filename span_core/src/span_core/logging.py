"""Structured logging setup for span-core."""
from __future__ import annotations

import logging
import sys

import structlog

DEFAULT_LEVEL = "WARNING"


def configure_logging(level: str | None = None) -> None:
    """Route structlog through stdlib logging as JSON lines on stderr.

    Each record carries ``level``, ``ts``, ``msg`` and ``component``. Standard
    output is left to command results.
    """

    numeric_level = resolve_level(level)
    logging.basicConfig(
        level=numeric_level,
        handlers=[logging.StreamHandler(sys.stderr)],
        format="%(message)s",
        force=True,
    )
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.stdlib.add_log_level,
            _add_component,
            structlog.processors.EventRenamer("msg"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=False,
    )


def resolve_level(level: str | None) -> int:
    """Map a level name such as ``"debug"`` to its numeric value.

    Unknown names fall back to :data:`DEFAULT_LEVEL`.
    """

    value = logging.getLevelName((level or DEFAULT_LEVEL).upper())
    if isinstance(value, int):
        return value
    return logging.getLevelName(DEFAULT_LEVEL)


def _add_component(
    logger: structlog.BoundLoggerBase, _name: str, event_dict: dict[str, object]
) -> dict[str, object]:
    event_dict.setdefault("component", getattr(logger, "name", None) or "span_core")
    return event_dict


__all__ = ["DEFAULT_LEVEL", "configure_logging", "resolve_level"]
