"""Structured logging for shamir-recover.

Library callers get records routed through the standard ``logging`` module
(silent below WARNING, never on stdout). The CLI replaces that with
:func:`configure_logging`, which renders every record on stderr as JSON or
as a console line.
"""
from __future__ import annotations

import logging
import sys
from typing import Any, Callable, List, MutableMapping

import structlog

EventDict = MutableMapping[str, Any]
Processor = Callable[[Any, str, EventDict], Any]

_LEVELS = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def install_library_defaults() -> None:
    """Send log events to stdlib ``logging`` unless structlog is already set up."""

    if structlog.is_configured():
        return
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            _tag_component,
            structlog.processors.KeyValueRenderer(key_order=["event", "component"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(level: str | None = None, fmt: str = "json") -> None:
    """Render events on stderr at ``level`` and above.

    ``fmt="json"`` emits one object per line with ``level``, ``ts``, ``msg``
    and ``component`` keys; ``fmt="console"`` emits human readable lines.
    """

    threshold = _LEVELS.get((level or "warning").lower(), logging.WARNING)
    logging.basicConfig(
        level=threshold,
        handlers=[logging.StreamHandler(sys.stderr)],
        format="%(message)s",
        force=True,
    )

    processors: List[Processor] = [
        structlog.processors.TimeStamper(fmt="iso", key="ts"),
        structlog.stdlib.add_log_level,
        _tag_component,
        structlog.processors.format_exc_info,
    ]
    if fmt == "console":
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    else:
        processors.extend([_event_as_msg, structlog.processors.JSONRenderer()])

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(threshold),
        cache_logger_on_first_use=True,
    )


def _tag_component(logger: Any, _name: str, event_dict: EventDict) -> EventDict:
    event_dict.setdefault("component", getattr(logger, "name", None) or "shamir_recover")
    return event_dict


def _event_as_msg(_logger: Any, _name: str, event_dict: EventDict) -> EventDict:
    if "msg" not in event_dict:
        event_dict["msg"] = event_dict.pop("event", "")
    return event_dict


__all__ = ["configure_logging", "install_library_defaults"]
