"""Route rovercli's log records to stderr through structlog.

stdout belongs to command output, so every log line goes to stderr:
human-readable console lines by default, one JSON object per line with
``--log-json``. Records from plain ``logging.getLogger(__name__)`` loggers
share the same processor chain as structlog loggers.
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.types import Processor

# Under --verbose only rovercli's own loggers drop to DEBUG.
_APP_LOGGER = "rovercli"
_HTTP_LOGGERS = ("httpx", "httpcore")


def _pre_chain(log_json: bool) -> list[Processor]:
    chain: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.StackInfoRenderer(),
    ]
    if log_json:
        # ConsoleRenderer prints tracebacks itself; JSON needs them as a string.
        chain += [structlog.processors.TimeStamper(fmt="iso"), structlog.processors.format_exc_info]
    return chain


def _stderr_handler(log_json: bool) -> logging.Handler:
    renderer: Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(log_json),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    return handler


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Install the stderr handler and set logger levels.

    Safe to call more than once; the root handler is replaced, not stacked.
    """
    structlog.configure(
        processors=[
            *_pre_chain(log_json),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers[:] = [_stderr_handler(log_json)]
    root.setLevel(logging.WARNING)

    levels = {_APP_LOGGER: logging.DEBUG if verbose else logging.WARNING}
    levels.update(dict.fromkeys(_HTTP_LOGGERS, logging.WARNING))
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)
