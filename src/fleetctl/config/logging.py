"""Logging setup: stdlib loggers rendered by structlog.

Modules log with ``logging.getLogger(__name__)``.  Every record goes
through one root handler on stderr whose formatter is structlog's
``ProcessorFormatter``: a console renderer for people, JSON lines with
``--log-json``.
"""

from __future__ import annotations

import logging
import sys

import structlog


def _fleet_level(*, verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.WARNING


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_json: bool = False,
) -> None:
    """(Re)configure logging for this process.

    Safe to call more than once; the root handler is replaced, not added.

    Args:
        verbose: Show the ``fleetctl`` loggers down to DEBUG, which
            includes the INFO line for every service operation.
        quiet: Only ERROR and above.  *verbose* wins if both are set.
        log_json: Render JSON lines instead of console text.
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger("fleetctl").setLevel(_fleet_level(verbose=verbose, quiet=quiet))


def bind_log_context(**values: object) -> None:
    """Add *values* to every log line from the current context.

    ``fleetctl shell`` binds a session id this way.
    """
    structlog.contextvars.bind_contextvars(**values)


def clear_log_context() -> None:
    structlog.contextvars.clear_contextvars()
