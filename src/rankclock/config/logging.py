"""structlog setup for the rankclock CLI.

Library modules log through ``logging.getLogger(__name__)`` and never
install handlers themselves; the CLI calls :func:`configure_logging` once
per invocation.  Records go to stderr as console lines, or one JSON object
per line with ``--log-json``.  While ``--at`` or ``--locale`` is in effect
every record also carries ``frozen_at`` / ``locale``, so a verbose trace
shows which clock and locale produced each message.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from rankclock import clock
from rankclock.i18n.locale import bound_locale

PACKAGE_LOGGER = "rankclock"
# Dependencies whose DEBUG chatter stays hidden even with --verbose.
QUIET_LOGGERS = ("babel",)


def add_clock_context(_logger: Any, _method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """structlog processor: attach the pinned instant and bound locale."""
    frozen = clock.frozen_instant()
    if frozen is not None:
        event_dict.setdefault("frozen_at", frozen.isoformat())
    locale = bound_locale()
    if locale is not None:
        event_dict.setdefault("locale", locale)
    return event_dict


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route rankclock's stdlib and structlog records to stderr.

    Args:
        verbose: DEBUG for ``rankclock.*`` (parse fallbacks, locale
            resolution, config discovery); otherwise WARNING and above.
        log_json: JSON lines instead of console output.
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        add_clock_context,
    ]
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
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
