"""Logging setup for hosts of the scoring engine.

Library modules only create loggers (``logging.getLogger(__name__)``); the
process that embeds them (the trace-score CLI, an app backend, a notebook)
decides where records go by calling configure_logging() once.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s %(levelname)-8s [%(name)s] %(message)s'
DATE_FORMAT = '%H:%M:%S'


def configure_logging(level: str = 'INFO', log_file: str | None = None) -> None:
    """Route trace_lib log records to stderr and optionally a file.

    Calling it again replaces the handlers installed by the previous call,
    so a CLI can reconfigure after parsing its arguments.

    Args:
        level: Level name such as 'DEBUG' or 'warning'. Unknown names fall
            back to INFO.
        log_file: Extra destination for the same records, appended to.

    Example:
        Per-attempt component values are logged at DEBUG::

            configure_logging(level='DEBUG', log_file='attempts.log')
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for old in list(root_logger.handlers):
        root_logger.removeHandler(old)
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    logger.debug("Scoring logs at %s%s", logging.getLevelName(log_level),
                 f", copied to {log_file}" if log_file else '')
