"""Logger injection helpers for the configuration readers.

Readers never decide on their own whether to be chatty. Callers pass a
``logging.Logger`` (or nothing, to get the module default) and choose the
verbosity through ordinary logging configuration.
"""

from __future__ import annotations

import logging
import sys

_VERBOSE_NAME = "mapeo_core.verbose"
_SILENT_NAME = "mapeo_core.silent"


def get_logger(name: str, logger: logging.Logger | None = None) -> logging.Logger:
    if logger is not None:
        return logger
    return logging.getLogger(name)


def verbose_logger() -> logging.Logger:
    """Return a logger that writes every debug record to stdout."""

    log = logging.getLogger(_VERBOSE_NAME)
    log.setLevel(logging.DEBUG)
    log.propagate = False
    if not log.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("*DEBUG - %(name)s - %(message)s"))
        log.addHandler(handler)
    return log


def silent_logger() -> logging.Logger:
    """Return a logger that discards everything."""

    log = logging.getLogger(_SILENT_NAME)
    log.propagate = False
    log.disabled = True
    if not log.handlers:
        log.addHandler(logging.NullHandler())
    return log
