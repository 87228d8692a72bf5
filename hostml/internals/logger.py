#
# SPDX-FileCopyrightText: Copyright (c) 2020-2025, NVIDIA CORPORATION.
# SPDX-License-Identifier: Apache-2.0
#

"""
Library logger.

All hostml messages go through a single ``logging`` logger named ``hostml``
that writes to whatever ``sys.stdout`` is at emit time. Levels are exposed as
``level_enum`` and map onto the estimator ``verbose`` hyperparameter:

=========  ==================
verbose    level
=========  ==================
0          ``level_enum.off``
1          ``level_enum.critical``
2          ``level_enum.error``
3          ``level_enum.warn``
4, False   ``level_enum.info``
5, True    ``level_enum.debug``
6          ``level_enum.trace``
=========  ==================
"""

import logging
import sys
from enum import IntEnum

__all__ = [
    "level_enum",
    "trace",
    "debug",
    "info",
    "warn",
    "error",
    "critical",
    "set_level",
    "get_level",
    "should_log_for",
    "set_pattern",
]


class level_enum(IntEnum):
    trace = 0
    debug = 1
    info = 2
    warn = 3
    error = 4
    critical = 5
    off = 6


_TRACE = 5
logging.addLevelName(_TRACE, "TRACE")

_to_logging = {
    level_enum.trace: _TRACE,
    level_enum.debug: logging.DEBUG,
    level_enum.info: logging.INFO,
    level_enum.warn: logging.WARNING,
    level_enum.error: logging.ERROR,
    level_enum.critical: logging.CRITICAL,
    level_enum.off: logging.CRITICAL + 10,
}
_from_logging = {v: k for k, v in _to_logging.items()}

_DEFAULT_PATTERN = "[%(levelname)s] [%(asctime)s] %(message)s"


class _StdoutHandler(logging.StreamHandler):
    """StreamHandler bound to the current ``sys.stdout`` rather than the one
    present at import, so redirected output is honored."""

    @property
    def stream(self):
        return sys.stdout

    @stream.setter
    def stream(self, value):
        pass


_logger = logging.getLogger("hostml")
_handler = _StdoutHandler()
_handler.setFormatter(logging.Formatter(_DEFAULT_PATTERN))
_logger.addHandler(_handler)
_logger.propagate = False
_logger.setLevel(_to_logging[level_enum.warn])


def _verbose_to_level(verbose):
    """Convert a ``verbose`` hyperparameter into a ``level_enum``."""
    if verbose is True:
        return level_enum.debug
    elif verbose is False:
        return level_enum.info
    return level_enum(level_enum.off - int(verbose))


def _verbose_from_level(level):
    """Convert a ``level_enum`` back into a numeric ``verbose`` value."""
    return int(level_enum.off - level_enum(level))


def get_level():
    """Return the current library log level as a ``level_enum``."""
    return _from_logging[_logger.level]


def should_log_for(level):
    """Whether a message at ``level`` would currently be emitted."""
    return _logger.isEnabledFor(_to_logging[level_enum(level)])


class set_level:
    """Set the library log level.

    Can be called directly, in which case the new level stays in effect, or
    used as a context manager, in which case the previous level is restored
    on exit.

    Examples
    --------
    >>> from hostml.internals import logger
    >>> with logger.set_level(logger.level_enum.debug):
    ...     logger.debug("shown")
    """

    def __init__(self, level):
        self._prev = get_level()
        _logger.setLevel(_to_logging[level_enum(level)])

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        _logger.setLevel(_to_logging[self._prev])


class set_pattern:
    """Set the ``logging`` format string used by the library handler.

    Like ``set_level`` it may be used as a context manager to restore the
    previous pattern.
    """

    def __init__(self, pattern):
        self._prev = _handler.formatter
        _handler.setFormatter(logging.Formatter(pattern))

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        _handler.setFormatter(self._prev)


def trace(msg, *args):
    _logger.log(_TRACE, msg, *args)


def debug(msg, *args):
    _logger.debug(msg, *args)


def info(msg, *args):
    _logger.info(msg, *args)


def warn(msg, *args):
    _logger.warning(msg, *args)


def error(msg, *args):
    _logger.error(msg, *args)


def critical(msg, *args):
    _logger.critical(msg, *args)
