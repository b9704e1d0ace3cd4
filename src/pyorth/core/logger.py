# This file is part of the pyOrth project.
# Copyright pyOrth developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)

"""This module contains pyOrth's logging facilities.

pyOrth's logging facilities are based on the :mod:`logging` module of the
Python standard library. To obtain a new logger object use :func:`getLogger`.
Logging can be configured via the :func:`set_log_format` and
:func:`set_log_levels` methods.
"""

import logging
import os
import time
from contextlib import contextmanager

from pyorth.core.defaults import defaults

RESET_SEQ = '\033[0m'
BOLD_SEQ = '\033[1m'
LEVEL_COLOR_SEQS = {
    'DEBUG':    '\033[1;34m',
    'WARNING':  '\033[1;33m',
    'ERROR':    '\033[1;31m',
    'CRITICAL': '\033[1;35m',
}

MAX_HIERARCHY_LEVEL = 1

start_time = time.perf_counter()


def _terminal_has_colors():
    if int(os.environ.get('PYORTH_COLORS_DISABLE', 0)) == 1:
        return False
    try:
        import curses
        curses.setupterm()
        return curses.tigetnum('colors') > 1
    except Exception:
        return False


class ColoredFormatter(logging.Formatter):
    """A logging.Formatter that colors loglevel keyword output.

    Each record is prefixed by the time elapsed since pyOrth has been imported
    and by the shortened logger name. Coloring can be disabled by setting the
    `PYORTH_COLORS_DISABLE` environment variable to `1`.
    """

    def __init__(self):
        super().__init__()
        self.use_color = _terminal_has_colors()

    def format(self, record):
        msg = super().format(record)  # call base class to support exception formatting

        minutes, seconds = divmod(int(time.perf_counter() - start_time), 60)
        hours, minutes = divmod(minutes, 60)
        timestamp = f'{hours:02}:{minutes:02}:{seconds:02}' if hours else f'{minutes:02}:{seconds:02}'

        tokens = record.name.split('.')
        path = '.'.join(tokens[1:MAX_HIERARCHY_LEVEL] + [tokens[-1]])
        levelname = '' if record.levelname == 'INFO' else f'|{record.levelname}|'
        if self.use_color:
            path = BOLD_SEQ + path + RESET_SEQ
            if levelname:
                levelname = LEVEL_COLOR_SEQS.get(record.levelname, BOLD_SEQ) + levelname + RESET_SEQ

        return f'{timestamp} {levelname}{path}: {msg}'


@defaults('filename')
def default_handler(filename=None):
    handlers = [logging.StreamHandler()]
    if filename:
        handlers.append(logging.FileHandler(filename))
    for handler in handlers:
        handler.setFormatter(ColoredFormatter())
    return handlers


def getLogger(module, level=None, filename=None):
    """Get the logger of the respective module for pyOrth's logging facility.

    Parameters
    ----------
    module
        Name of the module.
    level
        If set, `logger.setLevel(level)` is called (see
        :meth:`~logging.Logger.setLevel`).
    filename
        If not empty, path of a file where everything logged will be
        written to in addition to stderr.
    """
    module = 'pyorth' if module == '__main__' else module
    logger = logging.getLogger(module)
    logger.handlers = default_handler(filename)
    logger.propagate = False
    if level:
        logger.setLevel(level)
    return logger


class DummyLogger:
    """Logger replacement which discards all messages.

    Used by :meth:`~pyorth.core.base.BasicObject.disable_logging`.
    """

    __slots__ = []

    def nop(self, *args, **kwargs):
        return None

    debug = info = warning = error = critical = log = exception = nop

    def isEnabledFor(self, lvl):
        return False


dummy_logger = DummyLogger()


@defaults('levels')
def set_log_levels(levels=None):
    """Set log levels for pyOrth's logging facility.

    Parameters
    ----------
    levels
        Dict of log levels. Keys are names of loggers (see :func:`logging.getLogger`),
        values are the log levels to set for the loggers of the given names
        (see :meth:`~logging.Logger.setLevel`).
    """
    for k, v in (levels or {'pyorth': 'INFO'}).items():
        getLogger(k).setLevel(v)


@defaults('max_hierarchy_level')
def set_log_format(max_hierarchy_level=1):
    """Set the output format of pyOrth's logging facility.

    Parameters
    ----------
    max_hierarchy_level
        The number of components of the loggers name which are printed.
        (The first component is always stripped, the last component always
        preserved.)
    """
    global MAX_HIERARCHY_LEVEL
    MAX_HIERARCHY_LEVEL = max_hierarchy_level


@contextmanager
def log_levels(level_mapping):
    """Change levels for given loggers on entry and reset to before state on exit.

    Parameters
    ----------
    level_mapping
        a dict of logger name -> level name
    """
    previous = {name: getLogger(name).level for name in level_mapping}
    for name, level in level_mapping.items():
        getLogger(name).setLevel(level)
    try:
        yield
    finally:
        for name, level in previous.items():
            getLogger(name).setLevel(level)
