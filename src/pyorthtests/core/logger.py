# This file is part of the pyOrth project.
# Copyright pyOrth developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)

import logging

import pyorth.core as core
from pyorth.core.logger import dummy_logger, getLogger, log_levels, set_log_format
from pyorth.la.vector import Vector
from pyorthtests.base import runmodule


def test_logger():
    logger = Vector._logger
    for lvl in [getattr(logging, lvl) for lvl in ['WARN', 'ERROR', 'DEBUG', 'INFO']]:
        logger.setLevel(lvl)
        assert logger.isEnabledFor(lvl)
    for verb in ['warning', 'error', 'debug', 'info']:
        getattr(logger, verb)(f'{verb} -- logger {str(logger)}')


def test_empty_log_message():
    core.logger.getLogger('test').warning('')


def test_log_levels():
    logger = Vector._logger
    before_name = 'INFO'
    logger.setLevel(before_name)
    before = logger.level
    with log_levels({logger.name: 'DEBUG'}):
        assert 'DEBUG' == logging.getLevelName(logger.level)
        assert logger.level != before
    assert logger.level == before
    assert before_name == logging.getLevelName(logger.level)


def test_format(capsys, monkeypatch):
    monkeypatch.setenv('PYORTH_COLORS_DISABLE', '1')
    logger = getLogger('pyorthtests.core.logger.test_format', level='INFO')
    logger.info('hello')
    logger.warning('careful')
    logger.debug('not shown')
    lines = capsys.readouterr().err.splitlines()
    assert len(lines) == 2
    assert lines[0].endswith(' test_format: hello')
    assert lines[1].endswith(' |WARNING|test_format: careful')


def test_max_hierarchy_level(capsys, monkeypatch):
    monkeypatch.setenv('PYORTH_COLORS_DISABLE', '1')
    logger = getLogger('pyorthtests.core.logger.test_max_hierarchy_level', level='INFO')
    set_log_format(max_hierarchy_level=3)
    try:
        logger.info('hello')
    finally:
        set_log_format(max_hierarchy_level=1)
    assert capsys.readouterr().err.rstrip().endswith(' core.logger.test_max_hierarchy_level: hello')


def test_disable_logging(capsys):
    v = Vector([1.])
    v.disable_logging()
    assert v.logging_disabled
    assert v.logger is dummy_logger
    v.logger.warning('this is not printed')
    assert not v.logger.isEnabledFor(logging.ERROR)
    assert capsys.readouterr().err == ''
    v.enable_logging()
    assert not v.logging_disabled
    assert v.logger is Vector._logger


if __name__ == "__main__":
    runmodule(filename=__file__)
