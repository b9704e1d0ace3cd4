# This file is part of the pyOrth project.
# Copyright pyOrth developers and contributors. All rights reserved.
# License: BSD 2-Clause License (https://opensource.org/licenses/BSD-2-Clause)

import re

import pytest
from typer import Typer
from typer.testing import CliRunner

from pyorth.core.defaults import set_defaults
from pyorthdemos import gram_schmidt
from pyorthtests.base import runmodule

runner = CliRunner()

DEMO_ARGS = (
    [],
    ['--k', '0.1'],
    ['--k', '1e-5', '--k', '1e-10', '--compact'],
)


def test_perturbed_vectors():
    vectors = gram_schmidt.perturbed_vectors(0.5)
    assert [v.entries for v in vectors] == [(0.5, 0., 0., 0., 1.),
                                            (0., 0.5, 0., 0., 1.),
                                            (0., 0., 0.5, 0., 1.),
                                            (0., 0., 0., 0.5, 1.)]


def test_main(capsys):
    gram_schmidt.main(ks=[1e-1], compact=True)
    out = capsys.readouterr().out
    assert 'Classical Gram-Schmidt for k = 0.1' in out
    assert 'Modified Gram-Schmidt for k = 0.1' in out
    assert 'Frobenius norm of I - QtQ' in out
    assert '1e-01' in out


def test_main_uses_compact_print_default(capsys):
    path = 'pyorth.tools.pprint.format_array.compact_print'
    set_defaults({path: True})
    try:
        gram_schmidt.main(ks=[1e-1], compact=False)
    finally:
        set_defaults({path: False})
    lines = capsys.readouterr().out.splitlines()
    row = lines[lines.index('Classical Gram-Schmidt for k = 0.1') + 1]
    assert all(re.fullmatch(r'-?\d+\.\d{2}(e[+-]\d+)?', entry) for entry in row.split())


@pytest.mark.parametrize('args', DEMO_ARGS)
def test_demo(args):
    app = Typer()
    app.command()(gram_schmidt.main)
    result = runner.invoke(app, args, catch_exceptions=False)
    assert result.exit_code == 0
    assert result.output.count('Gram-Schmidt for k =') == 2 * (args.count('--k') or 3)


if __name__ == "__main__":
    runmodule(filename=__file__)
