from pathlib import Path

import pytest

from lax.runner import EX_DATAERR, EX_OK, run_file

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


@pytest.mark.parametrize('name, output', [
    ('arithmetic.lax', ['3', '9', '2', '2', '3.5', '-10', 'inf']),
    ('strings.lax', ['"ab"', 'true', 'true', 'true', '9']),
    ('truthiness.lax', ['true', 'false', 'true', 'false', 'false', 'nil']),
    ('comments.lax', ['1', 'true']),
])
def test_program(capsys, name, output):
    assert run_file(str(EXAMPLES / name)) == EX_OK
    assert capsys.readouterr().out.splitlines() == output


def test_runtime_error_program(capsys):
    assert run_file(str(EXAMPLES / 'runtime_error.lax')) == EX_DATAERR
    captured = capsys.readouterr()
    assert captured.out == '"before"\n'
    assert captured.err.startswith('[line 2] Error at \'+\'')


def test_syntax_error_program(capsys):
    assert run_file(str(EXAMPLES / 'syntax_error.lax')) == EX_DATAERR
    captured = capsys.readouterr()
    assert captured.out == ''
    assert 'Expect expression.' in captured.err


def test_number_output_keeps_literal_digits(tmp_path, capsys):
    script = tmp_path / 'numbers.lax'
    script.write_text('print 100000000000000000000000;\nprint 0.0000001;\n', encoding='utf-8')
    assert run_file(str(script)) == EX_OK
    assert capsys.readouterr().out.splitlines() == ['100000000000000000000000', '0.0000001']
