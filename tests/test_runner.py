import io

import pytest

from lax.__main__ import main
from lax.runner import EX_DATAERR, EX_OK, EX_USAGE, run_expression, run_file, run_prompt, run_source


@pytest.mark.parametrize('source, output', [
    ('print 1 + 2;', '3\n'),
    ('print "x" == "x";', 'true\n'),
    ('print (1 + 2) * 3;', '9\n'),
])
def test_end_to_end(capsys, source, output):
    assert run_source(source) is True
    assert capsys.readouterr().out == output


def test_syntax_error_is_reported_once(capsys):
    assert run_source('print 1 +;') is False
    captured = capsys.readouterr()
    assert captured.out == ''
    assert captured.err == "[line 1] Error at ';': Expect expression.\n"


def test_every_lexical_error_is_reported(capsys):
    assert run_source('@\nprint 1;\n#') is False
    captured = capsys.readouterr()
    assert captured.out == ''
    assert captured.err.splitlines() == [
        '[line 1] Error: Unexpected character.',
        '[line 3] Error: Unexpected character.',
    ]


def test_error_at_end(capsys):
    assert run_source('print (1') is False
    assert capsys.readouterr().err == "[line 1] Error at end: Expect ')' after expression.\n"


def test_runtime_error_is_reported(capsys):
    assert run_source('print 1; print "a" + 1;') is False
    captured = capsys.readouterr()
    assert captured.out == '1\n'
    assert captured.err == '[line 1] Error at \'+\': Invalid operands for +: "a" and 1\n'


def test_recover_reports_every_syntax_error(capsys):
    assert run_source('print 1 +;\nprint 2;\nprint (3;', recover=True) is False
    captured = capsys.readouterr()
    assert captured.out == ''
    assert len(captured.err.splitlines()) == 2


def test_run_file(tmp_path, capsys):
    good = tmp_path / 'good.lax'
    good.write_text('print 40 + 2;\n', encoding='utf-8')
    bad = tmp_path / 'bad.lax'
    bad.write_text('print 1 +;\n', encoding='utf-8')
    assert run_file(str(good)) == EX_OK
    assert run_file(str(bad)) == EX_DATAERR
    assert run_file(str(tmp_path / 'missing.lax')) == EX_USAGE
    assert capsys.readouterr().out == '42\n'


def test_run_file_on_a_directory(tmp_path, capsys):
    assert run_file(str(tmp_path)) == EX_USAGE
    captured = capsys.readouterr()
    assert captured.out == ''
    assert captured.err.startswith(f"Error: cannot read {tmp_path}")


def test_run_file_with_invalid_utf8(tmp_path, capsys):
    script = tmp_path / 'binary.lax'
    script.write_bytes(b'print 1;\xff\n')
    assert run_file(str(script)) == EX_DATAERR
    captured = capsys.readouterr()
    assert captured.out == ''
    assert 'is not valid UTF-8' in captured.err


def test_prompt_runs_each_line_in_isolation(capsys):
    stdin = io.StringIO('print 1;\nprint "a" + 1;\nprint 2;\n\nprint 3;\n')
    run_prompt(stdin)
    captured = capsys.readouterr()
    assert captured.out == '> 1\n> > 2\n> '
    assert 'Invalid operands for +' in captured.err


def test_prompt_stops_at_end_of_input(capsys):
    run_prompt(io.StringIO('print "last";'))
    assert capsys.readouterr().out == '> "last"\n> '


def test_run_expression(capsys):
    assert run_expression('1 + 2 * 3') is True
    assert run_expression('1 + 2 * 3', print_ast=True) is True
    assert run_expression('1 +') is False
    captured = capsys.readouterr()
    assert captured.out == '7\n(+ 1 (* 2 3))\n'
    assert captured.err == 'Error: could not parse expression\n'


def test_main_exits_65_on_malformed_script(tmp_path, capsys):
    script = tmp_path / 'bad.lax'
    script.write_text('print 1 +;', encoding='utf-8')
    with pytest.raises(SystemExit) as excinfo:
        main([str(script)])
    assert excinfo.value.code == 65
    assert capsys.readouterr().out == ''


def test_main_print_ast(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(['--print-ast', '8 - 4 - 2'])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out == '(- (- 8 4) 2)\n'


def test_main_writes_debug_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    script = tmp_path / 'ok.lax'
    script.write_text('print 1;', encoding='utf-8')
    with pytest.raises(SystemExit) as excinfo:
        main(['-vv', str(script)])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out == '1\n'
    trace = (tmp_path / 'debug.txt').read_text(encoding='utf-8')
    assert 'scanned 4 tokens' in trace
    assert 'execute PrintStmt' in trace


def test_main_generates_ast(tmp_path, capsys):
    main(['--generate-ast', str(tmp_path)])
    assert (tmp_path / 'expr.py').exists()
    assert (tmp_path / 'stmt.py').exists()
    assert 'Generating ast...' in capsys.readouterr().out


def test_main_dumps_tokens_at_highest_verbosity(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    script = tmp_path / 'ok.lax'
    script.write_text('print 1;', encoding='utf-8')
    with pytest.raises(SystemExit) as excinfo:
        main(['-vvv', str(script)])
    assert excinfo.value.code == 0
    trace = (tmp_path / 'debug.txt').read_text(encoding='utf-8').splitlines()
    assert 'token PRINT print None' in trace
    assert 'token NUMBER 1 1.0' in trace
    assert 'token EOF  None' in trace
