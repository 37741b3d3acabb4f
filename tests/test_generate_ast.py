from pathlib import Path

import pytest

import lax
from lax.tool.generate_ast import (
    EXPR_DEFINITIONS, STMT_DEFINITIONS, DefinitionError, define_ast, parse_definitions, render_ast,
)

PACKAGE_DIR = Path(lax.__file__).resolve().parent


def test_parse_definitions():
    nodes = parse_definitions(EXPR_DEFINITIONS)
    assert [n.name for n in nodes] == ['Binary', 'Grouping', 'Literal', 'Unary']
    binary = nodes[0]
    assert [(f.type_name, f.name) for f in binary.fields] == [('Expr', 'left'), ('Token', 'operator'), ('Expr', 'right')]
    literal = nodes[2]
    assert literal.fields[0].optional is True
    assert literal.fields[0].annotation == 'Optional[Value]'


def test_comments_are_ignored():
    nodes = parse_definitions('# statements\nPrint : Expr expression\n')
    assert [n.name for n in nodes] == ['Print']


def test_rendered_module_shape():
    source = render_ast('Expr', parse_definitions(EXPR_DEFINITIONS))
    assert 'class BinaryExpr(Expr):' in source
    assert '    def visit_literal_expr(self, expr: LiteralExpr) -> R:' in source
    assert '    value: Optional[Value]' in source
    compile(source, 'expr.py', 'exec')


def test_checked_in_modules_are_up_to_date():
    assert render_ast('Expr', parse_definitions(EXPR_DEFINITIONS)) == (PACKAGE_DIR / 'expr.py').read_text(encoding='utf-8')
    assert render_ast('Stmt', parse_definitions(STMT_DEFINITIONS)) == (PACKAGE_DIR / 'stmt.py').read_text(encoding='utf-8')


def test_define_ast_writes_file(tmp_path):
    path = define_ast(tmp_path, 'Stmt', STMT_DEFINITIONS)
    assert path == tmp_path / 'stmt.py'
    assert 'class PrintStmt(Stmt):' in path.read_text(encoding='utf-8')


@pytest.mark.parametrize('text', [
    'Binary Expr left',
    'Binary : Expr',
    'Print : Expr expression\nPrint : Expr expression',
])
def test_invalid_definitions(text):
    with pytest.raises(DefinitionError):
        parse_definitions(text)


def test_unknown_field_type():
    with pytest.raises(DefinitionError):
        render_ast('Expr', parse_definitions('Call : Callee callee'))
