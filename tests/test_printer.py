import pytest

from lax.expr import BinaryExpr, GroupingExpr, LiteralExpr, UnaryExpr
from lax.printer import AstPrinter
from lax.token import Token, TokenType


def test_ast_printer():
    expr = BinaryExpr(
        UnaryExpr(Token(TokenType.MINUS, '-', None, 1), LiteralExpr(123.0)),
        Token(TokenType.STAR, '*', None, 1),
        GroupingExpr(LiteralExpr(45.67)),
    )
    assert AstPrinter().print(expr) == '(* (- 123) (group 45.67))'


def test_literals():
    printer = AstPrinter()
    assert printer.print(LiteralExpr(None)) == 'nil'
    assert printer.print(LiteralExpr(True)) == 'true'
    assert printer.print(LiteralExpr('hi')) == '"hi"'
    assert printer.print(LiteralExpr(0.5)) == '0.5'
    assert printer.print(LiteralExpr(float('inf'))) == 'inf'


@pytest.mark.parametrize('value, text', [
    (1e23, '100000000000000000000000'),
    (1e21, '1000000000000000000000'),
    (0.0000001, '0.0000001'),
    (-0.0, '-0'),
    (3.0, '3'),
    (-2.5, '-2.5'),
    (0.1 + 0.2, '0.30000000000000004'),
])
def test_number_literals_print_shortest_positional_digits(value, text):
    assert AstPrinter().print(LiteralExpr(value)) == text
