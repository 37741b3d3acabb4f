"""Tree-walking evaluator for the Lax language.

The interpreter implements both visitor interfaces: statements are executed
in order for their side effects, and expressions are evaluated bottom-up to
runtime values (see ``lax.types``). Execution stops at the first failing
statement; output already printed by earlier statements stands.
"""

from __future__ import annotations

import math
import sys
from typing import Callable, Dict, List, Optional, TextIO

from .errors import LaxRuntimeError
from .expr import BinaryExpr, Expr, ExprVisitor, GroupingExpr, LiteralExpr, UnaryExpr
from .stmt import ExpressionStmt, PrintStmt, Stmt, StmtVisitor
from .token import Token, TokenType
from .types import Value, is_number, to_string


NESTING_ERROR = 'Expression nested too deeply.'


def divide(a: float, b: float) -> float:
    """IEEE 754 division: a zero divisor yields an infinity or NaN."""
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def parse_number(text: str) -> Optional[float]:
    # float() would also accept whitespace, digit separators and non-ASCII digits
    if not text.isascii() or text != text.strip() or '_' in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


ARITHMETIC: Dict[TokenType, Callable[[float, float], float]] = {
    TokenType.MINUS: lambda a, b: a - b,
    TokenType.STAR: lambda a, b: a * b,
    TokenType.SLASH: divide,
}

RELATIONAL: Dict[TokenType, Callable[[float, float], bool]] = {
    TokenType.GREATER: lambda a, b: a > b,
    TokenType.GREATER_EQUAL: lambda a, b: a >= b,
    TokenType.LESS: lambda a, b: a < b,
    TokenType.LESS_EQUAL: lambda a, b: a <= b,
}


class Interpreter(ExprVisitor[Value], StmtVisitor[None]):
    """Executes Lax statements and evaluates expressions."""
    def __init__(self, debug_level: int = 0, debug_fp: Optional[TextIO] = None, out: Optional[TextIO] = None):
        self.debug_level = debug_level
        self.debug_fp = debug_fp
        self.out = out
        # line of the operator being evaluated, for faults without a token
        self.line = 0

    def debug(self, msg: str):
        if self.debug_level > 0:
            if self.debug_fp:
                self.debug_fp.write(msg + '\n')
                self.debug_fp.flush()
            else:
                print(msg, file=sys.stderr)

    # Public API
    def interpret(self, statements: List[Stmt]) -> None:
        for stmt in statements:
            self.execute(stmt)

    def interpret_expression(self, expr: Expr) -> Value:
        """Evaluate a single expression and print its value."""
        value = self.guarded(expr.accept)
        print(to_string(value), file=self.out)
        return value

    def execute(self, stmt: Stmt) -> None:
        if self.debug_level >= 1:
            self.debug(f"execute {type(stmt).__name__}")
        self.guarded(stmt.accept)

    def evaluate(self, expr: Expr) -> Value:
        value = expr.accept(self)
        if self.debug_level >= 3:
            self.debug(f"evaluate {type(expr).__name__} -> {to_string(value)}")
        return value

    def guarded(self, accept: Callable[['Interpreter'], Value]) -> Value:
        try:
            return accept(self)
        except RecursionError:
            raise LaxRuntimeError(self.line, NESTING_ERROR) from None

    # Statements
    def visit_expression_stmt(self, stmt: ExpressionStmt) -> None:
        self.evaluate(stmt.expression)

    def visit_print_stmt(self, stmt: PrintStmt) -> None:
        value = self.evaluate(stmt.expression)
        if self.debug_level >= 2:
            self.debug(f"print {to_string(value)}")
        print(to_string(value), file=self.out)

    # Expressions
    def visit_literal_expr(self, expr: LiteralExpr) -> Value:
        return expr.value

    def visit_grouping_expr(self, expr: GroupingExpr) -> Value:
        return self.evaluate(expr.expression)

    def visit_unary_expr(self, expr: UnaryExpr) -> Value:
        right = self.evaluate(expr.right)
        operator = expr.operator
        self.line = operator.line
        if operator.type == TokenType.MINUS:
            # non-numbers negate to nil rather than failing
            if is_number(right):
                return -right
            return None
        if operator.type in (TokenType.BANG, TokenType.NOT):
            return not self.is_truthy(right)
        if operator.type == TokenType.PLUS:
            if isinstance(right, str):
                number = parse_number(right)
                if number is None:
                    raise LaxRuntimeError.at(operator, f"Could not parse {right} to a number")
                return number
            raise LaxRuntimeError.at(operator, f"Invalid operand for +: {to_string(right)}")
        raise LaxRuntimeError.at(operator, f"Invalid unary operator: {operator.lexeme}")

    def visit_binary_expr(self, expr: BinaryExpr) -> Value:
        left = self.evaluate(expr.left)
        right = self.evaluate(expr.right)
        self.line = expr.operator.line
        return self.apply_binary_op(expr.operator, left, right)

    def apply_binary_op(self, operator: Token, a: Value, b: Value) -> Value:
        op = operator.type
        if op == TokenType.PLUS:
            if is_number(a) and is_number(b):
                return a + b
            if isinstance(a, str) and isinstance(b, str):
                return a + b
            raise self.invalid_operands(operator, a, b)
        if op in ARITHMETIC:
            if is_number(a) and is_number(b):
                return ARITHMETIC[op](a, b)
            raise self.invalid_operands(operator, a, b)
        if op in RELATIONAL:
            if is_number(a) and is_number(b):
                return RELATIONAL[op](a, b)
            raise self.invalid_operands(operator, a, b)
        if op in (TokenType.EQUAL_EQUAL, TokenType.BANG_EQUAL):
            if not self.comparable(a, b):
                raise self.invalid_operands(operator, a, b)
            return (a == b) if op == TokenType.EQUAL_EQUAL else (a != b)
        if op in (TokenType.IN, TokenType.BANG_IN):
            if isinstance(a, str) and isinstance(b, str):
                return (a in b) if op == TokenType.IN else (a not in b)
            raise self.invalid_operands(operator, a, b)
        raise LaxRuntimeError.at(operator, f"Invalid operator: {operator.lexeme}")

    def comparable(self, a: Value, b: Value) -> bool:
        """Equality is only defined between two numbers, strings or booleans."""
        if is_number(a) and is_number(b):
            return True
        if isinstance(a, str) and isinstance(b, str):
            return True
        return isinstance(a, bool) and isinstance(b, bool)

    def invalid_operands(self, operator: Token, a: Value, b: Value) -> LaxRuntimeError:
        return LaxRuntimeError.at(
            operator, f"Invalid operands for {operator.lexeme}: {to_string(a)} and {to_string(b)}")

    def is_truthy(self, value: Value) -> bool:
        # an empty string is truthy and any other string is falsey
        if value is None:
            return False
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return len(value) == 0
        return True
