"""Recursive-descent parser for the Lax language.

Grammar, lowest to highest binding::

    program    -> statement* EOF
    statement  -> "print" expression ";" | expression ";"
    expression -> equality
    equality   -> comparison ( ( "==" | "!=" ) comparison )*
    comparison -> term ( ( ">" | ">=" | "<" | "<=" | "in" | "!in" ) term )*
    term       -> factor ( ( "+" | "-" ) factor )*
    factor     -> unary ( ( "*" | "/" ) unary )*
    unary      -> ( "!" | "-" | "not" | "+" ) unary | primary
    primary    -> "true" | "false" | "nil" | NUMBER | STRING
                | "(" expression ")"

Each binary level loops while its operator matches, folding repeated
operators into left-nested ``BinaryExpr`` nodes.

By default parsing stops at the first syntax error. With ``recover=True``
the parser records the error, skips ahead to the next statement boundary
and carries on, so that a single pass reports every syntax error.
"""

from __future__ import annotations

from typing import List, Optional

from .errors import ParseError
from .expr import BinaryExpr, Expr, GroupingExpr, LiteralExpr, UnaryExpr
from .stmt import ExpressionStmt, PrintStmt, Stmt
from .token import Token, TokenType


EQUALITY_OPS = (TokenType.EQUAL_EQUAL, TokenType.BANG_EQUAL)
COMPARISON_OPS = (
    TokenType.GREATER, TokenType.GREATER_EQUAL,
    TokenType.LESS, TokenType.LESS_EQUAL,
    TokenType.IN, TokenType.BANG_IN,
)
TERM_OPS = (TokenType.MINUS, TokenType.PLUS)
FACTOR_OPS = (TokenType.STAR, TokenType.SLASH)
UNARY_OPS = (TokenType.BANG, TokenType.MINUS, TokenType.NOT, TokenType.PLUS)

# tokens that can begin a new statement, used when resynchronizing
STATEMENT_KEYWORDS = (
    TokenType.CLASS, TokenType.FUN, TokenType.VAR, TokenType.VAL,
    TokenType.FOR, TokenType.IF, TokenType.WHILE, TokenType.LOOP,
    TokenType.PRINT, TokenType.RETURN,
)

NESTING_ERROR = 'Expression nested too deeply.'


class Parser:
    def __init__(self, tokens: List[Token], recover: bool = False):
        self.tokens = tokens
        self.current = 0
        self.recover = recover
        self.errors: List[ParseError] = []

    # Entry points
    def parse(self) -> List[Stmt]:
        """Parse the whole token list into statements.

        Raises the first ParseError unless the parser was built with
        ``recover=True``, in which case errors are collected in
        ``self.errors`` and the statements that parsed are returned.
        """
        statements: List[Stmt] = []
        while not self.is_at_end():
            try:
                statements.append(self.statement())
            except ParseError as e:
                if not self.recover:
                    raise
                self.errors.append(e)
                self.synchronize()
        return statements

    def parse_expression(self) -> Optional[Expr]:
        """Parse a single expression spanning the whole input, or return None."""
        try:
            expr = self.expression()
            if not self.is_at_end():
                raise self.error(self.peek(), 'Expect end of expression.')
            return expr
        except (ParseError, RecursionError):
            return None

    # Statements
    def statement(self) -> Stmt:
        try:
            if self.match(TokenType.PRINT):
                return self.print_statement()
            return self.expression_statement()
        except RecursionError:
            raise self.error(self.peek(), NESTING_ERROR) from None

    def print_statement(self) -> Stmt:
        value = self.expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after value.")
        return PrintStmt(value)

    def expression_statement(self) -> Stmt:
        expr = self.expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after expression.")
        return ExpressionStmt(expr)

    # Expressions
    def expression(self) -> Expr:
        return self.equality()

    def binary(self, operators, operand) -> Expr:
        expr = operand()
        while self.match(*operators):
            operator = self.previous()
            right = operand()
            expr = BinaryExpr(expr, operator, right)
        return expr

    def equality(self) -> Expr:
        return self.binary(EQUALITY_OPS, self.comparison)

    def comparison(self) -> Expr:
        return self.binary(COMPARISON_OPS, self.term)

    def term(self) -> Expr:
        return self.binary(TERM_OPS, self.factor)

    def factor(self) -> Expr:
        return self.binary(FACTOR_OPS, self.unary)

    def unary(self) -> Expr:
        if self.match(*UNARY_OPS):
            operator = self.previous()
            right = self.unary()
            return UnaryExpr(operator, right)
        return self.primary()

    def primary(self) -> Expr:
        if self.match(TokenType.FALSE):
            return LiteralExpr(False)
        if self.match(TokenType.TRUE):
            return LiteralExpr(True)
        if self.match(TokenType.NIL):
            return LiteralExpr(None)
        if self.match(TokenType.NUMBER, TokenType.STRING):
            return LiteralExpr(self.previous().literal)
        if self.match(TokenType.LEFT_PAREN):
            expr = self.expression()
            self.consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
            return GroupingExpr(expr)
        raise self.error(self.peek(), 'Expect expression.')

    # Error recovery
    def synchronize(self) -> None:
        """Discard tokens until the start of the next statement."""
        self.advance()
        while not self.is_at_end():
            if self.previous().is_type(TokenType.SEMICOLON):
                return
            if self.peek().type in STATEMENT_KEYWORDS:
                return
            self.advance()

    # Token helpers
    def consume(self, token_type: TokenType, message: str) -> Token:
        if self.check(token_type):
            return self.advance()
        raise self.error(self.peek(), message)

    def error(self, token: Token, message: str) -> ParseError:
        return ParseError.at(token, message)

    def match(self, *types: TokenType) -> bool:
        for token_type in types:
            if self.check(token_type):
                self.advance()
                return True
        return False

    def check(self, token_type: TokenType) -> bool:
        if self.is_at_end():
            return False
        return self.peek().type == token_type

    def advance(self) -> Token:
        if not self.is_at_end():
            self.current += 1
        return self.previous()

    def is_at_end(self) -> bool:
        return self.peek().type == TokenType.EOF

    def peek(self) -> Token:
        return self.tokens[self.current]

    def previous(self) -> Token:
        return self.tokens[self.current - 1]


def parse(tokens: List[Token]) -> List[Stmt]:
    """Parse ``tokens`` into statements, stopping at the first syntax error."""
    return Parser(tokens).parse()
