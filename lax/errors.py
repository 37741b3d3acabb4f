import sys
from typing import Optional, TextIO

from lax.token import Token, TokenType


class LaxError(Exception):
    """Base exception for every fault detected while running Lax source.

    Carries the source line, the offending token when one is known, and a
    short message. Constructing an error has no side effects; call
    :func:`report` at the boundary that decides to show it.
    """
    kind = 'Error'

    def __init__(self, line: int, message: str, token: Optional[Token] = None):
        super().__init__(f"[line {line}] {message}")
        self.line = line
        self.message = message
        self.token = token

    @classmethod
    def at(cls, token: Token, message: str) -> 'LaxError':
        return cls(token.line, message, token)

    def location(self) -> str:
        if self.token is None:
            return ''
        if self.token.is_type(TokenType.EOF):
            return ' at end'
        return f" at '{self.token.lexeme}'"


class ScanError(LaxError):
    """Lexical fault: unexpected character, unterminated string or comment."""


class ParseError(LaxError):
    """Syntactic fault: a missing token or an expression that cannot start."""


class LaxRuntimeError(LaxError):
    """Fault raised while evaluating a tree, e.g. an operand type mismatch."""


def format_error(error: LaxError) -> str:
    return f"[line {error.line}] Error{error.location()}: {error.message}"


def report(error: LaxError, stream: Optional[TextIO] = None) -> None:
    """Write one diagnostic line for ``error`` (stderr by default)."""
    print(format_error(error), file=stream if stream is not None else sys.stderr)
