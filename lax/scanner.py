"""Scanner for the Lax language.

The scanner walks the source once from left to right and produces the
token list consumed by the parser. It keeps going after a lexical fault so
that every token that can be produced is produced; faults are collected in
``Scanner.errors`` and the most recent one is what :func:`scan` raises.
Every token list ends with exactly one EOF token.
"""

from __future__ import annotations

from typing import List, Optional

from .errors import ScanError
from .token import KEYWORDS, Token, TokenType
from .types import Value


SINGLE_CHAR_TOKENS = {
    '(': TokenType.LEFT_PAREN,
    ')': TokenType.RIGHT_PAREN,
    '{': TokenType.LEFT_BRACE,
    '}': TokenType.RIGHT_BRACE,
    ',': TokenType.COMMA,
    '.': TokenType.DOT,
    '-': TokenType.MINUS,
    '+': TokenType.PLUS,
    ';': TokenType.SEMICOLON,
    '*': TokenType.STAR,
}

# first char -> (kind when followed by '=', kind otherwise)
EQUAL_SUFFIX_TOKENS = {
    '!': (TokenType.BANG_EQUAL, TokenType.BANG),
    '=': (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
    '>': (TokenType.GREATER_EQUAL, TokenType.GREATER),
    '<': (TokenType.LESS_EQUAL, TokenType.LESS),
}


def is_digit(c: Optional[str]) -> bool:
    return c is not None and '0' <= c <= '9'


def is_alpha(c: Optional[str]) -> bool:
    return c is not None and (('a' <= c <= 'z') or ('A' <= c <= 'Z') or c == '_')


def is_alpha_numeric(c: Optional[str]) -> bool:
    return is_alpha(c) or is_digit(c)


class Scanner:
    def __init__(self, source: str):
        self.source = source
        self.tokens: List[Token] = []
        self.errors: List[ScanError] = []
        self.start = 0
        self.current = 0
        self.line = 1

    @property
    def error(self) -> Optional[ScanError]:
        """The most recent lexical fault, if any."""
        return self.errors[-1] if self.errors else None

    def scan_tokens(self) -> List[Token]:
        while not self.is_at_end():
            self.start = self.current
            try:
                self.scan_token()
            except ScanError as e:
                self.errors.append(e)
        self.tokens.append(Token.eof(self.line))
        return self.tokens

    def is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def scan_token(self) -> None:
        c = self.advance()
        if c in SINGLE_CHAR_TOKENS:
            self.add_token(SINGLE_CHAR_TOKENS[c])
        elif c in EQUAL_SUFFIX_TOKENS:
            with_equal, alone = EQUAL_SUFFIX_TOKENS[c]
            if self.match('='):
                self.add_token(with_equal)
            elif c == '!' and self.match_word('in'):
                self.add_token(TokenType.BANG_IN)
            else:
                self.add_token(alone)
        elif c == '/':
            if self.match('/'):
                # line comment runs to the end of the line
                while self.peek() is not None and self.peek() != '\n':
                    self.advance()
            elif self.match('*'):
                self.block_comment()
            else:
                self.add_token(TokenType.SLASH)
        elif c in (' ', '\r', '\t'):
            pass
        elif c == '\n':
            self.line += 1
        elif c == '"':
            self.string()
        elif is_digit(c):
            self.number()
        elif is_alpha(c):
            self.identifier()
        else:
            raise ScanError(self.line, 'Unexpected character.')

    def advance(self) -> str:
        c = self.source[self.current]
        self.current += 1
        return c

    def match(self, expected: str) -> bool:
        if self.peek() != expected:
            return False
        self.current += 1
        return True

    def match_word(self, word: str) -> bool:
        """Consume ``word`` if it follows and is not the prefix of a longer name."""
        end = self.current + len(word)
        if self.source[self.current:end] != word:
            return False
        if end < len(self.source) and is_alpha_numeric(self.source[end]):
            return False
        self.current = end
        return True

    def peek(self) -> Optional[str]:
        if self.is_at_end():
            return None
        return self.source[self.current]

    def peek_next(self) -> Optional[str]:
        if self.current + 1 >= len(self.source):
            return None
        return self.source[self.current + 1]

    def add_token(self, token_type: TokenType, literal: Value = None) -> None:
        text = self.source[self.start:self.current]
        self.tokens.append(Token(token_type, text, literal, self.line))

    def block_comment(self) -> None:
        depth = 1
        while depth > 0:
            c = self.peek()
            if c is None:
                raise ScanError(self.line, 'Unterminated comment.')
            self.advance()
            if c == '*' and self.match('/'):
                depth -= 1
            elif c == '/' and self.match('*'):
                depth += 1
            elif c == '\n':
                self.line += 1

    def string(self) -> None:
        while self.peek() is not None and self.peek() != '"':
            if self.peek() == '\n':
                self.line += 1
            self.advance()
        if self.is_at_end():
            raise ScanError(self.line, 'Unterminated string.')
        # closing quote
        self.advance()
        # no escape sequences: the content between the quotes is taken verbatim
        value = self.source[self.start + 1:self.current - 1]
        self.add_token(TokenType.STRING, value)

    def number(self) -> None:
        while is_digit(self.peek()):
            self.advance()
        if self.peek() == '.' and is_digit(self.peek_next()):
            self.advance()
            while is_digit(self.peek()):
                self.advance()
        value = float(self.source[self.start:self.current])
        self.add_token(TokenType.NUMBER, value)

    def identifier(self) -> None:
        while is_alpha_numeric(self.peek()):
            self.advance()
        text = self.source[self.start:self.current]
        self.add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))


def scan(source: str) -> List[Token]:
    """Scan ``source`` into tokens, raising the most recent lexical fault."""
    scanner = Scanner(source)
    tokens = scanner.scan_tokens()
    if scanner.error is not None:
        raise scanner.error
    return tokens
