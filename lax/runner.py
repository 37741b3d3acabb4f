"""Pipeline driver: source text -> tokens -> statements -> effects.

Each call builds a fresh Scanner, Parser and Interpreter, so nothing carries
over between two runs (or between two REPL lines). This module is also the
single place where faults are reported to the user.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, TextIO

from .errors import LaxRuntimeError, ParseError, report
from .interpreter import Interpreter
from .parser import Parser
from .printer import AstPrinter
from .scanner import Scanner

EX_OK = 0
EX_USAGE = 64
EX_DATAERR = 65

PROMPT = '> '


def run_source(source: str, debug_level: int = 0, debug_fp: Optional[TextIO] = None, recover: bool = False) -> bool:
    """Run a unit of Lax source, returning True if it completed without fault."""
    interpreter = Interpreter(debug_level=debug_level, debug_fp=debug_fp)
    scanner = Scanner(source)
    tokens = scanner.scan_tokens()
    if scanner.errors:
        for error in scanner.errors:
            report(error)
        return False
    if debug_level >= 2:
        interpreter.debug(f"scanned {len(tokens)} tokens")
    if debug_level >= 3:
        for token in tokens:
            interpreter.debug(f"token {token}")

    parser = Parser(tokens, recover=recover)
    try:
        statements = parser.parse()
    except ParseError as e:
        report(e)
        return False
    if parser.errors:
        for error in parser.errors:
            report(error)
        return False
    if debug_level >= 2:
        interpreter.debug(f"parsed {len(statements)} statements")

    try:
        interpreter.interpret(statements)
    except LaxRuntimeError as e:
        report(e)
        return False
    return True


def run_expression(source: str, print_ast: bool = False, debug_level: int = 0, debug_fp: Optional[TextIO] = None) -> bool:
    """Parse a single expression and print either its value or its tree."""
    scanner = Scanner(source)
    tokens = scanner.scan_tokens()
    if scanner.errors:
        for error in scanner.errors:
            report(error)
        return False
    expr = Parser(tokens).parse_expression()
    if expr is None:
        print("Error: could not parse expression", file=sys.stderr)
        return False
    if print_ast:
        print(AstPrinter().print(expr))
        return True
    try:
        Interpreter(debug_level=debug_level, debug_fp=debug_fp).interpret_expression(expr)
    except LaxRuntimeError as e:
        report(e)
        return False
    return True


def run_file(path: str, debug_level: int = 0, debug_fp: Optional[TextIO] = None, recover: bool = False) -> int:
    """Run a script file and return the process exit status."""
    program_file = Path(path)
    if not program_file.exists():
        print(f"Error: file {program_file} not found", file=sys.stderr)
        return EX_USAGE
    try:
        with open(program_file, 'r', encoding='utf-8') as f:
            source = f.read()
    except UnicodeDecodeError as e:
        print(f"Error: file {program_file} is not valid UTF-8: {e.reason}", file=sys.stderr)
        return EX_DATAERR
    except OSError as e:
        print(f"Error: cannot read {program_file}: {e.strerror}", file=sys.stderr)
        return EX_USAGE
    if not run_source(source, debug_level, debug_fp, recover):
        return EX_DATAERR
    return EX_OK


def run_prompt(stdin: Optional[TextIO] = None, debug_level: int = 0, debug_fp: Optional[TextIO] = None) -> None:
    """Read-eval-print loop; stops on an empty line or end of input."""
    stdin = stdin if stdin is not None else sys.stdin
    print(PROMPT, end='', flush=True)
    for line in stdin:
        line = line.rstrip('\r\n')
        if not line:
            break
        # faults are reported and the loop carries on
        run_source(line, debug_level, debug_fp)
        print(PROMPT, end='', flush=True)
