# Lax language package
# This package provides the scanner, parser and tree-walking interpreter for Lax.
from .errors import LaxError, LaxRuntimeError, ParseError, ScanError
from .interpreter import Interpreter
from .parser import Parser
from .printer import AstPrinter
from .runner import run_file, run_source
from .scanner import Scanner, scan

__all__ = [
    'AstPrinter',
    'Interpreter',
    'LaxError',
    'LaxRuntimeError',
    'ParseError',
    'Parser',
    'ScanError',
    'Scanner',
    'run_file',
    'run_source',
    'scan',
]
