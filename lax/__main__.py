"""CLI entry point for the Lax interpreter.

Usage:
    python -m lax [-v|-vv|-vvv] [script]
    python -m lax [-v...] --expr SOURCE
    python -m lax --print-ast SOURCE
    python -m lax --generate-ast OUT_DIR

Options:
  -v              Increase debug verbosity (can be repeated)
  --recover       Report every syntax error in the script, not just the first
  --expr          Evaluate a single expression and print its value
  --print-ast     Parse a single expression and print its tree
  --generate-ast  Regenerate expr.py and stmt.py into OUT_DIR

With no script and no mode option an interactive prompt is started; each
line runs on its own and an empty line ends the session. Debug information
is written to `debug.txt` in the current directory when verbosity is
greater than zero. A script that fails to scan, parse or run exits with
status 65.
"""

import argparse
import sys
from typing import List, Optional

from .runner import EX_DATAERR, EX_OK, run_expression, run_file, run_prompt
from .tool.generate_ast import generate


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Lax language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    parser.add_argument('--recover', action='store_true', help='report every syntax error in the script')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--expr', metavar='SOURCE', help='evaluate a single expression and print its value')
    group.add_argument('--print-ast', metavar='SOURCE', help='print the tree of a single expression')
    group.add_argument('--generate-ast', metavar='OUT_DIR', help='generate the AST modules into OUT_DIR')
    parser.add_argument('script', nargs='?', help='Lax script to execute')
    args = parser.parse_args(argv)

    if args.generate_ast:
        generate(args.generate_ast)
        return

    debug_fp = open('debug.txt', 'w', encoding='utf-8') if args.v > 0 else None
    try:
        if args.print_ast is not None or args.expr is not None:
            source = args.print_ast if args.print_ast is not None else args.expr
            ok = run_expression(source, print_ast=args.print_ast is not None, debug_level=args.v, debug_fp=debug_fp)
            sys.exit(EX_OK if ok else EX_DATAERR)
        if args.script:
            sys.exit(run_file(args.script, debug_level=args.v, debug_fp=debug_fp, recover=args.recover))
        run_prompt(debug_level=args.v, debug_fp=debug_fp)
    finally:
        if debug_fp:
            debug_fp.close()


if __name__ == '__main__':
    main()
