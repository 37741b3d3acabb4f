"""Code generator for the Lax AST node and visitor modules.

Node hierarchies are described in a small textual format, one variant per
line::

    Binary   : Expr left, Token operator, Expr right
    Literal  : Value? value

A trailing ``?`` on a field type marks the field optional. The description
is parsed with a Lark grammar and rendered into a Python module holding a
base class, an abstract visitor with one ``visit_*`` method per variant, and
one frozen dataclass per variant whose ``accept`` dispatches to it.

``lax/expr.py`` and ``lax/stmt.py`` are the output of :func:`main` and are
checked in; rerun this tool after changing the definitions below.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from lark import Lark, Transformer
from lark.exceptions import LarkError


EXPR_DEFINITIONS = """
    Binary   : Expr left, Token operator, Expr right
    Grouping : Expr expression
    Literal  : Value? value
    Unary    : Token operator, Expr right
"""

STMT_DEFINITIONS = """
    Expression : Expr expression
    Print      : Expr expression
"""

NODE_GRAMMAR = r"""
    start: node+
    node: NAME ":" field ("," field)*
    field: NAME OPTIONAL? NAME

    OPTIONAL: "?"
    COMMENT: /#[^\n]*/

    %import common.CNAME -> NAME
    %import common.WS
    %ignore WS
    %ignore COMMENT
"""

NODE_PARSER = Lark(NODE_GRAMMAR, parser='lalr')

# field type -> import line in the generated module
TYPE_IMPORTS = {
    'Expr': 'from .expr import Expr',
    'Stmt': 'from .stmt import Stmt',
    'Token': 'from .token import Token',
    'Value': 'from .types import Value',
}

GENERATED_NOTICE = '# Generated by lax.tool.generate_ast. Do not edit by hand.'


@dataclass
class FieldDef:
    type_name: str
    name: str
    optional: bool = False

    @property
    def annotation(self) -> str:
        if self.optional:
            return f"Optional[{self.type_name}]"
        return self.type_name


@dataclass
class NodeDef:
    name: str
    fields: List[FieldDef]


class DefinitionError(Exception):
    pass


class NodeDefTransformer(Transformer):
    def start(self, items):
        return list(items)

    def node(self, items):
        return NodeDef(name=str(items[0]), fields=list(items[1:]))

    def field(self, items):
        if len(items) == 3:
            return FieldDef(type_name=str(items[0]), name=str(items[2]), optional=True)
        return FieldDef(type_name=str(items[0]), name=str(items[1]))


def parse_definitions(text: str) -> List[NodeDef]:
    try:
        tree = NODE_PARSER.parse(text)
    except LarkError as e:
        raise DefinitionError(f"invalid node definitions: {e}") from e
    nodes = NodeDefTransformer().transform(tree)
    seen = set()
    for node in nodes:
        if node.name in seen:
            raise DefinitionError(f"duplicate node {node.name}")
        seen.add(node.name)
    return nodes


def render_ast(base_name: str, nodes: List[NodeDef]) -> str:
    """Render the module source for one node hierarchy."""
    lower = base_name.lower()
    fields = [f for node in nodes for f in node.fields]

    typing_names = ['Generic', 'TypeVar']
    if any(f.optional for f in fields):
        typing_names.append('Optional')
    imports = sorted({f.type_name for f in fields if f.type_name != base_name})
    unknown = [name for name in imports if name not in TYPE_IMPORTS]
    if unknown:
        raise DefinitionError(f"unknown field types: {', '.join(unknown)}")

    lines = [
        GENERATED_NOTICE,
        'from __future__ import annotations',
        '',
        'from abc import ABC, abstractmethod',
        'from dataclasses import dataclass',
        f"from typing import {', '.join(sorted(typing_names))}",
        '',
    ]
    lines += [TYPE_IMPORTS[name] for name in imports]
    lines += [
        '',
        '',
        "R = TypeVar('R')",
        '',
        '',
        f'class {base_name}(ABC):',
        f'    """Base class for {lower} nodes."""',
        '',
        '    @abstractmethod',
        f'    def accept(self, visitor: {base_name}Visitor[R]) -> R:',
        '        ...',
        '',
        '',
        f'class {base_name}Visitor(ABC, Generic[R]):',
    ]
    for i, node in enumerate(nodes):
        if i:
            lines.append('')
        lines += [
            '    @abstractmethod',
            f'    def visit_{node.name.lower()}_{lower}(self, {lower}: {node.name}{base_name}) -> R:',
            '        ...',
        ]
    for node in nodes:
        lines += ['', '', '@dataclass(frozen=True)', f'class {node.name}{base_name}({base_name}):']
        lines += [f'    {f.name}: {f.annotation}' for f in node.fields]
        lines += [
            '',
            f'    def accept(self, visitor: {base_name}Visitor[R]) -> R:',
            f'        return visitor.visit_{node.name.lower()}_{lower}(self)',
        ]
    return '\n'.join(lines) + '\n'


def define_ast(output_dir: Path, base_name: str, definitions: str) -> Path:
    """Write ``<base_name>.py`` into ``output_dir`` and return its path."""
    path = Path(output_dir) / f"{base_name.lower()}.py"
    source = render_ast(base_name, parse_definitions(definitions))
    with open(path, 'w', encoding='utf-8') as f:
        f.write(source)
    return path


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Generate the Lax AST modules")
    parser.add_argument('-o', '--out', metavar='OUT_DIR', required=True, help='directory to write expr.py and stmt.py into')
    args = parser.parse_args(argv)
    generate(args.out)


def generate(output_dir: str) -> List[Path]:
    out = Path(output_dir)
    if not out.is_dir():
        print(f"Error: directory {out} not found", file=sys.stderr)
        sys.exit(1)
    print("Generating ast...")
    paths = [
        define_ast(out, 'Expr', EXPR_DEFINITIONS),
        define_ast(out, 'Stmt', STMT_DEFINITIONS),
    ]
    for path in paths:
        print(str(path))
    return paths


if __name__ == '__main__':
    main()
