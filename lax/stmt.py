# Generated by lax.tool.generate_ast. Do not edit by hand.
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar

from .expr import Expr


R = TypeVar('R')


class Stmt(ABC):
    """Base class for stmt nodes."""

    @abstractmethod
    def accept(self, visitor: StmtVisitor[R]) -> R:
        ...


class StmtVisitor(ABC, Generic[R]):
    @abstractmethod
    def visit_expression_stmt(self, stmt: ExpressionStmt) -> R:
        ...

    @abstractmethod
    def visit_print_stmt(self, stmt: PrintStmt) -> R:
        ...


@dataclass(frozen=True)
class ExpressionStmt(Stmt):
    expression: Expr

    def accept(self, visitor: StmtVisitor[R]) -> R:
        return visitor.visit_expression_stmt(self)


@dataclass(frozen=True)
class PrintStmt(Stmt):
    expression: Expr

    def accept(self, visitor: StmtVisitor[R]) -> R:
        return visitor.visit_print_stmt(self)
