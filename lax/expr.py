# Generated by lax.tool.generate_ast. Do not edit by hand.
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .token import Token
from .types import Value


R = TypeVar('R')


class Expr(ABC):
    """Base class for expr nodes."""

    @abstractmethod
    def accept(self, visitor: ExprVisitor[R]) -> R:
        ...


class ExprVisitor(ABC, Generic[R]):
    @abstractmethod
    def visit_binary_expr(self, expr: BinaryExpr) -> R:
        ...

    @abstractmethod
    def visit_grouping_expr(self, expr: GroupingExpr) -> R:
        ...

    @abstractmethod
    def visit_literal_expr(self, expr: LiteralExpr) -> R:
        ...

    @abstractmethod
    def visit_unary_expr(self, expr: UnaryExpr) -> R:
        ...


@dataclass(frozen=True)
class BinaryExpr(Expr):
    left: Expr
    operator: Token
    right: Expr

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_binary_expr(self)


@dataclass(frozen=True)
class GroupingExpr(Expr):
    expression: Expr

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_grouping_expr(self)


@dataclass(frozen=True)
class LiteralExpr(Expr):
    value: Optional[Value]

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_literal_expr(self)


@dataclass(frozen=True)
class UnaryExpr(Expr):
    operator: Token
    right: Expr

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_unary_expr(self)
