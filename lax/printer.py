from .expr import BinaryExpr, Expr, ExprVisitor, GroupingExpr, LiteralExpr, UnaryExpr
from .types import to_string


class AstPrinter(ExprVisitor[str]):
    """Renders an expression tree in fully parenthesized prefix form.

    ``1 + 2 * 3`` prints as ``(+ 1 (* 2 3))``; groupings print as
    ``(group ...)``.
    """

    def print(self, expr: Expr) -> str:
        return expr.accept(self)

    def parenthesize(self, name: str, *exprs: Expr) -> str:
        parts = [name] + [expr.accept(self) for expr in exprs]
        return '(' + ' '.join(parts) + ')'

    def visit_binary_expr(self, expr: BinaryExpr) -> str:
        return self.parenthesize(expr.operator.lexeme, expr.left, expr.right)

    def visit_grouping_expr(self, expr: GroupingExpr) -> str:
        return self.parenthesize('group', expr.expression)

    def visit_literal_expr(self, expr: LiteralExpr) -> str:
        if expr.value is None:
            return 'nil'
        return to_string(expr.value)

    def visit_unary_expr(self, expr: UnaryExpr) -> str:
        return self.parenthesize(expr.operator.lexeme, expr.right)
