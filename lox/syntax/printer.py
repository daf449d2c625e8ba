"""Re-serializes syntax trees to a fully parenthesized prefix form, e.g. `1 + 2 * 3` -> `(+ 1 (* 2 3))`. Used by the
--ast flag and to check that parsing is deterministic.
"""

from lox.syntax.nodes import Assign, Binary, Expression, Grouping, Literal, Print, Unary, Var, Variable


class AstPrinter:

    def print(self, expr):
        """Returns the prefix form of expr."""
        if isinstance(expr, Binary):
            return self.parenthesize(expr.operator.lexeme, expr.left, expr.right)
        elif isinstance(expr, Grouping):
            return self.parenthesize("group", expr.expression)
        elif isinstance(expr, Unary):
            return self.parenthesize(expr.operator.lexeme, expr.right)
        elif isinstance(expr, Assign):
            return self.parenthesize(f"= {expr.name.lexeme}", expr.value)
        elif isinstance(expr, Variable):
            return expr.name.lexeme
        elif isinstance(expr, Literal):
            return AstPrinter.literal(expr.value)
        raise TypeError(f"cannot print {type(expr).__name__}")

    def print_stmt(self, stmt):
        if isinstance(stmt, Print):
            return self.parenthesize("print", stmt.expression)
        elif isinstance(stmt, Expression):
            return self.parenthesize(";", stmt.expression)
        elif isinstance(stmt, Var):
            if stmt.initializer is None:
                return f"(var {stmt.name.lexeme})"
            return self.parenthesize(f"var {stmt.name.lexeme}", stmt.initializer)
        raise TypeError(f"cannot print {type(stmt).__name__}")

    def print_program(self, statements):
        """Returns one line per statement."""
        return "\n".join(self.print_stmt(stmt) for stmt in statements)

    def parenthesize(self, name, *exprs):
        return f"({name} {' '.join(self.print(expr) for expr in exprs)})"

    @staticmethod
    def literal(value):
        """Unlike print output, keeps variants apart: "1", 1 and 1.0 all render differently."""
        if value is None:
            return "nil"
        if type(value) is bool:
            return "true" if value else "false"
        if type(value) is str:
            return f"\"{value}\""
        return repr(value)
