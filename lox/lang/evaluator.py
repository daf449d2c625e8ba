"""Tree-walking evaluator for lox. Executes statements in document order against an Environment.

Operators are lenient: applying an operator to operands of mismatched or unsupported variants does not raise, it
evaluates to None (nil). The only runtime errors are undefined variables and integer division by zero.
"""

import logging
import math
import operator
from decimal import Decimal

from lox.lang.environment import Environment
from lox.lang.error import LoxRuntimeError, RuntimeErrorKind
from lox.syntax.nodes import Assign, Binary, Expression, Grouping, Literal, Print, Unary, Var, Variable
from lox.syntax.tokens import TokenKind, same_numeric, variant


logger = logging.getLogger(__name__)


def stringify(value):
    """Textual representation of a runtime value, as written by print."""
    if value is None:
        return "nil"
    if type(value) is bool:
        return "true" if value else "false"
    if type(value) is float:
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "inf" if value > 0 else "-inf"
        text = format(Decimal(repr(value)), "f")  # shortest digits, never an exponent
        return text[:-2] if text.endswith(".0") else text
    return str(value)


def is_truthy(value):
    """Truthiness coercion of bool, int and str operands of '!'. Floats and nil always coerce to false."""
    if type(value) is bool:
        return value
    if type(value) is int:
        return value != 0
    if type(value) is str:
        return value != ""
    return False


def values_equal(left, right):
    """Structural equality: same variant and same value. 1 == 1.0 is false."""
    return type(left) is type(right) and left == right


class Evaluator:
    """Executes statements against self.environment, writing print output to self.out."""
    ARITHMETIC = {
        TokenKind.PLUS: operator.add,
        TokenKind.MINUS: operator.sub,
        TokenKind.STAR: operator.mul,
    }
    COMPARISON = {
        TokenKind.GREATER: operator.gt,
        TokenKind.GREATER_EQUAL: operator.ge,
        TokenKind.LESS: operator.lt,
        TokenKind.LESS_EQUAL: operator.le,
    }

    def __init__(self, environment=None, out=None):
        self.environment = environment if environment is not None else Environment()
        self.out = out

    def interpret(self, statements):
        """Executes statements in order. A runtime error stops execution, but earlier effects are kept."""
        for statement in statements:
            self.execute(statement)

    def execute(self, stmt):
        if isinstance(stmt, Print):
            value = self.evaluate(stmt.expression)
            print(stringify(value), file=self.out)  # None writes to sys.stdout

        elif isinstance(stmt, Expression):
            self.evaluate(stmt.expression)

        elif isinstance(stmt, Var):
            value = None
            if stmt.initializer is not None:
                value = self.evaluate(stmt.initializer)
            self.environment.define(stmt.name.lexeme, value)

        else:
            raise TypeError(f"cannot execute {type(stmt).__name__}")

    def evaluate(self, expr):
        """Returns the runtime value of expr."""
        if isinstance(expr, Literal):
            return expr.value

        elif isinstance(expr, Grouping):
            return self.evaluate(expr.expression)

        elif isinstance(expr, Variable):
            return self.environment.get(expr.name)

        elif isinstance(expr, Assign):
            value = self.evaluate(expr.value)
            self.environment.assign(expr.name, value)
            return value

        elif isinstance(expr, Unary):
            return self.unary(expr.operator, self.evaluate(expr.right))

        elif isinstance(expr, Binary):
            left = self.evaluate(expr.left)
            right = self.evaluate(expr.right)
            return self.binary(expr.operator, left, right)

        raise TypeError(f"cannot evaluate {type(expr).__name__}")

    @staticmethod
    def unary(op, right):
        if op.kind == TokenKind.BANG:
            if type(right) in (bool, int, str):
                return not is_truthy(right)
            return False  # floats and nil negate to false

        if op.kind == TokenKind.MINUS and type(right) in (int, float):
            return -right
        return None

    def binary(self, op, left, right):
        kind = op.kind

        if kind == TokenKind.EQUAL_EQUAL:
            return values_equal(left, right)
        if kind == TokenKind.BANG_EQUAL:
            return not values_equal(left, right)

        if kind == TokenKind.PLUS and type(left) is str and type(right) is str:
            return left + right

        if not same_numeric(left, right):
            logger.debug("'%s' on %s and %s evaluates to nil", op.lexeme, variant(left), variant(right))
            return None

        if kind in Evaluator.ARITHMETIC:
            return Evaluator.ARITHMETIC[kind](left, right)
        if kind == TokenKind.SLASH:
            return Evaluator.divide(op, left, right)
        if kind in Evaluator.COMPARISON:
            return Evaluator.COMPARISON[kind](left, right)
        return None

    @staticmethod
    def divide(op, left, right):
        """Integer division truncates toward zero; float division by zero follows IEEE 754."""
        if type(left) is int:
            if right == 0:
                raise LoxRuntimeError(RuntimeErrorKind.DIVISION_BY_ZERO, op, "Division by zero.")
            quotient = abs(left) // abs(right)
            return -quotient if (left < 0) != (right < 0) else quotient

        if right == 0:
            if left == 0 or math.isnan(left):
                return math.nan
            return math.copysign(math.inf, left) * math.copysign(1.0, right)
        return left / right


def interpret(statements, environment, out=None):
    """Executes statements against environment."""
    Evaluator(environment, out).interpret(statements)
