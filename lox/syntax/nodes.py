"""Syntax tree nodes produced by the parser. The node set is closed: consumers (the evaluator, the printer) dispatch on
node type directly instead of through visitor methods.

```
<Expr> ::= Assign(name, value) | Binary(left, operator, right) | Grouping(expression)
         | Literal(value) | Unary(operator, right) | Variable(name)
<Stmt> ::= Print(expression) | Expression(expression) | Var(name, initializer?)
```

Nodes are immutable once built and own their children exclusively.
"""

from dataclasses import dataclass
from typing import Any, Optional

from lox.syntax.tokens import Token


class Expr:
    """Superclass of every expression node."""


class Stmt:
    """Superclass of every statement node."""


@dataclass(frozen=True)
class Assign(Expr):
    name: Token
    value: Expr


@dataclass(frozen=True)
class Binary(Expr):
    left: Expr
    operator: Token
    right: Expr


@dataclass(frozen=True)
class Grouping(Expr):
    expression: Expr


@dataclass(frozen=True)
class Literal(Expr):
    value: Any


@dataclass(frozen=True)
class Unary(Expr):
    operator: Token
    right: Expr


@dataclass(frozen=True)
class Variable(Expr):
    name: Token


@dataclass(frozen=True)
class Print(Stmt):
    expression: Expr


@dataclass(frozen=True)
class Expression(Stmt):
    expression: Expr


@dataclass(frozen=True)
class Var(Stmt):
    name: Token
    initializer: Optional[Expr] = None
