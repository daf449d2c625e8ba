"""Tokens produced by the scanner and embedded in syntax tree nodes for diagnostics.

Literal and runtime values share one representation: plain Python values, where the variant is the exact type.

```
Float   -> float
Integer -> int      ; never bool, even though bool subclasses int
String  -> str
Bool    -> bool
None    -> None
```
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class TokenKind(Enum):
    """Every kind of token the scanner can emit."""
    # single-character tokens
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()
    COMMA = auto()
    DOT = auto()
    MINUS = auto()
    PLUS = auto()
    SEMICOLON = auto()
    SLASH = auto()
    STAR = auto()

    # one or two character tokens
    BANG = auto()
    BANG_EQUAL = auto()
    EQUAL = auto()
    EQUAL_EQUAL = auto()
    GREATER = auto()
    GREATER_EQUAL = auto()
    LESS = auto()
    LESS_EQUAL = auto()

    # literals
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # keywords
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FOR = auto()
    FUN = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    EOF = auto()


KEYWORDS = {
    "and": TokenKind.AND,
    "class": TokenKind.CLASS,
    "else": TokenKind.ELSE,
    "false": TokenKind.FALSE,
    "for": TokenKind.FOR,
    "fun": TokenKind.FUN,
    "if": TokenKind.IF,
    "nil": TokenKind.NIL,
    "none": TokenKind.NIL,  # alternate spelling
    "or": TokenKind.OR,
    "print": TokenKind.PRINT,
    "return": TokenKind.RETURN,
    "super": TokenKind.SUPER,
    "this": TokenKind.THIS,
    "true": TokenKind.TRUE,
    "var": TokenKind.VAR,
    "while": TokenKind.WHILE,
}


@dataclass(frozen=True)
class Token:
    """A classified, positioned unit of lexical input."""
    kind: TokenKind
    lexeme: str
    literal: Any
    line: int

    def __str__(self):
        return f"{self.kind.name} {self.lexeme} {self.literal}"


def variant(value):
    """Returns the name of value's variant: 'Float', 'Integer', 'String', 'Bool' or 'None'."""
    if value is None:
        return "None"
    return {float: "Float", int: "Integer", str: "String", bool: "Bool"}[type(value)]


def same_numeric(left, right):
    """Whether or not left and right are both ints or both floats (bools excluded)."""
    return type(left) is type(right) and type(left) in (int, float)
