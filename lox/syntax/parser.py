"""Recursive descent parser for lox. Converts a list of Tokens into a list of statements.

Grammar, lowest to highest binding power:

```
<program>     ::= <declaration>* EOF
<declaration> ::= "var" IDENTIFIER ( "=" <expression> )? ";" | <statement>
<statement>   ::= "print" <expression> ";" | <expression> ";"
<expression>  ::= <assignment>
<assignment>  ::= IDENTIFIER "=" <assignment> | <equality>   ; right-associative
<equality>    ::= <comparison> ( ( "!=" | "==" ) <comparison> )*
<comparison>  ::= <term> ( ( ">" | ">=" | "<" | "<=" ) <term> )*
<term>        ::= <factor> ( ( "-" | "+" ) <factor> )*
<factor>      ::= <unary> ( ( "/" | "*" ) <unary> )*
<unary>       ::= ( "!" | "-" ) <unary> | <primary>
<primary>     ::= "true" | "false" | "nil" | NUMBER | STRING | IDENTIFIER | "(" <expression> ")"
```

Every binary tier is left-associative. There is no panic-mode recovery: the first structural error is raised and no
partial statement list is returned.
"""

import logging

from lox.lang.error import ParseError, ParseErrorKind
from lox.syntax.nodes import Assign, Binary, Expression, Grouping, Literal, Print, Unary, Var, Variable
from lox.syntax.tokens import TokenKind


logger = logging.getLogger(__name__)


class Parser:
    """Single-use parser with one cursor over the token list and one token of lookahead."""
    EQUALITY = (TokenKind.BANG_EQUAL, TokenKind.EQUAL_EQUAL)
    COMPARISON = (TokenKind.GREATER, TokenKind.GREATER_EQUAL, TokenKind.LESS, TokenKind.LESS_EQUAL)
    TERM = (TokenKind.MINUS, TokenKind.PLUS)
    FACTOR = (TokenKind.SLASH, TokenKind.STAR)
    UNARY = (TokenKind.BANG, TokenKind.MINUS)

    LITERALS = {TokenKind.FALSE: False, TokenKind.TRUE: True, TokenKind.NIL: None}
    EXPECTED = {TokenKind.SEMICOLON: ";", TokenKind.RIGHT_PAREN: ")"}

    def __init__(self, tokens):
        self.tokens = tokens
        self.current = 0

    def parse(self):
        """Returns every statement in self.tokens, in document order."""
        statements = []
        while not self.at_end():
            statements.append(self.declaration())
        logger.debug("parsed %d statement(s)", len(statements))
        return statements

    # statements

    def declaration(self):
        if self.match(TokenKind.VAR):
            return self.var_declaration()
        return self.statement()

    def var_declaration(self):
        name = self.consume(TokenKind.IDENTIFIER, "Expect variable name.", ParseErrorKind.EXPECTED_IDENTIFIER)

        initializer = None
        if self.match(TokenKind.EQUAL):
            initializer = self.expression()

        self.consume(TokenKind.SEMICOLON, "Expect ';' after variable declaration.")
        return Var(name, initializer)

    def statement(self):
        if self.match(TokenKind.PRINT):
            return self.print_statement()
        return self.expression_statement()

    def print_statement(self):
        value = self.expression()
        self.consume(TokenKind.SEMICOLON, "Expect ';' after expression.")
        return Print(value)

    def expression_statement(self):
        value = self.expression()
        self.consume(TokenKind.SEMICOLON, "Expect ';' after value.")
        return Expression(value)

    # expressions

    def expression(self):
        return self.assignment()

    def assignment(self):
        expr = self.equality()

        if self.match(TokenKind.EQUAL):
            equals = self.previous()
            value = self.assignment()

            if isinstance(expr, Variable):
                return Assign(expr.name, value)
            raise ParseError(ParseErrorKind.INVALID_ASSIGNMENT_TARGET, equals, "Invalid assignment target.")

        return expr

    def _binary(self, operators, operand):
        """Parses a left-associative tier: operand (operator operand)*."""
        expr = operand()

        while self.match(*operators):
            operator = self.previous()
            right = operand()
            expr = Binary(expr, operator, right)

        return expr

    def equality(self):
        return self._binary(Parser.EQUALITY, self.comparison)

    def comparison(self):
        return self._binary(Parser.COMPARISON, self.term)

    def term(self):
        return self._binary(Parser.TERM, self.factor)

    def factor(self):
        return self._binary(Parser.FACTOR, self.unary)

    def unary(self):
        if self.match(*Parser.UNARY):
            operator = self.previous()
            return Unary(operator, self.unary())
        return self.primary()

    def primary(self):
        if self.peek().kind in Parser.LITERALS:
            return Literal(Parser.LITERALS[self.advance().kind])

        if self.match(TokenKind.NUMBER, TokenKind.STRING):
            return Literal(self.previous().literal)

        if self.match(TokenKind.IDENTIFIER):
            return Variable(self.previous())

        if self.match(TokenKind.LEFT_PAREN):
            expr = self.expression()
            self.consume(TokenKind.RIGHT_PAREN, "Expect ')' after expression.")
            return Grouping(expr)

        raise ParseError(ParseErrorKind.EXPECTED_EXPRESSION, self.peek(), "Expect expression.")

    # cursor

    def consume(self, kind, message, error_kind=ParseErrorKind.EXPECTED_TOKEN):
        """Advances past a token of kind, or raises a ParseError at the current token."""
        if self.check(kind):
            return self.advance()

        expected = Parser.EXPECTED.get(kind) if error_kind is ParseErrorKind.EXPECTED_TOKEN else None
        raise ParseError(error_kind, self.peek(), message, expected)

    def match(self, *kinds):
        """Consumes the current token if it is any of kinds."""
        for kind in kinds:
            if self.check(kind):
                self.advance()
                return True
        return False

    def check(self, kind):
        if self.at_end():
            return False
        return self.peek().kind == kind

    def advance(self):
        if not self.at_end():
            self.current += 1
        return self.previous()

    def at_end(self):
        return self.peek().kind == TokenKind.EOF

    def peek(self):
        return self.tokens[self.current]

    def previous(self):
        return self.tokens[self.current - 1]


def parse(tokens):
    """Returns the statements in tokens. Raises ParseError on the first structural error."""
    return Parser(tokens).parse()
