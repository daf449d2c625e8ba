import unittest

from lox.syntax.nodes import Assign, Binary, Expression, Grouping, Literal, Print, Unary, Var, Variable
from lox.syntax.printer import AstPrinter
from lox.syntax.tokens import Token, TokenKind


def token(kind, lexeme):
    return Token(kind, lexeme, None, 1)


class AstPrinterTestCase(unittest.TestCase):

    def setUp(self):
        self.printer = AstPrinter()

    def test_literal(self):
        cases = {"nil": None, "true": True, "false": False, "1": 1, "1.0": 1.0, "2.5": 2.5, "\"1\"": "1"}
        for expected, value in cases.items():
            self.assertEqual(expected, self.printer.print(Literal(value)), value)

    def test_expr(self):
        expr = Binary(
            Unary(token(TokenKind.MINUS, "-"), Literal(123)),
            token(TokenKind.STAR, "*"),
            Grouping(Literal(45.67))
        )
        self.assertEqual("(* (- 123) (group 45.67))", self.printer.print(expr))

        assign = Assign(token(TokenKind.IDENTIFIER, "a"), Variable(token(TokenKind.IDENTIFIER, "b")))
        self.assertEqual("(= a b)", self.printer.print(assign))

    def test_stmt(self):
        value = Literal(1)
        name = token(TokenKind.IDENTIFIER, "x")
        cases = [
            (Print(value), "(print 1)"),
            (Expression(value), "(; 1)"),
            (Var(name), "(var x)"),
            (Var(name, value), "(var x 1)"),
        ]
        for stmt, expected in cases:
            self.assertEqual(expected, self.printer.print_stmt(stmt))

        self.assertEqual("(print 1)\n(var x)", self.printer.print_program([Print(value), Var(name)]))
        self.assertEqual("", self.printer.print_program([]))

    def test_unknown(self):
        self.assertRaises(TypeError, self.printer.print, object())
        self.assertRaises(TypeError, self.printer.print_stmt, Literal(1))


if __name__ == '__main__':
    unittest.main()
