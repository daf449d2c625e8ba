import io
import unittest

from lox.lang.error import (ErrorHandler, LexError, LexErrorKind, LoxError, LoxRuntimeError, ParseError,
                            ParseErrorKind, RuntimeErrorKind)
from lox.syntax.tokens import Token, TokenKind


class LoxErrorTestCase(unittest.TestCase):

    def test_format(self):
        semicolon = Token(TokenKind.SEMICOLON, ";", None, 3)
        eof = Token(TokenKind.EOF, "", None, 9)
        name = Token(TokenKind.IDENTIFIER, "count", None, 2)

        cases = [
            (LexError(LexErrorKind.UNEXPECTED_CHARACTER, 1, "#"), "[line 1] Error '#': Unexpected character."),
            (LexError(LexErrorKind.UNTERMINATED_STRING, 4), "[line 4] Error : Unterminated string."),
            (ParseError(ParseErrorKind.EXPECTED_TOKEN, semicolon, "Expect ')' after expression.", ")"),
             "[line 3] Error ';': Expect ')' after expression."),
            (ParseError(ParseErrorKind.EXPECTED_EXPRESSION, eof, "Expect expression."),
             "[line 9] Error : Expect expression."),
            (LoxRuntimeError(RuntimeErrorKind.UNDEFINED_VARIABLE, name, "Undefined variable 'count'."),
             "[line 2] Error 'count': Undefined variable 'count'."),
        ]
        for error, expected in cases:
            self.assertIsInstance(error, LoxError)
            self.assertEqual(expected, str(error))

    def test_exit_codes(self):
        token = Token(TokenKind.IDENTIFIER, "x", None, 1)
        self.assertEqual(65, LexError(LexErrorKind.MALFORMED_NUMBER, 1, "1x").exit_code)
        self.assertEqual(65, ParseError(ParseErrorKind.EXPECTED_IDENTIFIER, token, "Expect variable name.").exit_code)
        self.assertEqual(70, LoxRuntimeError(RuntimeErrorKind.UNDEFINED_VARIABLE, token, "").exit_code)


class ErrorHandlerTestCase(unittest.TestCase):

    def setUp(self):
        self.stream = io.StringIO()
        self.error = LexError(LexErrorKind.UNTERMINATED_STRING, 2)

    def test_non_fatal(self):
        handler = ErrorHandler(fatal=False, color=False, stream=self.stream)
        with handler:
            raise self.error

        self.assertEqual("error: [line 2] Error : Unterminated string.\n", self.stream.getvalue())
        self.assertEqual([self.error], handler.errors)

    def test_fatal(self):
        handler = ErrorHandler(fatal=True, color=False, stream=self.stream)
        with self.assertRaises(SystemExit) as context:
            with handler:
                raise self.error
        self.assertEqual(65, context.exception.code)

        token = Token(TokenKind.IDENTIFIER, "x", None, 1)
        with self.assertRaises(SystemExit) as context:
            with handler:
                raise LoxRuntimeError(RuntimeErrorKind.UNDEFINED_VARIABLE, token, "Undefined variable 'x'.")
        self.assertEqual(70, context.exception.code)

    def test_traceback(self):
        handler = ErrorHandler(fatal=False, color=False, stream=self.stream)
        handler.register_file("main.lox")
        handler.register_line("main.lox", "print \"oops;", 2)

        with handler:
            raise self.error

        self.assertEqual(
            "  File 'main.lox', line 2:\n    print \"oops;\nerror: [line 2] Error : Unterminated string.\n",
            self.stream.getvalue()
        )
        self.assertEqual({"main.lox": (None, None)}, handler.traceback)  # reset after reporting

    def test_remove_line(self):
        handler = ErrorHandler(fatal=False, color=False, stream=self.stream)
        handler.register_line("main.lox", "print 1;", 1)
        handler.remove_line("main.lox")

        with handler:
            raise self.error
        self.assertNotIn("File", self.stream.getvalue())

    def test_internal(self):
        handler = ErrorHandler(fatal=False, color=False, stream=self.stream)
        with self.assertRaises(ValueError):
            with handler:
                raise ValueError("boom")
        self.assertEqual("[internal] error: unknown error: 'ValueError: boom'\n", self.stream.getvalue())

    def test_no_error(self):
        handler = ErrorHandler(fatal=True, color=False, stream=self.stream)
        with handler:
            pass
        self.assertEqual("", self.stream.getvalue())
        self.assertEqual([], handler.errors)

    def test_color(self):
        handler = ErrorHandler(fatal=False, color=False, stream=self.stream)
        self.assertEqual("error: ", handler.paint("error: ", ErrorHandler.ERROR, attrs=["bold"]))

        handler = ErrorHandler(fatal=False, color=True, stream=self.stream)
        with handler:
            raise self.error
        self.assertIn("[line 2] Error : Unterminated string.", self.stream.getvalue())


if __name__ == '__main__':
    unittest.main()
