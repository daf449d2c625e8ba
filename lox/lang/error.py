"""Error handling for lox. Scanning, parsing and evaluation all report failures by raising a LoxError subclass; if
another type of error makes it all the way to ErrorHandler, it is assumed to be an internal issue.

Every LoxError renders the same way:

```
[line <line>] Error <context>: <message>   ; <context> is the offending lexeme in single quotes, or empty
```
"""

import logging
import sys
from enum import Enum

from termcolor import colored


logger = logging.getLogger(__name__)


class LexErrorKind(Enum):
    UNEXPECTED_CHARACTER = "Unexpected character."
    UNTERMINATED_STRING = "Unterminated string."
    MALFORMED_NUMBER = "Malformed number."
    UNTERMINATED_COMMENT = "Unterminated block comment."


class ParseErrorKind(Enum):
    EXPECTED_EXPRESSION = "expected expression"
    EXPECTED_TOKEN = "expected token"
    EXPECTED_IDENTIFIER = "expected identifier"
    INVALID_ASSIGNMENT_TARGET = "invalid assignment target"


class RuntimeErrorKind(Enum):
    UNDEFINED_VARIABLE = "undefined variable"
    DIVISION_BY_ZERO = "division by zero"


class LoxError(Exception):
    """Positioned lox diagnostic. lexeme is the offending source text, or None if no specific token is implicated."""
    exit_code = 65

    def __init__(self, kind, line, message, lexeme=None):
        super().__init__(message)
        self.kind = kind
        self.line = line
        self.message = message
        self.lexeme = lexeme or None  # the EOF token has an empty lexeme

    @property
    def context(self):
        return f"'{self.lexeme}'" if self.lexeme is not None else ""

    def __str__(self):
        return f"[line {self.line}] Error {self.context}: {self.message}"

    def __repr__(self):
        return f"{type(self).__name__}({self.kind.name}, line={self.line}, lexeme={self.lexeme!r})"


class LexError(LoxError):
    """Raised by the scanner. Aborts scanning immediately."""

    def __init__(self, kind, line, lexeme=None):
        super().__init__(kind, line, kind.value, lexeme)


class ParseError(LoxError):
    """Raised by the parser. Aborts parsing immediately, no partial statement list is returned. For EXPECTED_TOKEN,
    expected is the lexeme that was required (e.g. ';' or ')').
    """

    def __init__(self, kind, token, message, expected=None):
        super().__init__(kind, token.line, message, token.lexeme)
        self.expected = expected


class LoxRuntimeError(LoxError):
    """Raised while evaluating. Effects of statements that already ran are not undone."""
    exit_code = 70

    def __init__(self, kind, token, message):
        super().__init__(kind, token.line, message, token.lexeme)
        self.token = token


class ErrorHandler:
    """Context manager that reports LoxErrors (and unexpected Python errors) to stream. If fatal, the process exits
    with the error's exit code; otherwise the error is swallowed after it is reported.
    """
    ERROR = "red"
    INTERNAL_EXIT = 70

    def __init__(self, fatal=True, color=True, stream=None):
        self.fatal = fatal
        self.color = color
        self.stream = stream if stream is not None else sys.stderr
        self.traceback = {}
        self.errors = []

    def register_file(self, path):
        """Registers path in traceback."""
        self.traceback[path] = (None, None)

    def register_line(self, path, line, line_num):
        """Registers the offending source line in traceback given path."""
        self.traceback[path] = (line, line_num)

    def remove_line(self, path):
        """Removes line from traceback given path. Should be called after a successful Session run."""
        self.traceback[path] = (None, None)

    def paint(self, text, color=None, attrs=None):
        if not self.color:
            return text
        return colored(text, color, attrs=attrs)

    def throw(self, error, internal=False):
        """Reports error using self.traceback. If self.fatal, exits."""
        error_msg = ""
        for file, (line, line_num) in self.traceback.items():  # dicts are insertion-ordered
            if line:
                error_msg += self.paint(f"  File '{file}', line {line_num}:\n", attrs=["bold"])
                error_msg += f"    {line}\n"

        if internal:
            error_msg += self.paint("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += self.paint("error: ", ErrorHandler.ERROR, attrs=["bold"]) + str(error)
        print(error_msg, file=self.stream)

        self.errors.append(error)
        if self.fatal:
            sys.exit(ErrorHandler.INTERNAL_EXIT if internal else error.exit_code)
        self.traceback = {path: (None, None) for path in self.traceback}

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None or exc_type is SystemExit:
            return False

        if exc_type is KeyboardInterrupt:
            print(self.paint("keyboard interrupt", ErrorHandler.ERROR, attrs=["bold"]), file=self.stream)
            if self.fatal:
                sys.exit(130)
        elif issubclass(exc_type, LoxError):
            logger.debug("reporting %r", exc_val)
            self.throw(exc_val)
        else:
            logger.debug("internal error", exc_info=(exc_type, exc_val, exc_tb))
            self.throw(f"unknown error: '{exc_type.__name__}: {exc_val}'", internal=True)
            return False

        return True
