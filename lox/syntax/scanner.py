"""Lexical analysis for lox: converts raw source text into a list of Tokens.

The source is consumed once, left to right. Two-character operators are decided with one character of lookahead
(maximal munch over a two character window), and the first lexical error aborts the scan.
"""

import logging

from lox.lang.error import LexError, LexErrorKind
from lox.syntax.tokens import KEYWORDS, Token, TokenKind


logger = logging.getLogger(__name__)


class Scanner:
    """Single-use scanner over one source string."""
    SINGLE = {
        "(": TokenKind.LEFT_PAREN,
        ")": TokenKind.RIGHT_PAREN,
        "{": TokenKind.LEFT_BRACE,
        "}": TokenKind.RIGHT_BRACE,
        ",": TokenKind.COMMA,
        ".": TokenKind.DOT,
        "-": TokenKind.MINUS,
        "+": TokenKind.PLUS,
        ";": TokenKind.SEMICOLON,
        "*": TokenKind.STAR,
    }
    # char: (kind if followed by "=", kind otherwise)
    DOUBLE = {
        "!": (TokenKind.BANG_EQUAL, TokenKind.BANG),
        "=": (TokenKind.EQUAL_EQUAL, TokenKind.EQUAL),
        "<": (TokenKind.LESS_EQUAL, TokenKind.LESS),
        ">": (TokenKind.GREATER_EQUAL, TokenKind.GREATER),
    }
    WHITESPACE = " \r\t"

    def __init__(self, source):
        self.source = source
        self.tokens = []

        self.start = 0    # first character of the lexeme being scanned
        self.current = 0  # character currently being considered
        self.line = 1

    def scan_tokens(self):
        """Scans the whole source. Returns the tokens, always terminated by a single EOF token."""
        logger.debug("scanning %d characters", len(self.source))

        while not self.at_end():
            self.start = self.current
            self.scan_token()

        self.tokens.append(Token(TokenKind.EOF, "", None, self.line))
        return self.tokens

    def scan_token(self):
        char = self.advance()

        if char in Scanner.SINGLE:
            self.add_token(Scanner.SINGLE[char])
        elif char in Scanner.DOUBLE:
            matched, single = Scanner.DOUBLE[char]
            self.add_token(matched if self.match("=") else single)
        elif char == "/":
            if self.match("/"):
                self.line_comment()
            elif self.match("*"):
                self.block_comment()
            else:
                self.add_token(TokenKind.SLASH)
        elif char in Scanner.WHITESPACE:
            pass
        elif char == "\n":
            self.line += 1
        elif char == "\"":
            self.string()
        elif Scanner.is_digit(char):
            self.number()
        elif Scanner.is_alpha(char):
            self.identifier()
        else:
            raise LexError(LexErrorKind.UNEXPECTED_CHARACTER, self.line, char)

    def line_comment(self):
        """Discards everything up to (but not including) the end of the line."""
        while self.peek() != "\n" and not self.at_end():
            self.advance()

    def block_comment(self):
        """Discards a flat /* ... */ comment. Block comments do not nest."""
        line = self.line
        while not (self.peek() == "*" and self.peek_next() == "/"):
            if self.at_end():
                raise LexError(LexErrorKind.UNTERMINATED_COMMENT, line)
            if self.advance() == "\n":
                self.line += 1

        self.current += 2  # closing */

    def string(self):
        while self.peek() != "\"" and not self.at_end():
            if self.peek() == "\n":
                self.line += 1
            self.advance()

        if self.at_end():
            raise LexError(LexErrorKind.UNTERMINATED_STRING, self.line)

        self.advance()  # closing "
        self.add_token(TokenKind.STRING, self.source[self.start + 1:self.current - 1])

    def number(self):
        while Scanner.is_digit(self.peek()):
            self.advance()

        fractional = self.peek() == "." and Scanner.is_digit(self.peek_next())
        if fractional:
            self.advance()  # consume "."
            while Scanner.is_digit(self.peek()):
                self.advance()

        text = self.source[self.start:self.current]
        try:
            value = float(text) if fractional else int(text)
        except ValueError:
            raise LexError(LexErrorKind.MALFORMED_NUMBER, self.line, text)

        self.add_token(TokenKind.NUMBER, value)

    def identifier(self):
        while Scanner.is_alpha_numeric(self.peek()):
            self.advance()

        text = self.source[self.start:self.current]
        self.add_token(KEYWORDS.get(text, TokenKind.IDENTIFIER))

    def add_token(self, kind, literal=None):
        self.tokens.append(Token(kind, self.source[self.start:self.current], literal, self.line))

    def advance(self):
        char = self.source[self.current]
        self.current += 1
        return char

    def match(self, expected):
        """Consumes the current character only if it is expected."""
        if self.at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def peek(self):
        if self.at_end():
            return "\0"
        return self.source[self.current]

    def peek_next(self):
        if self.current + 1 >= len(self.source):
            return "\0"
        return self.source[self.current + 1]

    def at_end(self):
        return self.current >= len(self.source)

    @staticmethod
    def is_digit(char):
        return "0" <= char <= "9"

    @staticmethod
    def is_alpha(char):
        return "a" <= char <= "z" or "A" <= char <= "Z" or char == "_"

    @staticmethod
    def is_alpha_numeric(char):
        return Scanner.is_alpha(char) or Scanner.is_digit(char)


def scan(source):
    """Returns the tokens of source. Raises LexError on the first lexical error."""
    return Scanner(source).scan_tokens()
