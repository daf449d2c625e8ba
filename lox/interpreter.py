"""Lox interpreter: scanner -> parser -> tree-walking evaluator.

Basic program flow:
    1. Scanner: converts source text into a list of Tokens (see lox/syntax/scanner.py)
    2. Parser: recursive descent over the tokens, producing a list of statements (see lox/syntax/parser.py)
    3. Evaluator: executes the statements in order against a global Environment (see lox/lang/evaluator.py)

Each stage runs to completion before the next one starts. The first error of any stage is raised as a LoxError; if
scanning or parsing fails, nothing is executed.
"""

import logging

from lox.lang.environment import Environment
from lox.lang.evaluator import Evaluator
from lox.syntax.parser import parse
from lox.syntax.printer import AstPrinter
from lox.syntax.scanner import scan


logging.getLogger("lox").addHandler(logging.NullHandler())
logger = logging.getLogger(__name__)


class Interpreter:
    """Runs lox source against one global environment, so bindings persist across run calls."""

    def __init__(self, out=None):
        self.environment = Environment()
        self.evaluator = Evaluator(self.environment, out)

    def parse(self, source):
        """Returns the statements in source without executing them."""
        return parse(scan(source))

    def run(self, source):
        """Scans, parses and executes source. Raises the first LexError, ParseError or LoxRuntimeError."""
        statements = self.parse(source)
        logger.debug("executing %d statement(s)", len(statements))
        self.evaluator.interpret(statements)

    def dump(self, source):
        """Returns the prefix form of every statement in source, one per line."""
        return AstPrinter().print_program(self.parse(source))


def run(source, environment=None, out=None):
    """Executes source end-to-end. environment defaults to a fresh global environment."""
    evaluator = Evaluator(environment if environment is not None else Environment(), out)
    evaluator.interpret(parse(scan(source)))
