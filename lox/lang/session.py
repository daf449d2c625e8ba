"""Session control for lox. Runs source either from a file (file interpretation mode) or line by line from the
command-line shell, keeping one global environment for the whole session.
"""

import logging

from lox.interpreter import Interpreter
from lox.lang.error import LoxError


logger = logging.getLogger(__name__)


class Session:
    """Governs a lox session: the interpreter whose global scope persists across runs, and error bookkeeping."""
    SH_FILE = "<in>"  # command-line interpreter filename

    def __init__(self, error_handler, path, cmd_line, show_ast=False, out=None):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path          # used for error messages
        self.cmd_line = cmd_line  # whether or not in command-line mode
        self.show_ast = show_ast  # print syntax trees instead of executing
        self.out = out

        self.interpreter = Interpreter(out)
        self.source = ""

        if self.cmd_line:
            self.error_handler.fatal = False

        if path != Session.SH_FILE:
            logger.info("loading %s", path)
            with open(path, "r") as file:  # OSError is left to the caller
                self.source = file.read()

        elif not cmd_line:
            raise ValueError("'<in>' is a reserved filename")

    @staticmethod
    def preprocess_line(line, pending=""):
        """Joins line onto pending (an unfinished previous line). Returns the joined line and whether or not it
        needs a continuation: a line with unclosed parentheses (outside string literals and comments) is continued
        on the next one.
        """
        line = (pending + " " + line if pending else line).strip()

        depth = 0
        in_string = False
        for char, next_char in zip(line, line[1:] + " "):
            if char == '"':
                in_string = not in_string
            elif in_string:
                continue
            elif char == "/" and next_char == "/":
                break  # rest of the line is a comment
            elif char == "(":
                depth += 1
            elif char == ")":
                depth -= 1
        return line, depth > 0

    def run(self, source=None, line_num=1):
        """Runs source (by default, the loaded file). line_num is the line source starts on, for error messages.
        Errors are registered in the error handler's traceback and re-raised.
        """
        if source is None:
            source = self.source

        try:
            if self.show_ast:
                dumped = self.interpreter.dump(source)
                if dumped:
                    print(dumped, file=self.out)
            else:
                self.interpreter.run(source)
        except LoxError as error:
            lines = source.splitlines()
            if 0 < error.line <= len(lines):
                self.error_handler.register_line(self.path, lines[error.line - 1].strip(), line_num + error.line - 1)
            logger.debug("%s failed: %r", self.path, error)
            raise

        self.error_handler.remove_line(self.path)  # error was not raised

    @property
    def environment(self):
        return self.interpreter.environment
