"""Runs the lox interpreter on a .lox file, or in command-line mode if no file is given. Also uses the error handling
context manager. Installed as the `lox` console script.
"""

import argparse
import logging
import sys

from lox.config import Config
from lox.lang.error import ErrorHandler
from lox.lang.session import Session
from lox.lang.shell import Shell


NO_INPUT = 66  # source file could not be opened


def build_parser():
    parser = argparse.ArgumentParser(prog="lox", description="Lox scanner, parser and tree-walking interpreter.")
    parser.add_argument("file", help="file to interpret and run (if empty, goes to command-line mode)", nargs="?")
    parser.add_argument("--ast", action="store_true", help="print each statement's syntax tree instead of running it")
    parser.add_argument("--log-level", help="logging level (default: $LOX_LOG or WARNING)")
    parser.add_argument("--no-color", action="store_true", help="do not color diagnostics")
    parser.add_argument("--prompt", help="command-line mode prompt (default: '>>> ')")
    return parser


def main(argv=None):
    """Runs lox interpreter. Called from the lox console script."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = Config.from_args(args)
    except ValueError as error:
        parser.error(str(error))

    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")

    with ErrorHandler(color=config.color) as error_handler:
        if args.file is not None:
            try:
                sess = Session(error_handler, args.file, cmd_line=False, show_ast=config.show_ast)
            except OSError as error:
                prefix = error_handler.paint("error: ", ErrorHandler.ERROR, attrs=["bold"])
                print(f"{prefix}'{args.file}' could not be opened: {error.strerror}", file=error_handler.stream)
                sys.exit(NO_INPUT)
            sess.run()

        else:
            sess = Session(error_handler, Session.SH_FILE, cmd_line=True, show_ast=config.show_ast)
            Shell(sess, prompt=config.prompt).cmdloop()


if __name__ == "__main__":
    main()
