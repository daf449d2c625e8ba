"""Handles interactive/command-line mode for the lox interpreter. Uses cmd as backend."""

import cmd


class Shell(cmd.Cmd):
    """Lox interpreter shell."""
    intro = "Welcome to the Lox interpreter.\nType 'help' for more information."
    prompt = ">>> "
    secondary_prompt = "... "  # used for line continuations
    _tmp_prompt = ">>> "       # also used for prompt swapping in line continuations
    COMMANDS = ("help", "exit", "EOF")

    def __init__(self, sess, *args, prompt=None, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess
        if prompt is not None:
            self.prompt = self._tmp_prompt = prompt

        self._tmp_line = ""
        self._start_line = 1  # line the pending statement started on
        self.line_num = 0

    def parseline(self, line):
        """Only a bare command word is a shell command. Anything else, e.g. 'exit = 1;', is lox source."""
        line = line.strip()
        if line in Shell.COMMANDS:
            return super().parseline(line)
        return None, None, line

    def default(self, line):
        """Executes arbitrary lox source."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.line_num += 1
            if not self._tmp_line:
                self._start_line = self.line_num
            line, add_to_prev = self.sess.preprocess_line(line, self._tmp_line)

            if add_to_prev:
                self._tmp_line = line
                self.prompt = self.secondary_prompt
            else:
                self._tmp_line = ""
                self.prompt = self._tmp_prompt

                self.sess.run(line, self._start_line)

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Welcome to the lox interpreter!\n\n"
              "Lox is a small dynamically-typed scripting language. This interpreter supports \n"
              "numbers, strings, booleans and nil, arithmetic/comparison operators, variables \n"
              "and print statements.\n\n"
              "Try it out by typing 'var x = 5;'. This will bind 5 to the name 'x'. Next, try \n"
              "typing 'print x * 2;'. This will print 10.", file=self.stdout)

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        print(file=self.stdout)
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
