"""Chained name -> value scopes. Only the global environment is created by the interpreter, but every Environment can
enclose another, forming a singly-linked chain from innermost to outermost scope.
"""

from lox.lang.error import LoxRuntimeError, RuntimeErrorKind


class Environment:

    def __init__(self, enclosing=None):
        self.values = {}           # dict of name: value bound in this scope
        self.enclosing = enclosing  # parent scope, None for the global environment

    def define(self, name, value):
        """Binds name to value in this scope. Re-declaring an existing name overwrites it."""
        self.values[name] = value

    def get(self, name):
        """Returns the value bound to token name in the nearest scope that has it."""
        if name.lexeme in self.values:
            return self.values[name.lexeme]
        if self.enclosing is not None:
            return self.enclosing.get(name)
        raise Environment.undefined(name)

    def assign(self, name, value):
        """Replaces the value of token name in the nearest scope that has it. Never creates a binding."""
        if name.lexeme in self.values:
            self.values[name.lexeme] = value
        elif self.enclosing is not None:
            self.enclosing.assign(name, value)
        else:
            raise Environment.undefined(name)

    @staticmethod
    def undefined(name):
        return LoxRuntimeError(RuntimeErrorKind.UNDEFINED_VARIABLE, name, f"Undefined variable '{name.lexeme}'.")

    def __contains__(self, name):
        return name in self.values or (self.enclosing is not None and name in self.enclosing)

    def __repr__(self):
        return f"Environment({self.values!r}, enclosing={self.enclosing!r})"
