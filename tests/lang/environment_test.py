import unittest

from lox.lang.environment import Environment
from lox.lang.error import LoxRuntimeError, RuntimeErrorKind
from lox.syntax.tokens import Token, TokenKind


def name(lexeme, line=1):
    return Token(TokenKind.IDENTIFIER, lexeme, None, line)


class EnvironmentTestCase(unittest.TestCase):

    def test_define_get(self):
        env = Environment()
        cases = {"a": 1, "b": 2.5, "c": "s", "d": True, "e": None}
        for key, value in cases.items():
            env.define(key, value)
        for key, value in cases.items():
            self.assertEqual(value, env.get(name(key)), key)

    def test_redefine(self):
        env = Environment()
        env.define("a", 1)
        env.define("a", "two")
        self.assertEqual("two", env.get(name("a")))

    def test_undefined(self):
        env = Environment()
        with self.assertRaises(LoxRuntimeError) as context:
            env.get(name("x", line=4))

        error = context.exception
        self.assertIs(RuntimeErrorKind.UNDEFINED_VARIABLE, error.kind)
        self.assertEqual(4, error.line)
        self.assertEqual("[line 4] Error 'x': Undefined variable 'x'.", str(error))

    def test_assign(self):
        env = Environment()
        env.define("a", 1)
        env.assign(name("a"), 2)
        self.assertEqual(2, env.get(name("a")))

        with self.assertRaises(LoxRuntimeError) as context:
            env.assign(name("b"), 1)
        self.assertIs(RuntimeErrorKind.UNDEFINED_VARIABLE, context.exception.kind)
        self.assertNotIn("b", env)  # assignment never creates a binding

    def test_chain(self):
        outer = Environment()
        outer.define("a", 1)
        outer.define("b", 2)
        inner = Environment(outer)
        inner.define("b", 3)

        self.assertEqual(1, inner.get(name("a")))
        self.assertEqual(3, inner.get(name("b")))  # shadowed
        self.assertEqual(2, outer.get(name("b")))

        inner.assign(name("a"), 10)
        self.assertEqual(10, outer.get(name("a")))
        self.assertNotIn("a", inner.values)

        self.assertIn("a", inner)
        self.assertNotIn("c", inner)
        self.assertRaises(LoxRuntimeError, inner.get, name("c"))
        self.assertRaises(LoxRuntimeError, inner.assign, name("c"), 1)


if __name__ == '__main__':
    unittest.main()
