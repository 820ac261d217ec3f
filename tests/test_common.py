# -*- coding: utf-8 -*-

import unittest

from strcomb.contrib.common import (
    alpha,
    cons,
    const,
    digit,
    flatten,
    join,
    literals,
    sep_by,
    trim,
    unarg,
    whitespace,
)
from strcomb.parser import Failure, Success, a, many, oneplus


class CommonTest(unittest.TestCase):
    def test_functions(self) -> None:
        self.assertEqual(const(1)("x"), 1)
        self.assertEqual(flatten([[1, 2], [], [3]]), [1, 2, 3])
        self.assertEqual(unarg(lambda x, y: x - y)((5, 3)), 2)
        self.assertEqual(join(["a", "b"]), "ab")
        self.assertEqual(cons((1, [2, 3])), [1, 2, 3])

    def test_char_classes(self) -> None:
        self.assertEqual((oneplus(whitespace) >> join).parse(" \t\r\n"), " \t\r\n")
        self.assertEqual((oneplus(digit) >> join).parse("0129"), "0129")
        self.assertEqual((oneplus(alpha) >> join).parse("azAZ"), "azAZ")
        self.assertEqual(alpha.run("1", 0), Failure(0))

    def test_trim(self) -> None:
        expr = many(trim(a("x")))
        self.assertEqual(expr.parse(" x\n x\tx "), ["x", "x", "x"])
        self.assertEqual(trim(a("x")).name, "'x'")

    def test_literals_order(self) -> None:
        self.assertEqual(literals("<=", "<").run("<=", 0), Success("<=", 2))
        self.assertEqual(literals("<", "<=").run("<=", 0), Success("<", 1))
        self.assertEqual(literals().run("<", 0), Failure(0))

    def test_sep_by(self) -> None:
        numbers = sep_by(oneplus(digit) >> join >> int, trim(a(",")))
        self.assertEqual(numbers.parse("1, 22 ,333"), [1, 22, 333])
        self.assertEqual(numbers.parse(""), [])
        self.assertEqual(numbers.run("1,2,", 0), Success([1, 2], 3))
