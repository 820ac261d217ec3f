# -*- coding: utf-8 -*-

import unittest
from typing import Optional

from strcomb.parser import NoParseError, ParseError
from . import json


class JsonTest(unittest.TestCase):
    def t(self, data: str, expected: Optional[object] = None) -> None:
        self.assertEqual(json.loads(data), expected)

    def test_1_array(self) -> None:
        self.t("[1]", [1])

    def test_1_object(self) -> None:
        self.t('{"foo": "bar"}', {"foo": "bar"})

    def test_bool_and_null(self) -> None:
        self.t("[null, true, false]", [None, True, False])

    def test_empty_array(self) -> None:
        self.t("[]", [])
        self.t(" [ ] ", [])

    def test_empty_object(self) -> None:
        self.t("{}", {})
        self.t(" { } ", {})
        self.t(" [ { } ] ", [{}])

    def test_toplevel_scalars(self) -> None:
        self.t('  ""  ', "")
        self.t("  123  ", 123)
        self.t("  3.14  ", 3.14)
        self.t("  true  ", True)
        self.t("null", None)

    def test_many_array(self) -> None:
        self.t("[1, 2, [3, 4, 5], 6]", [1, 2, [3, 4, 5], 6])

    def test_many_object(self) -> None:
        # noinspection SpellCheckingInspection
        self.t(
            """
            {
                "foo": 1,
                "bar":
                {
                    "baz": 2,
                    "quux": [true, false],
                    "{}": {}
                },
                "spam": "eggs"
            }
        """,
            {
                "foo": 1,
                "bar": {
                    "baz": 2,
                    "quux": [True, False],
                    "{}": {},
                },
                "spam": "eggs",
            },
        )

    def test_nested_document(self) -> None:
        self.t(
            r"""
            {
                "escaped": "\ttest\u1234\ntest",
                "null": null,
                "a": +123,
                "b": -3.14e-1,
                "e": [
                    12,
                    34.56,
                    {"name": "Xiao Ming", "age": 18, "score": [99.8, 87.5, 60.0]},
                    "abc"
                ],
                "f": [],
                "g": {},
                "h": [true, {"m": false}]
            }
            """,
            {
                "escaped": "\ttest\u1234\ntest",
                "null": None,
                "a": 123,
                "b": -0.314,
                "e": [
                    12,
                    34.56,
                    {"name": "Xiao Ming", "age": 18, "score": [99.8, 87.5, 60.0]},
                    "abc",
                ],
                "f": [],
                "g": {},
                "h": [True, {"m": False}],
            },
        )

    def test_null(self) -> None:
        with self.assertRaises(NoParseError) as ctx:
            self.t("")
        self.assertEqual(ctx.exception.msg, "got unexpected end of input")

    def test_numbers(self) -> None:
        self.t(
            """\
            [
                0, 1, -1, 14, -14, 65536,
                0.0, 3.14, -3.14, -123.456,
                6.67428e-11, -1.602176e-19, 6.67428E-11
            ]
        """,
            [
                0,
                1,
                -1,
                14,
                -14,
                65536,
                0.0,
                3.14,
                -3.14,
                -123.456,
                6.67428e-11,
                -1.602176e-19,
                6.67428e-11,
            ],
        )

    def test_strings(self) -> None:
        # noinspection SpellCheckingInspection
        self.t(
            r"""
            [
                ["", "hello", "hello world!"],
                ["привет, мир!", "λx.x"],
                ["\"", "\\", "\/", "\b", "\f", "\n", "\r", "\t"],
                ["\u0000", "\u03bb", "\uffff", "\uFFFF"],
                ["вот функция идентичности:\nλx.x\nили так:\n\u03bbx.x"]
            ]
        """,
            [
                ["", "hello", "hello world!"],
                ["привет, мир!", "λx.x"],
                ['"', "\\", "/", "\x08", "\x0c", "\n", "\r", "\t"],
                ["\u0000", "\u03bb", "\uffff", "\uffff"],
                ["вот функция идентичности:\nλx.x\nили так:\n\u03bbx.x"],
            ],
        )

    def test_toplevel_string(self) -> None:
        with self.assertRaises(NoParseError):
            self.t("неправильно")

    def test_trailing_input(self) -> None:
        with self.assertRaises(NoParseError) as ctx:
            self.t("{}}")
        self.assertEqual(ctx.exception.pos, 2)
        with self.assertRaises(NoParseError):
            self.t("[1,2,3],4")

    def test_unclosed_object(self) -> None:
        with self.assertRaises(ParseError) as ctx:
            self.t("{")
        self.assertEqual(ctx.exception.msg, "'}' expected")
        self.assertEqual(ctx.exception.pos, 1)

    def test_mismatched_brackets(self) -> None:
        with self.assertRaises(ParseError) as ctx:
            self.t("[{]}")
        self.assertEqual(str(ctx.exception), "1,3: '}' expected")

    def test_missing_comma(self) -> None:
        with self.assertRaises(ParseError) as ctx:
            self.t("[1 2 3]")
        self.assertEqual(str(ctx.exception), "1,4: ']' expected")

    def test_missing_value_after_comma(self) -> None:
        with self.assertRaises(ParseError) as ctx:
            self.t("[1,\n 2,\n ]")
        self.assertEqual(ctx.exception.msg, "value expected")
        self.assertEqual(ctx.exception.place, (3, 2))

    def test_missing_colon(self) -> None:
        with self.assertRaises(ParseError) as ctx:
            self.t('{"a" 1}')
        self.assertEqual(ctx.exception.msg, "':' expected")
        self.assertEqual(ctx.exception.pos, 5)
