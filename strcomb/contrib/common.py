# Copyright © 2009/2023 Andrey Vlasovskikh
#
# Permission is hereby granted, free of charge, to any person obtaining a copy of this
# software and associated documentation files (the "Software"), to deal in the Software
# without restriction, including without limitation the rights to use, copy, modify,
# merge, publish, distribute, sublicense, and/or sell copies of the Software, and to
# permit persons to whom the Software is furnished to do so, subject to the following
# conditions:
#
# The above copyright notice and this permission notice shall be included in all copies
# or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED,
# INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A
# PARTICULAR PURPOSE AND NON-INFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT
# HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF
# CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE
# OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.

"""Helper functions and ready-made parsers for building grammars."""

__all__ = [
    "const",
    "flatten",
    "unarg",
    "join",
    "cons",
    "whitespace",
    "digit",
    "alpha",
    "trim",
    "literals",
    "sep_by",
]

from typing import Any, Callable, Iterable, List, Tuple, TypeVar

from strcomb.parser import (
    Parser,
    a,
    char_in,
    char_range,
    literal,
    many,
    maybe,
    never,
    one_of,
)

_A = TypeVar("_A")
_B = TypeVar("_B")


# Well-known functions
def const(x: _A) -> Callable[[Any], _A]:
    return lambda _: x


def flatten(lists: Iterable[List[_A]]) -> List[_A]:
    return [x for xs in lists for x in xs]


def unarg(f: Callable[..., _B]) -> Callable[[Tuple[Any, ...]], _B]:
    return lambda args: f(*args)


def join(chars: Iterable[str]) -> str:
    return "".join(chars)


def cons(values: Tuple[_A, List[_A]]) -> List[_A]:
    """Prepend the first value to the rest, e.g. for `p.then(many(-sep + p))`."""
    first, rest = values
    return [first] + rest


# Character classes
whitespace = char_in(" \t\r\n").named("whitespace")
digit = char_range("0", "9").named("digit")
alpha = (char_range("a", "z") | char_range("A", "Z")).named("alpha")


def trim(p: Parser[_A]) -> Parser[_A]:
    """Return a parser of `p` surrounded by optional whitespace.

    Examples:

    ```pycon
    >>> trim(a("x")).parse("  x\\n")
    'x'

    ```
    """
    return p.surround(many(whitespace)).named(p.name)


def literals(*strings: str) -> Parser[str]:
    """Return a parser of the first of `strings` found at the current position.

    The strings are tried in the order of declaration, so put longer strings that
    start with shorter ones first.
    """
    if not strings:
        return never
    return one_of(*[literal(s) for s in strings]).named(
        " or ".join(repr(s) for s in strings)
    )


def sep_by(p: Parser[_A], sep: Parser[Any]) -> Parser[List[_A]]:
    """Return a parser of zero or more `p` separated by `sep`.

    Examples:

    ```pycon
    >>> numbers = sep_by(digit, a(","))
    >>> numbers.parse("1,2,3")
    ['1', '2', '3']
    >>> numbers.parse("")
    []

    ```
    """
    items = p.then(many(-sep + p)) >> cons
    return (maybe(items, ()) >> list).named("{ %s / %s }" % (p.name, sep.name))
