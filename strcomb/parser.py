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

"""Functional parsing combinators over strings.

Parsing combinators define an internal domain-specific language (DSL) for describing
the parsing rules of a grammar. The DSL allows you to start with a few primitive
parsers, then combine your parsers to get more complex ones, and finally cover
the whole grammar you want to parse.

The structure of the language:

* Class `Parser`
    * All the primitives and combinators of the language return `Parser` objects
    * It defines the main `Parser.parse(text)` method
* Parsing results
    * `Success(value, pos)`, `Failure(pos)`, `Fatal(msg, text, pos)`
* Primitive parsers
    * `some(pred)`, `a(char)`, `literal(s)`, `char_range(lo, hi)`, `char_in(chars)`,
      `char_not_in(chars)`, `any_char`, `regex(pattern)`, `finished`, `pure(x)`,
      `never`, `fatal(msg)`
* Parser combinators
    * `p1 + p2`, `p1 | p2`, `p >> f`, `-p`, `p.then(q)`, `p.skip(q)`, `p.bind(f)`,
      `p.flat_map(f)`, `seq(...)`, `one_of(...)`, `repeat(p, n, m)`, `many(p)`,
      `oneplus(p)`, `maybe(p)`, `skip(p)`, `lookahead(p)`, `negative_lookahead(p)`
* Commit points
    * `p.commit(diagnostic)`, `p.expect(msg)`
* Abstraction
    * Use regular Python variables `p = ...  # Expression of type Parser` to define new
      rules (non-terminals) of your grammar, `forward_decl()` or `deferred(f)` for
      recursive rules

Every time you apply one of the combinators, you get a new `Parser` object. In other
words, the set of `Parser` objects is closed under the means of combination.

A parser never raises an exception to backtrack. It returns a `Success`, a
recoverable `Failure` that alternatives and repetitions may catch, or a `Fatal`
diagnostic that only `Parser.parse()` turns into an exception.
"""

__all__ = [
    "some",
    "a",
    "literal",
    "char_range",
    "char_in",
    "char_not_in",
    "any_char",
    "regex",
    "finished",
    "pure",
    "never",
    "fatal",
    "seq",
    "one_of",
    "repeat",
    "many",
    "oneplus",
    "maybe",
    "skip",
    "lookahead",
    "negative_lookahead",
    "deferred",
    "forward_decl",
    "Success",
    "Failure",
    "Fatal",
    "Result",
    "NoParseError",
    "ParseError",
    "GrammarError",
    "Parser",
]

import logging
from typing import (
    Any,
    Callable,
    Generic,
    Iterable,
    List,
    Optional,
    Tuple,
    TypeVar,
    Union,
    overload,
)

from strcomb.patterns import compile_pattern
from strcomb.util import ParsingError, Place, place_to_str, pos_to_place

log = logging.getLogger("strcomb")

debug = False

_A = TypeVar("_A")
_B = TypeVar("_B")
_C = TypeVar("_C")


class Success(Generic[_A]):
    """A successful parsing result: the parsed `value` and the next position `pos`."""

    def __init__(self, value: _A, pos: int) -> None:
        self.value = value
        self.pos = pos

    def __bool__(self) -> bool:
        return True

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Success)
            and self.value == other.value
            and self.pos == other.pos
        )

    def __repr__(self) -> str:
        return "Success(%r, %d)" % (self.value, self.pos)


class Failure:
    """A recoverable failure at the position `pos`.

    Alternatives, repetitions and optional parsers catch it and try something else at
    the same position.
    """

    def __init__(self, pos: int) -> None:
        self.pos = pos

    def __bool__(self) -> bool:
        return False

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Failure) and self.pos == other.pos

    def __repr__(self) -> str:
        return "Failure(%d)" % self.pos


class Fatal:
    """A fatal parsing error at the position `pos` of `text`.

    No combinator recovers from it, it terminates the parsing. The (_line_, _column_)
    place of the error is computed only when you ask for it.
    """

    def __init__(self, msg: str, text: str, pos: int) -> None:
        self.msg = msg
        self.text = text
        self.pos = pos

    @property
    def place(self) -> Place:
        return pos_to_place(self.text, self.pos)

    def __bool__(self) -> bool:
        return False

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Fatal)
            and self.msg == other.msg
            and self.pos == other.pos
            and self.text == other.text
        )

    def __repr__(self) -> str:
        return "Fatal(%r, %d)" % (self.msg, self.pos)

    def __str__(self) -> str:
        return "%s: %s" % (place_to_str(self.place), self.msg)


Result = Union[Success[_A], Failure, Fatal]


class NoParseError(ParsingError):
    """The parser failed to match the text or left some of it unparsed."""


class ParseError(ParsingError):
    """A fatal error reported by a commit point of the grammar."""


class GrammarError(Exception):
    """Raised when the grammar definition itself contains errors."""


class Parser(Generic[_A]):
    """A parser object that can parse a string or can be combined with other parsers
    using `+`, `|`, `>>`, `many()`, and other parsing combinators.

    Type: `Parser[A]`

    The generic variable in the type is `A`, the type of the parsed value.

    In order to define a parser for your grammar:

    1. You start with primitive parsers by calling `a(char)`, `literal(s)`,
       `some(pred)`, `regex(pattern)`, `forward_decl()`, `finished`
    2. You use parsing combinators `p1 + p2`, `p1 | p2`, `p >> f`, `many(p)`, and
       others to combine parsers into a more complex parser
    3. You can assign complex parsers to variables to define names that correspond to
       the rules of your grammar

    !!! Note

        The constructor `Parser.__init__()` is considered **internal** and may be
        changed in future versions. Use primitive parsers and parsing combinators to
        construct new parsers.
    """

    def __init__(
        self,
        p: Union["Parser[_A]", Callable[[str, int], Result[_A]]],
    ) -> None:
        """Wrap the parser function `p` into a `Parser` object."""
        self.name = ""
        self.define(p)

    def named(self, name: str) -> "Parser[_A]":
        """Specify the name of the parser for easier debugging.

        Type: `(str) -> Parser[A]`

        This name is used in the debug-level parsing log. You can also get it via the
        `Parser.name` attribute.

        Examples:

        ```pycon
        >>> expr = (a("x") + a("y")).named("expr")
        >>> expr.name
        'expr'

        ```

        ```pycon
        >>> expr = a("x") + a("y")
        >>> expr.name
        "('x', 'y')"

        ```

        !!! Note

            You can enable the parsing log this way:

            ```python
            import logging
            logging.basicConfig(level=logging.DEBUG)
            import strcomb.parser
            strcomb.parser.debug = True
            ```

            Only the parsers created after setting `debug` write to the log.
        """
        self.name = name
        return self

    def define(
        self,
        p: Union["Parser[_A]", Callable[[str, int], Result[_A]]],
    ) -> None:
        """Define the parser created earlier as a forward declaration.

        Type: `(Parser[A]) -> None`

        Use `p = forward_decl()` in combination with `p.define(...)` to define
        recursive parsers.

        See the examples in the docs for `forward_decl()`.
        """
        f = getattr(p, "run", p)
        if debug:
            setattr(self, "_run", f)
        else:
            setattr(self, "run", f)
        name = getattr(p, "name", p.__doc__)
        if name is not None:
            self.named(name)

    def run(self, text: str, pos: int) -> Result[_A]:
        """Run the parser against the text starting at the position `pos`.

        Type: `(str, int) -> Result[A]`

        It returns `Success(value, next_pos)` with `pos <= next_pos <= len(text)`,
        `Failure(pos)` if the parser doesn't match, or `Fatal(msg, text, pos)` if a
        commit point of the grammar has failed. It never raises an exception for
        a failed match.

        !!! Warning

            This is method is **internal** and may be changed in future versions. Use
            `Parser.parse(text)` instead.
        """
        log.debug("trying %s at %d" % (self.name, pos))
        return self._run(text, pos)

    def _run(self, text: str, pos: int) -> Result[_A]:
        raise NotImplementedError("you must define() a parser")

    def parse(self, text: str) -> _A:
        """Parse the whole string and return the parsed value.

        Type: `(str) -> A`

        If the parser fails to parse the text or leaves some of it unparsed, it raises
        `NoParseError`. If a commit point of the grammar fails, it raises `ParseError`
        with the message of the commit point.

        Examples:

        ```pycon
        >>> expr = literal("ab") + a("c")
        >>> expr.parse("abc")
        ('ab', 'c')

        ```
        """
        value, pos = self.parse_prefix(text)
        if pos < len(text):
            raise NoParseError(
                "got unexpected trailing input: %r" % _excerpt(text, pos), text, pos
            )
        return value

    def parse_prefix(self, text: str, pos: int = 0) -> Tuple[_A, int]:
        """Parse the beginning of the string and return the parsed value and the
        position right after it.

        Type: `(str, int) -> Tuple[A, int]`

        Unlike `Parser.parse()`, it allows unparsed text after the parsed value.

        Examples:

        ```pycon
        >>> literal("ab").parse_prefix("abcd")
        ('ab', 2)

        ```
        """
        r = self.run(text, pos)
        if isinstance(r, Success):
            return r.value, r.pos
        elif isinstance(r, Fatal):
            raise ParseError(r.msg, text, r.pos)
        elif r.pos < len(text):
            raise NoParseError(
                "got unexpected input: %r" % _excerpt(text, r.pos), text, r.pos
            )
        else:
            raise NoParseError("got unexpected end of input", text, r.pos)

    @overload
    def __add__(self, other: "_IgnoredParser") -> "Parser[_A]":
        pass

    @overload
    def __add__(self, other: "Parser[_B]") -> "_TupleParser[Tuple[_A, _B]]":
        pass

    def __add__(
        self,
        other: Union["_IgnoredParser", "Parser[_B]"],
    ) -> Union["Parser[_A]", "_TupleParser[Tuple[_A, _B]]"]:
        """Sequential combination of parsers. It runs this parser, then the other
        parser.

        The return value of the resulting parser is a tuple of each parsed value in
        the sum of parsers. We merge all parsing results of `p1 + p2 + ... + pN` into a
        single tuple. It means that the parsing result may be a 2-tuple, a 3-tuple,
        a 4-tuple, etc. of parsed values. You avoid this by transforming the parsed
        pair into a new value using the `>>` combinator, or by using `Parser.then()`
        that always returns a pair.

        You can also skip some parsing results in the resulting parsers by using `-p`
        or `skip(p)` for some parsers in your sum of parsers.

        Examples:

        ```pycon
        >>> expr = a("x") + a("y")
        >>> expr.parse("xy")
        ('x', 'y')

        ```

        ```pycon
        >>> expr = a("x") + a("y") + a("z")
        >>> expr.parse("xyz")
        ('x', 'y', 'z')

        ```
        """

        def magic(v1: Any, v2: Any) -> _Tuple:
            if isinstance(v1, _Tuple):
                return _Tuple(v1 + (v2,))
            else:
                return _Tuple((v1, v2))

        name = "(%s, %s)" % (self.name, other.name)
        if isinstance(other, _IgnoredParser):
            return Parser(_both(self, other, _left)).named(name)
        else:
            _add: _TupleParser[Tuple[_A, _B]] = _TupleParser(_both(self, other, magic))
            _add.name = name
            return _add

    def __or__(self, other: "Parser[_B]") -> "Parser[Union[_A, _B]]":
        """Choice combination of parsers.

        It runs this parser and returns its result. If the parser fails with a
        recoverable `Failure`, it runs the other parser at the same position. A `Fatal`
        result is returned as is, the other parser is not tried.

        Examples:

        ```pycon
        >>> expr = a("x") | a("y")
        >>> expr.parse("x")
        'x'
        >>> expr.parse("y")
        'y'

        ```
        """

        @Parser
        def _or(text: str, pos: int) -> Result[Union[_A, _B]]:
            r = self.run(text, pos)
            if isinstance(r, Failure):
                return other.run(text, pos)
            return r

        _or.name = "%s or %s" % (self.name, other.name)
        return _or

    def __rshift__(self, f: Callable[[_A], _B]) -> "Parser[_B]":
        """Transform the parsing result by applying the specified function.

        Type: `(Callable[[A], B]) -> Parser[B]`

        You can use it for transforming the parsed value into another value before
        including it into the parse tree (the AST). Failures are passed through.

        Examples:

        ```pycon
        >>> def make_canonical_name(s):
        ...     return s.lower()
        >>> expr = (a("D") | a("d")) >> make_canonical_name
        >>> expr.parse("D")
        'd'
        >>> expr.parse("d")
        'd'

        ```
        """

        @Parser
        def _shift(text: str, pos: int) -> Result[_B]:
            r = self.run(text, pos)
            if isinstance(r, Success):
                return Success(f(r.value), r.pos)
            return r

        return _shift.named(self.name)

    def value(self, x: _B) -> "Parser[_B]":
        """Return a parser that parses the same text, but its value is `x`.

        Examples:

        ```pycon
        >>> expr = a("t").value(True) | a("f").value(False)
        >>> expr.parse("f")
        False

        ```
        """
        return (self >> (lambda _: x)).named(self.name)

    def then(self, other: "Parser[_B]") -> "Parser[Tuple[_A, _B]]":
        """Sequential combination of two parsers that returns a pair of their values.

        Type: `(Parser[B]) -> Parser[Tuple[A, B]]`

        Unlike `+`, the values are never merged into a flat tuple, so
        `p.then(q).then(r)` returns `((vp, vq), vr)`.

        Examples:

        ```pycon
        >>> expr = literal("hello").then(a("!"))
        >>> expr.parse("hello!")
        ('hello', '!')

        ```
        """
        return Parser(_both(self, other, _pair)).named(
            "(%s, %s)" % (self.name, other.name)
        )

    def skip(self, other: "Parser[Any]") -> "Parser[_A]":
        """Run this parser, then the other parser, and return the value of this one.

        Type: `(Parser[Any]) -> Parser[A]`

        Examples:

        ```pycon
        >>> expr = a("x").skip(a(";"))
        >>> expr.parse("x;")
        'x'

        ```
        """
        return Parser(_both(self, other, _left)).named(
            "(%s, %s)" % (self.name, other.name)
        )

    def surround(
        self, prefix: "Parser[Any]", suffix: "Optional[Parser[Any]]" = None
    ) -> "Parser[_A]":
        """Return a parser of this parser between `prefix` and `suffix`.

        If there is no `suffix`, `prefix` is used on both sides.

        Examples:

        ```pycon
        >>> expr = a("x").surround(a("("), a(")"))
        >>> expr.parse("(x)")
        'x'

        ```
        """
        if suffix is None:
            suffix = prefix
        inner = Parser(_both(prefix, self, _right))
        return inner.skip(suffix).named(
            "(%s, %s, %s)" % (prefix.name, self.name, suffix.name)
        )

    def bind(self, f: Callable[[_A], "Parser[_B]"]) -> "Parser[_B]":
        """Bind the parser to a monadic function that returns a new parser.

        Type: `(Callable[[A], Parser[B]]) -> Parser[B]`

        Also known as `>>=` in Haskell. The next parser may depend on the parsed value
        of this parser, e.g. a closing tag must be equal to the opening tag.

        !!! Note

            You can parse any context-free grammar without resorting to `bind`. Use it
            only for context-sensitive parts of your grammar.
        """

        @Parser
        def _bind(text: str, pos: int) -> Result[_B]:
            r = self.run(text, pos)
            if not isinstance(r, Success):
                return r
            return f(r.value).run(text, r.pos)

        _bind.name = "(%s >>=)" % (self.name,)
        return _bind

    def flat_map(self, f: Callable[[_A], "Parser[_B]"]) -> "Parser[Tuple[_A, _B]]":
        """Like `Parser.bind()`, but return the pair of both parsed values.

        Type: `(Callable[[A], Parser[B]]) -> Parser[Tuple[A, B]]`

        Examples:

        ```pycon
        >>> digit = char_range("0", "9")
        >>> expr = digit.flat_map(lambda n: repeat(a("x"), int(n), int(n)))
        >>> expr.parse("2xx")
        ('2', ['x', 'x'])

        ```
        """

        def pair_with(v1: _A) -> Parser[Tuple[_A, _B]]:
            return f(v1) >> (lambda v2: (v1, v2))

        return self.bind(pair_with).named("(%s >>=)" % (self.name,))

    def not_followed_by(self, test: "Parser[Any]") -> "Parser[_A]":
        """Run this parser and then require that `test` doesn't match right after it.

        Type: `(Parser[Any]) -> Parser[A]`

        Nothing is consumed by `test`.

        Examples:

        ```pycon
        >>> keyword = literal("if").not_followed_by(char_range("a", "z"))
        >>> keyword.parse_prefix("if x")
        ('if', 2)

        ```
        """
        return self.skip(negative_lookahead(test)).named(
            "(%s, !%s)" % (self.name, test.name)
        )

    def commit(self, diagnostic: Callable[[str, int], str]) -> "Parser[_A]":
        """Turn a recoverable failure of this parser into a fatal error.

        Type: `(Callable[[str, int], str]) -> Parser[A]`

        The function `diagnostic` gets the text and the position of the failure and
        returns the error message. Use it at the point of no return of your grammar,
        e.g. right after an opening bracket, so a syntax error is reported there
        instead of silently trying other alternatives.
        """
        verbose = debug

        @Parser
        def _commit(text: str, pos: int) -> Result[_A]:
            r = self.run(text, pos)
            if isinstance(r, Failure):
                if verbose:
                    log.debug("commit point %s failed at %d" % (self.name, r.pos))
                return Fatal(diagnostic(text, r.pos), text, r.pos)
            return r

        _commit.name = self.name
        return _commit

    def expect(self, msg: str) -> "Parser[_A]":
        """Turn a recoverable failure of this parser into a fatal error with the
        message `msg`.

        Type: `(str) -> Parser[A]`

        See also `Parser.commit()`.
        """

        def diagnostic(_text: str, _pos: int) -> str:
            return msg

        return self.commit(diagnostic)

    def __neg__(self) -> "_IgnoredParser":
        """Return a parser that parses the same text, but its parsing result is
        ignored by the sequential `+` combinator.

        Type: `(Parser[A]) -> _IgnoredParser`

        You can use it for throwing away elements of concrete syntax (e.g. `","`,
        `";"`).

        Examples:

        ```pycon
        >>> expr = -a("x") + a("y")
        >>> expr.parse("xy")
        'y'

        ```

        ```pycon
        >>> expr = a("x") + -a("y") + a("z")
        >>> expr.parse("xyz")
        ('x', 'z')

        ```

        !!! Note

            You **should not** pass the resulting parser to any combinators other than
            `+`. You **should** have at least one non-skipped value in your
            `p1 + p2 + ... + pN`. The parsed value of `-p` is an **internal** `_Ignored`
            object, not intended for actual use.
        """
        return _IgnoredParser(self)


def _both(
    p: Parser[Any], q: Parser[Any], combine: Callable[[Any, Any], Any]
) -> Callable[[str, int], Result[Any]]:
    def _seq(text: str, pos: int) -> Result[Any]:
        r1 = p.run(text, pos)
        if not isinstance(r1, Success):
            return r1
        r2 = q.run(text, r1.pos)
        if not isinstance(r2, Success):
            return r2
        return Success(combine(r1.value, r2.value), r2.pos)

    return _seq


def _pair(v1: Any, v2: Any) -> Tuple[Any, Any]:
    return v1, v2


def _left(v1: Any, _v2: Any) -> Any:
    return v1


def _right(_v1: Any, v2: Any) -> Any:
    return v2


def _excerpt(text: str, pos: int) -> str:
    line = text[pos:].split("\n", 1)[0]
    return line[:20] if line else text[pos : pos + 1]


class _Tuple(tuple):
    pass


class _TupleParser(Parser[_A], Generic[_A]):
    @overload  # type: ignore[override]
    def __add__(self, other: "_IgnoredParser") -> "_TupleParser[_A]":
        pass

    @overload
    def __add__(self, other: Parser[Any]) -> Parser[Any]:
        pass

    def __add__(
        self, other: Union["_IgnoredParser", Parser[Any]]
    ) -> Union["_TupleParser[_A]", Parser[Any]]:
        return super().__add__(other)


class _Ignored:
    def __init__(self, value: Any) -> None:
        self.value = value

    def __repr__(self) -> str:
        return "_Ignored(%s)" % repr(self.value)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _Ignored) and self.value == other.value


class _IgnoredParser(Parser[Any]):
    def __init__(self, p: Parser[Any]) -> None:
        def ignored(text: str, pos: int) -> Result[Any]:
            r = p.run(text, pos)
            if isinstance(r, Success) and not isinstance(r.value, _Ignored):
                return Success(_Ignored(r.value), r.pos)
            return r

        super(_IgnoredParser, self).__init__(ignored)
        self.name = p.name

    @overload  # type: ignore[override]
    def __add__(self, other: "_IgnoredParser") -> "_IgnoredParser":
        pass

    @overload
    def __add__(self, other: Parser[_C]) -> Parser[_C]:
        pass

    def __add__(
        self, other: Union["_IgnoredParser", Parser[_C]]
    ) -> Union["_IgnoredParser", Parser[_C]]:
        name = "(%s, %s)" % (self.name, other.name)
        if isinstance(other, _IgnoredParser):
            ip = _IgnoredParser(Parser(_both(self, other, _right)))
            ip.name = name
            return ip
        else:
            return Parser(_both(self, other, _right)).named(name)


def some(pred: Callable[[str], bool]) -> Parser[str]:
    """Return a parser that parses a character if it satisfies the predicate `pred`.

    Type: `(Callable[[str], bool]) -> Parser[str]`

    Examples:

    ```pycon
    >>> expr = some(lambda c: c.isalpha()).named("alpha")
    >>> expr.parse("x")
    'x'
    >>> expr.run("1", 0)
    Failure(0)

    ```
    """
    verbose = debug

    @Parser
    def _some(text: str, pos: int) -> Result[str]:
        if pos < len(text):
            c = text[pos]
            if pred(c):
                if verbose:
                    log.debug("*matched* %r, new pos = %d" % (c, pos + 1))
                return Success(c, pos + 1)
        return Failure(pos)

    _some.name = "some(...)"
    return _some


def a(char: str) -> Parser[str]:
    """Return a parser that parses a character equal to `char`.

    Type: `(str) -> Parser[str]`

    Examples:

    ```pycon
    >>> expr = a("x")
    >>> expr.parse("x")
    'x'
    >>> expr.run("y", 0)
    Failure(0)

    ```
    """

    def eq_char(c: str) -> bool:
        return c == char

    return some(eq_char).named(repr(char))


def literal(s: str) -> Parser[str]:
    """Return a parser that parses the string `s`.

    Type: `(str) -> Parser[str]`

    Examples:

    ```pycon
    >>> literal("abc").run("abcd", 0)
    Success('abc', 3)

    ```
    """

    @Parser
    def _literal(text: str, pos: int) -> Result[str]:
        if text.startswith(s, pos):
            return Success(s, pos + len(s))
        return Failure(pos)

    _literal.name = repr(s)
    return _literal


def char_range(lo: str, hi: str) -> Parser[str]:
    """Return a parser that parses a character between `lo` and `hi` inclusive.

    Type: `(str, str) -> Parser[str]`

    The bounds may be given in any order.
    """
    if lo > hi:
        lo, hi = hi, lo

    def in_range(c: str) -> bool:
        return lo <= c <= hi

    return some(in_range).named("[%s-%s]" % (lo, hi))


def char_in(chars: Iterable[str]) -> Parser[str]:
    """Return a parser that parses any of the characters `chars`.

    Type: `(Iterable[str]) -> Parser[str]`
    """
    allowed = frozenset(chars)

    def is_allowed(c: str) -> bool:
        return c in allowed

    return some(is_allowed).named("[%s]" % "".join(sorted(allowed)))


def char_not_in(chars: Iterable[str]) -> Parser[str]:
    """Return a parser that parses any character except the characters `chars`.

    Type: `(Iterable[str]) -> Parser[str]`
    """
    forbidden = frozenset(chars)

    def is_allowed(c: str) -> bool:
        return c not in forbidden

    return some(is_allowed).named("[^%s]" % "".join(sorted(forbidden)))


any_char = some(lambda _: True).named("any char")


def regex(pattern: str, flags: int = 0) -> Parser[str]:
    """Return a parser that parses the text matched by the regexp `pattern` at the
    current position.

    Type: `(str, int) -> Parser[str]`

    Compiled patterns are shared via the process-wide cache in `strcomb.patterns`.

    Examples:

    ```pycon
    >>> number = regex(r"\\d+") >> int
    >>> number.parse("42")
    42

    ```
    """

    @Parser
    def _regex(text: str, pos: int) -> Result[str]:
        m = compile_pattern(pattern, flags).match(text, pos)
        if m is None:
            return Failure(pos)
        return Success(m.group(), m.end())

    _regex.name = "/%s/" % pattern
    return _regex


@Parser
def finished(text: str, pos: int) -> Result[None]:
    """A parser that fails if there is any unparsed text left."""
    if pos >= len(text):
        return Success(None, pos)
    return Failure(pos)


finished.name = "end of input"


def pure(x: _A) -> Parser[_A]:
    """Wrap any object into a parser.

    Type: `(A) -> Parser[A]`

    A pure parser doesn't touch the text, it just returns its pure `x` value.

    Also known as `return` in Haskell.
    """

    @Parser
    def _pure(_: str, pos: int) -> Result[_A]:
        return Success(x, pos)

    _pure.name = "(pure %r)" % (x,)
    return _pure


@Parser
def never(_: str, pos: int) -> Result[Any]:
    """A parser that always fails, the identity element of `|`."""
    return Failure(pos)


never.name = "never"


def fatal(msg: str) -> Parser[Any]:
    """Return a parser that always fails with a fatal error `msg`.

    Type: `(str) -> Parser[Any]`

    It is useful with `Parser.bind()` for reporting errors that depend on parsed
    values.
    """

    @Parser
    def _fatal(text: str, pos: int) -> Result[Any]:
        return Fatal(msg, text, pos)

    _fatal.name = "(fatal %r)" % (msg,)
    return _fatal


def seq(*parsers: Parser[Any]) -> Parser[List[Any]]:
    """Return a parser that applies `parsers` one after another and returns the list
    of their values.

    Examples:

    ```pycon
    >>> expr = seq(a("a"), literal("bcd"), a("e"))
    >>> expr.parse("abcde")
    ['a', 'bcd', 'e']
    >>> seq().parse("")
    []

    ```
    """

    @Parser
    def _seq(text: str, pos: int) -> Result[List[Any]]:
        values = []
        for p in parsers:
            r = p.run(text, pos)
            if not isinstance(r, Success):
                return r
            values.append(r.value)
            pos = r.pos
        return Success(values, pos)

    _seq.name = "(%s)" % ", ".join(p.name for p in parsers)
    return _seq


def one_of(*parsers: Parser[Any]) -> Parser[Any]:
    """Return a parser that returns the result of the first parser of `parsers` that
    doesn't fail.

    The alternatives are tried in the order of declaration, not by the longest match.
    With no alternatives, the parser always fails.

    Examples:

    ```pycon
    >>> expr = one_of(literal("hello"), a("h"))
    >>> expr.parse_prefix("help")
    ('h', 1)

    ```
    """

    @Parser
    def _one_of(text: str, pos: int) -> Result[Any]:
        r: Result[Any] = Failure(pos)
        for p in parsers:
            r = p.run(text, pos)
            if not isinstance(r, Failure):
                return r
        return r

    _one_of.name = " or ".join(p.name for p in parsers) or "never"
    return _one_of


def repeat(
    p: Parser[_A], minimum: int = 0, maximum: Optional[int] = None
) -> Parser[List[_A]]:
    """Return a parser that applies the parser `p` from `minimum` to `maximum` times.

    Type: `(Parser[A], int, Optional[int]) -> Parser[List[A]]`

    The first `minimum` applications are mandatory. After that `p` is applied as long
    as it succeeds, but no more than `maximum` times in total. If `maximum` is `None`
    or negative, the number of applications is unbounded.

    An optional application that fails is rolled back. An optional application that
    succeeds without consuming any text stops the repetition and its value is
    dropped, so a repeated parser that can match an empty string never loops forever.

    Examples:

    ```pycon
    >>> expr = repeat(a("a"), 1, 3)
    >>> expr.run("aaaa", 0)
    Success(['a', 'a', 'a'], 3)

    ```
    """
    if maximum is not None and maximum < 0:
        maximum = None
    if minimum < 0:
        raise GrammarError("negative minimum number of repetitions: %d" % minimum)
    if maximum is not None and maximum < minimum:
        raise GrammarError(
            "maximum number of repetitions %d is less than minimum %d"
            % (maximum, minimum)
        )
    verbose = debug

    @Parser
    def _repeat(text: str, pos: int) -> Result[List[_A]]:
        values: List[_A] = []
        while len(values) < minimum:
            r = p.run(text, pos)
            if not isinstance(r, Success):
                return r
            values.append(r.value)
            pos = r.pos
        while maximum is None or len(values) < maximum:
            r = p.run(text, pos)
            if isinstance(r, Fatal):
                return r
            elif isinstance(r, Failure):
                break
            elif r.pos == pos:
                if verbose:
                    log.debug("no progress made by %s at %d" % (p.name, pos))
                break
            values.append(r.value)
            pos = r.pos
        if verbose:
            log.debug(
                "*matched* %d instances of %s, new pos = %d"
                % (len(values), _repeat.name, pos)
            )
        return Success(values, pos)

    _repeat.name = "{ %s }%d..%s" % (
        p.name,
        minimum,
        "" if maximum is None else maximum,
    )
    return _repeat


def many(p: Parser[_A]) -> Parser[List[_A]]:
    """Return a parser that applies the parser `p` as many times as it succeeds at
    parsing the text.

    The parsed value is a list of the sequentially parsed values.

    Examples:

    ```pycon
    >>> expr = many(a("x"))
    >>> expr.parse("xx")
    ['x', 'x']
    >>> expr.parse_prefix("xxxy")
    (['x', 'x', 'x'], 3)
    >>> expr.parse("")
    []

    ```
    """
    return repeat(p, 0).named("{ %s }" % p.name)


def oneplus(p: Parser[_A]) -> Parser[List[_A]]:
    """Return a parser that applies the parser `p` one or more times.

    A similar parser combinator `many(p)` means apply `p` zero or more times, whereas
    `oneplus(p)` means apply `p` one or more times.

    Examples:

    ```pycon
    >>> expr = oneplus(a("x"))
    >>> expr.parse("xx")
    ['x', 'x']
    >>> expr.run("y", 0)
    Failure(0)

    ```
    """
    return repeat(p, 1).named("(%s, { %s })" % (p.name, p.name))


def maybe(
    p: Parser[_A], default: _B = None  # type: ignore[assignment]
) -> Parser[Union[_A, _B]]:
    """Return a parser that returns `default` if the parser `p` fails.

    It consumes nothing when `p` fails. A `Fatal` result of `p` is not caught.

    Examples:

    ```pycon
    >>> expr = maybe(a("x"))
    >>> expr.parse("x")
    'x'
    >>> expr.parse("") is None
    True
    >>> maybe(a("x"), "z").run("y", 0)
    Success('z', 0)

    ```
    """
    return (p | pure(default)).named("[ %s ]" % (p.name,))


def skip(p: Parser[Any]) -> _IgnoredParser:
    """An alias for `-p`.

    See also the docs for `Parser.__neg__()`.
    """
    return -p


def lookahead(p: Parser[_A]) -> Parser[_A]:
    """Return a parser that succeeds with the value of `p` if `p` matches at the
    current position, without consuming any text.

    If `p` fails, the failure is reported at the current position.
    """

    @Parser
    def _lookahead(text: str, pos: int) -> Result[_A]:
        r = p.run(text, pos)
        if isinstance(r, Success):
            return Success(r.value, pos)
        elif isinstance(r, Fatal):
            return r
        return Failure(pos)

    _lookahead.name = "&%s" % (p.name,)
    return _lookahead


def negative_lookahead(p: Parser[Any]) -> Parser[None]:
    """Return a parser that succeeds with `None` if `p` fails at the current position,
    without consuming any text.

    Examples:

    ```pycon
    >>> expr = -negative_lookahead(literal("abc")) + literal("abxyz")
    >>> expr.parse("abxyz")
    'abxyz'
    >>> expr.run("abcde", 0)
    Failure(0)

    ```
    """

    @Parser
    def _negative_lookahead(text: str, pos: int) -> Result[None]:
        r = p.run(text, pos)
        if isinstance(r, Success):
            return Failure(pos)
        elif isinstance(r, Fatal):
            return r
        return Success(None, pos)

    _negative_lookahead.name = "!%s" % (p.name,)
    return _negative_lookahead


def deferred(supplier: Callable[[], Parser[_A]]) -> Parser[_A]:
    """Return a parser that calls `supplier` to get the actual parser every time it
    runs.

    Type: `(Callable[[], Parser[A]]) -> Parser[A]`

    The supplier is not called when the parser is created, so it may refer to the
    parsers defined later, including the parser being defined. The result of the
    supplier is not cached. If building the parser is expensive, cache it in your
    supplier.

    Examples:

    ```pycon
    >>> parens = -a("(") + maybe(deferred(lambda: parens)) + -a(")")
    >>> parens.parse("(())") is None
    True

    ```
    """

    @Parser
    def _deferred(text: str, pos: int) -> Result[_A]:
        return supplier().run(text, pos)

    _deferred.name = "deferred(...)"
    return _deferred


def forward_decl() -> Parser[Any]:
    """Return an undefined parser that can be used as a forward declaration.

    Type: `Parser[Any]`

    Use `p = forward_decl()` in combination with `p.define(...)` to define recursive
    parsers.

    Examples:

    ```pycon
    >>> expr = forward_decl()
    >>> expr.define(a("x") + maybe(expr) + a("y"))
    >>> expr.parse("xxyy")  # noqa
    ('x', ('x', None, 'y'), 'y')

    ```

    !!! Note

        If you care about static types, you should add a type hint for your forward
        declaration, so that your type checker can check types in `p.define(...)` later:

        ```python
        p: Parser[int] = forward_decl()
        p.define(a("1") >> int)
        ```
    """

    @Parser
    def f(_text: str, _pos: int) -> Result[Any]:
        raise NotImplementedError("you must define() a forward_decl somewhere")

    f.name = "forward_decl()"
    return f


if __name__ == "__main__":
    import doctest

    doctest.testmod()
