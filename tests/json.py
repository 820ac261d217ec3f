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

"""A JSON parser using strcomb.

The parser is based on [the JSON grammar][1]. It is a bit more lenient about numbers:
it accepts a leading `+` and numbers like `.5` or `1.`.

  [1]: https://tools.ietf.org/html/rfc4627
"""

import re
from re import VERBOSE, Match
from typing import Any, Dict, List, Optional, Tuple, Union

from strcomb.contrib.common import literals, trim
from strcomb.parser import Parser, a, forward_decl, literal, many, maybe, regex

# noinspection SpellCheckingInspection
regexps = {
    "escaped": r"""
        \\                                  # Escape
          ((?P<standard>["\\/bfnrt])        # Standard escapes
        | (u(?P<unicode>[0-9A-Fa-f]{4})))   # uXXXX
        """,
    "unescaped": r"""
        [^"\\\x00-\x1f]                     # Unescaped: avoid ["\\] and controls
        """,
}
re_esc = re.compile(regexps["escaped"], VERBOSE)
JsonValue = Union[None, bool, dict, list, int, float, str]
JsonMember = Tuple[str, JsonValue]


def make_array(
    values: Optional[Tuple[JsonValue, List[JsonValue]]]
) -> List[JsonValue]:
    if values is None:
        return []
    else:
        return [values[0]] + values[1]


def make_object(
    values: Optional[Tuple[JsonMember, List[JsonMember]]]
) -> Dict[str, Any]:
    if values is None:
        return {}
    else:
        first, rest = values
        k, v = first
        d = {k: v}
        d.update(rest)
        return d


def make_number(s: str) -> Union[int, float]:
    try:
        return int(s)
    except ValueError:
        return float(s)


def unescape(s: str) -> str:
    std = {
        '"': '"',
        "\\": "\\",
        "/": "/",
        "b": "\b",
        "f": "\f",
        "n": "\n",
        "r": "\r",
        "t": "\t",
    }

    def sub(m: Match[str]) -> str:
        if m.group("standard") is not None:
            return std[m.group("standard")]
        else:
            return chr(int(m.group("unicode"), 16))

    return re_esc.sub(sub, s)


def make_string(s: str) -> str:
    return unescape(s[1:-1])


def make_member(values: Tuple[str, JsonValue]) -> JsonMember:
    k, v = values
    return k, v


def op(s: str) -> Parser[str]:
    return trim(a(s)).named(repr(s))


null = trim(literal("null")).value(None)
boolean = trim(literals("true", "false")) >> (lambda s: s == "true")
number = trim(
    regex(
        r"""
        [+-]?                       # Sign
        (\d+(\.\d*)?|\.\d+)         # Int and frac
        ([Ee][+-]?\d+)?             # Exp
        """,
        VERBOSE,
    )
    >> make_number
).named("number")
string = trim(
    regex(r'"(%(unescaped)s | %(escaped)s)*"' % regexps, VERBOSE) >> make_string
).named("string")
value: Parser[JsonValue] = forward_decl().named("json_value")
member = (
    string + -op(":").expect("':' expected") + value.expect("value expected")
) >> make_member
json_object = (
    (
        -op("{")
        + maybe(member + many(-op(",") + member.expect("member expected")))
        + -op("}").expect("'}' expected")
    )
    >> make_object
).named("json_object")
json_array = (
    (
        -op("[")
        + maybe(value + many(-op(",") + value.expect("value expected")))
        + -op("]").expect("']' expected")
    )
    >> make_array
).named("json_array")
value.define(null | boolean | json_object | json_array | number | string)


def loads(s: str) -> JsonValue:
    return value.parse(s)
