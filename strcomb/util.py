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

from typing import Tuple

Place = Tuple[int, int]


class ParsingError(Exception):
    """The base class for user-visible parsing errors.

    It keeps the text being parsed and the offset of the error. The (_line_,
    _column_) place of the error is computed only when it is requested.
    """

    def __init__(self, msg: str, text: str, pos: int) -> None:
        super(ParsingError, self).__init__(msg, pos)
        self.msg = msg
        self.text = text
        self.pos = pos

    @property
    def place(self) -> Place:
        return pos_to_place(self.text, self.pos)

    def __str__(self) -> str:
        return "%s: %s" % (place_to_str(self.place), self.msg)


def pos_to_place(text: str, pos: int) -> Place:
    """Return the 1-based (_line_, _column_) place of the offset `pos` in `text`.

    Type: `(str, int) -> Tuple[int, int]`

    Examples:

    ```pycon
    >>> pos_to_place("abc", 0)
    (1, 1)
    >>> pos_to_place("ab\\ncd", 4)
    (2, 2)

    ```
    """
    pos = max(0, min(pos, len(text)))
    line = text.count("\n", 0, pos) + 1
    column = pos - text.rfind("\n", 0, pos)
    return line, column


def place_to_str(place: Place) -> str:
    line, column = place
    return "%d,%d" % (line, column)
