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

"""A process-wide cache of compiled regular expressions.

The `regex()` primitive in `strcomb.parser` looks up its pattern here every time it
runs, so each distinct pattern is compiled once, on first use, and shared by all the
parsers and all the threads of the process.
"""

__all__ = ["PatternCache", "cache", "compile_pattern"]

import logging
import re
import threading
from re import Pattern
from typing import Dict, Tuple

log = logging.getLogger("strcomb")

_Key = Tuple[str, int]


class PatternCache:
    """An add-only mapping from `(pattern, flags)` to a compiled regexp.

    Entries are never removed or replaced. Lookups of already compiled patterns don't
    take the lock.
    """

    def __init__(self) -> None:
        self._patterns: Dict[_Key, Pattern[str]] = {}
        self._lock = threading.Lock()

    def get(self, pattern: str, flags: int = 0) -> Pattern[str]:
        key = (pattern, flags)
        try:
            return self._patterns[key]
        except KeyError:
            pass
        with self._lock:
            compiled = self._patterns.get(key)
            if compiled is None:
                compiled = re.compile(pattern, flags)
                self._patterns[key] = compiled
                log.debug("compiled pattern %r, flags = %d" % (pattern, flags))
            return compiled

    def __contains__(self, key: object) -> bool:
        return key in self._patterns

    def __len__(self) -> int:
        return len(self._patterns)

    def __repr__(self) -> str:
        return "PatternCache(%d patterns)" % len(self)


cache = PatternCache()


def compile_pattern(pattern: str, flags: int = 0) -> Pattern[str]:
    """Return the compiled `pattern` from the process-wide cache.

    Type: `(str, int) -> Pattern[str]`

    If the pattern is invalid, it raises `re.error` on every call, nothing is cached.
    """
    return cache.get(pattern, flags)
