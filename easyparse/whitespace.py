"""
Optional preprocessing between the input and the Machine: every run of
whitespace reaches the states as a single space.

    keep_newlines == False: "a\\t\\n\\tb" -> "a b"
    keep_newlines == True:  "a\\t\\n\\tb" -> "a \\n b"
"""

from __future__ import annotations
from typing import Iterable, Iterator

from easyparse.states import is_whitespace

SPACE = 0x20
NEWLINE = 0x0A


def compress_whitespace(
    chars: Iterable[int], keep_newlines: bool = False
) -> Iterator[int]:
    justReadWhitespace = False
    for c in chars:
        if is_whitespace(c) and not (keep_newlines and c == NEWLINE):
            if justReadWhitespace:
                continue
            justReadWhitespace = True
            yield SPACE
        else:
            justReadWhitespace = False
            yield c
