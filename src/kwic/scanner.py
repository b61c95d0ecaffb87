from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator

from .errors import InputExhausted
from .models import Line
from .tokens import Token, is_alpha


@dataclass
class Cursor:
    """Read position into one line of text. `pos` is the next unconsumed index."""
    text: str
    pos: int = 0

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str | None:
        return None if self.at_end else self.text[self.pos]

    def remaining(self) -> str:
        return self.text[self.pos:]


def scan_token(cursor: Cursor) -> Token:
    """
    Scan one token starting at the cursor.

    Rules:
      * non-letters are skipped and consumed
      * end of input before any letter -> cursor moves to the end, InputExhausted
      * otherwise the maximal run of letters is consumed; the boundary
        character after it (if any) stays unconsumed for the next scan
    """
    text, i, n = cursor.text, cursor.pos, len(cursor.text)
    while i < n and not is_alpha(text[i]):
        i += 1
    if i >= n:
        cursor.pos = n
        raise InputExhausted("no token before end of input")
    start = i
    while i < n and is_alpha(text[i]):
        i += 1
    tok = Token(text[start:i])
    cursor.pos = i
    return tok


def iter_tokens(text: str) -> Iterator[Token]:
    """Yield tokens of a line by repeated scanning until the input is exhausted."""
    cursor = Cursor(text)
    while True:
        try:
            yield scan_token(cursor)
        except InputExhausted:
            return


def tokenize(text: str) -> Line:
    """Return the Line (tuple of Tokens) for one input line; empty if it has no letters."""
    return tuple(iter_tokens(text))
