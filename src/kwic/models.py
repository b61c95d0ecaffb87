from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from .config import SEPARATOR
from .tokens import Token

Line = Tuple[Token, ...]

def render_line(line: Line) -> str:
    """Original-case token values joined by a single separator."""
    return SEPARATOR.join(t.value for t in line)

@dataclass(frozen=True)
class Rotation:
    line: Line          # rotated token sequence
    line_no: int        # 1-based input line that produced it
    shift: int          # rotation offset into the original line

    def to_entry(self) -> "KwicEntry":
        return KwicEntry(
            text=render_line(self.line),
            keyword=self.line[0].value,
            line_no=self.line_no,
            shift=self.shift,
        )

@dataclass(frozen=True)
class KwicEntry:
    text: str           # rendered rotation, no trailing separator
    keyword: str        # first token, original case
    line_no: int        # 1-based input line that first produced this entry
    shift: int          # rotation offset
