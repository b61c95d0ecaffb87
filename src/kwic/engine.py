# kwic/engine.py
from __future__ import annotations

import os
import logging
from functools import cmp_to_key
from typing import Iterable, List, Optional, TextIO, Union

from . import config as CFG
from .indexable_set import IndexableSet
from .loader import iter_stream_lines, split_lines
from .models import KwicEntry, Line, Rotation, render_line
from .scanner import tokenize
from .tokens import compare

log = logging.getLogger(__name__)


# /* ~~~ lexicographic order over token sequences ~~~ */
def compare_lines(a: Line, b: Line) -> int:
    """Element-wise compare(); a sequence exhausted first is smaller."""
    for x, y in zip(a, b):
        c = compare(x, y)
        if c:
            return c
    if len(a) == len(b):
        return 0
    return -1 if len(a) < len(b) else 1

line_key = cmp_to_key(compare_lines)


def rotations(line: Line) -> List[Line]:
    """All n cyclic rotations of a line; rotation i starts with the token at position i."""
    return [line[i:] + line[:i] for i in range(len(line))]


class RotationIndex(IndexableSet[Rotation]):
    """Deduplicating ordered set of rotations; equivalence is by compare_lines, first one wins."""

    def __init__(self) -> None:
        super().__init__(key=lambda r: line_key(r.line))

    def add(self, line: Line, *, line_no: int, shift: int) -> bool:
        return self.insert(Rotation(line=line, line_no=line_no, shift=shift))


class Engine:
    """
    Orchestrates one KWIC run:
      - tokenize each input line (scanner.tokenize)
      - insert every rotation into one shared RotationIndex
      - render the index in ascending order

    Public API (used by CLI/Flask):
      * build(lines):   ingest a whole line sequence
      * add_line(text): ingest one line
      * entries() / entry(rank) / render() / write(out)
      * shutdown():     discard the index

    The index is frozen on first read; adding lines afterwards raises RuntimeError.
    """

    # ------------- lifecycle -------------

    def __init__(self, *, verbose: bool = False) -> None:
        if verbose or CFG.VERBOSE:
            logging.basicConfig(level=logging.INFO)
            os.environ["KWIC_VERBOSE"] = "1"
        self.index: Optional[RotationIndex] = RotationIndex()
        self._lines_read = 0

    def build(self, lines: Iterable[str]) -> "Engine":
        added = 0
        for line in lines:
            added += self.add_line(line)
        log.info("Engine build() complete: lines=%d entries=%d", self._lines_read, added)
        return self

    def add_line(self, text: str, line_no: Optional[int] = None) -> int:
        """Index all rotations of one input line. Returns how many were new entries."""
        idx = self._require_index()
        if idx.frozen:
            raise RuntimeError("Rotation index is frozen; cannot add lines after reading")
        self._lines_read += 1
        if line_no is None:
            line_no = self._lines_read
        line = tokenize(text)
        if not line:
            return 0
        added = 0
        for shift, rot in enumerate(rotations(line)):
            added += idx.add(rot, line_no=line_no, shift=shift)
        return added

    # ------------- read -------------

    def entries(self) -> List[KwicEntry]:
        idx = self._reader()
        return [r.to_entry() for r in idx]

    def entry(self, rank: int) -> KwicEntry:
        return self._reader().at(rank).to_entry()

    def render(self) -> str:
        return "".join(render_line(r.line) + "\n" for r in self._reader())

    def write(self, out: TextIO) -> None:
        out.write(self.render())

    @property
    def size(self) -> int:
        return len(self._require_index())

    def __len__(self) -> int:
        return self.size

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self.index = None
        log.info("Engine shutdown complete")

    # ------------- internals -------------

    def _require_index(self) -> RotationIndex:
        if self.index is None:
            raise RuntimeError("Engine has been shut down")
        return self.index

    def _reader(self) -> RotationIndex:
        idx = self._require_index()
        if not idx.frozen:
            idx.freeze()
            log.info("Rotation index frozen: entries=%d", len(idx))
        return idx


def kwic(lines: Union[str, Iterable[str]]) -> str:
    """
    One-shot: build an index over `lines` and return the rendered output.
    A str is a block of text and is split into lines like a stream.
    """
    if isinstance(lines, str):
        lines = split_lines(lines)
    eng = Engine()
    try:
        return eng.build(lines).render()
    finally:
        eng.shutdown()


def kwic_stream(in_stream: TextIO, out_stream: TextIO) -> int:
    """Consume every line of in_stream, then write the index. Returns the entry count."""
    eng = Engine()
    try:
        eng.build(iter_stream_lines(in_stream))
        eng.write(out_stream)
        return len(eng)
    finally:
        eng.shutdown()
