"""
KWIC (Keyword-In-Context) Index Module

Reads lines of text, splits each line into alphabetic tokens, produces every
cyclic rotation of each line and returns the distinct rotations in
case-insensitive lexicographic order, one per line.

- Token: alphabetic lexical unit with case-insensitive order (tokens, scanner)
- IndexableSet: sorted unique collection with (negative) rank access
- Engine: tokenize -> rotate -> dedup -> render

Example Usage:
    from kwic import kwic

    print(kwic(["this is a test", "this is another test"]), end="")

    from kwic import Engine
    eng = Engine().build(["Apple banana", "Banana apple"])
    eng.entry(-1)   # KwicEntry(text='banana Apple', keyword='banana', line_no=1, shift=1)
"""

# src/kwic/__init__.py
from .engine import Engine, RotationIndex, compare_lines, kwic, kwic_stream, rotations
from .errors import InputExhausted, OutOfRange, ValidationError
from .indexable_set import IndexableSet
from .models import KwicEntry
from .scanner import Cursor, scan_token, tokenize
from .tokens import Token, compare, make_token

__version__ = "1.0.0"
__all__ = [
    "Engine", "RotationIndex", "compare_lines", "kwic", "kwic_stream", "rotations",
    "InputExhausted", "OutOfRange", "ValidationError",
    "IndexableSet", "KwicEntry",
    "Cursor", "scan_token", "tokenize",
    "Token", "compare", "make_token",
]
