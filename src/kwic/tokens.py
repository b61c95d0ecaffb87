from __future__ import annotations
import string
from functools import cmp_to_key
from typing import Union

from .config import DEFAULT_TOKEN
from .errors import ValidationError

# Fixed single-byte alphabet; anything else is a separator
_ALPHA = frozenset(string.ascii_letters)

def is_alpha(ch: str) -> bool:
    """True for ASCII letters only (no locale/Unicode letters)."""
    return ch in _ALPHA

def _lower(ch: str) -> str:
    # ASCII-only lowering; other characters pass through unchanged
    o = ord(ch)
    return chr(o + 32) if 65 <= o <= 90 else ch

def _text(x: Union["Token", str]) -> str:
    return x.value if isinstance(x, Token) else x

def compare(a: Union["Token", str], b: Union["Token", str]) -> int:
    """
    Case-insensitive three-way comparison of two token values.
      - characters are lower-cased one by one and compared in order
      - the first differing position decides
      - a strict prefix is smaller
    Returns -1, 0 or 1.
    """
    lhs, rhs = _text(a), _text(b)
    for x, y in zip(lhs, rhs):
        x, y = _lower(x), _lower(y)
        if x < y:
            return -1
        if x > y:
            return 1
    if len(lhs) == len(rhs):
        return 0
    return -1 if len(lhs) < len(rhs) else 1

# key function for sorted()/IndexableSet built from the comparator
token_key = cmp_to_key(compare)


class Token:
    """
    Immutable, non-empty run of ASCII letters.

    The original case is kept for output; equality, ordering and hashing are
    case-insensitive and all go through compare().
    """
    __slots__ = ("_value",)

    def __init__(self, text: str | None = None) -> None:
        if text is None:
            text = DEFAULT_TOKEN
        if not text:
            raise ValidationError("Token cannot be empty")
        bad = next((ch for ch in text if not is_alpha(ch)), None)
        if bad is not None:
            raise ValidationError(f"Token can only contain alphabetic characters, got {bad!r} in {text!r}")
        object.__setattr__(self, "_value", text)

    def __setattr__(self, name, value):
        raise AttributeError("Token is immutable")

    @property
    def value(self) -> str:
        return self._value

    @classmethod
    def read(cls, cursor) -> "Token":
        """Scan the next token from a Cursor (see scanner.scan_token)."""
        from .scanner import scan_token
        return scan_token(cursor)

    # -------- ordering --------
    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return compare(self, other) == 0

    def __ne__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return compare(self, other) != 0

    def __lt__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return compare(self, other) >= 0

    def __hash__(self) -> int:
        return hash("".join(_lower(ch) for ch in self._value))

    # -------- rendering --------
    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Token({self._value!r})"

    # Pickle support despite the immutability guard
    def __getstate__(self):
        return self._value

    def __setstate__(self, state):
        object.__setattr__(self, "_value", state)


def make_token(text: str) -> Token:
    """Validated construction; raises ValidationError for empty/non-alphabetic text."""
    return Token(text)
