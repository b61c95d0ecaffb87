from __future__ import annotations
import bisect
from itertools import islice
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar, overload

from .errors import OutOfRange

T = TypeVar("T")


class IndexableSet(Generic[T]):
    """
    Sorted, duplicate-free collection with positional access.

    Ordering comes from `key` (same contract as sorted(); comparator functions
    go through functools.cmp_to_key). Two values are equivalent when neither
    key is less than the other; inserting an equivalent value is a no-op, so
    the first one inserted is the one kept.

    Storage is two parallel sorted arrays (values + keys) searched with bisect:
    O(log n) lookup, O(1) rank access, O(n) insertion. Suited to
    build-once-then-read workloads.

    s.at(0) / s[0]   -> smallest
    s.at(-1) / s[-1] -> largest
    """

    def __init__(self, iterable: Iterable[T] = (), *, key: Optional[Callable[[T], Any]] = None) -> None:
        self._key_fn = key
        self._items: List[T] = []
        self._keys: List[Any] = []
        self._frozen: bool = False
        self.update(iterable)

    @classmethod
    def from_range(cls, it: Iterator[T], *, key: Optional[Callable[[T], Any]] = None) -> "IndexableSet[T]":
        """Build from an iterator range, same dedup rule as repeated insert()."""
        return cls(it, key=key)

    # -------- Build-time API --------
    def _k(self, value: T) -> Any:
        return value if self._key_fn is None else self._key_fn(value)

    def _locate(self, k: Any) -> tuple[int, bool]:
        i = bisect.bisect_left(self._keys, k)
        found = i != len(self._keys) and not (k < self._keys[i])
        return i, found

    def insert(self, value: T) -> bool:
        """Add value unless an equivalent element exists. Returns True if added."""
        if self._frozen:
            raise RuntimeError("IndexableSet is frozen; cannot insert")
        k = self._k(value)
        i, found = self._locate(k)
        if found:
            return False
        self._items.insert(i, value)
        self._keys.insert(i, k)
        return True

    def update(self, values: Iterable[T]) -> int:
        n = 0
        for v in values:
            n += self.insert(v)
        return n

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    # -------- Positional access --------
    def front(self) -> T:
        if not self._items:
            raise OutOfRange("set is empty")
        return self._items[0]

    def back(self) -> T:
        if not self._items:
            raise OutOfRange("set is empty")
        return self._items[-1]

    def at(self, rank: int) -> T:
        if isinstance(rank, bool) or not isinstance(rank, int):
            raise TypeError(f"rank must be an int, not {type(rank).__name__}")
        size = len(self._items)
        if rank < 0:
            rank += size
        if rank < 0 or rank >= size:
            raise OutOfRange(f"rank out of range for set of size {size}")
        return self._items[rank]

    @overload
    def __getitem__(self, rank: int) -> T: ...
    @overload
    def __getitem__(self, rank: slice) -> List[T]: ...
    def __getitem__(self, rank):
        if isinstance(rank, slice):
            return self._items[rank]
        return self.at(rank)

    def index(self, value: T) -> int:
        """Rank of the element equivalent to value."""
        i, found = self._locate(self._k(value))
        if not found:
            raise ValueError(f"{value!r} is not in set")
        return i

    # -------- Container protocol --------
    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._items)

    def __contains__(self, value: object) -> bool:
        # value must be acceptable to the key function; its errors propagate.
        # Only a key that cannot be ordered against the stored keys means "absent".
        k = self._k(value)  # type: ignore[arg-type]
        try:
            return self._locate(k)[1]
        except TypeError:
            return False

    def __eq__(self, other):
        if not isinstance(other, IndexableSet):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # mutable container

    def __repr__(self) -> str:
        head = ", ".join(repr(v) for v in islice(self._items, 10))
        more = ", ..." if len(self._items) > 10 else ""
        return f"IndexableSet([{head}{more}])"
