import pytest

from kwic.errors import OutOfRange
from kwic.indexable_set import IndexableSet
from kwic.tokens import token_key


def test_empty_set():
    s = IndexableSet()
    assert len(s) == 0 and not s
    with pytest.raises(OutOfRange):
        s.front()
    with pytest.raises(OutOfRange):
        s.back()
    with pytest.raises(OutOfRange):
        s[0]
    with pytest.raises(OutOfRange):
        s.at(0)
    with pytest.raises(IndexError):
        s.at(-1)


def test_insert_keeps_order_and_uniqueness():
    s = IndexableSet()
    assert s.insert(3) is True
    assert s.insert(1) is True
    assert s.insert(2) is True
    assert s.insert(2) is False
    assert len(s) == 3
    assert s.front() == 1
    assert s.back() == 3
    assert list(s) == [1, 2, 3]
    assert list(reversed(s)) == [3, 2, 1]


def test_positive_and_negative_ranks():
    s = IndexableSet([1, 2, 3])
    assert [s[0], s[1], s[2]] == [1, 2, 3]
    assert [s.at(0), s.at(1), s.at(2)] == [1, 2, 3]
    assert [s[-1], s[-2], s[-3]] == [3, 2, 1]
    assert [s.at(-1), s.at(-2), s.at(-3)] == [3, 2, 1]


def test_rank_equivalence_for_every_rank():
    s = IndexableSet([9, 4, 7, 1, 8, 4, 2])
    n = len(s)
    for rank in range(n):
        assert s.at(rank) == s.at(rank - n)


@pytest.mark.parametrize("rank", [3, -4, 100, -100])
def test_out_of_range(rank):
    s = IndexableSet([1, 2, 3])
    with pytest.raises(OutOfRange):
        s[rank]
    with pytest.raises(OutOfRange):
        s.at(rank)


@pytest.mark.parametrize("rank", [1.0, "0", None, True])
def test_non_integer_rank_is_type_error(rank):
    with pytest.raises(TypeError):
        IndexableSet([1, 2, 3]).at(rank)


def test_slicing_returns_list():
    s = IndexableSet([5, 3, 1, 4, 2])
    assert s[1:3] == [2, 3]
    assert s[::-1] == [5, 4, 3, 2, 1]


def test_constructors():
    assert len(IndexableSet()) == 0
    s2 = IndexableSet([1, 2, 3])
    assert len(s2) == 3 and s2[0] == 1
    base = {4, 5, 6}
    s3 = IndexableSet.from_range(iter(sorted(base)))
    assert len(s3) == 3 and s3[0] == 4
    assert IndexableSet([3, 3, 1]) == IndexableSet.from_range(iter([1, 3]))


def test_custom_comparator_keeps_first_equivalent():
    s = IndexableSet(key=token_key)
    s.insert("Apple")
    s.insert("banana")
    s.insert("Cherry")
    assert s.insert("APPLE") is False
    assert len(s) == 3
    assert [s[0], s[1], s[2]] == ["Apple", "banana", "Cherry"]
    assert "cherry" in s
    assert s.index("BANANA") == 1


def test_key_function():
    s = IndexableSet(["ccc", "a", "bb", "dd"], key=len)
    assert list(s) == ["a", "bb", "ccc"]  # "dd" is equivalent to "bb"


def test_contains_and_index():
    s = IndexableSet([10, 20, 30])
    assert 20 in s
    assert 25 not in s
    assert "x" not in s
    assert s.index(30) == 2
    with pytest.raises(ValueError):
        s.index(25)


def test_contains_lets_key_function_errors_through():
    def strict_key(v):
        if v < 0:
            raise ValueError("negative")
        return v

    s = IndexableSet([1, 2], key=strict_key)
    assert 2 in s
    with pytest.raises(ValueError):
        -1 in s


def test_contains_requires_element_type_for_key():
    from kwic.engine import RotationIndex
    from kwic.scanner import tokenize

    idx = RotationIndex()
    idx.add(tokenize("a b"), line_no=1, shift=0)
    with pytest.raises(AttributeError):
        "a b" in idx


def test_update_counts_new_values():
    s = IndexableSet([1])
    assert s.update([1, 2, 3, 2]) == 2
    assert list(s) == [1, 2, 3]


def test_frozen_set_rejects_insert():
    s = IndexableSet([1, 2])
    s.freeze()
    assert s.frozen
    with pytest.raises(RuntimeError):
        s.insert(3)
    assert list(s) == [1, 2]


def test_repr_is_truncated():
    r = repr(IndexableSet(range(20)))
    assert r.startswith("IndexableSet([0, 1")
    assert r.endswith(", ...])")
