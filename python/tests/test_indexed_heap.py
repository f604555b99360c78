"""Indexed min-heap: ordering, decrease-key, tie-breaking, misuse."""

from __future__ import annotations

import random

import pytest

from nineteen.engine.pqueue import IndexedMinPQ


def test_extracts_in_key_order() -> None:
    pq: IndexedMinPQ[str] = IndexedMinPQ()
    for number, key in enumerate([5, 3, 8, 1, 9, 2], 1):
        pq.insert(number, key, f"item{number}")
    assert pq.size() == 6
    assert pq.min_key() == 1
    out = [pq.extract_min() for _ in range(6)]
    assert out == ["item4", "item6", "item2", "item1", "item3", "item5"]
    assert pq.is_empty()


def test_equal_keys_leave_in_number_order() -> None:
    pq: IndexedMinPQ[int] = IndexedMinPQ()
    for number in (7, 3, 9, 1, 5):
        pq.insert(number, 4, number)
    assert [pq.extract_min() for _ in range(5)] == [1, 3, 5, 7, 9]


def test_decrease_key_moves_entry_up() -> None:
    pq: IndexedMinPQ[str] = IndexedMinPQ()
    pq.insert(1, 10, "a")
    pq.insert(2, 20, "b")
    pq.insert(3, 30, "c")
    pq.decrease_key(3, 5, "c2")
    assert pq.key_of(3) == 5
    assert pq.extract_min() == "c2"
    assert pq.extract_min() == "a"


def test_decrease_key_keeps_item_when_not_given() -> None:
    pq: IndexedMinPQ[str] = IndexedMinPQ()
    pq.insert(1, 10, "a")
    pq.decrease_key(1, 2)
    assert pq.extract_min() == "a"


def test_decrease_key_rejects_non_decrease() -> None:
    pq: IndexedMinPQ[str] = IndexedMinPQ()
    pq.insert(1, 10, "a")
    with pytest.raises(ValueError):
        pq.decrease_key(1, 10)
    with pytest.raises(ValueError):
        pq.decrease_key(1, 11)
    assert pq.key_of(1) == 10


def test_decrease_key_unknown_number() -> None:
    pq: IndexedMinPQ[str] = IndexedMinPQ()
    with pytest.raises(KeyError):
        pq.decrease_key(4, 1)


def test_duplicate_insert_rejected() -> None:
    pq: IndexedMinPQ[str] = IndexedMinPQ()
    pq.insert(1, 10, "a")
    with pytest.raises(ValueError):
        pq.insert(1, 3, "b")


def test_extract_from_empty() -> None:
    pq: IndexedMinPQ[str] = IndexedMinPQ()
    with pytest.raises(IndexError):
        pq.extract_min()
    with pytest.raises(IndexError):
        pq.min_key()


def test_membership_tracks_extraction() -> None:
    pq: IndexedMinPQ[int] = IndexedMinPQ()
    pq.insert(1, 1, 0)
    pq.insert(2, 2, 0)
    assert 1 in pq and 2 in pq
    pq.extract_min()
    assert 1 not in pq
    assert len(pq) == 1


@pytest.mark.parametrize("seed", range(10))
def test_random_interleaving_keeps_min_law(seed: int) -> None:
    rng = random.Random(seed)
    pq: IndexedMinPQ[int] = IndexedMinPQ()
    live: dict[int, int] = {}
    next_number = 1
    for _ in range(400):
        op = rng.random()
        if op < 0.45 or not live:
            key = rng.randint(0, 100)
            pq.insert(next_number, key, next_number)
            live[next_number] = key
            next_number += 1
        elif op < 0.75:
            number = rng.choice(list(live))
            if live[number] == 0:
                continue
            key = rng.randint(0, live[number] - 1)
            pq.decrease_key(number, key)
            live[number] = key
        else:
            expected = min(live, key=lambda n: (live[n], n))
            got = pq.extract_min()
            assert got == expected
            assert all(live[got] <= k for k in live.values())
            del live[got]
        assert len(pq) == len(live)
    while live:
        expected = min(live, key=lambda n: (live[n], n))
        assert pq.extract_min() == expected
        del live[expected]
