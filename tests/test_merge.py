import random

from multisort.merge import merge_sorted


def test_merge_empty_collection():
    assert merge_sorted([]) == []


def test_merge_with_empty_runs():
    assert merge_sorted([[], [1, 4], []]) == [1, 4]


def test_merge_matches_sorted_concatenation():
    rng = random.Random(99)
    for _ in range(30):
        runs = [
            sorted(rng.randint(-500, 500) for _ in range(rng.randint(0, 40)))
            for _ in range(rng.randint(1, 6))
        ]
        merged = merge_sorted(runs)
        assert merged == sorted(v for run in runs for v in run)


def test_merge_keeps_all_duplicates():
    runs = [[1, 1, 2], [1, 2, 2], [2]]
    merged = merge_sorted(runs)
    assert len(merged) == 7
    assert merged == sorted(merged)


def test_merge_accepts_generators():
    runs = (iter(run) for run in ([0, 5], [3]))
    assert merge_sorted(runs) == [0, 3, 5]