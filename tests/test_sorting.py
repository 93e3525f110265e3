import random

from algokit.sorting import bubble_sort, heap_sort, insertion_sort, merge_sort


def _random_lists():
    rng = random.Random(1234)
    lists = []
    for size in range(0, 40, 3):
        lists.append([rng.randint(-50, 50) for _ in range(size)])
    return lists


def test_bubble_sort_matches_builtin_sorted():
    for values in _random_lists():
        assert bubble_sort(values) == sorted(values)


def test_insertion_sort_matches_builtin_sorted():
    for values in _random_lists():
        assert insertion_sort(values) == sorted(values)


def test_heap_sort_matches_builtin_sorted():
    for values in _random_lists():
        assert heap_sort(values) == sorted(values)


def test_merge_sort_matches_builtin_sorted():
    for values in _random_lists():
        assert merge_sort(values) == sorted(values)


def test_empty_and_single():
    assert bubble_sort([]) == []
    assert bubble_sort([7]) == [7]
    assert insertion_sort([]) == []
    assert insertion_sort([7]) == [7]
    assert heap_sort([]) == []
    assert heap_sort([7]) == [7]
    assert merge_sort([]) == []
    assert merge_sort([7]) == [7]


def test_input_not_modified():
    values = [5, 1, 4, 2, 3]
    snapshot = list(values)
    results = [
        bubble_sort(values),
        insertion_sort(values),
        heap_sort(values),
        merge_sort(values),
    ]
    assert values == snapshot
    for result in results:
        assert result == [1, 2, 3, 4, 5]


def test_accepts_any_iterable():
    values = (9, 3, 3, 1)
    expected = [1, 3, 3, 9]
    assert bubble_sort(iter(values)) == expected
    assert insertion_sort(iter(values)) == expected
    assert heap_sort(iter(values)) == expected
    assert merge_sort(iter(values)) == expected


def test_already_sorted_and_reversed():
    ascending = list(range(25))
    assert bubble_sort(ascending) == ascending
    assert bubble_sort(reversed(ascending)) == ascending
    assert insertion_sort(ascending) == ascending
    assert insertion_sort(reversed(ascending)) == ascending
    assert heap_sort(ascending) == ascending
    assert heap_sort(reversed(ascending)) == ascending
    assert merge_sort(ascending) == ascending
    assert merge_sort(reversed(ascending)) == ascending


def test_strings():
    words = ["pear", "apple", "fig", "banana"]
    expected = ["apple", "banana", "fig", "pear"]
    assert bubble_sort(words) == expected
    assert insertion_sort(words) == expected
    assert heap_sort(words) == expected
    assert merge_sort(words) == expected


def test_merge_sort_is_stable():
    pairs = [(2, "a"), (1, "b"), (2, "c"), (1, "d")]

    class Key:
        def __init__(self, pair):
            self.pair = pair

        def __lt__(self, other):
            return self.pair[0] < other.pair[0]

        def __le__(self, other):
            return self.pair[0] <= other.pair[0]

    result = [key.pair for key in merge_sort(Key(p) for p in pairs)]
    assert result == [(1, "b"), (1, "d"), (2, "a"), (2, "c")]