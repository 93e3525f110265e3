import pytest

from algokit.greedy import fractional_knapsack, select_activities

STARTS = [1, 3, 0, 5, 8, 5]
FINISHES = [2, 4, 6, 7, 9, 9]


def test_select_activities_classic_example():
    assert select_activities(STARTS, FINISHES) == [0, 1, 3, 4]


def test_selected_activities_do_not_overlap():
    chosen = select_activities(STARTS, FINISHES)
    for earlier, later in zip(chosen, chosen[1:]):
        assert STARTS[later] >= FINISHES[earlier]


def test_select_activities_always_takes_first():
    chosen = select_activities([4, 0], [5, 1])
    assert chosen[0] == 0


def test_select_activities_empty():
    assert select_activities([], []) == []


def test_select_activities_length_mismatch():
    with pytest.raises(ValueError):
        select_activities([1, 2], [3])


def test_fractional_classic_example():
    result = fractional_knapsack(50, [10, 20, 30], [60, 100, 120])
    assert result.total_profit == pytest.approx(240.0)


def test_fractional_respects_capacity():
    weights = [10, 20, 30]
    result = fractional_knapsack(50, weights, [60, 100, 120])
    used = sum(p.fraction * p.weight for p in result.placements)
    assert used == pytest.approx(50)
    assert not result.placements[-1].complete
    assert all(p.complete for p in result.placements[:-1])


def test_fractional_everything_fits():
    weights = [3, 4, 5]
    values = [10, 20, 30]
    result = fractional_knapsack(100, weights, values)
    assert result.total_profit == pytest.approx(sum(values))
    assert sorted(p.item for p in result.placements) == [0, 1, 2]
    assert result.placements[-1].space_left == 100 - sum(weights)


def test_fractional_best_ratio_first():
    result = fractional_knapsack(50, [10, 20, 30], [60, 100, 120])
    ratios = [p.value / p.weight for p in result.placements]
    assert ratios == sorted(ratios, reverse=True)


def test_fractional_zero_capacity():
    result = fractional_knapsack(0, [1, 2], [3, 4])
    assert result.placements == []
    assert result.total_profit == 0


def test_fractional_percent_of_partial_item():
    result = fractional_knapsack(5, [10], [100])
    assert result.placements[0].percent == 50
    assert result.total_profit == pytest.approx(50.0)


def test_fractional_rejects_zero_weight():
    with pytest.raises(ValueError):
        fractional_knapsack(10, [0, 2], [1, 2])


def test_fractional_length_mismatch():
    with pytest.raises(ValueError):
        fractional_knapsack(10, [1, 2], [1])