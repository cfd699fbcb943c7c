import pytest

from dsakit.dynamic import mincost_tickets, min_sum_of_squares, num_squares, rob


def test_rob_small_cases():
    assert not rob([])
    assert rob([6]) == 6
    assert rob([3, 8]) == max(3, 8)


def test_rob_known_street():
    assert rob([2, 7, 9, 3, 1]) == 12


def test_rob_bounds():
    values = [5, 1, 1, 5, 3, 9, 2]
    result = rob(values)
    assert max(values) <= result <= sum(values)
    assert result >= sum(values[0::2])


def test_mincost_tickets_example():
    assert mincost_tickets([1, 4, 6, 7, 8, 20], [2, 7, 15]) == 11


def test_mincost_tickets_single_day_and_bound():
    costs = [4, 3, 20]
    assert mincost_tickets([10], costs) == min(costs)
    days = [1, 2, 3, 40, 41, 90]
    assert mincost_tickets(days, costs) <= costs[0] * len(days)


def test_mincost_tickets_no_days():
    assert not mincost_tickets([], [2, 7, 15])


def test_mincost_tickets_rejects_bad_costs():
    with pytest.raises(ValueError):
        mincost_tickets([1, 2], [2, 7])


def test_num_squares_perfect_squares():
    for root in range(1, 12):
        assert num_squares(root * root) == 1


def test_num_squares_four_square_bound():
    assert all(1 <= num_squares(n) <= 4 for n in range(1, 200))


def test_num_squares_known():
    assert num_squares(12) == 3


def test_num_squares_rejects_negative():
    with pytest.raises(ValueError):
        num_squares(-1)


def test_min_sum_of_squares_delete_everything():
    text = "aabbbcc"
    assert not min_sum_of_squares(text, len(text))
    assert not min_sum_of_squares(text, len(text) + 5)


def test_min_sum_of_squares_distinct_characters():
    text = "abcdef"
    assert min_sum_of_squares(text, 0) == len(text)


def test_min_sum_of_squares_never_grows_with_more_deletions():
    text = "aaabbbbccd"
    results = [min_sum_of_squares(text, k) for k in range(len(text) + 1)]
    assert all(a >= b for a, b in zip(results, results[1:]))
    assert min_sum_of_squares(text, -3) == min_sum_of_squares(text, 0)