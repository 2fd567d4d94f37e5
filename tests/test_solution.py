import math
import random

import pytest

from tspgrasp.instance import Instance
from tspgrasp.solution import Solution, trivial_solution


def _instance(points):
    weights = tuple(
        tuple(float(round(math.dist(p, q))) for q in points) for p in points
    )
    return Instance(len(points), weights)


def _random_instance(seed, n):
    rng = random.Random(seed)
    return _instance([(rng.randint(0, 100), rng.randint(0, 100)) for _ in range(n)])


def test_trivial_solution_visits_cities_in_order():
    inst = _random_instance(1, 7)
    s = trivial_solution(inst)
    assert s.route == list(range(1, 8)) + [1]
    assert s.cost == Solution(list(s.route)).compute_cost(inst)


def test_trivial_solution_single_city():
    inst = Instance(1, ((0.0,),))
    s = trivial_solution(inst)
    assert s.route == [1, 1]
    assert s.cost == 0.0


def test_compute_cost_stores_and_returns():
    inst = _random_instance(2, 6)
    s = Solution([1, 4, 2, 6, 3, 5, 1])
    value = s.compute_cost(inst)
    assert value == s.cost
    reversed_cost = Solution(list(reversed(s.route))).compute_cost(inst)
    assert reversed_cost == value


def test_copy_is_independent():
    s = Solution([1, 2, 3, 1], 5.0)
    c = s.copy()
    c.swap(1, 2)
    c.cost = 9.0
    assert s.route == [1, 2, 3, 1]
    assert s.cost == 5.0
    assert c.route == [1, 3, 2, 1]


def test_swap_exchanges_positions():
    s = Solution([1, 2, 3, 4, 1])
    s.swap(1, 3)
    assert s.route[1] == 4 and s.route[3] == 2
    s.swap(1, 3)
    assert s.route == [1, 2, 3, 4, 1]


def test_reverse_segment():
    s = Solution([1, 2, 3, 4, 5, 1])
    s.reverse(1, 3)
    assert s.route == [1, 4, 3, 2, 5, 1]
    s.reverse(1, 3)
    assert s.route == [1, 2, 3, 4, 5, 1]


def test_reverse_empty_range_is_noop():
    s = Solution([1, 2, 3, 4, 1])
    s.reverse(3, 1)
    assert s.route == [1, 2, 3, 4, 1]


def test_move_block_forward():
    s = Solution([1, 2, 3, 4, 5, 6, 1])
    s.move_block(1, 4, 2)
    assert s.route == [1, 4, 5, 2, 3, 6, 1]


def test_move_block_backward():
    s = Solution([1, 2, 3, 4, 5, 6, 1])
    s.move_block(4, 0, 2)
    assert s.route == [1, 5, 6, 2, 3, 4, 1]


@pytest.mark.parametrize(
    "position, target, block",
    [(1, 3, 1), (1, 6, 3), (2, 5, 2), (3, 7, 1), (2, 8, 3)],
)
def test_move_block_round_trip(position, target, block):
    original = [1, 2, 3, 4, 5, 6, 7, 8, 9, 1]
    s = Solution(list(original))
    s.move_block(position, target, block)
    assert sorted(s.route) == sorted(original)
    assert s.route != original
    s.move_block(target + 1 - block, position - 1, block)
    assert s.route == original


@pytest.mark.parametrize(
    "position, target, block",
    [(1, 1, 1), (2, 3, 2), (1, 2, 3), (1, 3, 0), (3, 0, 5)],
)
def test_move_block_rejects_bad_moves(position, target, block):
    s = Solution([1, 2, 3, 4, 5, 1])
    with pytest.raises(ValueError):
        s.move_block(position, target, block)


def test_format_matches_output_layout():
    s = Solution([1, 2, 3, 1], 6.0)
    assert s.format() == "Route: 1 - 2 - 3 - 1\nCost: 6"