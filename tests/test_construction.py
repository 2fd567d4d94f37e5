import math
import random

import pytest

from tspgrasp.construction import (
    construct,
    initial_candidates,
    insertion_costs,
)
from tspgrasp.instance import Instance
from tspgrasp.solution import Solution


def _instance(points):
    weights = tuple(
        tuple(float(round(math.dist(p, q))) for q in points) for p in points
    )
    return Instance(len(points), weights)


def _random_instance(seed, n):
    rng = random.Random(seed)
    return _instance([(rng.randint(0, 100), rng.randint(0, 100)) for _ in range(n)])


def _assert_valid_tour(route, n):
    assert route[0] == 1 and route[-1] == 1
    assert sorted(route[:-1]) == list(range(1, n + 1))


def test_initial_candidates_exclude_first_city():
    assert initial_candidates(_random_instance(0, 5)) == [2, 3, 4, 5]


def test_insertion_costs_order_edges_then_candidates():
    inst = _random_instance(1, 4)
    options = insertion_costs(inst, [1, 2, 1], [3, 4])
    assert [(o.edge, o.vertex) for o in options] == [(0, 3), (0, 4), (1, 3), (1, 4)]


def test_insertion_cost_matches_route_cost_change():
    inst = _random_instance(2, 7)
    route = [1, 4, 2, 6, 1]
    base = Solution(list(route)).compute_cost(inst)
    options = insertion_costs(inst, route, [3, 5, 7])
    assert len(options) == 4 * 3
    for option in options:
        new_route = list(route)
        new_route.insert(option.edge + 1, option.vertex)
        assert Solution(new_route).compute_cost(inst) == base + option.cost


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_construct_builds_valid_tour_with_true_cost(seed):
    inst = _random_instance(seed, 12)
    s = construct(inst, random.Random(seed))
    _assert_valid_tour(s.route, 12)
    assert s.cost == Solution(list(s.route)).compute_cost(inst)


def test_construct_is_reproducible_with_seed():
    inst = _random_instance(5, 15)
    a = construct(inst, random.Random(42))
    b = construct(inst, random.Random(42))
    assert a.route == b.route
    assert a.cost == b.cost


def test_construct_greedy_ignores_randomness():
    inst = _random_instance(6, 10)
    a = construct(inst, random.Random(1), alpha=1e-9)
    b = construct(inst, random.Random(99), alpha=1e-9)
    assert a.route == b.route


def test_construct_single_city():
    inst = Instance(1, ((0.0,),))
    s = construct(inst, random.Random(0))
    assert s.route == [1, 1]
    assert s.cost == 0.0


@pytest.mark.parametrize("alpha", [0, -0.1, 1.5])
def test_construct_rejects_bad_alpha(alpha):
    with pytest.raises(ValueError):
        construct(_random_instance(0, 4), random.Random(0), alpha=alpha)