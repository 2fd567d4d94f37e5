"""Randomised greedy construction of an initial tour by cheapest insertion."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from itertools import pairwise
from operator import attrgetter
from typing import Sequence

from .instance import Instance
from .solution import Solution

DEFAULT_ALPHA = 0.5


@dataclass(frozen=True)
class Insertion:
    """Inserting ``vertex`` into the edge that starts at route position ``edge``."""

    vertex: int
    edge: int
    cost: float


def initial_candidates(instance: Instance) -> list[int]:
    """Every city except city 1, which starts the tour."""
    return list(range(2, instance.dimension + 1))


def insertion_costs(
    instance: Instance, route: Sequence[int], candidates: Sequence[int]
) -> list[Insertion]:
    """Cost of inserting each candidate into each edge of ``route``."""
    d = instance.distance
    return [
        Insertion(k, edge, d(i, k) + d(j, k) - d(i, j))
        for edge, (i, j) in enumerate(pairwise(route))
        for k in candidates
    ]


def construct(
    instance: Instance,
    rng: random.Random | None = None,
    alpha: float = DEFAULT_ALPHA,
) -> Solution:
    """Build a tour, picking each insertion at random from the cheapest ``alpha`` share."""
    if not 0 < alpha <= 1:
        raise ValueError("alpha must lie in (0, 1]")
    if rng is None:
        rng = random.Random()
    route = [1, 1]
    cost = 0.0
    candidates = initial_candidates(instance)
    while candidates:
        options = sorted(insertion_costs(instance, route, candidates), key=attrgetter("cost"))
        chosen = options[rng.randrange(math.ceil(alpha * len(options)))]
        candidates.remove(chosen.vertex)
        route.insert(chosen.edge + 1, chosen.vertex)
        cost += chosen.cost
    return Solution(route, cost)