"""Best-improvement neighbourhoods and randomised variable neighbourhood descent."""

from __future__ import annotations

import random
from functools import partial

from .instance import Instance
from .solution import Solution, trivial_solution


def _zero_based(solution: Solution) -> list[int]:
    return [city - 1 for city in solution.route]


def best_improvement_swap(instance: Instance, solution: Solution) -> bool:
    """Apply the best improving exchange of two cities; report whether one was found."""
    n = instance.dimension
    w = instance.weights
    r = _zero_based(solution)
    best_delta = 0.0
    best = None
    for i in range(1, n - 1):
        for j in range(i + 1, n):
            if j == i + 1:
                removed = w[r[i - 1]][r[i]] + w[r[j]][r[j + 1]]
                added = w[r[i - 1]][r[j]] + w[r[i]][r[j + 1]]
            else:
                removed = (
                    w[r[i - 1]][r[i]] + w[r[i]][r[i + 1]]
                    + w[r[j - 1]][r[j]] + w[r[j]][r[j + 1]]
                )
                added = (
                    w[r[i - 1]][r[j]] + w[r[j]][r[i + 1]]
                    + w[r[j - 1]][r[i]] + w[r[i]][r[j + 1]]
                )
            delta = added - removed
            if delta < best_delta:
                best_delta = delta
                best = (i, j)
    if best is None:
        return False
    solution.swap(*best)
    solution.cost += best_delta
    return True


def best_improvement_two_opt(instance: Instance, solution: Solution) -> bool:
    """Apply the best improving segment reversal; report whether one was found."""
    n = instance.dimension
    w = instance.weights
    r = _zero_based(solution)
    best_delta = 0.0
    best = None
    for i in range(1, n - 1):
        for j in range(i + 1, n):
            delta = (
                -w[r[i - 1]][r[i]]
                - w[r[j]][r[j + 1]]
                + w[r[i - 1]][r[j]]
                + w[r[i]][r[j + 1]]
            )
            if delta < best_delta:
                best_delta = delta
                best = (i, j)
    if best is None:
        return False
    solution.reverse(*best)
    solution.cost += best_delta
    return True


def best_improvement_or_opt(instance: Instance, solution: Solution, block: int) -> bool:
    """Apply the best improving move of ``block`` consecutive cities elsewhere."""
    if block < 1:
        raise ValueError("block must hold at least one city")
    n = instance.dimension
    w = instance.weights
    r = _zero_based(solution)
    best_delta = 0.0
    best = None
    for i in range(1, n - block + 1):
        first, last, before, after = r[i], r[i + block - 1], r[i - 1], r[i + block]
        for j in range(n):
            if j == i or j == i - 1 or i < j <= i + 1 + block // 3:
                continue
            delta = (
                -w[before][first]
                - w[last][after]
                - w[r[j]][r[j + 1]]
                + w[before][after]
                + w[r[j]][first]
                + w[last][r[j + 1]]
            )
            if delta < best_delta:
                best_delta = delta
                best = (i, j)
    if best is None:
        return False
    solution.move_block(best[0], best[1], block)
    solution.cost += best_delta
    return True


_NEIGHBOURHOODS = (
    best_improvement_swap,
    best_improvement_two_opt,
    partial(best_improvement_or_opt, block=1),
    partial(best_improvement_or_opt, block=2),
    partial(best_improvement_or_opt, block=3),
)


def rvnd(instance: Instance, solution: Solution, rng: random.Random | None = None) -> None:
    """Descend through the neighbourhoods in random order until none improves."""
    if rng is None:
        rng = random.Random()
    available = list(_NEIGHBOURHOODS)
    while available:
        index = rng.randrange(len(available))
        if available[index](instance, solution):
            available = list(_NEIGHBOURHOODS)
        else:
            del available[index]


def solve(instance: Instance, rng: random.Random | None = None) -> Solution:
    """Improve the trivial tour by local search alone."""
    solution = trivial_solution(instance)
    rvnd(instance, solution, rng)
    return solution