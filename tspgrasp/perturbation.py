"""Double-bridge style perturbation that exchanges two segments of a tour."""

from __future__ import annotations

import math
import random

from .instance import Instance
from .solution import Solution

MIN_SEGMENT = 2
MIN_DIMENSION = 11


def perturb(
    instance: Instance, solution: Solution, rng: random.Random | None = None
) -> Solution:
    """Return a copy of ``solution`` with two disjoint segments exchanged.

    The first segment lies in the first half of the tour and the second in
    the second half. Each holds between 2 and ``ceil(n / 10)`` cities. The
    cost of the result is updated incrementally.
    """
    n = instance.dimension
    if n < MIN_DIMENSION:
        raise ValueError(f"perturbation needs at least {MIN_DIMENSION} cities, got {n}")
    if rng is None:
        rng = random.Random()

    max_size = math.ceil(n / 10.0)
    size_i = rng.randint(MIN_SEGMENT, max_size)
    size_j = rng.randint(MIN_SEGMENT, max_size)
    i = rng.randint(1, n // 2 - size_i)
    j = rng.randint(n // 2, n - size_j)

    r = solution.route
    d = instance.distance
    end_i = i + size_i
    end_j = j + size_j

    if end_i == j:
        delta = (
            -d(r[i - 1], r[i])
            - d(r[end_i - 1], r[end_i])
            - d(r[end_j - 1], r[end_j])
            + d(r[i - 1], r[j])
            + d(r[end_j - 1], r[i])
            + d(r[end_i - 1], r[end_j])
        )
    else:
        delta = (
            -d(r[i - 1], r[i])
            - d(r[end_i - 1], r[end_i])
            - d(r[j - 1], r[j])
            - d(r[end_j - 1], r[end_j])
            + d(r[i - 1], r[j])
            + d(r[end_j - 1], r[end_i])
            + d(r[j - 1], r[i])
            + d(r[end_i - 1], r[end_j])
        )

    route = r[:i] + r[j:end_j] + r[end_i:j] + r[i:end_i] + r[end_j:]
    return Solution(route, solution.cost + delta)