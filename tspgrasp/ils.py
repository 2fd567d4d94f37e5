"""Iterated local search built on randomised construction and RVND."""

from __future__ import annotations

import random

from .construction import construct
from .instance import Instance
from .local_search import rvnd
from .perturbation import perturb
from .solution import Solution


def ils(
    instance: Instance,
    max_iter: int,
    max_iter_ils: int,
    rng: random.Random | None = None,
) -> Solution:
    """Run ``max_iter`` restarts, each perturbing until ``max_iter_ils`` fail in a row."""
    if max_iter < 1:
        raise ValueError("max_iter must be at least 1")
    if rng is None:
        rng = random.Random()

    best_of_all: Solution | None = None
    for _ in range(max_iter):
        current = construct(instance, rng)
        best = current.copy()
        failures = 0
        while failures <= max_iter_ils:
            rvnd(instance, current, rng)
            if current.cost < best.cost:
                best = current.copy()
                failures = 0
            current = perturb(instance, best, rng)
            failures += 1
        if best_of_all is None or best.cost < best_of_all.cost:
            best_of_all = best
    assert best_of_all is not None
    return best_of_all