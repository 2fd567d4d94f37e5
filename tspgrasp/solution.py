"""Tours over the cities of an instance and the moves that rearrange them."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import pairwise

from .instance import Instance


@dataclass
class Solution:
    """A closed tour that starts and ends at city 1, with its cost."""

    route: list[int] = field(default_factory=list)
    cost: float = 0.0

    def copy(self) -> Solution:
        """Return an independent copy of this solution."""
        return Solution(list(self.route), self.cost)

    def compute_cost(self, instance: Instance) -> float:
        """Recompute the cost of the route from scratch, store it and return it."""
        self.cost = float(sum(instance.distance(a, b) for a, b in pairwise(self.route)))
        return self.cost

    def swap(self, i: int, j: int) -> None:
        """Exchange the cities at positions ``i`` and ``j``."""
        self.route[i], self.route[j] = self.route[j], self.route[i]

    def reverse(self, start: int, end: int) -> None:
        """Reverse the stretch of the route between positions ``start`` and ``end``."""
        if start < end:
            self.route[start:end + 1] = self.route[start:end + 1][::-1]

    def move_block(self, position: int, target: int, block: int) -> None:
        """Move ``block`` cities starting at ``position`` to just after ``target``.

        ``target`` is a position in the route as it is before the move.
        """
        if block < 1:
            raise ValueError("block must hold at least one city")
        if position + block > len(self.route):
            raise ValueError("block runs past the end of the route")
        if position <= target < position + block:
            raise ValueError("target lies inside the block being moved")
        segment = self.route[position:position + block]
        if position < target:
            self.route[target + 1:target + 1] = segment
            del self.route[position:position + block]
        else:
            del self.route[position:position + block]
            self.route[target + 1:target + 1] = segment

    def format(self) -> str:
        """Render the route and cost as two lines of text."""
        route = " - ".join(str(city) for city in self.route)
        return f"Route: {route}\nCost: {self.cost:g}"


def trivial_solution(instance: Instance) -> Solution:
    """Return the tour that visits the cities in numeric order."""
    solution = Solution(list(range(1, instance.dimension + 1)) + [1])
    solution.compute_cost(instance)
    return solution