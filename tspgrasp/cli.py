"""Command line entry point: solve one instance and log time and cost."""

from __future__ import annotations

import argparse
import random
import sys
import time
from pathlib import Path

from .ils import ils
from .instance import InstanceError, load_instance

DEFAULT_INSTANCE = "instancias/eil101.tsp"
DEFAULT_RESTARTS = 50
LARGE_INSTANCE = 150


def ils_iterations(dimension: int) -> int:
    """Number of non-improving perturbations allowed for an instance size."""
    return dimension // 2 if dimension >= LARGE_INSTANCE else dimension


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tspgrasp", description="Solve a TSPLIB instance with GRASP and ILS."
    )
    parser.add_argument("instance", nargs="?", default=DEFAULT_INSTANCE)
    parser.add_argument("--iterations", type=int, default=DEFAULT_RESTARTS)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--time-log", default="tempo.txt")
    parser.add_argument("--cost-log", default="custo.txt")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the solver and append the elapsed time and cost to the log files."""
    args = _parser().parse_args(argv)
    start = time.perf_counter()
    try:
        instance = load_instance(args.instance)
    except InstanceError as exc:
        print(exc, file=sys.stderr)
        return 1

    rng = random.Random(args.seed)
    solution = ils(instance, args.iterations, ils_iterations(instance.dimension), rng)
    print(solution.format())

    elapsed = time.perf_counter() - start
    with Path(args.time_log).open("a") as log:
        log.write(f"Tempo: {elapsed:g}\n")
    with Path(args.cost_log).open("a") as log:
        log.write(f"Custo: {solution.cost:g}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())