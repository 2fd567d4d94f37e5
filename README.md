# tspgrasp

A metaheuristic solver for the symmetric Travelling Salesman Problem. It reads
instances in the TSPLIB text format and searches for a short tour with GRASP
construction (randomised cheapest insertion) followed by Iterated Local Search
(ILS) driven by a Random Variable Neighbourhood Descent (RVND).

## Installation

```
pip install .
```

The package has no runtime dependencies. To run the test suite:

```
pip install ".[test]"
pytest
```

## Supported instances

Edge weight types `EUC_2D`, `CEIL_2D`, `GEO`, `ATT` and `EXPLICIT` are read.
Explicit matrices may be given as `FULL_MATRIX`, `UPPER_ROW`, `LOWER_ROW`,
`UPPER_DIAG_ROW`, `LOWER_DIAG_ROW`, `UPPER_COL`, `LOWER_COL`,
`UPPER_DIAG_COL` or `LOWER_DIAG_COL`. Any other edge weight type or format
raises `UnsupportedFormatError`; a missing file, a bad dimension, a bad number
or data that ends too early raises `InstanceError` (a subclass of
`ValueError`).

Distances follow the TSPLIB conventions: `EUC_2D` rounds the Euclidean
distance to the nearest integer, `CEIL_2D` rounds it up, `ATT` uses the
pseudo-Euclidean distance and `GEO` the geographical distance on an idealised
sphere of radius 6378.388 km.

## Command line

```
tspgrasp instancias/eil101.tsp
```

The same entry point can be run as `python -m tspgrasp.cli`.

Options:

- `instance` – path of the TSPLIB file; defaults to `instancias/eil101.tsp`.
- `--iterations N` – number of GRASP starts (default 50).
- `--seed S` – seed for the random number generator, for reproducible runs.
- `--time-log PATH` – file the elapsed time is appended to (default
  `tempo.txt`), as a line `Tempo: <seconds>`.
- `--cost-log PATH` – file the cost is appended to (default `custo.txt`), as a
  line `Custo: <cost>`.

Each start is improved by ILS, which stops after a number of consecutive
perturbations without improvement: the number of cities for instances below
150 cities, and half of it from 150 cities up (see `ils_iterations`). The best
tour is printed as

```
Route: 1 - 5 - ... - 1
Cost: 629
```

If the instance cannot be read, the error is printed to standard error and the
command exits with status 1.

## Library use

```python
import random

from tspgrasp.cli import ils_iterations
from tspgrasp.ils import ils
from tspgrasp.instance import load_instance

instance = load_instance("instancias/eil101.tsp")
rng = random.Random(42)

best = ils(instance, 50, ils_iterations(instance.dimension), rng)
print(best.format())
```

The building blocks are available on their own:

- `tspgrasp.instance` – `load_instance(path)` and `parse_instance(text)`
  return a frozen `Instance` with `dimension`, a `weights` matrix and
  `distance(i, j)` for cities numbered from 1. The distance helpers
  `euclidean_distance`, `att_distance`, `geo_radians` and `geo_distance` are
  public.
- `tspgrasp.solution` – `Solution` holds a closed `route` starting and ending
  at city 1 together with its `cost`, and offers `copy`, `compute_cost`,
  `swap`, `reverse`, `move_block` and `format`. `trivial_solution(instance)`
  gives the tour 1, 2, ..., n, 1.
- `tspgrasp.construction` – `construct(instance, rng, alpha)` builds a tour by
  cheapest insertion, picking at random among the cheapest `alpha` share of
  candidate insertions (default 0.5; `alpha` must lie in (0, 1]).
  `initial_candidates` and `insertion_costs` expose the candidate list and the
  `Insertion` records it is built from.
- `tspgrasp.local_search` – `best_improvement_swap`,
  `best_improvement_two_opt` and `best_improvement_or_opt` (moving a block of
  cities) apply the best improving move in place, update the cost and return
  whether one was found. `rvnd` applies the swap, 2-opt and or-opt moves with
  blocks of 1, 2 and 3 in random order until none improves; `solve` runs it
  from the trivial tour.
- `tspgrasp.perturbation` – `perturb(instance, solution, rng)` exchanges a
  random segment from the first half of the tour with one from the second
  half and returns a new solution with the cost updated incrementally.
- `tspgrasp.ils` – `ils(instance, max_iter, max_iter_ils, rng)` runs the whole
  search and returns the best solution found.

Every function that draws random numbers takes an optional `random.Random`;
passing your own makes runs reproducible.

## Limitations

- Edge weight types `EUC_3D`, `MAX_2D`, `MAX_3D`, `MAN_2D`, `MAN_3D`, `XRAY1`,
  `XRAY2`, `SPECIAL` and the explicit format `FUNCTION` are not supported.
- `perturb`, and therefore `ils` and the command, need an instance of at least
  11 cities; smaller instances raise `ValueError`.
- Only symmetric instances are meant: the local search moves assume that the
  distance from one city to another equals the distance back.