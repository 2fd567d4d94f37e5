"""Reading symmetric TSP instances in the TSPLIB text format."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path

GEO_PI = 3.141592
EARTH_RADIUS = 6378.388


class InstanceError(ValueError):
    """Raised when an instance cannot be read."""


class UnsupportedFormatError(InstanceError):
    """Raised for edge weight types or formats that are not handled."""


@dataclass(frozen=True)
class Instance:
    """A TSP instance: its dimension and full distance matrix.

    Cities are numbered from 1 to ``dimension``.
    """

    dimension: int
    weights: tuple[tuple[float, ...], ...]

    def __post_init__(self) -> None:
        if self.dimension < 1:
            raise InstanceError("dimension must be positive")
        if len(self.weights) != self.dimension or any(
            len(row) != self.dimension for row in self.weights
        ):
            raise InstanceError("weight matrix does not match the dimension")

    def distance(self, i: int, j: int) -> float:
        """Return the weight of the edge between cities ``i`` and ``j``."""
        if not (1 <= i <= self.dimension and 1 <= j <= self.dimension):
            raise IndexError(f"city out of range: {i}, {j}")
        return self.weights[i - 1][j - 1]


def euclidean_distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Plain Euclidean distance between two points."""
    return math.sqrt((x1 - x2) ** 2 + (y1 - y2) ** 2)


def att_distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Pseudo-Euclidean distance used by ATT instances."""
    r = math.sqrt(((x1 - x2) ** 2 + (y1 - y2) ** 2) / 10)
    t = math.floor(r + 0.5)
    return float(t + 1 if t < r else t)


def geo_radians(value: float) -> float:
    """Convert a DDD.MM coordinate to radians."""
    degrees = math.trunc(value)
    minutes = value - degrees
    return GEO_PI * (degrees + 5.0 * minutes / 3.0) / 180.0


def geo_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Geographical distance in kilometres between points given in radians."""
    q1 = math.cos(lon1 - lon2)
    q2 = math.cos(lat1 - lat2)
    q3 = math.cos(lat1 + lat2)
    arg = 0.5 * ((1.0 + q1) * q2 - (1.0 - q1) * q3)
    arg = max(-1.0, min(1.0, arg))
    return float(int(EARTH_RADIUS * math.acos(arg) + 1.0))


class _Tokens:
    """Whitespace separated tokens read front to back."""

    def __init__(self, text: str) -> None:
        self._tokens = text.split()
        self._pos = 0

    def next(self, what: str) -> str:
        if self._pos >= len(self._tokens):
            raise InstanceError(f"unexpected end of data while reading {what}")
        token = self._tokens[self._pos]
        self._pos += 1
        return token

    def number(self, what: str) -> float:
        token = self.next(what)
        try:
            return float(token)
        except ValueError:
            raise InstanceError(f"invalid number {token!r} in {what}") from None

    def value_of(self, keyword: str) -> str:
        prefix = keyword + ":"
        while True:
            token = self.next(keyword)
            if token == keyword:
                value = self.next(keyword)
                return self.next(keyword) if value == ":" else value
            if token == prefix:
                return self.next(keyword)
            if token.startswith(prefix):
                return token[len(prefix):]

    def seek(self, keyword: str) -> None:
        while self.next(keyword) != keyword:
            pass


def _full_matrix(n: int) -> Iterator[tuple[int, int]]:
    for i in range(n):
        for j in range(n):
            yield i, j


def _upper_row(n: int) -> Iterator[tuple[int, int]]:
    for i in range(n - 1):
        for j in range(i + 1, n):
            yield i, j


def _lower_row(n: int) -> Iterator[tuple[int, int]]:
    for i in range(1, n):
        for j in range(i):
            yield i, j


def _upper_diag_row(n: int) -> Iterator[tuple[int, int]]:
    for i in range(n):
        for j in range(i, n):
            yield i, j


def _lower_diag_row(n: int) -> Iterator[tuple[int, int]]:
    for i in range(n):
        for j in range(i + 1):
            yield i, j


def _upper_col(n: int) -> Iterator[tuple[int, int]]:
    for j in range(1, n):
        for i in range(j):
            yield i, j


def _lower_col(n: int) -> Iterator[tuple[int, int]]:
    for j in range(n - 1):
        for i in range(j + 1, n):
            yield i, j


def _upper_diag_col(n: int) -> Iterator[tuple[int, int]]:
    for j in range(n):
        for i in range(j + 1):
            yield i, j


def _lower_diag_col(n: int) -> Iterator[tuple[int, int]]:
    for j in range(n):
        for i in range(j, n):
            yield i, j


_EXPLICIT_FORMATS: dict[str, Callable[[int], Iterator[tuple[int, int]]]] = {
    "FULL_MATRIX": _full_matrix,
    "UPPER_ROW": _upper_row,
    "LOWER_ROW": _lower_row,
    "UPPER_DIAG_ROW": _upper_diag_row,
    "LOWER_DIAG_ROW": _lower_diag_row,
    "UPPER_COL": _upper_col,
    "LOWER_COL": _lower_col,
    "UPPER_DIAG_COL": _upper_diag_col,
    "LOWER_DIAG_COL": _lower_diag_col,
}


def _read_explicit(tokens: _Tokens, n: int) -> list[list[float]]:
    fmt = tokens.value_of("EDGE_WEIGHT_FORMAT")
    cells = _EXPLICIT_FORMATS.get(fmt)
    if cells is None:
        raise UnsupportedFormatError(f"edge weight format {fmt} is not supported")
    tokens.seek("EDGE_WEIGHT_SECTION")
    matrix = [[0.0] * n for _ in range(n)]
    symmetric = fmt != "FULL_MATRIX"
    for i, j in cells(n):
        value = tokens.number("EDGE_WEIGHT_SECTION")
        matrix[i][j] = value
        if symmetric:
            matrix[j][i] = value
    return matrix


def _read_coordinates(tokens: _Tokens, n: int) -> list[tuple[float, float]]:
    tokens.seek("NODE_COORD_SECTION")
    points = []
    for _ in range(n):
        tokens.next("NODE_COORD_SECTION")
        x = tokens.number("NODE_COORD_SECTION")
        y = tokens.number("NODE_COORD_SECTION")
        points.append((x, y))
    return points


def _pairwise(
    points: list[tuple[float, float]],
    metric: Callable[[float, float, float, float], float],
) -> list[list[float]]:
    return [[metric(x1, y1, x2, y2) for (x2, y2) in points] for (x1, y1) in points]


def _euc_2d(x1: float, y1: float, x2: float, y2: float) -> float:
    return float(math.floor(euclidean_distance(x1, y1, x2, y2) + 0.5))


def _ceil_2d(x1: float, y1: float, x2: float, y2: float) -> float:
    return float(math.ceil(euclidean_distance(x1, y1, x2, y2)))


def parse_instance(text: str) -> Instance:
    """Parse the text of a TSPLIB instance into an :class:`Instance`."""
    tokens = _Tokens(text)
    raw_dimension = tokens.value_of("DIMENSION")
    try:
        n = int(raw_dimension)
    except ValueError:
        raise InstanceError(f"invalid dimension {raw_dimension!r}") from None
    if n < 1:
        raise InstanceError(f"invalid dimension {n}")
    weight_type = tokens.value_of("EDGE_WEIGHT_TYPE")

    if weight_type == "EXPLICIT":
        matrix = _read_explicit(tokens, n)
    elif weight_type == "EUC_2D":
        matrix = _pairwise(_read_coordinates(tokens, n), _euc_2d)
    elif weight_type == "CEIL_2D":
        matrix = _pairwise(_read_coordinates(tokens, n), _ceil_2d)
    elif weight_type == "GEO":
        points = [
            (geo_radians(x), geo_radians(y)) for x, y in _read_coordinates(tokens, n)
        ]
        matrix = _pairwise(points, geo_distance)
    elif weight_type == "ATT":
        points = [
            (float(math.trunc(x)), float(math.trunc(y)))
            for x, y in _read_coordinates(tokens, n)
        ]
        matrix = _pairwise(points, att_distance)
    else:
        raise UnsupportedFormatError(f"edge weight type {weight_type} is not supported")

    return Instance(n, tuple(tuple(row) for row in matrix))


def load_instance(path: str | Path) -> Instance:
    """Read and parse the instance stored in ``path``."""
    try:
        text = Path(path).read_text()
    except OSError as exc:
        raise InstanceError(f"cannot open {path}") from exc
    return parse_instance(text)