"""GRASP-ILS heuristic for the symmetric Travelling Salesman Problem on TSPLIB instances."""

__version__ = "0.1.0"