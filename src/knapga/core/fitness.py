"""Knapsack fitness: total packed value, or zero when the packing is overweight."""

from __future__ import annotations

import numpy as np

from knapga.core.catalog import Catalog
from knapga.core.genome import Genome

__all__ = ["fitness", "total_value", "total_weight"]


def _selected(genome: Genome, catalog: Catalog) -> np.ndarray:
    if len(genome) != len(catalog):
        raise ValueError(f"Genome length {len(genome)} does not match catalog length {len(catalog)}.")
    return genome.as_array() == 1


def total_weight(genome: Genome, catalog: Catalog) -> float:
    """Sum of the weights of every item the genome selects."""
    return float(catalog.weights[_selected(genome, catalog)].sum())


def total_value(genome: Genome, catalog: Catalog) -> float:
    """Sum of the values of every item the genome selects."""
    return float(catalog.values[_selected(genome, catalog)].sum())


def fitness(genome: Genome, catalog: Catalog) -> float:
    # weight == capacity is still feasible
    if total_weight(genome, catalog) > catalog.capacity:
        return 0.0
    return total_value(genome, catalog)
