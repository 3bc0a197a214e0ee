"""Genome distance utilities.

Used by the engine to track how quickly a selection strategy collapses genetic
diversity (best-fit breeding converges much faster than the roulette wheel).

    hamming_distance(a, b) -> int
        Number of positions where the two genomes differ.

    normalized_hamming_distance(a, b) -> float
        Hamming distance divided by genome length, in [0, 1].

    population_diversity(genomes) -> float
        Mean normalized Hamming distance over all unordered pairs; 0.0 for fewer than
        two genomes. Computed per position: with ``k`` ones among ``n`` genomes a position
        separates ``k * (n - k)`` pairs, so no pairwise matrix is built.
"""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from .genome import Genome

__all__ = [
    "hamming_distance",
    "normalized_hamming_distance",
    "population_diversity",
]


def hamming_distance(a: Genome, b: Genome) -> int:
    if len(a) != len(b):
        raise ValueError("Genome lengths differ.")
    return int(np.count_nonzero(a.as_array() != b.as_array()))


def normalized_hamming_distance(a: Genome, b: Genome) -> float:
    return float(hamming_distance(a, b) / max(1, len(a)))


def population_diversity(genomes: Iterable[Genome]) -> float:
    genos = list(genomes)
    n = len(genos)
    if n < 2:
        return 0.0
    if len({len(g) for g in genos}) != 1:
        raise ValueError("Genome lengths differ.")
    bits = np.stack([g.as_array() for g in genos]).astype(np.int64)
    ones = bits.sum(axis=0)
    pairs = n * (n - 1) / 2
    return float((ones * (n - ones)).sum() / (pairs * max(1, bits.shape[1])))
