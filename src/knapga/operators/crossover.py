"""
knapga.operators.crossover
==========================

Single-point recombination of two genomes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from knapga.core.genome import Genome


class LengthMismatchError(ValueError):
    pass


# =============================================================================
# Base class
# =============================================================================
class CrossoverOperator(ABC):
    """Abstract base class for crossover operators supporting RNG injection.

    Parameters
    ----------
    rng : numpy.random.Generator | None, default None
        Optional RNG for deterministic behavior. If ``None`` a new default
        generator is created.
    """

    def __init__(self, rng: np.random.Generator | None = None):
        self.rng: np.random.Generator = rng if rng is not None else np.random.default_rng()

    @abstractmethod
    def crossover(self, parent1: Genome, parent2: Genome) -> Genome:
        """Return one (unmutated) child genome created from parent1 and parent2."""
        pass


class MidSplitCrossover(CrossoverOperator):
    """
    One-point crossover with the cut restricted to the middle 60% of the genome.

    The child takes ``parent1`` genes before the split and ``parent2`` genes from the split on.
    The split is ``floor(0.2 * L) + r`` with ``r`` drawn uniformly from ``[0, floor(0.6 * L))``;
    when that window is empty ``r`` is 0.
    """

    def split_point(self, length: int) -> int:
        offset = int(length * 0.2)
        window = int(length * 0.6)
        if window <= 0:
            return offset
        return offset + int(self.rng.integers(0, window))

    @staticmethod
    def splice(parent1: Genome, parent2: Genome, split: int) -> Genome:
        if len(parent1) != len(parent2):
            raise LengthMismatchError(f"Parents must have the same length; got {len(parent1)} and {len(parent2)}.")
        if not (0 <= split <= len(parent1)):
            raise ValueError(f"split must be in [0, {len(parent1)}], got {split}")
        genes = np.concatenate([parent1.genes[:split], parent2.genes[split:]])
        return Genome(genes)

    def crossover(self, parent1: Genome, parent2: Genome) -> Genome:
        if len(parent1) != len(parent2):
            raise LengthMismatchError(f"Parents must have the same length; got {len(parent1)} and {len(parent2)}.")
        return self.splice(parent1, parent2, self.split_point(len(parent1)))
