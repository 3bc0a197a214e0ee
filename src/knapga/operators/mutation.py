"""
knapga.operators.mutation
=========================

Stochastic bit-flip mutation for genomes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from knapga.core.genome import Genome


# =============================================================================
# Base class
# =============================================================================
class MutationOperator(ABC):
    """Abstract base class for mutation operators."""

    @abstractmethod
    def mutate(self, genome: Genome) -> Genome:
        """Return a mutated copy of the genome."""
        pass


class RandomFlipMutation(MutationOperator):
    """
    Runs ``n_mutations`` independent trials; each trial flips one uniformly random bit with probability 0.5.

    Positions may repeat between trials, so a bit can be flipped back within the same call and the
    number of changed bits is usually below ``n_mutations``.

    Parameters:
        n_mutations (int): Number of flip trials per call.
        rng (numpy.random.Generator | None): Optional RNG for reproducibility.
    """

    def __init__(self, n_mutations: int, rng: np.random.Generator | None = None):
        if n_mutations < 0:
            raise ValueError("n_mutations must be >= 0")
        self.n_mutations = n_mutations
        self.rng: np.random.Generator = rng if rng is not None else np.random.default_rng()

    def mutate(self, genome: Genome) -> Genome:
        genes = genome.genes.copy()
        for _ in range(self.n_mutations):
            if self.rng.random() < 0.5:
                index = int(self.rng.integers(0, len(genes)))
                genes[index] = 1 - genes[index]
        return Genome(genes)
