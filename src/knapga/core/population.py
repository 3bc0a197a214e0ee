"""Population value: the members of one generation plus everything needed to breed the next.

A :class:`Population` is never edited in place. Selection strategies build a new member list
and :meth:`Population.replace` wraps it into a new value that shares the catalog, the
configuration, the random source and the operators of the previous one.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import numpy as np

from knapga.core.catalog import Catalog
from knapga.core.config import GAConfig
from knapga.core.genome import Genome
from knapga.core.individual import Individual, best_of
from knapga.operators.crossover import CrossoverOperator, MidSplitCrossover
from knapga.operators.mutation import MutationOperator, RandomFlipMutation


class Population:
    """Ordered, immutable collection of :class:`Individual` for one generation.

    Parameters
    ----------
    catalog : Catalog
        Shared item catalog; every member genome has ``len(catalog)`` bits.
    config : GAConfig
        Run configuration (pool size, elite fraction, weak carry factor, mutation trials).
    members : Iterable[Individual], default ()
        Individuals of this generation.
    rng : numpy.random.Generator | None, default None
        Random source shared by the operators. A fresh default generator is used if None.
    crossover, mutation : optional operators
        Override the default :class:`MidSplitCrossover` / :class:`RandomFlipMutation`.
    """

    __slots__ = ("_members", "catalog", "config", "crossover_op", "mutation_op", "rng")

    def __init__(
        self,
        catalog: Catalog,
        config: GAConfig,
        members: Iterable[Individual] = (),
        rng: np.random.Generator | None = None,
        crossover: CrossoverOperator | None = None,
        mutation: MutationOperator | None = None,
    ) -> None:
        self.catalog = catalog
        self.config = config
        self.rng: np.random.Generator = rng if rng is not None else np.random.default_rng()
        self.crossover_op = crossover if crossover is not None else MidSplitCrossover(self.rng)
        self.mutation_op = mutation if mutation is not None else RandomFlipMutation(config.n_mutations, self.rng)
        self._members: tuple[Individual, ...] = tuple(members)
        # empty is allowed: it is the state before initialization
        if self._members and len(self._members) != config.pool_size:
            raise ValueError(f"population holds {len(self._members)} members but pool_size is {config.pool_size}")

    @classmethod
    def initialize(cls, catalog: Catalog, config: GAConfig, rng: np.random.Generator | None = None) -> Population:
        """Create ``config.pool_size`` random individuals with their fitness computed immediately."""
        if len(catalog) != config.genome_size:
            raise ValueError(
                f"catalog has {len(catalog)} items but genome_size is {config.genome_size}"
            )
        population = cls(catalog, config, rng=rng)
        members = [
            Individual.evaluate(Genome.random(config.genome_size, population.rng), catalog)
            for _ in range(config.pool_size)
        ]
        return population.replace(members)

    def replace(self, members: Iterable[Individual]) -> Population:
        """Return a new Population holding ``members`` and sharing everything else with this one."""
        return Population(
            self.catalog,
            self.config,
            members,
            rng=self.rng,
            crossover=self.crossover_op,
            mutation=self.mutation_op,
        )

    # ------------------------------------------------------------------
    # Breeding
    # ------------------------------------------------------------------
    def crossover(self, parent1: Individual, parent2: Individual) -> Individual:
        """Splice two parents, mutate the child genome, then evaluate it."""
        child = self.crossover_op.crossover(parent1.genome, parent2.genome)
        child = self.mutation_op.mutate(child)
        return Individual.evaluate(child, self.catalog)

    def best(self) -> Individual:
        """Highest-fitness member; ties go to the earliest member."""
        return best_of(self._members)

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    @property
    def members(self) -> tuple[Individual, ...]:
        return self._members

    @property
    def pool_size(self) -> int:
        return self.config.pool_size

    def fitnesses(self) -> np.ndarray:
        return np.array([ind.fitness for ind in self._members], dtype=float)

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Individual]:
        return iter(self._members)

    def __getitem__(self, index: int) -> Individual:
        return self._members[index]

    def __repr__(self) -> str:
        return f"Population(size={len(self._members)}, catalog={self.catalog!r})"
