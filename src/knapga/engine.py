from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from knapga.core.catalog import Catalog
from knapga.core.config import GAConfig
from knapga.core.distance import population_diversity
from knapga.core.fitness import total_weight
from knapga.core.individual import Individual
from knapga.core.population import Population
from knapga.operators.selection import SelectionStrategy, make_selection

# ---------------------------------------------------------------------------
# Engine stats & result
# ---------------------------------------------------------------------------


@dataclass
class GAStats:
    generation: int = 0
    evaluations: int = 0
    best_fitness: float = float("-inf")
    mean_fitness: float = float("-inf")
    diversity: float = 0.0
    history: list[dict[str, Any]] = field(default_factory=list)


@dataclass(frozen=True)
class RunResult:
    best: Individual
    weight: float
    population: Population
    stats: GAStats


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class GAEngineError(RuntimeError):
    pass


# ---------------------------------------------------------------------------
# GAEngine
# ---------------------------------------------------------------------------


class GAEngine:
    """Drive one knapsack run: build the first generation, then replace it once per generation.

    Parameters
    ----------
    config : GAConfig
        Validated run configuration.
    catalog : Catalog | None
        Item catalog. Generated from ``rng`` with the configured ranges and capacity if omitted.
    selection : SelectionStrategy | None
        Strategy producing each next generation. Built from ``config.strategy`` if omitted.
    rng : numpy.random.Generator | None
        The single random source of the run. Seeded from ``config.seed`` if omitted.
    """

    def __init__(
        self,
        config: GAConfig,
        catalog: Catalog | None = None,
        selection: SelectionStrategy | None = None,
        rng: np.random.Generator | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.config = config
        self.rng: np.random.Generator = rng if rng is not None else np.random.default_rng(config.seed)
        self.catalog = (
            catalog
            if catalog is not None
            else Catalog.random(
                config.genome_size,
                self.rng,
                value_range=config.value_range,
                weight_range=config.weight_range,
                capacity=config.capacity,
            )
        )
        self.selection = selection if selection is not None else make_selection(config.strategy)
        self.stats = GAStats()
        self.logger = logger or logging.getLogger("knapga.engine")

    # -----------------------------
    # Public API
    # -----------------------------

    def initialize(self) -> Population:
        """Create the first generation of ``pool_size`` random individuals."""
        population = Population.initialize(self.catalog, self.config, self.rng)
        self.stats.evaluations += len(population)
        self.logger.info(
            "Initialized population of %d genomes over %d items (capacity=%s)",
            len(population),
            len(self.catalog),
            self.catalog.capacity,
        )
        return population

    def run(self, population: Population | None = None, generations: int | None = None) -> RunResult:
        """Evolve ``population`` for ``generations`` steps and return the best individual found.

        Parameters
        ----------
        population : Population | None
            Starting generation. A fresh one is initialized if omitted.
        generations : int | None
            Number of replacements; defaults to ``config.generations``. ``0`` returns the best
            of the starting population untouched.
        """
        if population is None:
            population = self.initialize()
        if len(population) == 0:
            raise GAEngineError("Initial population is empty.")
        generations = self.config.generations if generations is None else generations
        if generations < 0:
            raise GAEngineError("generations must be >= 0")

        self._update_stats(population)
        for _ in range(generations):
            self.logger.info("Generation %d start", self.stats.generation)
            carried = {id(ind) for ind in population}
            population = self.selection.select(population)
            # elites are carried over without being re-evaluated
            self.stats.evaluations += sum(1 for ind in population if id(ind) not in carried)
            self.stats.generation += 1
            self._update_stats(population)

        best = population.best()
        weight = total_weight(best.genome, self.catalog)
        self.logger.info("Best individual: fitness=%s weight=%s", best.fitness, weight)
        return RunResult(best=best, weight=weight, population=population, stats=self.stats)

    # -----------------------------
    # Internal helpers
    # -----------------------------

    def _update_stats(self, population: Population) -> None:
        scores = population.fitnesses()
        self.stats.best_fitness = float(scores.max())
        self.stats.mean_fitness = float(scores.mean())
        self.stats.diversity = population_diversity(ind.genome for ind in population)

        snapshot = {
            "generation": self.stats.generation,
            "best": self.stats.best_fitness,
            "mean": self.stats.mean_fitness,
            "diversity": self.stats.diversity,
            "evaluations": self.stats.evaluations,
        }
        self.stats.history.append(snapshot)
        self.logger.info(
            "Generation %d stats: best=%s mean=%s diversity=%.3f evals=%d",
            self.stats.generation,
            self.stats.best_fitness,
            self.stats.mean_fitness,
            self.stats.diversity,
            self.stats.evaluations,
        )
