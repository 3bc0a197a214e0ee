"""
knapga.operators.selection
==========================

Generation-replacing selection strategies. Each strategy consumes the current population and
returns the next one, breeding children through :meth:`Population.crossover`.

All selection strategies implement the same interface:

    select(self, population) -> Population

The returned population always holds exactly ``population.pool_size`` individuals.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from knapga.core.config import InvalidConfigurationError
from knapga.core.population import Population

logger = logging.getLogger("knapga.selection")


class EmptyWheelError(RuntimeError):
    pass


class SelectionStrategy:
    """Base class for all selection strategies."""

    name: str = ""

    def select(self, population: Population) -> Population:  # pragma: no cover (interface)
        raise NotImplementedError("SelectionStrategy must implement select().")

    @staticmethod
    def _validate(population: Population) -> None:
        if len(population) == 0:
            raise ValueError("population must not be empty")


class BestFitBreeding(SelectionStrategy):
    """
    Best-Fit Breeding.
    Every member, the best one included, is bred with the single fittest individual.
    Ties for the best go to the earliest member. Diversity collapses quickly under this strategy.
    """

    name = "best-fit"

    def select(self, population: Population) -> Population:
        self._validate(population)
        best = population.best()
        children = [population.crossover(best, member) for member in population]
        return population.replace(children)


def build_wheel(fitnesses: Sequence[float], carry_weak: float) -> np.ndarray:
    """Return the roulette wheel as an array of indices into ``fitnesses``.

    With ``total = 1 + sum(fitnesses)``, an individual of nonzero fitness ``f`` gets
    ``floor(total / f)`` slots, so lower fitness earns more slots. An individual of zero
    fitness gets one slot plus ``floor(total * carry_weak) - 1`` more when that is positive.
    """
    scores = np.asarray(fitnesses, dtype=float)
    if scores.size == 0:
        return np.zeros(0, dtype=np.int64)
    total = 1.0 + float(scores.sum())
    counts = np.empty(scores.size, dtype=np.int64)
    nonzero = scores != 0.0
    counts[nonzero] = np.floor(total / scores[nonzero]).astype(np.int64)
    counts[~nonzero] = 1 + max(0, int(np.floor(total * carry_weak)) - 1)
    return np.repeat(np.arange(scores.size), counts)


class RouletteWheelSelection(SelectionStrategy):
    """
    Roulette Wheel Selection with elitism.

    The top ``floor(pool_size * elite_fraction)`` individuals survive unchanged. The rest of the
    next generation is bred from pairs drawn at two distinct wheel positions (see :func:`build_wheel`).

    Parameters
    ----------
    elite_fraction : float | None, default None
        Fraction of the pool carried over unchanged. Defaults to the population's ``carry_fit``.
    """

    name = "roulette"

    def __init__(self, elite_fraction: float | None = None):
        if elite_fraction is not None and not (0.0 <= elite_fraction <= 1.0):
            raise InvalidConfigurationError("elite_fraction must be in [0,1]")
        self.elite_fraction = elite_fraction

    def select(self, population: Population) -> Population:
        if len(population) == 0:
            raise EmptyWheelError("cannot build a roulette wheel from an empty population")
        fraction = self.elite_fraction if self.elite_fraction is not None else population.config.carry_fit
        pool_size = population.pool_size

        ranked = sorted(population.members, key=lambda ind: ind.fitness)
        n_elite = min(int(pool_size * fraction), len(ranked))
        next_gen = ranked[len(ranked) - n_elite :]

        wheel = build_wheel([ind.fitness for ind in ranked], population.config.carry_weak)
        logger.debug("Roulette wheel built with %d slots for %d individuals", wheel.size, len(ranked))
        if wheel.size == 0:
            raise EmptyWheelError("roulette wheel is empty")
        if len(next_gen) < pool_size and wheel.size < 2:
            raise EmptyWheelError(f"roulette wheel has {wheel.size} slot(s); two distinct slots are needed to breed")

        rng = population.rng
        while len(next_gen) < pool_size:
            a = int(rng.integers(0, wheel.size))
            b = int(rng.integers(0, wheel.size))
            while b == a:
                b = int(rng.integers(0, wheel.size))
            next_gen.append(population.crossover(ranked[wheel[a]], ranked[wheel[b]]))
        return population.replace(next_gen)


SELECTIONS: dict[str, type[SelectionStrategy]] = {
    BestFitBreeding.name: BestFitBreeding,
    RouletteWheelSelection.name: RouletteWheelSelection,
}


def make_selection(name: str) -> SelectionStrategy:
    try:
        return SELECTIONS[name]()
    except KeyError:
        raise InvalidConfigurationError(
            f"unknown selection strategy {name!r}; expected one of {sorted(SELECTIONS)}"
        ) from None
