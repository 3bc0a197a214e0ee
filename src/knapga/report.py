"""Plain-text rendering of a run: the catalog, a population, and the final result."""

from __future__ import annotations

from knapga.core.catalog import Catalog
from knapga.core.fitness import total_weight
from knapga.core.population import Population
from knapga.engine import RunResult


def format_catalog(catalog: Catalog) -> str:
    lines = [f"Value: {item.value}, Weight: {item.weight}" for item in catalog]
    lines.append(f"Capacity: {catalog.capacity}")
    return "\n".join(lines)


def format_population(population: Population) -> str:
    """One line per member: genome bits, fitness, and carried weight."""
    return "\n".join(
        f"{ind.genome.as_list()} {ind.fitness:f} {total_weight(ind.genome, population.catalog):f}"
        for ind in population
    )


def format_result(result: RunResult) -> str:
    return f"{result.best.genome.as_list()} {result.best.fitness} {result.weight}"
