"""Core individual abstraction.

The :class:`Individual` couples a genome with its cached fitness.
"""

from knapga.core.catalog import Catalog
from knapga.core.fitness import fitness as evaluate_fitness
from knapga.core.genome import Genome


class Individual:
    """Represents a single candidate packing.

    Parameters
    ----------
    genome : Genome
        Bit-vector selecting catalog items.
    fitness : float, default 0.0
        Cached fitness of ``genome``. Use :meth:`evaluate` to derive it from a catalog.
    """

    __slots__ = ("fitness", "genome")

    def __init__(self, genome: Genome, fitness: float = 0.0) -> None:
        self.genome: Genome = genome
        self.fitness: float = float(fitness)

    @classmethod
    def evaluate(cls, genome: Genome, catalog: Catalog) -> "Individual":
        """Build an Individual whose fitness is computed from ``genome`` against ``catalog``."""
        return cls(genome, evaluate_fitness(genome, catalog))

    @property
    def length(self) -> int:
        return len(self.genome)

    # ------------------------------------------------------------------
    # Core protocol helpers
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:  # type: ignore[override]
        if not isinstance(other, Individual):
            return False
        return self.genome == other.genome and self.fitness == other.fitness

    def __repr__(self) -> str:  # Helpful for debugging/logging
        return f"Individual(genome={self.genome!r}, fitness={self.fitness:.4f})"

    def copy(self) -> "Individual":
        """Create a deep copy preserving the cached fitness."""
        return Individual(genome=self.genome.copy(), fitness=self.fitness)

    def __hash__(self):
        return hash((self.genome, self.fitness))


def best_of(individuals) -> Individual:
    """Return the highest-fitness individual; ties go to the earliest one in iteration order."""
    individuals = list(individuals)
    if not individuals:
        raise ValueError("cannot pick the best of an empty collection")
    return max(individuals, key=lambda ind: ind.fitness)
