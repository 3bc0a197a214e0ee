import pytest

from knapga.core.catalog import Catalog, Item
from knapga.core.genome import Genome
from knapga.core.individual import Individual, best_of


def test_individual_equality():
    g1 = Genome.from_bits([1, 0, 1])
    g2 = Genome.from_bits([0, 0, 1])

    ind1 = Individual(genome=g1, fitness=10.0)
    ind2 = Individual(genome=g1.copy(), fitness=10.0)
    ind3 = Individual(genome=g2, fitness=10.0)
    ind4 = Individual(genome=g1, fitness=12.0)

    assert ind1 == ind2, "Individuals with same attributes should be equal"
    assert ind1 != ind3, "Individuals with different genomes should not be equal"
    assert ind1 != ind4, "Individuals with different fitness scores should not be equal"


def test_individual_copy():
    ind1 = Individual(genome=Genome.from_bits([1, 1, 0]), fitness=15.0)
    ind2 = ind1.copy()

    assert ind1 == ind2, "Copied individual should be equal to the original"
    assert ind1.genome is not ind2.genome, "Genomes should be different objects"


def test_individual_evaluate_computes_fitness():
    catalog = Catalog([Item(1, 1), Item(2, 1), Item(4, 1)], capacity=2)
    ind = Individual.evaluate(Genome.from_bits([0, 1, 1]), catalog)
    assert ind.fitness == 6.0
    assert ind.length == 3


def test_best_of_breaks_ties_by_first_occurrence():
    first = Individual(Genome.from_bits([1, 0]), fitness=3.0)
    second = Individual(Genome.from_bits([0, 1]), fitness=3.0)
    low = Individual(Genome.from_bits([0, 0]), fitness=1.0)
    assert best_of([low, first, second]) is first


def test_best_of_empty():
    with pytest.raises(ValueError):
        best_of([])
