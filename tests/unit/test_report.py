from knapga.core.catalog import Catalog, Item
from knapga.core.config import GAConfig
from knapga.core.genome import Genome
from knapga.core.individual import Individual
from knapga.core.population import Population
from knapga.engine import GAEngine
from knapga.report import format_catalog, format_population, format_result


def _catalog():
    return Catalog([Item(1.0, 1.0), Item(0.5, 0.25), Item(2.0, 3.0)], capacity=2.0)


def test_format_catalog():
    text = format_catalog(_catalog())
    assert text.splitlines() == [
        "Value: 1.0, Weight: 1.0",
        "Value: 0.5, Weight: 0.25",
        "Value: 2.0, Weight: 3.0",
        "Capacity: 2.0",
    ]


def test_format_population():
    catalog = _catalog()
    config = GAConfig(genome_size=3, pool_size=2, generations=1, carry_fit=0.0, carry_weak=0.0, n_mutations=0)
    members = [
        Individual.evaluate(Genome.from_bits([1, 1, 0]), catalog),
        Individual.evaluate(Genome.from_bits([1, 0, 1]), catalog),
    ]
    text = format_population(Population(catalog, config, members))
    assert text.splitlines() == [
        "[1, 1, 0] 1.500000 1.250000",
        "[1, 0, 1] 0.000000 4.000000",
    ]


def test_format_result():
    catalog = _catalog()
    config = GAConfig(genome_size=3, pool_size=2, generations=1, carry_fit=0.0, carry_weak=0.0, n_mutations=0)
    engine = GAEngine(config, catalog=catalog)
    population = Population(catalog, config, [Individual.evaluate(Genome.from_bits([1, 1, 0]), catalog)] * 2)
    result = engine.run(population, generations=0)
    assert format_result(result) == "[1, 1, 0] 1.5 1.25"
