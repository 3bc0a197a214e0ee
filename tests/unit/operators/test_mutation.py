import numpy as np
import pytest

from knapga.core.genome import Genome
from knapga.operators.mutation import RandomFlipMutation


def test_zero_mutations_leave_genome_unchanged(scripted_rng):
    genome = Genome.random(40, rng=np.random.default_rng(0))
    mutated = RandomFlipMutation(0, rng=scripted_rng()).mutate(genome)
    assert mutated == genome


def test_mutation_preserves_length_and_binary_values():
    rng = np.random.default_rng(1)
    op = RandomFlipMutation(25, rng=rng)
    for _ in range(20):
        genome = Genome.random(16, rng)
        mutated = op.mutate(genome)
        assert len(mutated) == len(genome)
        assert set(np.unique(mutated.genes)).issubset({0, 1})


def test_mutation_returns_copy(scripted_rng):
    genome = Genome.from_bits([0, 0, 0, 0])
    mutated = RandomFlipMutation(1, rng=scripted_rng(randoms=[0.1], integers=[2])).mutate(genome)
    assert mutated.as_list() == [0, 0, 1, 0]
    assert genome.as_list() == [0, 0, 0, 0]


def test_trial_skipped_on_failed_coin(scripted_rng):
    genome = Genome.from_bits([1, 1, 1])
    mutated = RandomFlipMutation(2, rng=scripted_rng(randoms=[0.5, 0.9])).mutate(genome)
    assert mutated == genome


def test_repeated_position_flips_back(scripted_rng):
    genome = Genome.from_bits([1, 0, 1, 0])
    op = RandomFlipMutation(2, rng=scripted_rng(randoms=[0.0, 0.3], integers=[3, 3]))
    assert op.mutate(genome) == genome


def test_changed_bits_never_exceed_trials():
    rng = np.random.default_rng(2)
    op = RandomFlipMutation(10, rng=rng)
    changed = []
    for _ in range(300):
        genome = Genome.random(1000, rng)
        changed.append(int(np.sum(op.mutate(genome).genes != genome.genes)))
    assert max(changed) <= 10
    # about half of the trials flip a bit
    assert 3.5 < np.mean(changed) < 6.5


def test_negative_mutations_rejected():
    with pytest.raises(ValueError):
        RandomFlipMutation(-1)
