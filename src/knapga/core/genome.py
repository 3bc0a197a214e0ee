"""
knapga.core.genome
==================

Bit-vector genome: one gene per catalog item, 1 meaning the item is packed.
"""

from __future__ import annotations

import numpy as np


class Genome:
    """Fixed-length binary genome backed by an ``int8`` numpy array of 0/1 values."""

    def __init__(self, genes: np.ndarray):
        genes = np.asarray(genes)
        if not np.issubdtype(genes.dtype, np.integer) and genes.dtype != np.bool_:
            raise TypeError(f"Genome genes must be integer or boolean, got dtype={genes.dtype}.")
        if genes.ndim != 1:
            raise ValueError(f"Genome genes must be one-dimensional, got shape={genes.shape}.")
        if genes.size and not np.isin(genes, (0, 1)).all():
            raise ValueError("Genome genes must only contain 0 and 1.")
        self.genes: np.ndarray = genes.astype(np.int8)

    @classmethod
    def random(cls, length: int, rng: np.random.Generator | None = None) -> Genome:
        """Create a genome with every bit drawn uniformly from {0, 1}.

        Parameters
        ----------
        length : int
            Number of bits (one per catalog item).
        rng : numpy.random.Generator | None, default None
            Optional RNG for reproducibility. Falls back to a fresh default generator if None.
        """
        if length <= 0:
            raise ValueError("length must be > 0")
        _rng = rng if rng is not None else np.random.default_rng()
        return cls(_rng.integers(0, 2, size=length, dtype=np.int8))

    @classmethod
    def from_bits(cls, bits) -> Genome:
        return cls(np.asarray(list(bits), dtype=np.int8))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Genome):
            return False
        return np.array_equal(self.genes, other.genes)

    def __hash__(self):
        return hash(self.genes.tobytes())

    def __len__(self) -> int:
        return self.genes.size

    def __getitem__(self, index):
        return self.genes[index]

    def __repr__(self) -> str:
        return f"Genome({''.join(str(int(b)) for b in self.genes)})"

    def copy(self) -> Genome:
        return Genome(np.copy(self.genes))

    def as_array(self) -> np.ndarray:
        """Return the genes as a numpy array."""
        return self.genes

    def as_list(self) -> list[int]:
        return [int(b) for b in self.genes]
