"""Item catalog shared read-only by every component of a run."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Item:
    value: float
    weight: float


class Catalog:
    """Ordered, immutable collection of :class:`Item` plus the knapsack capacity.

    Parameters
    ----------
    items : Iterable[Item]
        Items addressed by genome position.
    capacity : float
        Maximum total weight a feasible genome may carry.
    """

    __slots__ = ("_items", "_values", "_weights", "capacity")

    def __init__(self, items: Iterable[Item], capacity: float) -> None:
        self._items: tuple[Item, ...] = tuple(items)
        if not self._items:
            raise ValueError("catalog must contain at least one item")
        self.capacity: float = float(capacity)
        self._values = np.array([it.value for it in self._items], dtype=float)
        self._weights = np.array([it.weight for it in self._items], dtype=float)
        self._values.setflags(write=False)
        self._weights.setflags(write=False)

    @classmethod
    def random(
        cls,
        size: int,
        rng: np.random.Generator | None = None,
        value_range: tuple[float, float] = (0.1, 0.9),
        weight_range: tuple[float, float] = (0.1, 0.9),
        capacity: float = 2.0,
    ) -> Catalog:
        """Draw ``size`` items with value and weight uniform in their ranges."""
        if size <= 0:
            raise ValueError("size must be > 0")
        _rng = rng if rng is not None else np.random.default_rng()
        items = [
            Item(value=float(_rng.uniform(*value_range)), weight=float(_rng.uniform(*weight_range)))
            for _ in range(size)
        ]
        return cls(items, capacity)

    @property
    def items(self) -> tuple[Item, ...]:
        return self._items

    @property
    def values(self) -> np.ndarray:
        return self._values

    @property
    def weights(self) -> np.ndarray:
        return self._weights

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Item:
        return self._items[index]

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Catalog(items={len(self._items)}, capacity={self.capacity:.4f})"
