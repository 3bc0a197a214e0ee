import dataclasses

import numpy as np
import pytest

from knapga.core.catalog import Catalog, Item


def test_item_is_immutable():
    item = Item(value=0.5, weight=0.25)
    with pytest.raises(dataclasses.FrozenInstanceError):
        item.value = 1.0  # type: ignore[misc]


def test_catalog_indexing_and_arrays():
    catalog = Catalog([Item(1.0, 2.0), Item(3.0, 4.0)], capacity=5)
    assert len(catalog) == 2
    assert catalog[1] == Item(3.0, 4.0)
    assert catalog.capacity == 5.0
    assert np.array_equal(catalog.values, [1.0, 3.0])
    assert np.array_equal(catalog.weights, [2.0, 4.0])
    assert list(catalog) == [Item(1.0, 2.0), Item(3.0, 4.0)]


def test_catalog_arrays_are_read_only():
    catalog = Catalog([Item(1.0, 1.0)], capacity=1.0)
    with pytest.raises(ValueError):
        catalog.weights[0] = 9.0


def test_catalog_rejects_empty():
    with pytest.raises(ValueError):
        Catalog([], capacity=1.0)


def test_catalog_random_ranges():
    catalog = Catalog.random(50, rng=np.random.default_rng(3))
    assert len(catalog) == 50
    assert catalog.capacity == 2.0
    assert np.all((catalog.values >= 0.1) & (catalog.values <= 0.9))
    assert np.all((catalog.weights >= 0.1) & (catalog.weights <= 0.9))


def test_catalog_random_reproducible_with_seed():
    c1 = Catalog.random(10, rng=np.random.default_rng(11), capacity=3.0)
    c2 = Catalog.random(10, rng=np.random.default_rng(11), capacity=3.0)
    assert c1.items == c2.items
    assert c1.capacity == 3.0
