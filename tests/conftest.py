import pytest


class ScriptedRng:
    """Stand-in for ``numpy.random.Generator`` that replays fixed draws."""

    def __init__(self, integers=(), randoms=()):
        self._integers = iter(integers)
        self._randoms = iter(randoms)

    def integers(self, low, high=None, size=None, dtype=None):
        return next(self._integers)

    def random(self):
        return next(self._randoms)


@pytest.fixture
def scripted_rng():
    return ScriptedRng
