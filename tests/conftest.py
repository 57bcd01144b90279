"""Shared fixtures: deterministic random sources for the generator tests."""

import pytest


class ZeroSource:
    """Always picks index 0."""

    def randbelow(self, bound):
        assert bound > 0
        return 0


class MaxSource:
    """Always picks the last index, bound - 1."""

    def randbelow(self, bound):
        assert bound > 0
        return bound - 1


class RecordingSource:
    """Picks index 0 and remembers every bound it was asked for."""

    def __init__(self):
        self.bounds = []

    def randbelow(self, bound):
        self.bounds.append(bound)
        return 0


@pytest.fixture
def zero_rng():
    return ZeroSource()


@pytest.fixture
def max_rng():
    return MaxSource()


@pytest.fixture
def recording_rng():
    return RecordingSource()
