"""
Test configuration and fixtures.
"""

import numpy as np
import pytest

from yahtzeekit.rulesets import yahtzee_rules


class ScriptedRng:
    """Stand-in for numpy's Generator that hands out predefined die values."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def integers(self, low, high, size):
        assert (low, high) == (1, 7)
        self.calls.append(size)
        drawn, self.values = self.values[:size], self.values[size:]
        assert len(drawn) == size, "ran out of scripted dice"
        return np.array(drawn)


@pytest.fixture
def scripted_rng():
    """Factory for an rng that produces the given die values in order."""
    return ScriptedRng


@pytest.fixture
def seeded_rng():
    return np.random.default_rng(1234)


@pytest.fixture
def rules():
    return yahtzee_rules


@pytest.fixture
def full_scores():
    """Every category filled, upper section worth 84 points."""
    return [4, 8, 12, 16, 20, 24, 17, 24, 25, 30, 40, 50, 14]
