import random

import pytest


class RecordingRandom(random.Random):
    """A seeded random source that records every draw made through it."""

    def __init__(self, seed=0):
        super().__init__(seed)
        self.calls = []

    def choice(self, seq):
        self.calls.append(("choice", tuple(seq)))
        return super().choice(seq)

    def randint(self, a, b):
        self.calls.append(("randint", a, b))
        return super().randint(a, b)


class FixedRandom:
    """A random source that always picks the first item and returns a fixed number."""

    def __init__(self, number=None):
        self.number = number

    def choice(self, seq):
        return seq[0]

    def randint(self, a, b):
        return a if self.number is None else self.number


@pytest.fixture
def rng():
    """Seeded random source for reproducible tests."""
    return random.Random(1234)


@pytest.fixture
def recording_rng():
    return RecordingRandom(42)


@pytest.fixture
def short_words():
    """Word lists whose dash-joined combinations have lengths 3, 4 and 5."""
    return {"adjectives": ["a", "bb"], "nouns": ["c", "dd"]}
