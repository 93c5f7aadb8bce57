import os
import sys

# pygame must not open a real window during tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Ensure src is on path for test imports
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, 'src')
if SRC not in sys.path:
    sys.path.insert(0, SRC)

import pytest


class ScriptedRandom:
    """
    deterministic stand-in for the random source

    choice() returns the next scripted value (or the first candidate when the
    script runs out), random() returns the next scripted roll (or 0.5, a 2)
    """

    def __init__(self, choices=(), rolls=()):
        self.choices = list(choices)
        self.rolls = list(rolls)
        self.offered = []

    def choice(self, seq):
        seq = list(seq)
        self.offered.append(seq)
        if self.choices:
            pick = self.choices.pop(0)
            assert pick in seq, f"scripted cell {pick} is not empty"
            return pick
        return seq[0]

    def random(self):
        if self.rolls:
            return self.rolls.pop(0)
        return 0.5


@pytest.fixture
def scripted_rng():
    return ScriptedRandom()


@pytest.fixture
def stuck_values():
    """4x4 checkerboard with no empty cell and no adjacent pair"""
    return [
        2, 4, 2, 4,
        4, 2, 4, 2,
        2, 4, 2, 4,
        4, 2, 4, 2,
    ]
