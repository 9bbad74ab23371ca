import os
import sys
import itertools
import pytest

# Ensure the project root (containing the `app` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from app.state import SessionState
from services.controller import SessionController


class FakeClock:
    """Milliseconds that only move when a test says so."""

    def __init__(self, start=0):
        self.ms = start

    def now(self):
        return self.ms

    def since(self, instant):
        return max(0.0, (self.ms - instant) / 1000.0)

    def advance(self, seconds):
        self.ms += int(seconds * 1000)


class StubSupplier:
    """Hands out w0, w1, w2, ... so every word is predictable."""

    def __init__(self):
        self._counter = itertools.count()

    def next_words(self, n):
        return [f"w{next(self._counter)}" for _ in range(n)]

    def next_word(self):
        return self.next_words(1)[0]


@pytest.fixture()
def clock():
    return FakeClock(start=10_000)


@pytest.fixture()
def supplier():
    return StubSupplier()


@pytest.fixture()
def controller(clock, supplier):
    return SessionController.create(clock, supplier)


@pytest.fixture()
def in_game(clock, supplier):
    """A controller already in a race, with words cat, dog queued."""
    state = SessionState.initial(["cat", "dog"])
    ctl = SessionController(state, clock, supplier)
    state.started = True
    state.begin_race(clock.now())
    return ctl
