"""Pytest fixtures for all tests."""

from collections import deque

import pytest
from blessed.keyboard import Keystroke

from river_raid.world import create_world


_SEQUENCES = {
    'KEY_UP': ('\x1b[A', 259),
    'KEY_DOWN': ('\x1b[B', 258),
    'KEY_LEFT': ('\x1b[D', 260),
    'KEY_RIGHT': ('\x1b[C', 261),
    'KEY_ESCAPE': ('\x1b', 361),
    'KEY_F1': ('\x1bOP', 265),
}


def make_key(value=''):
    """Build a blessed Keystroke from a character or a KEY_* name."""
    if value in _SEQUENCES:
        ucs, code = _SEQUENCES[value]
        return Keystroke(ucs, code=code, name=value)
    return Keystroke(value)


class ScriptedRandom:
    """
    Random source that replays a fixed list of draws.

    Once the script runs out every draw returns `low`, which never
    passes a spawn or retarget roll.
    """

    def __init__(self, values=()):
        self.values = deque(values)
        self.calls = []

    def range(self, low, high):
        self.calls.append((low, high))
        if not self.values:
            return low
        value = self.values.popleft()
        assert low <= value < high, f'scripted {value} outside [{low}, {high})'
        return value


class FakeTerminal:
    """
    The slice of blessed.Terminal the game uses.

    Keys are fed in bursts: a waiting inkey() starts the next burst and
    inkey(timeout=0) drains what is left of it.
    """

    normal = '<n>'
    home = '<home>'
    clear = '<clear>'

    def __init__(self, width=40, height=20):
        self.width = width
        self.height = height
        self._bursts = deque()
        self._pending = deque()

    def feed(self, *bursts):
        for burst in bursts:
            if isinstance(burst, str):
                burst = [burst]
            self._bursts.append([make_key(k) for k in burst])

    @property
    def pending(self):
        return len(self._pending)

    def inkey(self, timeout=None):
        if timeout:
            if self._bursts:
                self._pending = deque(self._bursts.popleft())
        if self._pending:
            return self._pending.popleft()
        return Keystroke('')

    def move_xy(self, x, y):
        return f'<{x},{y}>'

    def color(self, n):
        return f'<c{n}>'

    def on_color(self, n):
        return f'<b{n}>'


@pytest.fixture
def quiet_rng():
    """Random source that never spawns or retargets."""
    return ScriptedRandom()


@pytest.fixture
def term():
    """Create a 40x20 fake terminal."""
    return FakeTerminal(width=40, height=20)


@pytest.fixture
def world():
    """Create a 40x20 world: river (15, 25) on every row, ship at (20, 19)."""
    return create_world(40, 20)
