import pytest

from scoreboard.models.data import GameType
from scoreboard.store import ScoreboardManager

WINDOW_MS = 60000


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: float = 1_700_000_000_000):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> float:
        self.now += ms
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def game_types():
    return [
        GameType('1', 'Space Shooter', 'Classic arcade space shooter'),
        GameType('2', 'Puzzle Master', 'Mind-bending puzzle challenges'),
    ]


@pytest.fixture
def manager(clock, game_types):
    return ScoreboardManager(game_types=game_types, window_ms=WINDOW_MS, max_submissions=3, clock=clock)
