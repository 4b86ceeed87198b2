from .base import ScoreboardManager
from .leaderboard import LeaderboardStore

__all__ = ['ScoreboardManager', 'LeaderboardStore']
