from .core.rate_limiter import RateLimiter
from .core.validator import parse_score, validate_score
from .store import LeaderboardStore, ScoreboardManager

__all__ = ['RateLimiter', 'parse_score', 'validate_score', 'LeaderboardStore', 'ScoreboardManager']
