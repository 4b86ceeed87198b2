import math
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


class Severity(str, Enum):
    SUCCESS = 'success'
    ERROR = 'error'
    WARNING = 'warning'


class GameType:
    __slots__ = ('id', 'name', 'description')
    def __init__(self, id: str, name: str, description: str):
        self.id = id
        self.name = name
        self.description = description

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description
        }

    def __repr__(self):
        return f"GameType(id={self.id!r}, name={self.name!r})"

class Score:
    __slots__ = ('id', 'player_name', 'score', 'timestamp', 'game_type')
    def __init__(self, id: str, player_name: str, score: int, game_type: str,
                 timestamp: Optional[datetime] = None):
        self.id = id
        self.player_name = player_name
        self.score = int(score)
        self.game_type = game_type
        if timestamp is None:
            self.timestamp = datetime.now(timezone.utc)
        else:
            self.timestamp = timestamp

    def to_dict(self):
        return {
            'id': self.id,
            'player_name': self.player_name,
            'score': self.score,
            'timestamp': self.timestamp,
            'game_type': self.game_type
        }

    def __repr__(self):
        return f"Score(id={self.id!r}, player_name={self.player_name!r}, score={self.score})"

class RateLimitState:
    __slots__ = ('last_submission', 'submission_count', 'is_limited', 'time_until_reset', 'max_submissions')
    def __init__(self, last_submission: Optional[float], submission_count: int, is_limited: bool,
                 time_until_reset: float, max_submissions: int):
        self.last_submission = last_submission
        self.submission_count = submission_count
        self.is_limited = is_limited
        self.time_until_reset = time_until_reset
        self.max_submissions = max_submissions

    @property
    def seconds_until_reset(self) -> int:
        return math.ceil(self.time_until_reset / 1000)

class ValidationResult:
    __slots__ = ('is_valid', 'message', 'severity')
    def __init__(self, is_valid: bool, message: str, severity: Severity = Severity.ERROR):
        self.is_valid = is_valid
        self.message = message
        self.severity = severity

    @classmethod
    def error(cls, message: str) -> 'ValidationResult':
        return cls(False, message, Severity.ERROR)

    @classmethod
    def success(cls, message: str) -> 'ValidationResult':
        return cls(True, message, Severity.SUCCESS)

    def __repr__(self):
        return f"ValidationResult(is_valid={self.is_valid}, message={self.message!r})"

class RankInfo:
    __slots__ = ('player_name', 'score', 'rank', 'total', 'percentile')
    def __init__(self, player_name: str, score: int, rank: int, total: int):
        self.player_name = player_name
        self.score = score
        self.rank = rank
        self.total = total
        self.percentile = 100 * (1 - (rank - 1) / total)

class RemovalResult:
    __slots__ = ('game_type', 'scores_removed', 'selection_cleared')
    def __init__(self, game_type: Optional[GameType] = None, scores_removed: int = 0):
        self.game_type = game_type
        self.scores_removed = scores_removed
        self.selection_cleared = False

    @property
    def removed(self) -> bool:
        return self.game_type is not None

class SubmissionResult:
    __slots__ = ('result', 'score', 'rate_limit', 'rate_limited')
    def __init__(self, result: ValidationResult, rate_limit: RateLimitState,
                 score: Optional[Score] = None, rate_limited: bool = False):
        self.result = result
        self.rate_limit = rate_limit
        self.score = score
        self.rate_limited = rate_limited

    @property
    def accepted(self) -> bool:
        return self.score is not None
