import itertools
import threading
import time
from datetime import datetime, timezone
from typing import Callable, Iterable, List, Optional

from ..config import board, rate_limit, GameTypeSeed
from ..core.rate_limiter import RateLimiter
from ..core.validator import parse_score, validate_score
from ..logger import get_logger
from ..models.data import (
    GameType, RankInfo, RateLimitState, RemovalResult, Score, SubmissionResult, ValidationResult
)
from .leaderboard import DEFAULT_DESCRIPTION, DEFAULT_LIMIT, LeaderboardStore

logger = get_logger(__name__)


def wall_clock_ms() -> float:
    return time.time() * 1000


class ScoreboardManager:
    """
    Entry point for every inbound operation.

    Holds the rate limiter, the leaderboard store, the current submission
    target and the last feedback result. Each operation runs under a single
    lock so ticks and submissions never interleave mid-mutation.
    """

    _instance = None
    _instance_lock = threading.Lock()

    def __init__(self, game_types: Optional[Iterable[GameType]] = None,
                 window_ms: float = 60000, max_submissions: int = 3,
                 feedback_ttl_ms: float = 3000, top_scores_limit: int = DEFAULT_LIMIT,
                 strict_score_parsing: bool = False,
                 clock: Optional[Callable[[], float]] = None):
        self.store = LeaderboardStore(game_types)
        self.rate_limiter = RateLimiter(window_ms=window_ms, max_submissions=max_submissions)
        self.feedback_ttl_ms = feedback_ttl_ms
        self.top_scores_limit = top_scores_limit
        self.strict_score_parsing = strict_score_parsing
        self.clock = clock or wall_clock_ms
        self.selected_game_type: Optional[str] = None
        self._score_ids = itertools.count(1)
        self._feedback: Optional[ValidationResult] = None
        self._feedback_expires: Optional[float] = None
        self._lock = threading.RLock()

    @classmethod
    def from_settings(cls, clock: Optional[Callable[[], float]] = None) -> 'ScoreboardManager':
        return cls(
            game_types=[_seed_to_game_type(seed) for seed in board.initial_game_types],
            window_ms=rate_limit.window_ms,
            max_submissions=rate_limit.max_submissions,
            feedback_ttl_ms=board.feedback_ttl_ms,
            top_scores_limit=board.top_scores_limit,
            strict_score_parsing=board.strict_score_parsing,
            clock=clock
        )

    @classmethod
    def get_instance(cls) -> 'ScoreboardManager':
        """Get the process-wide manager, building it from settings on first use"""
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls.from_settings()
                    logger.info("Scoreboard manager initialized")
        return cls._instance

    @classmethod
    def reset_instance(cls):
        with cls._instance_lock:
            cls._instance = None

    def _now(self, now: Optional[float]) -> float:
        return self.clock() if now is None else now

    # --- Feedback ---
    def _set_feedback(self, result: ValidationResult, now: float):
        self._feedback = result
        self._feedback_expires = now + self.feedback_ttl_ms

    def _expire_feedback(self, now: float):
        if self._feedback is not None and now >= self._feedback_expires:
            self._feedback = None
            self._feedback_expires = None

    def last_result(self, now: Optional[float] = None) -> Optional[ValidationResult]:
        """Most recent submission outcome, until it is superseded or expires"""
        with self._lock:
            self._expire_feedback(self._now(now))
            return self._feedback

    # --- Submission ---
    def submit_score(self, name: str, raw_score: str, game_type_id: Optional[str] = None,
                     now: Optional[float] = None) -> SubmissionResult:
        """
        Run a submission through admission, validation and storage.

        - **game_type_id**: target game type; the current selection when omitted
        """
        with self._lock:
            now = self._now(now)
            if game_type_id is None:
                game_type_id = self.selected_game_type

            state = self.rate_limiter.tick(now)
            if not self.rate_limiter.is_admitted(now):
                result = ValidationResult.error(
                    f"Rate limit exceeded. Try again in {state.seconds_until_reset} seconds"
                )
                self._set_feedback(result, now)
                logger.warning(f"Submission rejected by rate limit ({state.seconds_until_reset}s remaining)")
                return SubmissionResult(result, state, rate_limited=True)

            result = validate_score(name, raw_score, game_type_id, self.store.game_type_ids(),
                                    strict=self.strict_score_parsing)
            if not result.is_valid:
                self._set_feedback(result, now)
                logger.debug(f"Submission rejected: {result.message}")
                return SubmissionResult(result, state)

            score = Score(
                id=str(next(self._score_ids)),
                player_name=name.strip(),
                score=parse_score(raw_score, strict=self.strict_score_parsing),
                game_type=game_type_id,
                timestamp=datetime.fromtimestamp(now / 1000, tz=timezone.utc)
            )
            self.store.add_score(score)
            state = self.rate_limiter.record_submission(now)

            result = ValidationResult.success('Score submitted successfully!')
            self._set_feedback(result, now)
            logger.info(f"Accepted score {score.score} from {score.player_name} for game type {game_type_id}")
            return SubmissionResult(result, state, score=score)

    def preview(self, name: str, raw_score: str, game_type_id: Optional[str] = None) -> ValidationResult:
        """Validate a submission against the live game types without recording anything"""
        with self._lock:
            if game_type_id is None:
                game_type_id = self.selected_game_type
            return validate_score(name, raw_score, game_type_id, self.store.game_type_ids(),
                                  strict=self.strict_score_parsing)

    # --- Game types ---
    def add_game_type(self, name: str, description: str = '') -> Optional[GameType]:
        with self._lock:
            return self.store.add_game_type(name, description)

    def remove_game_type(self, game_type_id: str) -> RemovalResult:
        with self._lock:
            removal = self.store.remove_game_type(game_type_id)
            if removal.removed and self.selected_game_type == game_type_id:
                self.selected_game_type = None
                removal.selection_cleared = True
            return removal

    def select_game_type(self, game_type_id: Optional[str]) -> bool:
        """Set the submission target; None or an empty id clears it"""
        with self._lock:
            if not game_type_id:
                self.selected_game_type = None
                return True
            if not self.store.has_game_type(game_type_id):
                logger.warning(f"Cannot select unknown game type {game_type_id}")
                return False
            self.selected_game_type = game_type_id
            return True

    # --- Periodic refresh ---
    def tick(self, now: Optional[float] = None) -> RateLimitState:
        with self._lock:
            now = self._now(now)
            self._expire_feedback(now)
            return self.rate_limiter.tick(now)

    # --- Queries ---
    def rate_limit(self) -> RateLimitState:
        with self._lock:
            return self.rate_limiter.snapshot()

    def game_types(self) -> List[GameType]:
        with self._lock:
            return self.store.game_types()

    def get_game_type(self, game_type_id: str) -> Optional[GameType]:
        with self._lock:
            return self.store.get_game_type(game_type_id)

    def top_scores(self, game_type_id: str, limit: Optional[int] = None) -> List[Score]:
        with self._lock:
            return self.store.top_scores(game_type_id, self.top_scores_limit if limit is None else limit)

    def count_scores(self, game_type_id: str) -> int:
        with self._lock:
            return self.store.count_scores(game_type_id)

    def rank_of(self, game_type_id: str, player_name: str) -> Optional[RankInfo]:
        with self._lock:
            return self.store.rank_of(game_type_id, player_name)


def _seed_to_game_type(seed: GameTypeSeed) -> GameType:
    return GameType(id=seed.id, name=seed.name, description=seed.description.strip() or DEFAULT_DESCRIPTION)
