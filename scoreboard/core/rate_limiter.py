"""
Submission throttling for a single local submitter.

The window anchors to the most recent accepted submission rather than to a
fixed clock boundary: every accepted submission inside an active window
refreshes the countdown to the full window length. All times are epoch
milliseconds supplied by the caller.
"""

from typing import Optional

from ..logger import get_logger
from ..models.data import RateLimitState

logger = get_logger(__name__)

class RateLimiter:
    """Sliding-window-with-reset limiter: at most ``max_submissions`` per ``window_ms``."""

    def __init__(self, window_ms: float = 60000, max_submissions: int = 3):
        if window_ms <= 0 or max_submissions <= 0:
            raise ValueError("window_ms and max_submissions must be positive")
        self.window_ms = window_ms
        self.max_submissions = max_submissions
        self.last_submission: Optional[float] = None
        self.submission_count = 0
        self.is_limited = False
        self.time_until_reset = 0.0

    def _window_expired(self, now: float) -> bool:
        return self.last_submission is None or now - self.last_submission > self.window_ms

    def is_admitted(self, now: float) -> bool:
        """Check whether a new submission may proceed at ``now``."""
        if self._window_expired(now):
            return True
        return self.submission_count < self.max_submissions

    def record_submission(self, now: float) -> RateLimitState:
        """Advance the counters after a submission was fully accepted."""
        if self._window_expired(now):
            self.submission_count = 1
        else:
            self.submission_count += 1
        self.last_submission = now
        self.is_limited = self.submission_count >= self.max_submissions
        self.time_until_reset = float(self.window_ms)
        if self.is_limited:
            logger.info(f"Rate limit reached ({self.submission_count}/{self.max_submissions})")
        return self.snapshot()

    def tick(self, now: float) -> RateLimitState:
        """Recompute the derived fields; counts only change when the window has lapsed."""
        if self.last_submission is None:
            return self.snapshot()

        elapsed = now - self.last_submission
        if elapsed > self.window_ms:
            if self.submission_count:
                logger.debug("Rate limit window elapsed, counter reset")
            self.submission_count = 0
            self.is_limited = False
            self.time_until_reset = 0.0
        else:
            self.is_limited = self.submission_count >= self.max_submissions
            self.time_until_reset = float(self.window_ms - elapsed)
        return self.snapshot()

    def snapshot(self) -> RateLimitState:
        return RateLimitState(
            last_submission=self.last_submission,
            submission_count=self.submission_count,
            is_limited=self.is_limited,
            time_until_reset=self.time_until_reset,
            max_submissions=self.max_submissions
        )
