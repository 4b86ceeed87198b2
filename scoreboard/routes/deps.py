from datetime import datetime, timezone

from fastapi import Request

from ..models.data import RateLimitState, Score, ValidationResult
from ..models.response import RateLimitResponse, ScoreEntry, ValidationResponse
from ..store import ScoreboardManager


def get_manager(request: Request) -> ScoreboardManager:
    """Manager attached to the running app"""
    return request.app.state.manager


def rate_limit_response(state: RateLimitState) -> RateLimitResponse:
    last_submission = None
    if state.last_submission is not None:
        last_submission = datetime.fromtimestamp(state.last_submission / 1000, tz=timezone.utc)
    return RateLimitResponse(
        last_submission=last_submission,
        submission_count=state.submission_count,
        max_submissions=state.max_submissions,
        is_limited=state.is_limited,
        time_until_reset=state.time_until_reset,
        seconds_until_reset=state.seconds_until_reset
    )


def validation_response(result: ValidationResult) -> ValidationResponse:
    return ValidationResponse(is_valid=result.is_valid, message=result.message, severity=result.severity)


def score_entry(score: Score) -> ScoreEntry:
    return ScoreEntry(**score.to_dict())
