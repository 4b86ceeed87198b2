from fastapi import APIRouter, Depends, HTTPException
from ..models.score import ScoreRequest
from ..models.response import FeedbackResponse, RateLimitResponse, SubmissionResponse, ValidationResponse
from ..store import ScoreboardManager
from ..logger import get_logger
from .deps import get_manager, rate_limit_response, score_entry, validation_response

logger = get_logger(__name__)
router = APIRouter()

@router.post("/scores", response_model=SubmissionResponse, status_code=201)
async def submit_score(data: ScoreRequest, manager: ScoreboardManager = Depends(get_manager)):
    """
    Submit a new score.

    - **player_name**: at least 2 characters once trimmed
    - **score**: integer between 0 and 999,999,999
    - **game_type_id**: target game type; the current selection when omitted
    """
    try:
        outcome = manager.submit_score(data.player_name, data.score, data.game_type_id)
    except Exception as e:
        logger.error(f"Error submitting score: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")

    if outcome.rate_limited:
        raise HTTPException(
            status_code=429,
            detail=outcome.result.message,
            headers={"Retry-After": str(outcome.rate_limit.seconds_until_reset)}
        )
    if not outcome.accepted:
        raise HTTPException(status_code=400, detail=outcome.result.message)

    return SubmissionResponse(
        message=outcome.result.message,
        score=score_entry(outcome.score),
        rate_limit=rate_limit_response(outcome.rate_limit)
    )

@router.post("/scores/validate", response_model=ValidationResponse)
async def validate_score(data: ScoreRequest, manager: ScoreboardManager = Depends(get_manager)):
    """Check a submission without recording it."""
    return validation_response(manager.preview(data.player_name, data.score, data.game_type_id))

@router.get("/rate-limit", response_model=RateLimitResponse)
async def get_rate_limit(manager: ScoreboardManager = Depends(get_manager)):
    return rate_limit_response(manager.rate_limit())

@router.get("/feedback", response_model=FeedbackResponse)
async def get_feedback(manager: ScoreboardManager = Depends(get_manager)):
    """Latest submission outcome; empty once its display window has passed."""
    result = manager.last_result()
    if result is None:
        return FeedbackResponse()
    return FeedbackResponse(result=validation_response(result))
