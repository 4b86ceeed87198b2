from datetime import datetime
from pydantic import BaseModel
from typing import List, Literal, Optional

from .data import Severity

class ValidationResponse(BaseModel):
    is_valid: bool
    message: str
    severity: Severity

class RateLimitResponse(BaseModel):
    last_submission: Optional[datetime] = None
    submission_count: int
    max_submissions: int
    is_limited: bool
    time_until_reset: float
    seconds_until_reset: int

class ScoreEntry(BaseModel):
    id: str
    player_name: str
    score: int
    timestamp: datetime
    game_type: str

class SubmissionResponse(BaseModel):
    status: Literal["success"] = "success"
    message: str
    score: ScoreEntry
    rate_limit: RateLimitResponse

class GameTypeResponse(BaseModel):
    id: str
    name: str
    description: str
    score_count: int = 0

class GameTypeListResponse(BaseModel):
    game_types: List[GameTypeResponse]
    selected_game_type: Optional[str] = None

class RemovalResponse(BaseModel):
    game_type_id: str
    removed: bool
    scores_removed: int
    selection_cleared: bool

class SelectionResponse(BaseModel):
    selected_game_type: Optional[str] = None

class LeaderboardEntry(BaseModel):
    rank: int
    score_id: str
    player_name: str
    score: int
    display_score: str
    timestamp: datetime
    display_time: str

class LeaderboardResponse(BaseModel):
    game_type_id: str
    name: str
    total_scores: int
    entries: List[LeaderboardEntry]

class RankResponse(BaseModel):
    game_type_id: str
    player_name: str
    rank: int
    score: int
    total: int
    percentile: float

class FeedbackResponse(BaseModel):
    result: Optional[ValidationResponse] = None

class HealthResponse(BaseModel):
    status: Literal["healthy"] = "healthy"
    uptime: float
    ticker_running: bool = False
