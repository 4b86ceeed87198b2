from typing import List

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GameTypeSeed(BaseModel):
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    description: str = ""


DEFAULT_GAME_TYPES = [
    GameTypeSeed(id='1', name='Space Shooter', description='Classic arcade space shooter'),
    GameTypeSeed(id='2', name='Puzzle Master', description='Mind-bending puzzle challenges'),
    GameTypeSeed(id='3', name='Racing Thunder', description='High-speed racing action'),
]


class RateLimitConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='SCOREBOARD_RATE_LIMIT_')

    window_ms: int = Field(60000, gt=0)
    max_submissions: int = Field(3, gt=0)
    tick_interval: float = Field(1.0, gt=0)

rate_limit = RateLimitConfig()

class BoardConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='SCOREBOARD_')

    feedback_ttl_ms: int = Field(3000, ge=0)
    top_scores_limit: int = Field(10, ge=1, le=100)
    strict_score_parsing: bool = False
    initial_game_types: List[GameTypeSeed] = Field(default_factory=lambda: list(DEFAULT_GAME_TYPES))
    log_level: str = 'INFO'

board = BoardConfig()
