# --- Pydantic Models ---
from pydantic import BaseModel, Field, field_validator
from typing import Optional

class ScoreRequest(BaseModel):
    player_name: str = Field('', max_length=100)
    # Kept as text: the validator owns numeric parsing and its messages.
    score: str = Field('', max_length=100)
    game_type_id: Optional[str] = Field(None, max_length=100)

    @field_validator('score', mode='before')
    @classmethod
    def coerce_score(cls, v):
        if isinstance(v, bool):
            raise ValueError('score must be a string or an integer')
        if isinstance(v, float):
            if not v.is_integer():
                raise ValueError('score must be a whole number')
            return str(int(v))
        if isinstance(v, int):
            return str(v)
        return v

class GameTypeRequest(BaseModel):
    name: str = Field(..., max_length=100)
    description: str = Field('', max_length=500)

class SelectionRequest(BaseModel):
    game_type_id: Optional[str] = Field(None, max_length=100)
