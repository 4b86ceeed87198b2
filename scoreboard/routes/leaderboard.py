from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Path
from ..core.formatting import format_score, format_timestamp
from ..models.response import LeaderboardResponse, RankResponse, LeaderboardEntry
from ..store import ScoreboardManager
from ..logger import get_logger
from .deps import get_manager

logger = get_logger(__name__)
router = APIRouter()

@router.get("/games/{game_type_id}/leaders", response_model=LeaderboardResponse)
async def get_leaders(
    game_type_id: str = Path(..., min_length=1, max_length=100),
    limit: Optional[int] = Query(None, ge=1, le=100),
    manager: ScoreboardManager = Depends(get_manager)
):
    """
    Get the top scores for a game type.

    - **game_type_id**: identifier of the game type
    - **limit**: number of entries to return (1-100, default 10)
    """
    game_type = manager.get_game_type(game_type_id)
    if game_type is None:
        raise HTTPException(status_code=404, detail="Game type not found")

    scores = manager.top_scores(game_type_id, limit)
    entries = [
        LeaderboardEntry(
            rank=idx + 1,
            score_id=score.id,
            player_name=score.player_name,
            score=score.score,
            display_score=format_score(score.score),
            timestamp=score.timestamp,
            display_time=format_timestamp(score.timestamp)
        )
        for idx, score in enumerate(scores)
    ]
    logger.debug(f"Returning {len(entries)} leaders for game type {game_type_id}")
    return LeaderboardResponse(
        game_type_id=game_type_id,
        name=game_type.name,
        total_scores=manager.count_scores(game_type_id),
        entries=entries
    )

@router.get("/games/{game_type_id}/players/{player_name}/rank", response_model=RankResponse)
async def get_rank(
    game_type_id: str = Path(..., min_length=1, max_length=100),
    player_name: str = Path(..., min_length=1, max_length=100),
    manager: ScoreboardManager = Depends(get_manager)
):
    """
    Get the best rank a player holds in a game type.

    - **game_type_id**: identifier of the game type
    - **player_name**: name the scores were submitted under
    """
    rank_info = manager.rank_of(game_type_id, player_name)
    if rank_info is None:
        logger.warning(f"Player {player_name} not found in game type {game_type_id}")
        raise HTTPException(status_code=404, detail="Player not found in leaderboard")

    return RankResponse(
        game_type_id=game_type_id,
        player_name=rank_info.player_name,
        rank=rank_info.rank,
        score=rank_info.score,
        total=rank_info.total,
        percentile=rank_info.percentile
    )
