from fastapi import APIRouter, Depends, HTTPException, Path
from ..models.score import GameTypeRequest, SelectionRequest
from ..models.response import GameTypeListResponse, GameTypeResponse, RemovalResponse, SelectionResponse
from ..store import ScoreboardManager
from ..logger import get_logger
from .deps import get_manager

logger = get_logger(__name__)
router = APIRouter()

@router.get("/games", response_model=GameTypeListResponse)
async def list_game_types(manager: ScoreboardManager = Depends(get_manager)):
    """Game types in the order they were added, with their score counts."""
    game_types = [
        GameTypeResponse(**game_type.to_dict(), score_count=manager.count_scores(game_type.id))
        for game_type in manager.game_types()
    ]
    return GameTypeListResponse(game_types=game_types, selected_game_type=manager.selected_game_type)

@router.post("/games", response_model=GameTypeResponse, status_code=201)
async def add_game_type(data: GameTypeRequest, manager: ScoreboardManager = Depends(get_manager)):
    game_type = manager.add_game_type(data.name, data.description)
    if game_type is None:
        raise HTTPException(status_code=400, detail="Game type name is required")
    return GameTypeResponse(**game_type.to_dict())

@router.delete("/games/{game_type_id}", response_model=RemovalResponse)
async def remove_game_type(
    game_type_id: str = Path(..., min_length=1, max_length=100),
    manager: ScoreboardManager = Depends(get_manager)
):
    """
    Remove a game type and every score recorded for it.

    Removing an unknown id is not an error; the response reports `removed: false`.
    """
    removal = manager.remove_game_type(game_type_id)
    return RemovalResponse(
        game_type_id=game_type_id,
        removed=removal.removed,
        scores_removed=removal.scores_removed,
        selection_cleared=removal.selection_cleared
    )

@router.put("/selection", response_model=SelectionResponse)
async def select_game_type(data: SelectionRequest, manager: ScoreboardManager = Depends(get_manager)):
    if not manager.select_game_type(data.game_type_id):
        raise HTTPException(status_code=404, detail="Game type not found")
    return SelectionResponse(selected_game_type=manager.selected_game_type)
