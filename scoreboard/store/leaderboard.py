import itertools
from typing import Dict, Iterable, List, Optional

from sortedcontainers import SortedList

from ..core.exceptions import UnknownGameTypeError
from ..logger import get_logger
from ..models.data import GameType, RankInfo, RemovalResult, Score

logger = get_logger(__name__)

DEFAULT_DESCRIPTION = 'No description provided'
DEFAULT_LIMIT = 10

class LeaderboardStore:
    """
    In-memory owner of the game types and their scores.

    Each game type keeps its scores in a SortedList keyed on
    ``(-score, sequence)`` where ``sequence`` is the insertion counter, so
    equal scores keep their submission order.
    """

    def __init__(self, game_types: Optional[Iterable[GameType]] = None):
        self._game_types: Dict[str, GameType] = {}
        self._scores: Dict[str, SortedList] = {}
        self._sequence = itertools.count()
        self._next_id = 1
        for game_type in game_types or []:
            self._register(game_type)

    def _register(self, game_type: GameType):
        if game_type.id in self._game_types:
            raise ValueError(f"Duplicate game type id '{game_type.id}'")
        self._game_types[game_type.id] = game_type
        self._scores[game_type.id] = SortedList()

    def _generate_id(self) -> str:
        while str(self._next_id) in self._game_types:
            self._next_id += 1
        game_type_id = str(self._next_id)
        self._next_id += 1
        return game_type_id

    # --- Game types ---
    def add_game_type(self, name: str, description: str = '') -> Optional[GameType]:
        """Create a game type; a blank name is ignored and returns None."""
        name = (name or '').strip()
        if not name:
            return None
        game_type = GameType(
            id=self._generate_id(),
            name=name,
            description=(description or '').strip() or DEFAULT_DESCRIPTION
        )
        self._register(game_type)
        logger.info(f"Added game type {game_type.id} ({game_type.name})")
        return game_type

    def remove_game_type(self, game_type_id: str) -> RemovalResult:
        """Remove a game type together with every score recorded for it."""
        game_type = self._game_types.pop(game_type_id, None)
        if game_type is None:
            return RemovalResult()
        removed = self._scores.pop(game_type_id)
        logger.info(f"Removed game type {game_type_id} ({game_type.name}) and {len(removed)} scores")
        return RemovalResult(game_type=game_type, scores_removed=len(removed))

    def game_types(self) -> List[GameType]:
        return list(self._game_types.values())

    def game_type_ids(self) -> List[str]:
        return list(self._game_types)

    def get_game_type(self, game_type_id: str) -> Optional[GameType]:
        return self._game_types.get(game_type_id)

    def has_game_type(self, game_type_id: str) -> bool:
        return game_type_id in self._game_types

    # --- Scores ---
    def add_score(self, score: Score):
        """Append an already validated score."""
        entries = self._scores.get(score.game_type)
        if entries is None:
            raise UnknownGameTypeError(score.game_type)
        entries.add((-score.score, next(self._sequence), score))

    def top_scores(self, game_type_id: str, limit: int = DEFAULT_LIMIT) -> List[Score]:
        entries = self._scores.get(game_type_id)
        if not entries or limit <= 0:
            return []
        return [entry[2] for entry in entries.islice(0, limit)]

    def count_scores(self, game_type_id: str) -> int:
        return len(self._scores.get(game_type_id, ()))

    def rank_of(self, game_type_id: str, player_name: str) -> Optional[RankInfo]:
        """Best rank held by a player in one game type, if any."""
        entries = self._scores.get(game_type_id)
        if not entries:
            return None
        player_name = player_name.strip()
        for idx, (_, _, score) in enumerate(entries):
            if score.player_name == player_name:
                return RankInfo(player_name, score.score, idx + 1, len(entries))
        return None

    def __len__(self):
        return sum(len(entries) for entries in self._scores.values())
