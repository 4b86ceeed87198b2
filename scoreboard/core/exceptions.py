class ScoreboardError(Exception):
    """Base class for errors raised by the scoreboard core."""


class UnknownGameTypeError(ScoreboardError, KeyError):
    """Raised when a score is stored against a game type that does not exist."""

    def __init__(self, game_type_id: str):
        super().__init__(f"Unknown game type '{game_type_id}'")
        self.game_type_id = game_type_id

    def __str__(self):
        return self.args[0]
