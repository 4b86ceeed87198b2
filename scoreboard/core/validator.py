import re
from typing import Iterable, Optional

from ..models.data import ValidationResult

MIN_NAME_LENGTH = 2
MAX_SCORE = 999_999_999

# Leading integer of the text, trailing characters ignored ("42abc" -> 42).
_PREFIX_INT = re.compile(r'\s*([+-]?[0-9]+)')
_WHOLE_INT = re.compile(r'\s*([+-]?[0-9]+)\s*')


def parse_score(raw: str, strict: bool = False) -> Optional[int]:
    """Parse a submitted score, returning None when no integer can be read."""
    if raw is None:
        return None
    pattern = _WHOLE_INT.fullmatch if strict else _PREFIX_INT.match
    match = pattern(str(raw))
    if match is None:
        return None
    return int(match.group(1))


def validate_score(name: str, raw_score: str, game_type_id: Optional[str],
                   existing_game_type_ids: Iterable[str], strict: bool = False) -> ValidationResult:
    """
    Validate a candidate submission.

    Checks run in a fixed order and the first failure is returned; nothing
    is aggregated and nothing is raised.
    """
    name = '' if name is None else str(name)
    raw_score = '' if raw_score is None else str(raw_score)

    if not name.strip():
        return ValidationResult.error('Player name is required')
    if len(name.strip()) < MIN_NAME_LENGTH:
        return ValidationResult.error(f'Player name must be at least {MIN_NAME_LENGTH} characters')
    if not raw_score.strip():
        return ValidationResult.error('Score is required')

    value = parse_score(raw_score, strict=strict)
    if value is None:
        return ValidationResult.error('Score must be a valid number')
    if value < 0:
        return ValidationResult.error('Score cannot be negative')
    if value > MAX_SCORE:
        return ValidationResult.error(f'Score is too high (max: {MAX_SCORE:,})')

    if not game_type_id or game_type_id not in set(existing_game_type_ids):
        return ValidationResult.error('Please select a game type')

    return ValidationResult.success('Score is valid and ready to submit')
