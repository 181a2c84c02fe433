"""Field-level checks applied before players reach the balancer."""

from __future__ import annotations

from domain.common import Player
from roster.errors import PlayerValidationError, ValidationErrorType

MIN_SKILL_LEVEL = 1
MAX_SKILL_LEVEL = 3


def is_name_valid(name: str | None) -> bool:
    """Names must be non-blank and free of commas."""
    return bool(name and name.strip()) and "," not in name


def are_skill_levels_valid(speed: int, technical: int, stamina: int) -> bool:
    return all(MIN_SKILL_LEVEL <= value <= MAX_SKILL_LEVEL for value in (speed, technical, stamina))


def validate_player(player: Player) -> None:
    if not is_name_valid(player.name):
        raise PlayerValidationError(
            "Player name cannot be empty or contain commas.",
            player=player,
            error_type=ValidationErrorType.INVALID_NAME,
        )
    if not are_skill_levels_valid(player.speed, player.technical, player.stamina):
        raise PlayerValidationError(
            f"Player skill levels must be between {MIN_SKILL_LEVEL} and {MAX_SKILL_LEVEL}.",
            player=player,
            error_type=ValidationErrorType.INVALID_SKILL_LEVELS,
        )


__all__ = [
    "MAX_SKILL_LEVEL",
    "MIN_SKILL_LEVEL",
    "are_skill_levels_valid",
    "is_name_valid",
    "validate_player",
]
