"""Error types for roster validation and CSV handling."""

from __future__ import annotations

from enum import Enum

from domain.common import Player


class ValidationErrorType(str, Enum):
    INVALID_NAME = "invalid_name"
    INVALID_SKILL_LEVELS = "invalid_skill_levels"
    DUPLICATE_PLAYER = "duplicate_player"
    OTHER = "other"


class PlayerValidationError(ValueError):
    """A player record failed field-level validation."""

    def __init__(
        self,
        message: str,
        *,
        player: Player | None = None,
        error_type: ValidationErrorType = ValidationErrorType.OTHER,
    ) -> None:
        super().__init__(message)
        self.player = player
        self.error_type = error_type


class CsvParseError(ValueError):
    """One CSV row could not be turned into a player."""

    def __init__(
        self,
        message: str,
        *,
        line_number: int | None = None,
        line_content: str | None = None,
    ) -> None:
        super().__init__(message)
        self.line_number = line_number
        self.line_content = line_content


__all__ = ["CsvParseError", "PlayerValidationError", "ValidationErrorType"]
