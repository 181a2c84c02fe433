"""Roster validation and CSV import/export."""

from roster.csv_codec import (
    CSV_HEADER,
    parse_players,
    read_roster,
    serialize_players,
    write_roster,
)
from roster.errors import CsvParseError, PlayerValidationError, ValidationErrorType
from roster.validation import are_skill_levels_valid, is_name_valid, validate_player

__all__ = [
    "CSV_HEADER",
    "CsvParseError",
    "PlayerValidationError",
    "ValidationErrorType",
    "are_skill_levels_valid",
    "is_name_valid",
    "parse_players",
    "read_roster",
    "serialize_players",
    "validate_player",
    "write_roster",
]
