"""Error types raised by the balancing code."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class InvalidInput(ValueError):
    """Balancing request rejected before any work was done."""


def ensure_valid_request(players: Sequence[Any] | None, team_count: int) -> None:
    """Reject empty rosters and team counts below two."""
    if not players:
        raise InvalidInput("Player list cannot be empty.")
    if team_count < 2:
        raise InvalidInput(f"Number of teams must be at least 2, got {team_count}.")


__all__ = ["InvalidInput", "ensure_valid_request"]
