"""Persistence repositories."""

from repositories.player_repository import (
    ImportSummary,
    add_player,
    deactivate_player,
    ensure_player_schema,
    export_players,
    fetch_active_players,
    get_player,
    import_players,
    update_player,
)

__all__ = [
    "ImportSummary",
    "add_player",
    "deactivate_player",
    "ensure_player_schema",
    "export_players",
    "fetch_active_players",
    "get_player",
    "import_players",
    "update_player",
]
