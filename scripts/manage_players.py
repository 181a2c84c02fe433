#!/usr/bin/env python3
"""Maintain the stored player roster."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated
from uuid import UUID

import typer

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from db import DEFAULT_DB_URL, create_db_engine, create_session_factory
from repositories.player_repository import (
    deactivate_player,
    ensure_player_schema,
    export_players,
    fetch_active_players,
    import_players,
)
from roster.csv_codec import read_roster

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Player roster jobs.",
)

DbUrlOption = Annotated[
    str,
    typer.Option("--db-url", help="Database URL. Defaults to a local SQLite file."),
]


def _session_factory(db_url: str):
    engine = create_db_engine(db_url)
    ensure_player_schema(engine)
    return create_session_factory(engine)


@app.command("import-csv")
def import_csv(
    csv_path: Annotated[Path, typer.Argument(help="Roster CSV to import.")],
    db_url: DbUrlOption = DEFAULT_DB_URL,
) -> None:
    """Add players from a CSV file, skipping invalid rows and known names."""
    if not csv_path.exists():
        raise typer.BadParameter(f"CSV file not found: {csv_path}")

    players = read_roster(csv_path, echo=typer.echo)
    session_factory = _session_factory(db_url)
    with session_factory() as session:
        with session.begin():
            import_players(session, players, echo=typer.echo)


@app.command("export-csv")
def export_csv(
    csv_path: Annotated[Path, typer.Argument(help="Destination CSV file.")],
    db_url: DbUrlOption = DEFAULT_DB_URL,
) -> None:
    """Write the active roster to a CSV file."""
    session_factory = _session_factory(db_url)
    with session_factory() as session:
        content = export_players(session)
    csv_path.write_text(content, encoding="utf-8")
    typer.echo(f"exported to {csv_path}")


@app.command("list")
def list_players(db_url: DbUrlOption = DEFAULT_DB_URL) -> None:
    """Print the active roster."""
    session_factory = _session_factory(db_url)
    with session_factory() as session:
        players = fetch_active_players(session)

    if not players:
        typer.echo("No active players.")
        return
    for index, player in enumerate(players, start=1):
        typer.echo(f"{index:3d}. {player}  id={player.id}")


@app.command("deactivate")
def deactivate(
    player_id: Annotated[str, typer.Argument(help="Player UUID.")],
    db_url: DbUrlOption = DEFAULT_DB_URL,
) -> None:
    """Soft-delete one player."""
    try:
        parsed_id = UUID(player_id)
    except ValueError as exc:
        raise typer.BadParameter(f"Not a valid UUID: {player_id}") from exc

    session_factory = _session_factory(db_url)
    with session_factory() as session:
        with session.begin():
            removed = deactivate_player(session, parsed_id)

    if not removed:
        typer.echo(f"No player with id={parsed_id}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"deactivated id={parsed_id}")


if __name__ == "__main__":
    app()
