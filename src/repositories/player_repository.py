"""Persistence helpers for the player roster using SQLAlchemy."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from domain.common import Player
from models import Base, PlayerRecord
from roster.csv_codec import serialize_players
from roster.errors import PlayerValidationError, ValidationErrorType
from roster.validation import validate_player


@dataclass(frozen=True)
class ImportSummary:
    imported: int
    skipped: int


def _utcnow() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


def _to_player(record: PlayerRecord) -> Player:
    return Player(
        id=record.id,
        name=record.name,
        speed=record.speed,
        technical=record.technical_skills,
        stamina=record.stamina,
    )


def ensure_player_schema(engine: Engine) -> None:
    """Create the players table and its indexes if they do not exist."""
    Base.metadata.create_all(bind=engine, tables=[PlayerRecord.__table__])


def fetch_active_players(session: Session) -> list[Player]:
    """Fetch active players in insertion order."""
    statement = (
        select(PlayerRecord)
        .where(PlayerRecord.is_active.is_(True))
        .order_by(PlayerRecord.created_at, PlayerRecord.name, PlayerRecord.id)
    )
    return [_to_player(record) for record in session.scalars(statement)]


def get_player(session: Session, player_id: UUID) -> Player | None:
    record = session.get(PlayerRecord, player_id)
    if record is None or not record.is_active:
        return None
    return _to_player(record)


def add_player(session: Session, player: Player) -> Player:
    """Validate and stage a new player row."""
    validate_player(player)
    if session.get(PlayerRecord, player.id) is not None:
        raise PlayerValidationError(
            f"Player with ID {player.id} already exists.",
            player=player,
            error_type=ValidationErrorType.DUPLICATE_PLAYER,
        )

    session.add(
        PlayerRecord(
            id=player.id,
            name=player.name,
            speed=player.speed,
            technical_skills=player.technical,
            stamina=player.stamina,
            is_active=True,
            created_at=_utcnow(),
        )
    )
    session.flush()
    return player


def update_player(session: Session, player: Player) -> Player:
    """Overwrite the stored fields of an existing player."""
    validate_player(player)
    record = session.get(PlayerRecord, player.id)
    if record is None:
        raise LookupError(f"Player with ID {player.id} not found.")

    record.name = player.name
    record.speed = player.speed
    record.technical_skills = player.technical
    record.stamina = player.stamina
    record.updated_at = _utcnow()
    session.flush()
    return _to_player(record)


def deactivate_player(session: Session, player_id: UUID) -> bool:
    """Soft-delete one player. Returns False when the id is unknown."""
    record = session.get(PlayerRecord, player_id)
    if record is None:
        return False

    record.is_active = False
    record.updated_at = _utcnow()
    session.flush()
    return True


def import_players(
    session: Session,
    players: Iterable[Player],
    *,
    echo: Callable[[str], None] | None = None,
) -> ImportSummary:
    """Add players, skipping invalid rows and names already on the active roster."""
    known_names = {player.name.strip().lower() for player in fetch_active_players(session)}
    imported = 0
    skipped = 0

    for player in players:
        key = player.name.strip().lower()
        if key in known_names:
            if echo is not None:
                echo(f"skipping player={player.name!r} reason=duplicate name")
            skipped += 1
            continue
        try:
            add_player(session, player)
        except PlayerValidationError as exc:
            if echo is not None:
                echo(f"skipping player={player.name!r} reason={exc.error_type.value}: {exc}")
            skipped += 1
            continue
        known_names.add(key)
        imported += 1

    if echo is not None:
        echo(f"import completed imported={imported} skipped={skipped}")
    return ImportSummary(imported=imported, skipped=skipped)


def export_players(session: Session) -> str:
    """Serialize the active roster to CSV."""
    return serialize_players(fetch_active_players(session))


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
