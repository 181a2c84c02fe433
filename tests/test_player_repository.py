"""Tests for the SQLAlchemy player repository against SQLite."""

from __future__ import annotations

from pathlib import Path
from uuid import uuid4

import pytest
from sqlalchemy.orm import Session, sessionmaker

from db import create_db_engine, create_session_factory
from domain.common import Player
from repositories.player_repository import (
    add_player,
    deactivate_player,
    ensure_player_schema,
    export_players,
    fetch_active_players,
    get_player,
    import_players,
    update_player,
)
from roster.errors import PlayerValidationError, ValidationErrorType


@pytest.fixture
def session_factory(tmp_path: Path) -> sessionmaker[Session]:
    engine = create_db_engine(f"sqlite:///{tmp_path / 'players.db'}")
    ensure_player_schema(engine)
    return create_session_factory(engine)


def test_added_players_are_fetched_back(session_factory: sessionmaker[Session]) -> None:
    ana = Player(name="Ana", speed=3, technical=2, stamina=1)
    bruno = Player(name="Bruno", speed=1, technical=1, stamina=2)

    with session_factory() as session, session.begin():
        add_player(session, ana)
        add_player(session, bruno)

    with session_factory() as session:
        assert fetch_active_players(session) == [ana, bruno]
        assert get_player(session, ana.id) == ana
        assert get_player(session, uuid4()) is None


def test_duplicate_id_is_rejected(session_factory: sessionmaker[Session]) -> None:
    ana = Player(name="Ana", speed=3, technical=2, stamina=1)
    with session_factory() as session, session.begin():
        add_player(session, ana)

    with session_factory() as session:
        with pytest.raises(PlayerValidationError) as excinfo:
            add_player(session, ana)
    assert excinfo.value.error_type is ValidationErrorType.DUPLICATE_PLAYER


def test_invalid_player_is_not_stored(session_factory: sessionmaker[Session]) -> None:
    with session_factory() as session:
        with pytest.raises(PlayerValidationError):
            add_player(session, Player(name="Ana", speed=4, technical=2, stamina=1))
        assert fetch_active_players(session) == []


def test_update_player_overwrites_fields(session_factory: sessionmaker[Session]) -> None:
    ana = Player(name="Ana", speed=1, technical=1, stamina=1)
    with session_factory() as session, session.begin():
        add_player(session, ana)

    improved = Player(id=ana.id, name="Ana B", speed=3, technical=3, stamina=2)
    with session_factory() as session, session.begin():
        assert update_player(session, improved) == improved

    with session_factory() as session:
        assert get_player(session, ana.id) == improved


def test_update_unknown_player_raises(session_factory: sessionmaker[Session]) -> None:
    with session_factory() as session:
        with pytest.raises(LookupError):
            update_player(session, Player(name="Ghost", speed=2, technical=2, stamina=2))


def test_deactivate_player_soft_deletes(session_factory: sessionmaker[Session]) -> None:
    ana = Player(name="Ana", speed=2, technical=2, stamina=2)
    with session_factory() as session, session.begin():
        add_player(session, ana)

    with session_factory() as session, session.begin():
        assert deactivate_player(session, ana.id) is True
        assert deactivate_player(session, uuid4()) is False

    with session_factory() as session:
        assert fetch_active_players(session) == []
        assert get_player(session, ana.id) is None


def test_import_skips_invalid_and_duplicate_names(session_factory: sessionmaker[Session]) -> None:
    with session_factory() as session, session.begin():
        add_player(session, Player(name="Ana", speed=2, technical=2, stamina=2))

    incoming = [
        Player(name="ana", speed=3, technical=3, stamina=3),
        Player(name="Bruno", speed=1, technical=2, stamina=3),
        Player(name="Bad,Name", speed=1, technical=2, stamina=3),
        Player(name="Carla", speed=0, technical=2, stamina=3),
        Player(name="BRUNO", speed=2, technical=2, stamina=2),
    ]
    messages: list[str] = []
    with session_factory() as session, session.begin():
        summary = import_players(session, incoming, echo=messages.append)

    assert summary.imported == 1
    assert summary.skipped == 4
    assert messages[-1] == "import completed imported=1 skipped=4"
    assert any("invalid_name" in message for message in messages)
    assert any("invalid_skill_levels" in message for message in messages)

    with session_factory() as session:
        assert [player.name for player in fetch_active_players(session)] == ["Ana", "Bruno"]


def test_export_players_writes_active_roster(session_factory: sessionmaker[Session]) -> None:
    ana = Player(name="Ana", speed=3, technical=2, stamina=1)
    bruno = Player(name="Bruno", speed=1, technical=1, stamina=2)
    with session_factory() as session, session.begin():
        add_player(session, ana)
        add_player(session, bruno)
        deactivate_player(session, bruno.id)

    with session_factory() as session:
        assert export_players(session) == "Name,Speed,TechnicalSkills,Stamina\nAna,3,2,1\n"
