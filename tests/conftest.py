"""Shared fixtures for balancing tests."""

from __future__ import annotations

import random

import pytest

from domain.common import Player


def make_player(name: str, speed: int, technical: int | None = None, stamina: int | None = None) -> Player:
    technical = speed if technical is None else technical
    stamina = speed if stamina is None else stamina
    return Player(name=name, speed=speed, technical=technical, stamina=stamina)


@pytest.fixture
def six_player_roster() -> list[Player]:
    """Overall values 3, 3, 2, 2, 1, 1 (every attribute equal per player)."""
    return [
        make_player("p0", 3),
        make_player("p1", 3),
        make_player("p2", 2),
        make_player("p3", 2),
        make_player("p4", 1),
        make_player("p5", 1),
    ]


@pytest.fixture
def mixed_roster() -> list[Player]:
    rng = random.Random(1234)
    return [
        Player(
            name=f"player_{index:02d}",
            speed=rng.randint(1, 3),
            technical=rng.randint(1, 3),
            stamina=rng.randint(1, 3),
        )
        for index in range(17)
    ]
