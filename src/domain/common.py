"""Shared types for team balancing."""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID, uuid4


@dataclass(frozen=True)
class Player:
    """Rated participant fed into a balancing run.

    Skill attributes are expected in [1, 3]; validation happens before a
    player reaches the balancing code.
    """

    name: str
    speed: int
    technical: int
    stamina: int
    id: UUID = field(default_factory=uuid4)

    @property
    def overall(self) -> float:
        return (self.speed + self.technical + self.stamina) / 3.0

    def __str__(self) -> str:
        return (
            f"{self.name} (speed={self.speed}, technical={self.technical}, "
            f"stamina={self.stamina}, overall={self.overall:.1f})"
        )


def _mean(values: list[float]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


@dataclass
class Team:
    """One generated team. Members are shared references, never copies."""

    name: str
    players: list[Player] = field(default_factory=list)
    id: UUID = field(default_factory=uuid4)

    @property
    def player_count(self) -> int:
        return len(self.players)

    @property
    def average_speed(self) -> float:
        return _mean([player.speed for player in self.players])

    @property
    def average_technical(self) -> float:
        return _mean([player.technical for player in self.players])

    @property
    def average_stamina(self) -> float:
        return _mean([player.stamina for player in self.players])

    @property
    def average_overall(self) -> float:
        return _mean([player.overall for player in self.players])

    @property
    def total_skill_points(self) -> float:
        return sum(player.overall for player in self.players)

    def add_player(self, player: Player) -> None:
        if player not in self.players:
            self.players.append(player)

    def remove_player(self, player: Player) -> bool:
        try:
            self.players.remove(player)
        except ValueError:
            return False
        return True

    def __str__(self) -> str:
        return f"{self.name} - {self.player_count} players (overall={self.average_overall:.2f})"


def team_label(index: int) -> str:
    """Return "Team A", "Team B", ... for index 0, 1, ..."""
    if index < 0:
        raise ValueError("team index must be >= 0")
    letters = ""
    value = index
    while True:
        value, remainder = divmod(value, 26)
        letters = chr(ord("A") + remainder) + letters
        if value == 0:
            break
        value -= 1
    return f"Team {letters}"


def create_empty_teams(team_count: int) -> list[Team]:
    """Create ``team_count`` fresh, sequentially labeled teams."""
    return [Team(name=team_label(index)) for index in range(team_count)]


__all__ = ["Player", "Team", "create_empty_teams", "team_label"]
