"""Balancing entry point used by scripts and other callers."""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass

from domain.balancing.config import BalancingSystemConfig
from domain.balancing.scoring import balance_score
from domain.common import Player, Team
from domain.errors import InvalidInput, ensure_valid_request
from domain.protocol import AlgorithmType, BalancingParameters, StopCheck
from domain.registry import create_strategy, parse_algorithm


@dataclass(frozen=True)
class BalanceOutcome:
    """Result of one balancing request: either teams and a score, or an error."""

    teams: tuple[Team, ...] = ()
    score: float | None = None
    algorithm: AlgorithmType | None = None
    error: InvalidInput | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> list[Team]:
        if self.error is not None:
            raise self.error
        return list(self.teams)


@dataclass(frozen=True)
class TeamStatistics:
    total_players: int
    team_count: int
    average_players_per_team: float
    min_players_in_team: int
    max_players_in_team: int
    balance_score: float
    overall_range: float
    speed_range: float
    technical_range: float
    stamina_range: float


def _spread(values: list[float]) -> float:
    return max(values) - min(values)


class TeamBalancingService:
    """Resolve a strategy, run it and score the result."""

    def __init__(
        self,
        default_algorithm: AlgorithmType | str | None = AlgorithmType.SNAKE_DRAFT,
        params: BalancingParameters | None = None,
    ) -> None:
        self.default_algorithm = default_algorithm
        self.params = params or BalancingParameters()

    @classmethod
    def from_config(cls, config: BalancingSystemConfig) -> TeamBalancingService:
        return cls(default_algorithm=config.algorithm, params=config.parameters)

    def balance(
        self,
        players: Sequence[Player] | None,
        team_count: int,
        *,
        algorithm: AlgorithmType | str | None = None,
        shuffle: bool = False,
        rng: random.Random | None = None,
        should_stop: StopCheck | None = None,
    ) -> BalanceOutcome:
        try:
            ensure_valid_request(players, team_count)
            resolved = parse_algorithm(algorithm if algorithm is not None else self.default_algorithm)
            strategy = create_strategy(resolved, self.params)
            teams = strategy.balance_teams(
                list(players or ()),
                team_count,
                shuffle,
                rng=rng,
                should_stop=should_stop,
            )
        except InvalidInput as exc:
            return BalanceOutcome(error=exc)

        return BalanceOutcome(
            teams=tuple(teams),
            score=balance_score(teams),
            algorithm=resolved,
        )

    def score(self, teams: Sequence[Team]) -> float:
        return balance_score(teams)

    def team_statistics(self, teams: Sequence[Team]) -> TeamStatistics | None:
        """Summarize a set of teams for display. Returns None for no teams."""
        if not teams:
            return None

        counts = [team.player_count for team in teams]
        return TeamStatistics(
            total_players=sum(counts),
            team_count=len(teams),
            average_players_per_team=sum(counts) / len(counts),
            min_players_in_team=min(counts),
            max_players_in_team=max(counts),
            balance_score=balance_score(teams),
            overall_range=_spread([team.average_overall for team in teams]),
            speed_range=_spread([team.average_speed for team in teams]),
            technical_range=_spread([team.average_technical for team in teams]),
            stamina_range=_spread([team.average_stamina for team in teams]),
        )


__all__ = ["BalanceOutcome", "TeamBalancingService", "TeamStatistics"]
