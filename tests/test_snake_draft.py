"""Unit tests for the snake draft strategy."""

from __future__ import annotations

import random
from itertools import islice

import pytest

from conftest import make_player
from domain.balancing.scoring import balance_score
from domain.balancing.snake_draft import SnakeDraftStrategy, snake_order, sort_for_draft
from domain.common import Player
from domain.errors import InvalidInput
from domain.protocol import BalancingParameters


def _names(teams) -> list[list[str]]:
    return [[player.name for player in team.players] for team in teams]


def test_snake_order_reverses_at_each_end() -> None:
    assert list(islice(snake_order(2), 8)) == [0, 1, 1, 0, 0, 1, 1, 0]
    assert list(islice(snake_order(3), 9)) == [0, 1, 2, 2, 1, 0, 0, 1, 2]


def test_six_player_scenario_is_perfectly_balanced(six_player_roster: list[Player]) -> None:
    teams = SnakeDraftStrategy().balance_teams(six_player_roster, 2)

    assert [team.name for team in teams] == ["Team A", "Team B"]
    assert _names(teams) == [["p0", "p3", "p4"], ["p1", "p2", "p5"]]
    assert teams[0].average_overall == pytest.approx(2.0)
    assert teams[1].average_overall == pytest.approx(2.0)
    assert [team.total_skill_points for team in teams] == [pytest.approx(6.0), pytest.approx(6.0)]
    assert balance_score(teams) == pytest.approx(0.0)


def test_sort_breaks_overall_ties_by_speed_then_technical_then_stamina() -> None:
    players = [
        Player(name="balanced", speed=2, technical=2, stamina=2),
        Player(name="technical", speed=1, technical=3, stamina=2),
        Player(name="sprinter", speed=3, technical=1, stamina=2),
        Player(name="stamina", speed=1, technical=2, stamina=3),
        Player(name="elite", speed=3, technical=3, stamina=3),
    ]
    ordered = sort_for_draft(players)
    assert [player.name for player in ordered] == [
        "elite",
        "sprinter",
        "balanced",
        "technical",
        "stamina",
    ]


def test_full_ties_keep_input_order() -> None:
    players = [make_player(f"twin_{index}", 2) for index in range(4)]
    assert sort_for_draft(players) == players


def test_unshuffled_draft_is_deterministic(mixed_roster: list[Player]) -> None:
    strategy = SnakeDraftStrategy()
    first = strategy.balance_teams(mixed_roster, 3)
    second = strategy.balance_teams(mixed_roster, 3)
    assert [[p.id for p in team.players] for team in first] == [
        [p.id for p in team.players] for team in second
    ]
    assert {team.id for team in first}.isdisjoint({team.id for team in second})


@pytest.mark.parametrize("shuffle", [False, True])
def test_draft_partitions_every_player_once(mixed_roster: list[Player], shuffle: bool) -> None:
    teams = SnakeDraftStrategy().balance_teams(
        mixed_roster, 4, shuffle=shuffle, rng=random.Random(3)
    )
    assigned = [player.id for team in teams for player in team.players]
    assert len(assigned) == len(mixed_roster)
    assert sorted(assigned) == sorted(player.id for player in mixed_roster)
    assert max(team.player_count for team in teams) - min(team.player_count for team in teams) <= 1


def test_seeded_shuffle_is_reproducible(mixed_roster: list[Player]) -> None:
    strategy = SnakeDraftStrategy(BalancingParameters(seed=11))
    first = strategy.balance_teams(mixed_roster, 2, shuffle=True)
    second = strategy.balance_teams(mixed_roster, 2, shuffle=True)
    assert _names(first) == _names(second)


def test_draft_does_not_mutate_input(mixed_roster: list[Player]) -> None:
    original = list(mixed_roster)
    SnakeDraftStrategy().balance_teams(mixed_roster, 3, shuffle=True, rng=random.Random(5))
    assert mixed_roster == original


def test_more_teams_than_players_leaves_empty_teams() -> None:
    players = [make_player("solo", 2), make_player("duo", 1)]
    teams = SnakeDraftStrategy().balance_teams(players, 3)
    assert [team.player_count for team in teams] == [1, 1, 0]


def test_empty_roster_is_rejected() -> None:
    with pytest.raises(InvalidInput, match="empty"):
        SnakeDraftStrategy().balance_teams([], 2)


@pytest.mark.parametrize("team_count", [1, 0, -3])
def test_team_count_below_two_is_rejected(six_player_roster: list[Player], team_count: int) -> None:
    with pytest.raises(InvalidInput, match="at least 2"):
        SnakeDraftStrategy().balance_teams(six_player_roster, team_count)
