"""Snake draft (greedy) balancing strategy."""

from __future__ import annotations

import random
from collections.abc import Iterator, Sequence

from domain.balancing.tiers import shuffle_within_tiers
from domain.common import Player, Team, create_empty_teams
from domain.errors import ensure_valid_request
from domain.protocol import BalancingParameters, StopCheck


def draft_sort_key(player: Player) -> tuple[float, int, int, int]:
    return (player.overall, player.speed, player.technical, player.stamina)


def sort_for_draft(players: Sequence[Player]) -> list[Player]:
    """Sort strongest first; ties beyond the four skill keys keep input order."""
    return sorted(players, key=draft_sort_key, reverse=True)


def snake_order(team_count: int) -> Iterator[int]:
    """Yield 0, 1, ..., n-1, n-1, ..., 1, 0, 0, 1, ... forever."""
    forward = list(range(team_count))
    backward = forward[::-1]
    while True:
        yield from forward
        yield from backward


class SnakeDraftStrategy:
    """Sort by skill and deal players out in alternating direction.

    Deterministic unless ``shuffle`` is set, in which case the sorted roster
    is shuffled within skill tiers before the draft.
    """

    def __init__(self, params: BalancingParameters | None = None) -> None:
        self.params = params or BalancingParameters()

    def balance_teams(
        self,
        players: Sequence[Player],
        team_count: int,
        shuffle: bool = False,
        *,
        rng: random.Random | None = None,
        should_stop: StopCheck | None = None,
    ) -> list[Team]:
        ensure_valid_request(players, team_count)

        teams = create_empty_teams(team_count)
        ordered = sort_for_draft(players)
        if shuffle:
            ordered = shuffle_within_tiers(ordered, rng or self.params.make_rng())

        for player, team_index in zip(ordered, snake_order(team_count)):
            teams[team_index].add_player(player)

        return teams


__all__ = ["SnakeDraftStrategy", "draft_sort_key", "snake_order", "sort_for_draft"]
