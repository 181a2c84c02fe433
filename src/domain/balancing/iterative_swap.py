"""Iterative swap balancing strategy.

Players are dealt round-robin, then pairs of players on different teams are
swapped while doing so lowers the balance score. The search is
first-improvement: the first swap in scan order that beats the current score
by more than ``improvement_threshold`` is kept and the scan restarts from the
first team pair. It does not escape local optima, so the result depends on the
initial ordering (hence ``shuffle``).

Each team keeps its members as a list of indices. A swap, accepted or
reverted, removes both players and appends each to the back of its new list,
and later passes scan the lists in that order.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass

from domain.balancing.scoring import assignment_score
from domain.common import Player, Team, create_empty_teams
from domain.errors import ensure_valid_request
from domain.protocol import BalancingParameters, StopCheck


@dataclass(frozen=True)
class RefinementResult:
    """Outcome of one local search over an ordered roster."""

    team_of: tuple[int, ...]
    members: tuple[tuple[int, ...], ...]
    initial_score: float
    final_score: float
    iterations: int
    accepted_swaps: int
    stopped: bool


def round_robin_assignment(player_count: int, team_count: int) -> list[int]:
    return [index % team_count for index in range(player_count)]


class IterativeSwapStrategy:
    """Round-robin start followed by pairwise-swap hill climbing."""

    def __init__(self, params: BalancingParameters | None = None) -> None:
        self.params = params or BalancingParameters()

    def initial_order(
        self,
        players: Sequence[Player],
        shuffle: bool,
        rng: random.Random,
    ) -> list[Player]:
        if shuffle:
            ordered = list(players)
            rng.shuffle(ordered)
            return ordered
        return sorted(players, key=lambda player: player.overall, reverse=True)

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

        ordered = self.initial_order(players, shuffle, rng or self.params.make_rng())
        result = self.refine(ordered, team_count, should_stop=should_stop)

        teams = create_empty_teams(team_count)
        for team, member_indices in zip(teams, result.members):
            for player_index in member_indices:
                team.add_player(ordered[player_index])
        return teams

    def refine(
        self,
        ordered_players: Sequence[Player],
        team_count: int,
        *,
        should_stop: StopCheck | None = None,
    ) -> RefinementResult:
        """Run the swap search starting from a round-robin deal of ``ordered_players``.

        ``should_stop`` is polled once before every outer pass.
        """
        ensure_valid_request(ordered_players, team_count)

        team_of = round_robin_assignment(len(ordered_players), team_count)
        members: list[list[int]] = [[] for _ in range(team_count)]
        for player_index, team_index in enumerate(team_of):
            members[team_index].append(player_index)

        initial_score = assignment_score(ordered_players, team_of, team_count)
        current_score = initial_score
        iterations = 0
        accepted_swaps = 0
        stopped = False

        improved = True
        while improved and iterations < self.params.max_iterations:
            if should_stop is not None and should_stop():
                stopped = True
                break

            improved = False
            iterations += 1
            new_score = self._apply_first_improving_swap(
                ordered_players,
                team_of,
                members,
                current_score,
            )
            if new_score is not None:
                current_score = new_score
                accepted_swaps += 1
                improved = True

        return RefinementResult(
            team_of=tuple(team_of),
            members=tuple(tuple(member_indices) for member_indices in members),
            initial_score=initial_score,
            final_score=current_score,
            iterations=iterations,
            accepted_swaps=accepted_swaps,
            stopped=stopped,
        )

    def _apply_first_improving_swap(
        self,
        players: Sequence[Player],
        team_of: list[int],
        members: list[list[int]],
        current_score: float,
    ) -> float | None:
        # Mutates team_of and members in place; returns the new score when a swap was kept.
        team_count = len(members)
        threshold = self.params.improvement_threshold
        for i in range(team_count - 1):
            for j in range(i + 1, team_count):
                for a in list(members[i]):
                    for b in list(members[j]):
                        _exchange(team_of, members, a, i, b, j)
                        new_score = assignment_score(players, team_of, team_count)
                        if new_score < current_score - threshold:
                            return new_score
                        # Reverting also moves both players to the back of their lists.
                        _exchange(team_of, members, b, i, a, j)
        return None


def _exchange(
    team_of: list[int],
    members: list[list[int]],
    leaving_i: int,
    team_i: int,
    leaving_j: int,
    team_j: int,
) -> None:
    members[team_i].remove(leaving_i)
    members[team_j].remove(leaving_j)
    members[team_i].append(leaving_j)
    members[team_j].append(leaving_i)
    team_of[leaving_i] = team_j
    team_of[leaving_j] = team_i


__all__ = ["IterativeSwapStrategy", "RefinementResult", "round_robin_assignment"]
