"""Balance score shared by every strategy.

The score is a weighted sum of population variances taken across teams:

    2.0 * var(overall) + var(speed) + var(technical) + var(stamina)
        + 1.5 * var(player_count)

Lower is better and 0 means every team has identical means and size.
"""

from __future__ import annotations

from collections.abc import Sequence

from domain.common import Player, Team

OVERALL_SKILL_WEIGHT = 2.0
ATTRIBUTE_WEIGHT = 1.0
PLAYER_COUNT_WEIGHT = 1.5


def population_variance(values: Sequence[float]) -> float:
    """Mean squared deviation from the mean (divisor is ``len(values)``)."""
    if not values:
        return 0.0
    mean = sum(values) / len(values)
    return sum((value - mean) ** 2 for value in values) / len(values)


def _weighted_score(
    overall: Sequence[float],
    speed: Sequence[float],
    technical: Sequence[float],
    stamina: Sequence[float],
    counts: Sequence[float],
) -> float:
    return (
        OVERALL_SKILL_WEIGHT * population_variance(overall)
        + ATTRIBUTE_WEIGHT * population_variance(speed)
        + ATTRIBUTE_WEIGHT * population_variance(technical)
        + ATTRIBUTE_WEIGHT * population_variance(stamina)
        + PLAYER_COUNT_WEIGHT * population_variance(counts)
    )


def balance_score(teams: Sequence[Team]) -> float:
    """Score a set of teams. An empty team set scores 0."""
    if not teams:
        return 0.0
    return _weighted_score(
        [team.average_overall for team in teams],
        [team.average_speed for team in teams],
        [team.average_technical for team in teams],
        [team.average_stamina for team in teams],
        [float(team.player_count) for team in teams],
    )


def assignment_score(
    players: Sequence[Player],
    team_of: Sequence[int],
    team_count: int,
) -> float:
    """Score a membership array where ``team_of[i]`` is the team of ``players[i]``.

    Produces the same value as ``balance_score`` on the materialized teams.
    """
    if team_count <= 0:
        return 0.0

    counts = [0] * team_count
    speed_sums = [0.0] * team_count
    technical_sums = [0.0] * team_count
    stamina_sums = [0.0] * team_count
    overall_sums = [0.0] * team_count
    for player, team_index in zip(players, team_of):
        counts[team_index] += 1
        speed_sums[team_index] += player.speed
        technical_sums[team_index] += player.technical
        stamina_sums[team_index] += player.stamina
        overall_sums[team_index] += player.overall

    def means(sums: list[float]) -> list[float]:
        return [total / count if count else 0.0 for total, count in zip(sums, counts)]

    return _weighted_score(
        means(overall_sums),
        means(speed_sums),
        means(technical_sums),
        means(stamina_sums),
        [float(count) for count in counts],
    )


__all__ = [
    "ATTRIBUTE_WEIGHT",
    "OVERALL_SKILL_WEIGHT",
    "PLAYER_COUNT_WEIGHT",
    "assignment_score",
    "balance_score",
    "population_variance",
]
