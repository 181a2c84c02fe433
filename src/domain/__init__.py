"""Team balancing domain modules."""

from domain.common import Player, Team, create_empty_teams, team_label
from domain.errors import InvalidInput
from domain.protocol import AlgorithmType, BalancingParameters, BalancingStrategy

__all__ = [
    "AlgorithmType",
    "BalancingParameters",
    "BalancingStrategy",
    "InvalidInput",
    "Player",
    "Team",
    "create_empty_teams",
    "team_label",
]
