"""Balancing strategies and the shared balance score."""

from domain.balancing.iterative_swap import (
    IterativeSwapStrategy,
    RefinementResult,
    round_robin_assignment,
)
from domain.balancing.scoring import (
    assignment_score,
    balance_score,
    population_variance,
)
from domain.balancing.snake_draft import SnakeDraftStrategy, snake_order, sort_for_draft
from domain.balancing.tiers import shuffle_within_tiers, tier_size

__all__ = [
    "IterativeSwapStrategy",
    "RefinementResult",
    "SnakeDraftStrategy",
    "assignment_score",
    "balance_score",
    "population_variance",
    "round_robin_assignment",
    "shuffle_within_tiers",
    "snake_order",
    "sort_for_draft",
    "tier_size",
]
