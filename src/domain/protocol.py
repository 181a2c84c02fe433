"""Shared protocols and enums for balancing strategies."""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable

from domain.common import Player, Team

StopCheck = Callable[[], bool]


class AlgorithmType(str, Enum):
    """Available team balancing algorithms."""

    SNAKE_DRAFT = "snake_draft"
    ITERATIVE_SWAP = "iterative_swap"


@dataclass(frozen=True)
class BalancingParameters:
    max_iterations: int = 1000
    improvement_threshold: float = 0.0001
    seed: int | None = None

    def make_rng(self) -> random.Random:
        """Return a new generator owned by a single balancing call."""
        return random.Random(self.seed)


@runtime_checkable
class BalancingStrategy(Protocol):
    """Contract every balancing strategy satisfies."""

    params: BalancingParameters

    def balance_teams(
        self,
        players: Sequence[Player],
        team_count: int,
        shuffle: bool = False,
        *,
        rng: random.Random | None = None,
        should_stop: StopCheck | None = None,
    ) -> list[Team]: ...


__all__ = [
    "AlgorithmType",
    "BalancingParameters",
    "BalancingStrategy",
    "StopCheck",
]
