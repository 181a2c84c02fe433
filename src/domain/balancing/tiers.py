"""Shuffle a skill-sorted roster within contiguous tiers."""

from __future__ import annotations

import random
from collections.abc import Sequence

from domain.common import Player


def tier_size(player_count: int) -> int:
    return max(2, player_count // 6)


def shuffle_within_tiers(sorted_players: Sequence[Player], rng: random.Random) -> list[Player]:
    """Shuffle inside each tier while keeping tier boundaries and tier order.

    Players only move within a window of similar skill, so a subsequent
    draft stays close to the unshuffled balance.
    """
    size = tier_size(len(sorted_players))
    result: list[Player] = []
    for start in range(0, len(sorted_players), size):
        tier = list(sorted_players[start : start + size])
        rng.shuffle(tier)
        result.extend(tier)
    return result


__all__ = ["shuffle_within_tiers", "tier_size"]
