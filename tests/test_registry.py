"""Tests for the strategy registry."""

from __future__ import annotations

import pytest

from domain import registry
from domain.balancing.iterative_swap import IterativeSwapStrategy
from domain.balancing.snake_draft import SnakeDraftStrategy
from domain.errors import InvalidInput
from domain.protocol import AlgorithmType, BalancingParameters, BalancingStrategy


def test_defaults_are_registered_in_deterministic_order() -> None:
    algorithms = [descriptor.algorithm for descriptor in registry.get_all()]
    assert algorithms == [AlgorithmType.ITERATIVE_SWAP, AlgorithmType.SNAKE_DRAFT]


def test_duplicate_registration_is_rejected() -> None:
    with pytest.raises(ValueError, match="Duplicate strategy"):
        registry.register(registry.get(AlgorithmType.SNAKE_DRAFT))


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("snake_draft", AlgorithmType.SNAKE_DRAFT),
        ("Snake-Draft", AlgorithmType.SNAKE_DRAFT),
        (" iterative_swap ", AlgorithmType.ITERATIVE_SWAP),
        (AlgorithmType.ITERATIVE_SWAP, AlgorithmType.ITERATIVE_SWAP),
    ],
)
def test_parse_algorithm_accepts_names(value, expected: AlgorithmType) -> None:
    assert registry.parse_algorithm(value) is expected


def test_parse_algorithm_rejects_missing_and_unknown() -> None:
    with pytest.raises(InvalidInput):
        registry.parse_algorithm(None)
    with pytest.raises(InvalidInput, match="Choose one of"):
        registry.parse_algorithm("greedy")


def test_create_strategy_builds_configured_instances() -> None:
    params = BalancingParameters(max_iterations=10, seed=1)

    swap = registry.create_strategy("iterative_swap", params)
    snake = registry.create_strategy(AlgorithmType.SNAKE_DRAFT)

    assert isinstance(swap, IterativeSwapStrategy)
    assert swap.params is params
    assert isinstance(snake, SnakeDraftStrategy)
    assert isinstance(swap, BalancingStrategy)
    assert isinstance(snake, BalancingStrategy)


def test_descriptors_carry_descriptions() -> None:
    for descriptor in registry.get_all():
        assert descriptor.description
