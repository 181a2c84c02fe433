"""Registry of available balancing strategy implementations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from domain.balancing.iterative_swap import IterativeSwapStrategy
from domain.balancing.snake_draft import SnakeDraftStrategy
from domain.errors import InvalidInput
from domain.protocol import AlgorithmType, BalancingParameters, BalancingStrategy

CreateStrategyFn = Callable[[BalancingParameters], BalancingStrategy]


@dataclass(frozen=True)
class StrategyDescriptor:
    """Everything required to build one balancing strategy."""

    algorithm: AlgorithmType
    description: str
    create_strategy: CreateStrategyFn


_REGISTRY: dict[AlgorithmType, StrategyDescriptor] = {}


def register(descriptor: StrategyDescriptor) -> None:
    """Register one strategy descriptor."""
    if descriptor.algorithm in _REGISTRY:
        raise ValueError(
            f"Duplicate strategy descriptor registration for algorithm={descriptor.algorithm.value}"
        )
    _REGISTRY[descriptor.algorithm] = descriptor


def get_all() -> list[StrategyDescriptor]:
    """Return all registered descriptors in deterministic order."""
    return [_REGISTRY[key] for key in sorted(_REGISTRY.keys(), key=lambda item: item.value)]


def get(algorithm: AlgorithmType) -> StrategyDescriptor:
    """Get one registered descriptor by algorithm."""
    try:
        return _REGISTRY[algorithm]
    except KeyError as exc:
        available = ", ".join(descriptor.algorithm.value for descriptor in get_all())
        raise KeyError(
            f"No strategy registered for {algorithm.value}. Available: {available}"
        ) from exc


def parse_algorithm(value: AlgorithmType | str | None) -> AlgorithmType:
    """Resolve an algorithm name, raising InvalidInput when missing or unknown."""
    if value is None:
        raise InvalidInput("A balancing strategy must be specified.")
    if isinstance(value, AlgorithmType):
        return value

    normalized = str(value).strip().lower().replace("-", "_")
    try:
        return AlgorithmType(normalized)
    except ValueError as exc:
        choices = ", ".join(item.value for item in AlgorithmType)
        raise InvalidInput(f"Unknown balancing strategy {value!r}. Choose one of: {choices}") from exc


def create_strategy(
    algorithm: AlgorithmType | str | None,
    params: BalancingParameters | None = None,
) -> BalancingStrategy:
    """Build a strategy instance for ``algorithm``."""
    resolved = parse_algorithm(algorithm)
    try:
        descriptor = get(resolved)
    except KeyError as exc:
        raise InvalidInput(str(exc)) from exc
    return descriptor.create_strategy(params or BalancingParameters())


_DEFAULTS: list[tuple[AlgorithmType, str, CreateStrategyFn]] = [
    (
        AlgorithmType.SNAKE_DRAFT,
        "Sort by skill and distribute in snake order. Fast and deterministic.",
        SnakeDraftStrategy,
    ),
    (
        AlgorithmType.ITERATIVE_SWAP,
        "Round-robin start refined by first-improvement pairwise swaps.",
        IterativeSwapStrategy,
    ),
]


def _register_defaults() -> None:
    if _REGISTRY:
        return
    for algorithm, description, factory in _DEFAULTS:
        register(
            StrategyDescriptor(
                algorithm=algorithm,
                description=description,
                create_strategy=factory,
            )
        )


_register_defaults()

__all__ = [
    "StrategyDescriptor",
    "create_strategy",
    "get",
    "get_all",
    "parse_algorithm",
    "register",
]
