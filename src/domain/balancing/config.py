"""Load balancing system definitions from TOML files.

Each ``*.toml`` file in a config directory describes one named setup: a
``[system]`` table with ``name`` and an optional ``description``, and a
``[balancing]`` table with the algorithm, team count and search parameters.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Any
import tomllib

from domain.protocol import AlgorithmType, BalancingParameters


@dataclass(frozen=True)
class BalancingSystemConfig:
    """One named combination of algorithm, team count and search parameters."""

    name: str
    description: str | None
    file_path: Path
    algorithm: AlgorithmType
    team_count: int
    shuffle: bool
    parameters: BalancingParameters

    def as_config_json(self) -> dict[str, Any]:
        return {
            "algorithm": self.algorithm.value,
            "team_count": self.team_count,
            "shuffle": self.shuffle,
            "max_iterations": self.parameters.max_iterations,
            "improvement_threshold": self.parameters.improvement_threshold,
            "seed": self.parameters.seed,
        }


def load_balancing_configs(config_dir: Path) -> list[BalancingSystemConfig]:
    """Load and validate every balancing config in ``config_dir``, sorted by file name."""
    configs = [
        _parse_balancing_config(_read_toml(file_path), file_path)
        for file_path in _config_files(config_dir)
    ]

    name_counts = Counter(config.name for config in configs)
    duplicates = sorted(name for name, count in name_counts.items() if count > 1)
    if duplicates:
        raise ValueError(
            f"Duplicate balancing system names in {config_dir}: {', '.join(duplicates)}"
        )
    return configs


def get_balancing_config(
    configs: list[BalancingSystemConfig],
    name: str,
) -> BalancingSystemConfig:
    for config in configs:
        if config.name == name:
            return config
    available = ", ".join(sorted(config.name for config in configs))
    raise KeyError(f"No balancing config named {name!r}. Available: {available}")


def _config_files(config_dir: Path) -> list[Path]:
    if not config_dir.exists():
        raise FileNotFoundError(f"Config directory not found: {config_dir}")
    if not config_dir.is_dir():
        raise NotADirectoryError(f"Config path is not a directory: {config_dir}")

    config_files = sorted(config_dir.glob("*.toml"))
    if not config_files:
        raise ValueError(f"No .toml config files found in: {config_dir}")
    return config_files


def _read_toml(file_path: Path) -> dict[str, Any]:
    with file_path.open("rb") as file:
        return tomllib.load(file)


def _parse_balancing_config(raw: dict[str, Any], file_path: Path) -> BalancingSystemConfig:
    system_raw = raw.get("system", {})
    balancing_raw = raw.get("balancing", {})

    name = str(system_raw.get("name", "")).strip()
    if not name:
        raise ValueError(f"{file_path}: [system].name is required")

    description_value = system_raw.get("description")
    description = None if description_value is None else str(description_value)

    algorithm_value = str(balancing_raw.get("algorithm", AlgorithmType.SNAKE_DRAFT.value))
    try:
        algorithm = AlgorithmType(algorithm_value.strip().lower().replace("-", "_"))
    except ValueError as exc:
        choices = ", ".join(item.value for item in AlgorithmType)
        raise ValueError(
            f"{file_path}: [balancing].algorithm must be one of {choices}, got {algorithm_value!r}"
        ) from exc

    team_count = int(balancing_raw.get("team_count", 2))
    if team_count < 2:
        raise ValueError(f"{file_path}: [balancing].team_count must be >= 2")

    shuffle_value = balancing_raw.get("shuffle", False)
    if not isinstance(shuffle_value, bool):
        raise ValueError(f"{file_path}: [balancing].shuffle must be true or false")

    seed_value = balancing_raw.get("seed")
    if seed_value is not None and (isinstance(seed_value, bool) or not isinstance(seed_value, int)):
        raise ValueError(f"{file_path}: [balancing].seed must be an integer")

    parameters = BalancingParameters(
        max_iterations=int(balancing_raw.get("max_iterations", 1000)),
        improvement_threshold=float(balancing_raw.get("improvement_threshold", 0.0001)),
        seed=seed_value,
    )
    _validate_parameters(file_path=file_path, parameters=parameters)

    return BalancingSystemConfig(
        name=name,
        description=description,
        file_path=file_path,
        algorithm=algorithm,
        team_count=team_count,
        shuffle=shuffle_value,
        parameters=parameters,
    )


def _validate_parameters(*, file_path: Path, parameters: BalancingParameters) -> None:
    if parameters.max_iterations < 1:
        raise ValueError(f"{file_path}: [balancing].max_iterations must be >= 1")
    if parameters.improvement_threshold < 0.0:
        raise ValueError(f"{file_path}: [balancing].improvement_threshold must be >= 0")


__all__ = ["BalancingSystemConfig", "get_balancing_config", "load_balancing_configs"]
