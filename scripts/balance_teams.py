#!/usr/bin/env python3
"""Split a roster into balanced teams and print the result."""

from __future__ import annotations

import sys
from dataclasses import replace
from pathlib import Path
from typing import Annotated

import typer

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from db import DEFAULT_DB_URL, create_db_engine, create_session_factory
from domain.balancing.config import get_balancing_config, load_balancing_configs
from domain.common import Player, Team
from domain.protocol import AlgorithmType, BalancingParameters
from domain.service import TeamBalancingService
from repositories.player_repository import ensure_player_schema, fetch_active_players
from roster.csv_codec import read_roster, write_roster

DEFAULT_CONFIG_DIR = ROOT_DIR / "configs" / "balancing"

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Team balancing jobs.",
)


def _load_players(csv_path: Path | None, db_url: str) -> list[Player]:
    if csv_path is not None:
        if not csv_path.exists():
            raise typer.BadParameter(f"CSV file not found: {csv_path}")
        return read_roster(csv_path, echo=typer.echo)

    engine = create_db_engine(db_url)
    ensure_player_schema(engine)
    session_factory = create_session_factory(engine)
    with session_factory() as session:
        return fetch_active_players(session)


def _echo_team(team: Team) -> None:
    typer.echo(
        f"{team.name}: players={team.player_count} total={team.total_skill_points:.2f} "
        f"overall={team.average_overall:.2f} speed={team.average_speed:.2f} "
        f"technical={team.average_technical:.2f} stamina={team.average_stamina:.2f}"
    )
    for player in team.players:
        typer.echo(f"  - {player}")


@app.command("balance")
def balance_teams(
    csv_path: Annotated[
        Path | None,
        typer.Option("--csv", help="Roster CSV (Name,Speed,TechnicalSkills,Stamina). Reads the database when omitted."),
    ] = None,
    db_url: Annotated[
        str,
        typer.Option("--db-url", help="Database URL used when --csv is not given."),
    ] = DEFAULT_DB_URL,
    config_name: Annotated[
        str | None,
        typer.Option("--config", help="Balancing config name from configs/balancing."),
    ] = None,
    team_count: Annotated[
        int | None,
        typer.Option("--teams", help="Number of teams. Overrides the config value."),
    ] = None,
    algorithm: Annotated[
        AlgorithmType | None,
        typer.Option("--algorithm", help="Balancing algorithm. Overrides the config value."),
    ] = None,
    shuffle: Annotated[
        bool | None,
        typer.Option("--shuffle/--no-shuffle", help="Add variety to the initial ordering."),
    ] = None,
    seed: Annotated[
        int | None,
        typer.Option("--seed", help="Seed for reproducible shuffles."),
    ] = None,
    max_iterations: Annotated[
        int | None,
        typer.Option("--max-iterations", help="Swap refinement pass limit."),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output", help="Write one CSV per team into this directory."),
    ] = None,
) -> None:
    """Balance the roster into teams and report the balance score."""
    if team_count is not None and team_count < 2:
        raise typer.BadParameter("--teams must be at least 2")
    if max_iterations is not None and max_iterations <= 0:
        raise typer.BadParameter("--max-iterations must be greater than 0")

    resolved_algorithm = AlgorithmType.SNAKE_DRAFT
    resolved_teams = 2
    resolved_shuffle = False
    params = BalancingParameters()
    if config_name is not None:
        try:
            config = get_balancing_config(load_balancing_configs(DEFAULT_CONFIG_DIR), config_name)
        except KeyError as exc:
            raise typer.BadParameter(str(exc.args[0])) from exc
        resolved_algorithm = config.algorithm
        resolved_teams = config.team_count
        resolved_shuffle = config.shuffle
        params = config.parameters

    if algorithm is not None:
        resolved_algorithm = algorithm
    if team_count is not None:
        resolved_teams = team_count
    if shuffle is not None:
        resolved_shuffle = shuffle
    if seed is not None:
        params = replace(params, seed=seed)
    if max_iterations is not None:
        params = replace(params, max_iterations=max_iterations)

    players = _load_players(csv_path, db_url)
    service = TeamBalancingService(default_algorithm=resolved_algorithm, params=params)
    outcome = service.balance(players, resolved_teams, shuffle=resolved_shuffle)
    if not outcome.ok:
        typer.echo(f"error: {outcome.error}", err=True)
        raise typer.Exit(code=1)

    teams = outcome.unwrap()
    for team in teams:
        _echo_team(team)

    stats = service.team_statistics(teams)
    if stats is not None:
        typer.echo(
            f"algorithm={resolved_algorithm.value} teams={stats.team_count} "
            f"players={stats.total_players} "
            f"sizes={stats.min_players_in_team}-{stats.max_players_in_team} "
            f"overall_range={stats.overall_range:.3f} "
            f"balance_score={stats.balance_score:.4f}"
        )

    if output_dir is not None:
        output_dir.mkdir(parents=True, exist_ok=True)
        for team in teams:
            file_name = team.name.lower().replace(" ", "_") + ".csv"
            write_roster(output_dir / file_name, team.players)
        typer.echo(f"wrote {len(teams)} team files to {output_dir}")


@app.command("configs")
def list_configs(
    config_dir: Annotated[
        Path,
        typer.Option("--config-dir", help="Directory holding balancing TOML files."),
    ] = DEFAULT_CONFIG_DIR,
) -> None:
    """List balancing configs."""
    for config in load_balancing_configs(config_dir):
        typer.echo(
            f"{config.name:<16} algorithm={config.algorithm.value} "
            f"teams={config.team_count} shuffle={config.shuffle} "
            f"file={config.file_path.name}"
        )


if __name__ == "__main__":
    app()
