"""Read and write rosters in the ``Name,Speed,TechnicalSkills,Stamina`` CSV format."""

from __future__ import annotations

import csv
import io
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

from domain.common import Player
from roster.errors import CsvParseError, PlayerValidationError
from roster.validation import validate_player

CSV_HEADER = ("Name", "Speed", "TechnicalSkills", "Stamina")

# Leading characters that spreadsheet tools evaluate as formulas.
_FORMULA_PREFIXES = ("=", "+", "-", "@", "\t", "\r")


def parse_player_row(fields: Sequence[str], line_number: int) -> Player:
    """Build one validated player from a CSV row."""
    line_content = ",".join(fields)
    if len(fields) < len(CSV_HEADER):
        raise CsvParseError(
            f"Expected {len(CSV_HEADER)} columns, found {len(fields)}",
            line_number=line_number,
            line_content=line_content,
        )

    try:
        speed, technical, stamina = (int(value.strip()) for value in fields[1:4])
    except ValueError as exc:
        raise CsvParseError(
            "Failed to parse numeric skill value",
            line_number=line_number,
            line_content=line_content,
        ) from exc

    player = Player(
        name=fields[0].strip(),
        speed=speed,
        technical=technical,
        stamina=stamina,
    )
    try:
        validate_player(player)
    except PlayerValidationError as exc:
        raise CsvParseError(str(exc), line_number=line_number, line_content=line_content) from exc
    return player


def parse_players(
    content: str,
    *,
    echo: Callable[[str], None] | None = None,
) -> list[Player]:
    """Parse CSV content, skipping (and reporting) rows that fail validation.

    The first non-blank row is treated as the header.
    """
    if not content or not content.strip():
        return []

    players: list[Player] = []
    skipped_rows = 0
    header_seen = False

    reader = csv.reader(io.StringIO(content))
    for fields in reader:
        if not any(field.strip() for field in fields):
            continue
        if not header_seen:
            header_seen = True
            continue

        try:
            players.append(parse_player_row(fields, reader.line_num))
        except CsvParseError as exc:
            skipped_rows += 1
            if echo is not None:
                echo(f"skipping line={exc.line_number} reason={exc} content={exc.line_content!r}")

    if echo is not None:
        echo(f"csv parsed players={len(players)} skipped_rows={skipped_rows}")
    return players


def sanitize_csv_value(value: str) -> str:
    if value and value.startswith(_FORMULA_PREFIXES):
        return "'" + value
    return value


def serialize_players(players: Iterable[Player]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for player in players:
        writer.writerow(
            [sanitize_csv_value(player.name), player.speed, player.technical, player.stamina]
        )
    return buffer.getvalue()


def read_roster(path: Path, *, echo: Callable[[str], None] | None = None) -> list[Player]:
    return parse_players(path.read_text(encoding="utf-8"), echo=echo)


def write_roster(path: Path, players: Iterable[Player]) -> None:
    path.write_text(serialize_players(players), encoding="utf-8")


__all__ = [
    "CSV_HEADER",
    "parse_player_row",
    "parse_players",
    "read_roster",
    "sanitize_csv_value",
    "serialize_players",
    "write_roster",
]
