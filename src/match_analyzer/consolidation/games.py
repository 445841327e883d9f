from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from match_analyzer.aggregation.merge import apply_merge, merge_type_of
from match_analyzer.core.errors import MissingAttributeError
from match_analyzer.domain.records import GameRecord, GameTable, PlayerRow, TeamRecord

logger = logging.getLogger(__name__)

GAME_ID_ATTRIBUTE = "gameid"
TEAM_ATTRIBUTE = "team"

# Per-player flags that have to be combined across a team's rows. Team totals
# (kills, deaths, gold) repeat on every player row, so the first row wins.
TEAM_MERGE_ATTRIBUTES: tuple[str, ...] = ("firstblood",)


@dataclass(frozen=True)
class ConsolidationSummary:
    rows_seen: int
    games_seen: int
    complete_games: int
    incomplete_games: int


def _require(row: PlayerRow, attribute: str) -> str:
    value = row.get(attribute)
    if value is None:
        raise MissingAttributeError(attribute, context={"row": dict(row)})
    return value


def player_row_to_team_record(row: PlayerRow) -> TeamRecord:
    return TeamRecord(name=_require(row, TEAM_ATTRIBUTE), attributes=dict(row))


def fold_into(team: TeamRecord, row: PlayerRow) -> None:
    """Fold another player row of the same team into its team record.

    Only `TEAM_MERGE_ATTRIBUTES` are combined (missing values read as "");
    every other attribute keeps the value of the team's first row.
    """

    for attribute in TEAM_MERGE_ATTRIBUTES:
        strategy = merge_type_of(attribute)
        current = team.attributes.get(attribute, "")
        incoming = row.get(attribute, "")
        team.attributes[attribute] = apply_merge(strategy, current, incoming)


def consolidate(table: GameTable, row: PlayerRow) -> None:
    """Place one player row into the game table.

    The first team seen for a game id becomes `team_a`. A row for a different
    team sets `team_b` from that row alone; second-team rows are not folded.
    """

    game_id = _require(row, GAME_ID_ATTRIBUTE)
    team_name = _require(row, TEAM_ATTRIBUTE)

    game = table.get(game_id)
    if game is None:
        table[game_id] = GameRecord(team_a=player_row_to_team_record(row))
        return

    if game.team_a.name == team_name:
        fold_into(game.team_a, row)
    else:
        game.team_b = player_row_to_team_record(row)


def summarize(table: GameTable, *, rows_seen: int) -> ConsolidationSummary:
    complete = sum(1 for game in table.values() if game.is_complete)
    return ConsolidationSummary(
        rows_seen=rows_seen,
        games_seen=len(table),
        complete_games=complete,
        incomplete_games=len(table) - complete,
    )


def build_game_table(rows: Iterable[PlayerRow]) -> GameTable:
    table: GameTable = {}
    rows_seen = 0
    for row in rows:
        consolidate(table, row)
        rows_seen += 1

    summary = summarize(table, rows_seen=rows_seen)
    logger.info(
        "Consolidated rows_seen=%d games_seen=%d complete_games=%d incomplete_games=%d",
        summary.rows_seen,
        summary.games_seen,
        summary.complete_games,
        summary.incomplete_games,
    )
    return table


def complete_games(table: GameTable) -> Iterator[tuple[str, TeamRecord, TeamRecord]]:
    """Yield `(game_id, team_a, team_b)` for games with both teams present."""

    for game_id, game in table.items():
        if game.team_b is None:
            logger.debug("Skipping incomplete game gameid=%s team=%s", game_id, game.team_a.name)
            continue
        yield game_id, game.team_a, game.team_b
