from __future__ import annotations

import logging

from match_analyzer.aggregation.merge import apply_merge, merge_type_of
from match_analyzer.consolidation.games import complete_games
from match_analyzer.core.errors import MissingAttributeError, UnsupportedStatisticError
from match_analyzer.domain.enums import StatisticEnum, StatResolution
from match_analyzer.domain.records import GameTable, TeamRecord
from match_analyzer.query.constraints import matches
from match_analyzer.query.models import Query

logger = logging.getLogger(__name__)

DEFAULT_STAT_VALUE = "0"

STAT_ATTRIBUTES: dict[StatisticEnum, str] = {
    StatisticEnum.KILLS: "kills",
    StatisticEnum.DEATHS: "deaths",
    StatisticEnum.GOLD_DIFF_10: "golddiffat10",
    StatisticEnum.GOLD_DIFF_15: "golddiffat15",
    StatisticEnum.BARONS: "barons",
    StatisticEnum.FIRST_BARON: "firstbaron",
    StatisticEnum.DRAGONS: "dragons",
    StatisticEnum.FIRST_DRAGON: "firstdragon",
    StatisticEnum.TOWERS: "towers",
    StatisticEnum.FIRST_TOWER: "firsttower",
}

# Statistics the historical resolver knew how to read.
KILLS_ONLY_STATS: frozenset[StatisticEnum] = frozenset({StatisticEnum.KILLS})


def statistic_attribute(stat: StatisticEnum) -> str:
    return STAT_ATTRIBUTES[stat]


def query_stat(
    stat: StatisticEnum,
    team: TeamRecord,
    *,
    stat_resolution: StatResolution = StatResolution.COMPLETE,
) -> str:
    """Read a team's value for a statistic."""

    if stat_resolution == StatResolution.KILLS_ONLY and stat not in KILLS_ONLY_STATS:
        raise UnsupportedStatisticError(stat.value)

    attribute = statistic_attribute(stat)
    value = team.attributes.get(attribute)
    if value is None:
        raise MissingAttributeError(attribute, context={"team": team.name, "stat": stat.value})
    return value


def run_query(
    query: Query,
    games: GameTable,
    *,
    stat_resolution: StatResolution = StatResolution.COMPLETE,
) -> dict[str, str]:
    """Aggregate the requested statistics over every team matching the constraints.

    Only games with both teams present are considered; each team is filtered
    independently. Values are folded per attribute with that attribute's merge
    strategy, starting from "0".
    """

    results: dict[str, str] = {
        statistic_attribute(stat): DEFAULT_STAT_VALUE for stat in query.stats
    }

    games_considered = 0
    teams_matched = 0

    for _, team_a, team_b in complete_games(games):
        games_considered += 1

        for team in (team_a, team_b):
            if not matches(team, query.constraints):
                continue
            teams_matched += 1

            for stat in query.stats:
                attribute = statistic_attribute(stat)
                strategy = merge_type_of(attribute)
                value = query_stat(stat, team, stat_resolution=stat_resolution)
                results[attribute] = apply_merge(strategy, results[attribute], value)

    logger.info(
        "Query evaluated games_considered=%d teams_matched=%d",
        games_considered,
        teams_matched,
    )
    return results
