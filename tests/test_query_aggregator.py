from __future__ import annotations

import pytest

from match_analyzer.consolidation.games import build_game_table
from match_analyzer.core.errors import MissingAttributeError, UnsupportedStatisticError
from match_analyzer.domain.enums import StatisticEnum, StatResolution
from match_analyzer.domain.records import GameTable, PlayerRow
from match_analyzer.query.aggregator import STAT_ATTRIBUTES, run_query, statistic_attribute
from match_analyzer.query.models import (
    Constraint,
    GameResultConstraint,
    LeagueConstraint,
    Query,
    SideConstraint,
    TeamConstraint,
)


def _row(game_id: str, team: str, **attrs: str) -> PlayerRow:
    base = {
        "gameid": game_id,
        "team": team,
        "result": "0",
        "league": "LCK",
        "side": "Blue",
        "kills": "0",
        "firstblood": "0",
    }
    base.update(attrs)
    return base


def _games() -> GameTable:
    return build_game_table(
        [
            _row("G1", "A", result="1", side="Blue", kills="10", firstblood="1"),
            _row("G1", "B", result="0", side="Red", kills="7", firstblood="0"),
            _row("G2", "C", result="1", kills="30"),
        ]
    )


def _named(name: str) -> TeamConstraint:
    return TeamConstraint.model_validate({"Team": name})


def _query(constraints: list[Constraint], stats: list[StatisticEnum]) -> Query:
    return Query(constraints=constraints, stats=stats)


def test_league_query_sums_kills_over_both_teams() -> None:
    results = run_query(
        _query([LeagueConstraint.model_validate({"League": "LCK"})], [StatisticEnum.KILLS]),
        _games(),
    )
    assert results == {"kills": "17"}


def test_team_query_reads_single_team() -> None:
    results = run_query(_query([_named("A")], [StatisticEnum.KILLS]), _games())
    assert results == {"kills": "10"}


def test_incomplete_game_contributes_nothing() -> None:
    results = run_query(_query([_named("C")], [StatisticEnum.KILLS]), _games())
    assert results == {"kills": "0"}


def test_no_matching_team_yields_default() -> None:
    query = _query(
        [
            GameResultConstraint.model_validate({"GameResult": True}),
            SideConstraint.model_validate({"Side": "Red"}),
        ],
        [StatisticEnum.KILLS, StatisticEnum.DEATHS],
    )
    assert run_query(query, _games()) == {"kills": "0", "deaths": "0"}


def test_result_does_not_depend_on_game_order() -> None:
    rows = [
        _row("G1", "A", kills="10", firsttower="1"),
        _row("G1", "B", kills="7", firsttower="0"),
        _row("G3", "A", kills="4", firsttower="0"),
        _row("G3", "D", kills="12", firsttower="0"),
    ]
    query = _query([], [StatisticEnum.KILLS, StatisticEnum.FIRST_TOWER])

    forward = run_query(query, build_game_table(rows))
    backward = run_query(query, build_game_table(list(reversed(rows))))

    assert forward == backward == {"kills": "33", "firsttower": "1"}


def test_every_statistic_reads_its_backing_attribute() -> None:
    games = build_game_table(
        [
            _row("G1", "A", deaths="3", golddiffat10="250", golddiffat15="900", barons="1",
                 firstbaron="1", dragons="3", firstdragon="1", towers="9", firsttower="1"),
            _row("G1", "B", deaths="8", golddiffat10="-250", golddiffat15="-900", barons="0",
                 firstbaron="0", dragons="1", firstdragon="0", towers="2", firsttower="0"),
        ]
    )

    results = run_query(_query([], list(StatisticEnum)), games)

    assert set(results) == set(STAT_ATTRIBUTES.values())
    assert results["deaths"] == "11"
    assert results["golddiffat10"] == "0"
    assert results["dragons"] == "4"
    assert results["towers"] == "11"
    assert results["firstbaron"] == "1"
    # `firstdragon` has no registered merge strategy, so the seed is kept.
    assert results["firstdragon"] == "0"


def test_missing_backing_attribute_is_fatal() -> None:
    with pytest.raises(MissingAttributeError) as exc_info:
        run_query(_query([], [StatisticEnum.BARONS]), _games())
    assert exc_info.value.attribute == statistic_attribute(StatisticEnum.BARONS)


def test_kills_only_resolution_rejects_other_statistics() -> None:
    query = _query([_named("A")], [StatisticEnum.KILLS, StatisticEnum.TOWERS])

    with pytest.raises(UnsupportedStatisticError) as exc_info:
        run_query(query, _games(), stat_resolution=StatResolution.KILLS_ONLY)
    assert exc_info.value.statistic == "Towers"

    kills_only = _query([_named("A")], [StatisticEnum.KILLS])
    assert run_query(kills_only, _games(), stat_resolution=StatResolution.KILLS_ONLY) == {
        "kills": "10"
    }
