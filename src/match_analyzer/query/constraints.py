from __future__ import annotations

from collections.abc import Sequence

from match_analyzer.core.errors import MissingAttributeError
from match_analyzer.domain.records import TeamRecord
from match_analyzer.domain.values import bool_to_flag, parse_league, parse_side
from match_analyzer.query.models import (
    Constraint,
    GameResultConstraint,
    LeagueConstraint,
    SideConstraint,
    TeamConstraint,
)


def _team_attribute(team: TeamRecord, attribute: str) -> str:
    value = team.attributes.get(attribute)
    if value is None:
        raise MissingAttributeError(attribute, context={"team": team.name})
    return value


def fits_constraint(team: TeamRecord, constraint: Constraint) -> bool:
    if isinstance(constraint, TeamConstraint):
        return team.name == constraint.name
    if isinstance(constraint, GameResultConstraint):
        return _team_attribute(team, "result") == bool_to_flag(constraint.won)
    if isinstance(constraint, LeagueConstraint):
        return parse_league(_team_attribute(team, "league")) == constraint.league
    if isinstance(constraint, SideConstraint):
        return parse_side(_team_attribute(team, "side")) == constraint.side
    raise TypeError(f"Unsupported constraint type: {type(constraint).__name__}")


def matches(team: TeamRecord, constraints: Sequence[Constraint]) -> bool:
    """True when the team satisfies every constraint (empty list matches all)."""

    return all(fits_constraint(team, c) for c in constraints)
