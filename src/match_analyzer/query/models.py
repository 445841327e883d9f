from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr

from match_analyzer.domain.enums import LeagueEnum, SideEnum, StatisticEnum


class _ConstraintModel(BaseModel):
    """
    Constraints are single-key objects tagged by variant name,
    e.g. {"Team": "T1"} or {"GameResult": true}.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")


class TeamConstraint(_ConstraintModel):
    name: StrictStr = Field(alias="Team")


class GameResultConstraint(_ConstraintModel):
    won: StrictBool = Field(alias="GameResult")


class SideConstraint(_ConstraintModel):
    side: SideEnum = Field(alias="Side")


class LeagueConstraint(_ConstraintModel):
    league: LeagueEnum = Field(alias="League")


Constraint = TeamConstraint | GameResultConstraint | SideConstraint | LeagueConstraint


class Query(BaseModel):
    # Unknown top-level keys are ignored.
    model_config = ConfigDict(frozen=True, extra="ignore")

    constraints: list[Constraint]
    stats: list[StatisticEnum]
