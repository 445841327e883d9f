from __future__ import annotations

from enum import Enum, StrEnum


class SideEnum(StrEnum):
    RED = "Red"
    BLUE = "Blue"


class LeagueEnum(StrEnum):
    LFL = "LFL"
    LCS = "LCS"
    LCK = "LCK"
    LPL = "LPL"
    LEC = "LEC"
    CK = "CK"
    VCS = "VCS"
    LJL = "LJL"


class StatisticEnum(StrEnum):
    KILLS = "Kills"
    DEATHS = "Deaths"
    GOLD_DIFF_10 = "GoldDiff10"
    GOLD_DIFF_15 = "GoldDiff15"
    BARONS = "Barons"
    FIRST_BARON = "FirstBaron"
    DRAGONS = "Dragons"
    FIRST_DRAGON = "FirstDragon"
    TOWERS = "Towers"
    FIRST_TOWER = "FirstTower"


class MergeStrategyEnum(str, Enum):
    OR = "OR"
    AND = "AND"
    INT_SUM = "INT_SUM"
    NO_OP = "NO_OP"


class StatResolution(StrEnum):
    COMPLETE = "complete"
    KILLS_ONLY = "kills_only"
