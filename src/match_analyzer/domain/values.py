from __future__ import annotations

from match_analyzer.core.errors import UnrecognizedLeagueError, UnrecognizedSideError
from match_analyzer.domain.enums import LeagueEnum, SideEnum

TRUE_FLAG = "1"
FALSE_FLAG = "0"


def bool_to_flag(value: bool) -> str:
    """Encode a boolean the way the match export does ("1"/"0")."""

    return TRUE_FLAG if value else FALSE_FLAG


def parse_league(value: str) -> LeagueEnum:
    try:
        return LeagueEnum(value)
    except ValueError:
        raise UnrecognizedLeagueError(value) from None


def parse_side(value: str) -> SideEnum:
    try:
        return SideEnum(value)
    except ValueError:
        raise UnrecognizedSideError(value) from None
