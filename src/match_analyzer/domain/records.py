from __future__ import annotations

from dataclasses import dataclass, field

PlayerRow = dict[str, str]
GameId = str


@dataclass
class TeamRecord:
    """
    Consolidated attributes of one team in one game.
    Built from that team's first player row; later rows are folded in.
    """
    name: str
    attributes: dict[str, str] = field(default_factory=dict)


@dataclass
class GameRecord:
    team_a: TeamRecord
    team_b: TeamRecord | None = None

    @property
    def is_complete(self) -> bool:
        return self.team_b is not None


GameTable = dict[GameId, GameRecord]
