from __future__ import annotations

from pathlib import Path


class MatchAnalyzerError(RuntimeError):
    """Base exception for failures that abort an analysis run."""


class MissingAttributeError(MatchAnalyzerError):
    """A row or team record lacks an attribute the computation requires."""

    def __init__(self, attribute: str, context: dict[str, object] | None = None) -> None:
        self.attribute = attribute
        self.context = context
        super().__init__(attribute)

    def __str__(self) -> str:
        message = f"Missing required attribute: {self.attribute!r}"
        if not self.context:
            return message
        return f"{message} | context={self.context}"


class UnrecognizedValueError(MatchAnalyzerError):
    """An attribute value does not map onto a known enum member."""

    kind = "value"

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(value)

    def __str__(self) -> str:
        return f"Unrecognized {self.kind}: {self.value!r}"


class UnrecognizedLeagueError(UnrecognizedValueError):
    kind = "league"


class UnrecognizedSideError(UnrecognizedValueError):
    kind = "side"


class InvalidIntegerOperandError(MatchAnalyzerError):
    """An integer-sum merge received an operand that is not an integer."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(value)

    def __str__(self) -> str:
        return f"Cannot sum non-integer value: {self.value!r}"


class UnsupportedStatisticError(MatchAnalyzerError):
    """The statistic resolver has no implementation for the requested statistic."""

    def __init__(self, statistic: str) -> None:
        self.statistic = statistic
        super().__init__(statistic)

    def __str__(self) -> str:
        return f"Unknown stat: {self.statistic}"


class InputLoadError(MatchAnalyzerError):
    """An input file could not be read or parsed."""

    what = "input"

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")

    def __str__(self) -> str:
        return f"{self.what.capitalize()} could not be loaded from {self.path}: {self.reason}"


class MatchDataLoadError(InputLoadError):
    what = "match data"


class QueryLoadError(InputLoadError):
    what = "query"
