from __future__ import annotations

import re
from collections.abc import Callable

from match_analyzer.core.errors import InvalidIntegerOperandError
from match_analyzer.domain.enums import MergeStrategyEnum
from match_analyzer.domain.values import FALSE_FLAG, TRUE_FLAG

MergeFn = Callable[[str, str], str]

_INT_RE = re.compile(r"[+-]?[0-9]+")

MERGE_STRATEGY_BY_ATTRIBUTE: dict[str, MergeStrategyEnum] = {
    "firstbaron": MergeStrategyEnum.OR,
    "firstblood": MergeStrategyEnum.OR,
    "firsttower": MergeStrategyEnum.OR,
    "kills": MergeStrategyEnum.INT_SUM,
    "towers": MergeStrategyEnum.INT_SUM,
    "barons": MergeStrategyEnum.INT_SUM,
    "deaths": MergeStrategyEnum.INT_SUM,
    "dragons": MergeStrategyEnum.INT_SUM,
    "golddiffat10": MergeStrategyEnum.INT_SUM,
    "golddiffat15": MergeStrategyEnum.INT_SUM,
}


def merge_type_of(attribute: str) -> MergeStrategyEnum:
    """Merge strategy for an attribute; unknown attributes are not combined."""

    return MERGE_STRATEGY_BY_ATTRIBUTE.get(attribute, MergeStrategyEnum.NO_OP)


def or_merge(a: str, b: str) -> str:
    if a == TRUE_FLAG or b == TRUE_FLAG:
        return TRUE_FLAG
    return FALSE_FLAG


def and_merge(a: str, b: str) -> str:
    if a == TRUE_FLAG and b == TRUE_FLAG:
        return TRUE_FLAG
    return FALSE_FLAG


def _parse_int(value: str) -> int:
    # Optional sign, then ASCII digits only.
    if _INT_RE.fullmatch(value) is None:
        raise InvalidIntegerOperandError(value)
    return int(value)


def int_sum_merge(a: str, b: str) -> str:
    return str(_parse_int(a) + _parse_int(b))


def no_op_merge(a: str, b: str) -> str:
    return a


_MERGE_FNS: dict[MergeStrategyEnum, MergeFn] = {
    MergeStrategyEnum.OR: or_merge,
    MergeStrategyEnum.AND: and_merge,
    MergeStrategyEnum.INT_SUM: int_sum_merge,
    MergeStrategyEnum.NO_OP: no_op_merge,
}


def apply_merge(strategy: MergeStrategyEnum, a: str, b: str) -> str:
    return _MERGE_FNS[strategy](a, b)


def merge_attribute(attribute: str, a: str, b: str) -> str:
    return apply_merge(merge_type_of(attribute), a, b)
