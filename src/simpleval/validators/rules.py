"""対応ルールのディスパッチテーブル。

ルールを追加する場合は RULES にエントリを1つ追加するだけでよい。
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from simpleval.validators.predicates import (
    is_email,
    is_empty,
    is_in,
    is_length_between,
    to_int,
    value_length,
)

# (値, 未変換パラメータ, 補助データ) -> 合格なら True
RuleCheck = Callable[[Any, list[str], Mapping[str, Any]], bool]


@dataclass(frozen=True)
class Rule:
    """ディスパッチテーブルの1エントリ。"""

    name: str
    check: RuleCheck
    # True の場合、空の値に対しては判定せず合格とする
    skip_empty: bool = False


def _param(params: list[str], index: int) -> str:
    return params[index] if index < len(params) else ""


def _check_required(value: Any, params: list[str], auxiliary: Mapping[str, Any]) -> bool:
    return not is_empty(value)


def _check_min(value: Any, params: list[str], auxiliary: Mapping[str, Any]) -> bool:
    length = to_int(_param(params, 0))
    if length is None:
        return False
    return value_length(value) >= length


def _check_max(value: Any, params: list[str], auxiliary: Mapping[str, Any]) -> bool:
    length = to_int(_param(params, 0))
    if length is None:
        return False
    return value_length(value) <= length


def _check_btw(value: Any, params: list[str], auxiliary: Mapping[str, Any]) -> bool:
    low = to_int(_param(params, 0))
    high = to_int(_param(params, 1))
    if low is None or high is None:
        return False
    return is_length_between(value, low, high)


def _check_email(value: Any, params: list[str], auxiliary: Mapping[str, Any]) -> bool:
    return is_email(value)


def _check_in_arr(value: Any, params: list[str], auxiliary: Mapping[str, Any]) -> bool:
    key = _param(params, 0)
    # 未登録の補助データに対する判定は不合格とする
    if key not in auxiliary:
        return False
    return is_in(value, auxiliary[key])


RULES: dict[str, Rule] = {
    rule.name: rule
    for rule in (
        Rule("required", _check_required),
        Rule("min", _check_min),
        Rule("max", _check_max),
        Rule("btw", _check_btw),
        Rule("email", _check_email, skip_empty=True),
        Rule("inArr", _check_in_arr, skip_empty=True),
    )
}
