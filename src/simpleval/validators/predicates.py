"""ルールから利用されるプリミティブな判定関数。"""

import re
from collections.abc import Iterable, Mapping, Sized
from typing import Any

from pydantic import validate_email
from pydantic_core import PydanticCustomError

# 先頭の整数部分のみを読む（"3.0" や "3px" は 3）
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def value_length(value: Any) -> int:
    """値の長さを返す。

    None は 0、文字列やコレクションは len()、それ以外のプリミティブは
    str() 化した表現の長さとする。
    """
    if value is None:
        return 0
    if isinstance(value, Sized):
        return len(value)
    return len(str(value))


def is_empty(value: Any) -> bool:
    """値が None または長さ0であれば True を返す。"""
    return value_length(value) == 0


def to_int(param: str) -> int | None:
    """ルールパラメータ先頭の整数部分を返す。整数で始まらない場合は None。"""
    match = _LEADING_INT.match(param)
    if match is None:
        return None
    return int(match.group(1))


def is_length_between(value: Any, low: int, high: int) -> bool:
    """値の長さが [low, high] の範囲内であれば True を返す。"""
    return low <= value_length(value) <= high


def is_email(value: Any) -> bool:
    """値がメールアドレスの形式であれば True を返す。

    ``Name <addr>`` 形式の表示名付きアドレスは受け付けない。
    """
    text = str(value)
    if "<" in text or ">" in text:
        return False
    try:
        validate_email(text)
    except PydanticCustomError:
        return False
    return True


def is_in(value: Any, options: Any) -> bool:
    """値が options に含まれていれば True を返す。

    options がマッピングの場合はキー、文字列の場合は部分文字列として判定する。
    それ以外のイテラブルは要素を文字列化して比較する。
    """
    text = str(value)
    if isinstance(options, (Mapping, str)):
        return text in options
    if isinstance(options, Iterable):
        return any(text == str(option) for option in options)
    return False
