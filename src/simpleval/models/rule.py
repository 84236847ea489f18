"""ルール宣言とバリデーション結果のデータモデル。"""

from typing import Any

from pydantic import BaseModel, Field


class ValidationRequest(BaseModel):
    """バリデーション対象データ・ルール宣言・メッセージ定義の組。

    messages の値は表示用の文字列に限る。文字列以外を渡すと ValidationError になる。
    """

    data: dict[str, Any] = Field(default_factory=dict)
    rules: dict[str, str | None] = Field(default_factory=dict)
    messages: dict[str, str] = Field(default_factory=dict)


class ParsedRule(BaseModel):
    """ルール宣言の1セグメントを解析した結果。

    params は未変換の文字列のまま保持する。型変換は各ルール側で行う。
    """

    name: str
    params: list[str] = Field(default_factory=list)


class Failure(BaseModel):
    """フィールド単位のバリデーション失敗。"""

    field: str
    message: str


def failure_key(field: str, rule_name: str) -> str:
    """メッセージ定義の検索に使う失敗キー（``<field>.<rule>``）を返す。"""
    return f"{field}.{rule_name}"
