"""ルール宣言文字列のパーサー。"""

from simpleval.models.rule import ParsedRule

RULE_SEPARATOR = "|"
PARAM_PREFIX = ":"
PARAM_SEPARATOR = ","


def parse_rule_declaration(declaration: str | None) -> list[ParsedRule]:
    """``"required|min:3|btw:2,8"`` 形式のルール宣言を分解する。

    Args:
        declaration: パイプ区切りのルール宣言。空文字列や None も可。

    Returns:
        宣言順の ParsedRule のリスト。宣言が空の場合は空リスト。
        パラメータを持たないルールの params は ``[""]`` になる。
    """
    if not declaration:
        return []

    parsed: list[ParsedRule] = []
    for segment in declaration.split(RULE_SEPARATOR):
        name, _, raw_params = segment.partition(PARAM_PREFIX)
        parsed.append(ParsedRule(name=name, params=raw_params.split(PARAM_SEPARATOR)))
    return parsed
