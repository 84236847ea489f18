"""simpleval のカスタム例外クラス。"""


class SimpleValError(Exception):
    """simpleval の基底例外クラス。"""


class UnknownRuleError(SimpleValError):
    """ルール宣言に未対応のルール名が含まれている場合の例外。

    strict_rules が有効な場合のみ送出される。
    """

    def __init__(self, field: str, rule_name: str) -> None:
        super().__init__(f"Unknown rule '{rule_name}' declared for field: {field}")
        self.field = field
        self.rule_name = rule_name


class MissingMessageError(SimpleValError):
    """失敗キーに対応するメッセージが定義されていない場合の例外。

    strict_messages が有効な場合のみ送出される。
    """

    def __init__(self, failure_key: str) -> None:
        super().__init__(f"No message defined for failure: {failure_key}")
        self.failure_key = failure_key
