"""simpleval の設定管理。"""

from pydantic_settings import BaseSettings


class ValidatorConfig(BaseSettings):
    """バリデータ設定。環境変数から読み込み可能。

    既定値ではルール名の誤りやメッセージ未定義を黙って無視する。
    """

    model_config = {"env_prefix": "SIMPLEVAL_"}

    # 未知のルール名を UnknownRuleError として扱う
    strict_rules: bool = False

    # メッセージ未定義の失敗キーを MissingMessageError として扱う
    strict_messages: bool = False
