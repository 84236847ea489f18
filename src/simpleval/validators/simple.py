"""宣言的ルールによるフィールドバリデーション。"""

import logging
from collections.abc import Mapping
from typing import Any

from simpleval.config import ValidatorConfig
from simpleval.models.errors import MissingMessageError, UnknownRuleError
from simpleval.models.rule import Failure, ParsedRule, ValidationRequest, failure_key
from simpleval.validators.parser import parse_rule_declaration
from simpleval.validators.predicates import is_empty
from simpleval.validators.rules import RULES

logger = logging.getLogger(__name__)


class SimpleValidator:
    """フィールドごとのルール宣言に基づいてデータを検証する。

    config を省略した場合は環境変数から ValidatorConfig を読み込むため、
    SIMPLEVAL_STRICT_RULES などが設定されていると fails() が例外を送出しうる。

    使用例::

        validator = SimpleValidator(
            data={"name": "ab", "role": "guest"},
            rules={"name": "required|min:3", "role": "inArr:roles"},
            messages={"name.min": "Name is too short", "role.inArr": "Unknown role"},
        )
        validator.add_auxiliary_data("roles", ["admin", "user"])
        validator.fails()
    """

    def __init__(
        self,
        data: Mapping[str, Any] | None = None,
        rules: Mapping[str, str | None] | None = None,
        messages: Mapping[str, str] | None = None,
        config: ValidatorConfig | None = None,
    ) -> None:
        self._request = ValidationRequest(
            data=dict(data or {}),
            rules=dict(rules or {}),
            messages=dict(messages or {}),
        )
        self._config = config if config is not None else ValidatorConfig()
        self._auxiliary: dict[str, Any] = {}

    @property
    def request(self) -> ValidationRequest:
        return self._request

    @property
    def auxiliary_data(self) -> Mapping[str, Any]:
        return self._auxiliary

    def add_auxiliary_data(self, key: str, value: Any) -> None:
        """inArr などのルールが参照する補助データを登録する。

        同じキーが登録済みの場合は上書きする。
        """
        logger.debug("Registering auxiliary data: %s", key)
        self._auxiliary[key] = value

    def apply_rules(self, field: str, value: Any, rules: list[ParsedRule]) -> list[str]:
        """解析済みルールを値に適用し、失敗したルールの失敗キーを返す。

        Args:
            field: フィールド名。
            value: 検証対象の値。
            rules: 宣言順の解析済みルール。

        Returns:
            ``<field>.<rule>`` 形式の失敗キーのリスト（ルール宣言順）。

        Raises:
            UnknownRuleError: strict_rules が有効で未対応のルールがある場合。
        """
        failed: list[str] = []
        for parsed in rules:
            rule = RULES.get(parsed.name)
            if rule is None:
                if self._config.strict_rules:
                    raise UnknownRuleError(field, parsed.name)
                logger.debug("Ignoring unknown rule '%s' on field %s", parsed.name, field)
                continue

            if rule.skip_empty and is_empty(value):
                continue

            if not rule.check(value, parsed.params, self._auxiliary):
                key = failure_key(field, parsed.name)
                logger.debug("Validation failed: %s", key)
                failed.append(key)

        return failed

    def fails_to_messages(self, fails: list[str] | None) -> list[str]:
        """失敗キーをメッセージ定義に従ってメッセージに変換する。

        メッセージが定義されていない失敗キーは結果に含めない。

        Raises:
            MissingMessageError: strict_messages が有効でメッセージ未定義の場合。
        """
        if not fails:
            return []

        catalog = self._request.messages
        messages: list[str] = []
        for key in fails:
            if key in catalog:
                messages.append(catalog[key])
            elif self._config.strict_messages:
                raise MissingMessageError(key)
            else:
                logger.debug("Dropping failure without message: %s", key)
        return messages

    def fails(self) -> list[Failure]:
        """コンストラクタで渡されたデータを検証する。

        Returns:
            検出された失敗のリスト。問題がない場合は空リスト。
        """
        results: list[Failure] = []
        rules = self._request.rules

        for field, value in self._request.data.items():
            declaration = rules.get(field)
            # ルール宣言のないフィールドは検証しない
            if not declaration:
                continue

            failed = self.apply_rules(field, value, parse_rule_declaration(declaration))
            results.extend(Failure(field=field, message=m) for m in self.fails_to_messages(failed))

        return results

    def passes(self) -> bool:
        """失敗が1件もなければ True を返す。"""
        return not self.fails()
