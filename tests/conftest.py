"""テスト共通フィクスチャ。"""

from collections.abc import Callable
from typing import Any

import pytest

from simpleval.config import ValidatorConfig
from simpleval.validators.simple import SimpleValidator


@pytest.fixture(autouse=True)
def _clear_simpleval_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """環境変数由来の設定がテストに影響しないようにする。"""
    monkeypatch.delenv("SIMPLEVAL_STRICT_RULES", raising=False)
    monkeypatch.delenv("SIMPLEVAL_STRICT_MESSAGES", raising=False)


@pytest.fixture
def config() -> ValidatorConfig:
    """既定（寛容モード）の設定。"""
    return ValidatorConfig()


@pytest.fixture
def strict_config() -> ValidatorConfig:
    """未知ルール・メッセージ未定義をエラーにする設定。"""
    return ValidatorConfig(strict_rules=True, strict_messages=True)


@pytest.fixture
def signup_messages() -> dict[str, str]:
    """会員登録フォーム用のメッセージ定義。"""
    return {
        "username.required": "Username is required",
        "username.min": "Username must be at least 3 characters",
        "username.max": "Username must be at most 20 characters",
        "email.required": "Email is required",
        "email.email": "Email is not valid",
        "role.inArr": "Role is not allowed",
        "pin.btw": "PIN must be 4 to 6 digits",
    }


@pytest.fixture
def signup_rules() -> dict[str, str]:
    """会員登録フォーム用のルール宣言。"""
    return {
        "username": "required|min:3|max:20",
        "email": "required|email",
        "role": "inArr:roles",
        "pin": "btw:4,6",
    }


@pytest.fixture
def make_validator(
    signup_rules: dict[str, str], signup_messages: dict[str, str], config: ValidatorConfig
) -> Callable[..., SimpleValidator]:
    """会員登録フォーム用のバリデータを生成するファクトリ。"""

    def _make(data: dict[str, Any], roles: list[str] | None = None) -> SimpleValidator:
        validator = SimpleValidator(data, signup_rules, signup_messages, config=config)
        if roles is not None:
            validator.add_auxiliary_data("roles", roles)
        return validator

    return _make
