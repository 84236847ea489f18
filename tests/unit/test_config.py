"""ValidatorConfigのユニットテスト。"""

import pytest

from simpleval.config import ValidatorConfig


class TestValidatorConfig:
    def test_defaults_are_lenient(self) -> None:
        config = ValidatorConfig()
        assert config.strict_rules is False
        assert config.strict_messages is False

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SIMPLEVAL_STRICT_RULES", "true")
        monkeypatch.setenv("SIMPLEVAL_STRICT_MESSAGES", "1")
        config = ValidatorConfig()
        assert config.strict_rules is True
        assert config.strict_messages is True

    def test_explicit_values(self) -> None:
        config = ValidatorConfig(strict_rules=True)
        assert config.strict_rules is True
        assert config.strict_messages is False
