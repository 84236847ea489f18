"""宣言的ルールによる軽量フィールドバリデーション。"""

from simpleval.config import ValidatorConfig
from simpleval.models.errors import MissingMessageError, SimpleValError, UnknownRuleError
from simpleval.models.rule import Failure, ParsedRule, ValidationRequest
from simpleval.validators.parser import parse_rule_declaration
from simpleval.validators.simple import SimpleValidator

__all__ = [
    "Failure",
    "MissingMessageError",
    "ParsedRule",
    "SimpleValError",
    "SimpleValidator",
    "UnknownRuleError",
    "ValidationRequest",
    "ValidatorConfig",
    "parse_rule_declaration",
]
