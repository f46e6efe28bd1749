"""core/evaluator.py - 分词 -> 中缀转后缀 -> 后缀求值 -> 格式化"""
import logging
from types import MappingProxyType
from typing import List

from config.config import PRECEDENCE_TABLE, TOKENIZER_CONFIG
from core.converter import InfixConverter
from core.rpn_evaluator import RPNEvaluator
from core.token_system import Token, tokenize, contains_logical_operators

logger = logging.getLogger(__name__)


class EvaluationResult:
    """整数结果；is_boolean 为真时按 true/false 输出"""
    __slots__ = ("value", "is_boolean")

    def __init__(self, value: int, is_boolean: bool = False):
        self.value = value
        self.is_boolean = is_boolean

    def render(self) -> str:
        if self.is_boolean:
            return "true" if self.value else "false"
        return str(self.value)

    def __eq__(self, other):
        if not isinstance(other, EvaluationResult):
            return NotImplemented
        return self.value == other.value and self.is_boolean == other.is_boolean

    def __repr__(self):
        return f"EvaluationResult(value={self.value}, is_boolean={self.is_boolean})"

    def __str__(self):
        return self.render()


class ExpressionEvaluator:
    """
    表达式求值器。构造时绑定优先级表和分词合并规则，之后只读；
    每次调用都使用独立的栈，可在多线程中共享同一实例。
    """

    def __init__(self, precedence=None, merge_pairs=None):
        self.precedence = (PRECEDENCE_TABLE if precedence is None
                           else MappingProxyType(dict(precedence)))
        self.merge_pairs = (TOKENIZER_CONFIG["merge_pairs"] if merge_pairs is None
                            else frozenset(merge_pairs))

    @classmethod
    def extended(cls):
        """同时合并 >= 和 <= 的求值器（偏离原始分词行为）"""
        return cls(merge_pairs=TOKENIZER_CONFIG["extended_merge_pairs"])

    def tokenize(self, expression: str) -> List[Token]:
        return tokenize(expression, self.merge_pairs)

    def to_postfix(self, tokens: List[Token]) -> List[Token]:
        return InfixConverter.to_postfix(tokens, self.precedence)

    def evaluate_postfix(self, postfix: List[Token]) -> int:
        return RPNEvaluator.evaluate(postfix)

    def evaluate_result(self, expression: str) -> EvaluationResult:
        tokens = self.tokenize(expression)
        postfix = self.to_postfix(tokens)
        value = self.evaluate_postfix(postfix)
        # 布尔判断看原始Token序列，而不是后缀序列
        result = EvaluationResult(value, contains_logical_operators(tokens))
        logger.debug(f"{expression!r} -> {result!r}")
        return result

    def eval(self, expression: str) -> str:
        return self.evaluate_result(expression).render()


_default_evaluator = ExpressionEvaluator()


def evaluate_result(expression: str) -> EvaluationResult:
    return _default_evaluator.evaluate_result(expression)


def evaluate(expression: str) -> str:
    """求值单个表达式，返回 "true"/"false" 或十进制整数文本"""
    return _default_evaluator.eval(expression)
