"""core/token_system.py"""
import logging
import string
from enum import Enum

from config.config import TOKENIZER_CONFIG, LOGICAL_OPERATORS

logger = logging.getLogger(__name__)

DIGITS = frozenset(string.digits)


class TokenType(Enum):
    NUMBER = "number"  # 整数字面量
    OPERATOR = "operator"  # 操作符（包括未知符号）
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"


class Token:
    """不可变的词法单元"""
    __slots__ = ("type", "text")

    def __init__(self, token_type, text):
        object.__setattr__(self, "type", token_type)
        object.__setattr__(self, "text", text)

    def __setattr__(self, name, value):
        raise AttributeError("Token is immutable")

    @property
    def value(self):
        """数字的整数值；非数字返回None"""
        if self.type == TokenType.NUMBER:
            return int(self.text)
        return None

    @property
    def is_logical(self):
        return self.type == TokenType.OPERATOR and self.text in LOGICAL_OPERATORS

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.text == other.text

    def __hash__(self):
        return hash((self.type, self.text))

    def __repr__(self):
        return f"Token({self.type.name}, {self.text!r})"

    def __str__(self):
        return self.text


def make_token(text):
    """根据文本构造Token"""
    if text[0] in DIGITS:
        return Token(TokenType.NUMBER, text)
    if text == "(":
        return Token(TokenType.LEFT_PAREN, text)
    if text == ")":
        return Token(TokenType.RIGHT_PAREN, text)
    return Token(TokenType.OPERATOR, text)


def tokenize(expression, merge_pairs=None):
    """
    把表达式切分为Token序列
    Args:
        expression: 单行中缀表达式
        merge_pairs: 需要合并为一个Token的双字符操作符，默认 && || == !=
    Returns:
        Token列表
    """
    if merge_pairs is None:
        merge_pairs = TOKENIZER_CONFIG["merge_pairs"]

    tokens = []
    i = 0
    n = len(expression)
    while i < n:
        ch = expression[i]
        if ch.isspace():
            i += 1
            continue

        if ch in DIGITS:
            j = i + 1
            while j < n and expression[j] in DIGITS:
                j += 1
            tokens.append(Token(TokenType.NUMBER, expression[i:j]))
            i = j
            continue

        # 只向后看一个字符
        pair = expression[i:i + 2]
        if len(pair) == 2 and pair in merge_pairs:
            tokens.append(make_token(pair))
            i += 2
        else:
            tokens.append(make_token(ch))
            i += 1

    logger.debug(f"Tokens: {' '.join(t.text for t in tokens)}")
    return tokens


def contains_logical_operators(tokens):
    """序列中是否出现比较或逻辑操作符"""
    return any(token.is_logical for token in tokens)
