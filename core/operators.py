"""core/operators.py"""
import logging

import numpy as np

from core.errors import DivisionByZero, NumericOverflow, UnknownOperator

logger = logging.getLogger(__name__)


def _truncate_divide(a, b):
    """向零取整的整数除法"""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


class Operators:
    """所有二元操作符的静态方法集合，结果均为整数"""

    # 算术操作符====================
    @staticmethod
    def add(a, b):
        return a + b

    @staticmethod
    def sub(a, b):
        return a - b

    @staticmethod
    def mul(a, b):
        return a * b

    @staticmethod
    def div(a, b):
        """整数除法，结果向零截断"""
        if b == 0:
            raise DivisionByZero("/")
        return _truncate_divide(a, b)

    @staticmethod
    def mod(a, b):
        """截断取余：余数符号与左操作数相同"""
        if b == 0:
            raise DivisionByZero("%")
        return a - b * _truncate_divide(a, b)

    @staticmethod
    def pow(a, b):
        """
        浮点乘方后向零截断为整数
        2^-1 -> 0.5 -> 0；0^-1 视为除零
        底数为 0、1、-1 或指数为 0 时结果与指数大小无关，不经过 double
        """
        if b == 0:
            return 1
        if a == 1:
            return 1
        if a == -1:
            return 1 if b % 2 == 0 else -1
        if a == 0:
            if b < 0:
                raise DivisionByZero("^")
            return 0

        try:
            with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
                result = np.power(np.float64(a), np.float64(b))
        except OverflowError:
            # 操作数本身超出 double 范围
            raise NumericOverflow("^") from None

        if not np.isfinite(result):
            raise NumericOverflow("^")
        return int(result)

    # 比较操作符====================
    @staticmethod
    def greater(a, b):
        return int(a > b)

    @staticmethod
    def greater_equal(a, b):
        return int(a >= b)

    @staticmethod
    def less(a, b):
        return int(a < b)

    @staticmethod
    def less_equal(a, b):
        return int(a <= b)

    @staticmethod
    def equal(a, b):
        return int(a == b)

    @staticmethod
    def not_equal(a, b):
        return int(a != b)

    # 逻辑操作符====================
    @staticmethod
    def logical_and(a, b):
        return int(bool(a) and bool(b))

    @staticmethod
    def logical_or(a, b):
        return int(bool(a) or bool(b))

    @staticmethod
    def apply(op, a, b):
        """按符号调用对应的操作符"""
        method_name = OPERATOR_METHODS.get(op)
        if method_name is None:
            raise UnknownOperator(op)
        result = getattr(Operators, method_name)(a, b)
        logger.debug(f"{a} {op} {b} = {result}")
        return result


# 符号 -> Operators 方法名
OPERATOR_METHODS = {
    "+": "add",
    "-": "sub",
    "*": "mul",
    "/": "div",
    "%": "mod",
    "^": "pow",
    ">": "greater",
    ">=": "greater_equal",
    "<": "less",
    "<=": "less_equal",
    "==": "equal",
    "!=": "not_equal",
    "&&": "logical_and",
    "||": "logical_or",
}
