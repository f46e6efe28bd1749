"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from core.errors import InsufficientOperands, InvalidToken, MalformedExpression
from core.operators import Operators
from core.token_system import TokenType

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估后缀表达式的值"""

    @staticmethod
    def evaluate(token_sequence):
        """
        Args:
            token_sequence: 后缀Token序列
        Returns:
            整数结果
        """
        stack = []

        for token in token_sequence:
            if token.type == TokenType.NUMBER:
                stack.append(token.value)

            elif token.type == TokenType.OPERATOR:
                if len(stack) < 2:
                    raise InsufficientOperands(token.text)
                # 先出栈的是右操作数
                b = stack.pop()
                a = stack.pop()
                stack.append(Operators.apply(token.text, a, b))

            else:
                # 括号不应出现在后缀序列中
                raise InvalidToken(token.text)

        if len(stack) != 1:
            raise MalformedExpression(len(stack))
        return stack[0]
