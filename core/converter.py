"""core/converter.py - 中缀转后缀（调度场算法）"""
import logging

from config.config import PRECEDENCE_TABLE
from core.errors import InvalidToken, MismatchedParentheses
from core.token_system import TokenType

logger = logging.getLogger(__name__)


class InfixConverter:
    """把中缀Token序列转换为后缀（逆波兰）序列"""

    @staticmethod
    def to_postfix(tokens, precedence=PRECEDENCE_TABLE):
        """
        Args:
            tokens: tokenize 产生的Token序列
            precedence: 只读的优先级表
        Returns:
            后缀Token列表
        """
        output = []
        op_stack = []

        for token in tokens:
            if token.type == TokenType.NUMBER:
                output.append(token)

            elif token.type == TokenType.OPERATOR and token.text in precedence:
                rank = precedence[token.text]
                # 同级也出栈：所有操作符左结合，^ 也不例外
                while (op_stack and op_stack[-1].type != TokenType.LEFT_PAREN
                       and precedence[op_stack[-1].text] >= rank):
                    output.append(op_stack.pop())
                op_stack.append(token)

            elif token.type == TokenType.LEFT_PAREN:
                op_stack.append(token)

            elif token.type == TokenType.RIGHT_PAREN:
                while op_stack and op_stack[-1].type != TokenType.LEFT_PAREN:
                    output.append(op_stack.pop())
                if not op_stack:
                    raise MismatchedParentheses(token.text)
                op_stack.pop()

            else:
                raise InvalidToken(token.text)

        while op_stack:
            top = op_stack.pop()
            if top.type == TokenType.LEFT_PAREN:
                raise MismatchedParentheses(top.text)
            output.append(top)

        logger.debug(f"Postfix: {' '.join(t.text for t in output)}")
        return output
