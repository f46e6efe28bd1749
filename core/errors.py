"""core/errors.py - 表达式求值的异常类型"""


class ExpressionError(ValueError):
    """所有求值错误的基类；token 为出错的符号（可能为 None）"""

    def __init__(self, message, token=None):
        super().__init__(message)
        self.message = message
        self.token = token


class InvalidToken(ExpressionError):
    def __init__(self, token):
        super().__init__(f"Invalid token: {token}", token)


class MismatchedParentheses(ExpressionError):
    def __init__(self, token=None):
        super().__init__("Mismatched parentheses", token)


class UnknownOperator(ExpressionError):
    def __init__(self, token):
        super().__init__(f"Unknown operator: {token}", token)


class InsufficientOperands(ExpressionError):
    def __init__(self, token):
        super().__init__(f"Invalid expression: insufficient operands for {token}", token)


class DivisionByZero(ExpressionError, ZeroDivisionError):
    def __init__(self, token="/"):
        super().__init__("Division by zero", token)


class MalformedExpression(ExpressionError):
    def __init__(self, stack_size):
        super().__init__(
            f"Invalid expression: {stack_size} values left on the stack, expected 1")
        self.stack_size = stack_size


class NumericOverflow(ExpressionError, OverflowError):
    def __init__(self, token):
        super().__init__(f"Numeric overflow in {token}", token)
