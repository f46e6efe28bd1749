"""核心模块 - Token系统、中缀转换、RPN评估器和操作符"""
from .token_system import TokenType, Token, tokenize, contains_logical_operators
from .converter import InfixConverter
from .rpn_evaluator import RPNEvaluator
from .operators import Operators, OPERATOR_METHODS
from .evaluator import ExpressionEvaluator, EvaluationResult, evaluate, evaluate_result
from .errors import (
    ExpressionError, InvalidToken, MismatchedParentheses, UnknownOperator,
    InsufficientOperands, DivisionByZero, MalformedExpression, NumericOverflow
)

__all__ = [
    'TokenType', 'Token', 'tokenize', 'contains_logical_operators',
    'InfixConverter', 'RPNEvaluator', 'Operators', 'OPERATOR_METHODS',
    'ExpressionEvaluator', 'EvaluationResult', 'evaluate', 'evaluate_result',
    'ExpressionError', 'InvalidToken', 'MismatchedParentheses', 'UnknownOperator',
    'InsufficientOperands', 'DivisionByZero', 'MalformedExpression', 'NumericOverflow'
]
