"""表达式模块 - Token系统、词法分析、调度场解析和RPN求值"""
from .token_system import (
    TokenType, Token, Associativity, OperatorSpec, OPERATOR_DEFINITIONS,
    UNARY_MINUS, VARIABLE_NAME, precedence_of, associativity_of
)
from .exceptions import ExpressionError, InvalidSyntaxError, ComputationError
from .operators import Operators
from .tokenizer import Tokenizer, tokenize
from .shunting_yard import ShuntingYardParser, to_postfix
from .rpn_evaluator import RPNEvaluator
from .math_expression import MathExpression

__all__ = [
    'TokenType', 'Token', 'Associativity', 'OperatorSpec', 'OPERATOR_DEFINITIONS',
    'UNARY_MINUS', 'VARIABLE_NAME', 'precedence_of', 'associativity_of',
    'ExpressionError', 'InvalidSyntaxError', 'ComputationError',
    'Operators', 'Tokenizer', 'tokenize', 'ShuntingYardParser', 'to_postfix',
    'RPNEvaluator', 'MathExpression'
]
