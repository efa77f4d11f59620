"""RPN表达式求值器 - 调用统一的Operators类"""
import numpy as np
import pandas as pd
import logging

from expression.token_system import TokenType, OPERATOR_DEFINITIONS, VARIABLE_NAME
from expression.operators import Operators
from expression.exceptions import InvalidSyntaxError

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估后缀(RPN)表达式的值"""

    @staticmethod
    def _parse_literal(text, x):
        if text == VARIABLE_NAME:
            if x is None:
                raise InvalidSyntaxError("Unexpected error: Encountered token x (no value supplied for x)")
            return x
        try:
            return np.float64(float(text))
        except ValueError as e:
            # 词法阶段允许 1.2.3 这类数字，在这里才报错
            raise InvalidSyntaxError(f"Unexpected error: Encountered token {text}") from e

    @staticmethod
    def _calculate(operation, stack):
        spec = OPERATOR_DEFINITIONS.get(operation)
        if spec is None:
            raise InvalidSyntaxError(f"Unexpected token '{operation}'")
        if len(stack) < spec.arity:
            logger.debug(f"Insufficient operands for {spec.name}")
            raise InvalidSyntaxError("Not enough operands!")

        # 后弹出的是左操作数
        args = [stack.pop() for _ in range(spec.arity)][::-1]
        op_method = getattr(Operators, spec.method)
        return op_method(*args)

    @staticmethod
    def _finalize(result, x):
        """标量结果返回 float；向量输入时保持 ndarray/Series 形状"""
        if isinstance(x, pd.Series):
            if isinstance(result, pd.Series):
                return result.astype(float)
            return pd.Series(np.broadcast_to(result, x.shape).astype(float), index=x.index)
        if isinstance(x, np.ndarray):
            return np.broadcast_to(np.asarray(result, dtype=float), x.shape).copy()
        return float(result)

    @staticmethod
    def evaluate(postfix, x=None):
        """
        评估后缀表达式
        Args:
            postfix: 后缀 Token 序列（只读遍历，不消耗）
            x: 代入变量 x 的值；None 表示不代入，遇到 x 即报错。
               可以是标量、np.ndarray 或 pd.Series
        Returns:
            float，或与 x 同形状的 ndarray / Series
        """
        # 整数输入统一转为浮点，避免整数运算溢出回绕
        if isinstance(x, pd.Series):
            x = x.astype(float)
        elif isinstance(x, (list, tuple, np.ndarray)):
            x = np.asarray(x, dtype=float)
        elif x is not None:
            x = np.float64(x)

        stack = []
        with np.errstate(all='ignore'):
            for token in postfix:
                if token.type == TokenType.LITERAL:
                    stack.append(RPNEvaluator._parse_literal(token.text, x))
                elif token.type in (TokenType.OPERATOR, TokenType.FUNCTION):
                    stack.append(RPNEvaluator._calculate(token.text, stack))
                else:
                    raise InvalidSyntaxError(f"Unexpected error: Encountered token {token.text}")

            if len(stack) != 1:
                logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
                raise InvalidSyntaxError("Invalid number of literals")

            return RPNEvaluator._finalize(stack[0], x)
