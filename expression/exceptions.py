"""expression/exceptions.py - 两类错误：语法错误与计算错误"""


class ExpressionError(Exception):
    """表达式引擎所有错误的基类"""


class InvalidSyntaxError(ExpressionError, ValueError):
    """输入或内部token流无法解释（词法、结构、操作数个数等）"""

    def __init__(self, message, position=None):
        super().__init__(message)
        self.position = position


class ComputationError(ExpressionError, ArithmeticError):
    """表达式本身合法，但数值求根的前置条件不满足"""
