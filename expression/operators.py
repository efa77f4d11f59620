"""expression/operators.py"""
import numpy as np
import pandas as pd


class Operators:
    """所有操作符/函数的静态方法集合

    不做定义域检查：除零、非正数取对数、tan 的极点等都按 IEEE 浮点语义
    得到 inf/nan，调用方需在 np.errstate(all='ignore') 中调用。
    操作数可以是标量、np.ndarray 或 pd.Series。
    """

    @staticmethod
    def _as_float(operand):
        if isinstance(operand, (pd.Series, np.ndarray)):
            return operand
        return np.float64(operand)

    # 二元操作符========================================
    @staticmethod
    def add(operand1, operand2):
        return np.add(Operators._as_float(operand1), operand2)

    @staticmethod
    def sub(operand1, operand2):
        return np.subtract(Operators._as_float(operand1), operand2)

    @staticmethod
    def mul(operand1, operand2):
        return np.multiply(Operators._as_float(operand1), operand2)

    @staticmethod
    def div(operand1, operand2):
        """除法：x/0 得到 ±inf，0/0 得到 nan"""
        return np.true_divide(Operators._as_float(operand1), operand2)

    @staticmethod
    def power(operand1, operand2):
        return np.power(Operators._as_float(operand1), operand2)

    @staticmethod
    def log(value, base):
        """以 base 为底的对数：log(value, base)"""
        return np.divide(np.log(Operators._as_float(value)), np.log(Operators._as_float(base)))

    # 一元操作符====================
    @staticmethod
    def neg(operand):
        return np.negative(Operators._as_float(operand))

    @staticmethod
    def ln(operand):
        return np.log(Operators._as_float(operand))

    @staticmethod
    def sin(operand):
        return np.sin(Operators._as_float(operand))

    @staticmethod
    def cos(operand):
        return np.cos(Operators._as_float(operand))

    @staticmethod
    def tan(operand):
        return np.tan(Operators._as_float(operand))

    @staticmethod
    def exp(operand):
        return np.exp(Operators._as_float(operand))

    # 倒数三角函数
    @staticmethod
    def sec(operand):
        return np.divide(1.0, np.cos(Operators._as_float(operand)))

    @staticmethod
    def cosec(operand):
        return np.divide(1.0, np.sin(Operators._as_float(operand)))

    @staticmethod
    def cot(operand):
        return np.divide(1.0, np.tan(Operators._as_float(operand)))
