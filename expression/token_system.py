"""expression/token_system.py"""
from enum import Enum


class TokenType(Enum):
    LITERAL = "literal"  # 数字或变量 x
    OPERATOR = "operator"  # + - * / ^ unary_minus
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"
    FUNCTION = "function"  # sin, log ...
    COMMA = "comma"  # 多参数函数的参数分隔符


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


VARIABLE_NAME = 'x'
UNARY_MINUS = 'unary_minus'


class Token:
    """不可变的 (text, type) 对，由词法分析器创建后不再修改"""

    __slots__ = ('_text', '_type')

    def __init__(self, text, token_type):
        object.__setattr__(self, '_text', text)
        object.__setattr__(self, '_type', token_type)

    def __setattr__(self, name, value):
        raise AttributeError("Token is immutable")

    @property
    def text(self):
        return self._text

    @property
    def type(self):
        return self._type

    @property
    def is_variable(self):
        return self._type == TokenType.LITERAL and self._text == VARIABLE_NAME

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self._text == other._text and self._type == other._type

    def __hash__(self):
        return hash((self._text, self._type))

    def __repr__(self):
        return f"Token({self._text!r}, {self._type.name})"


class OperatorSpec:
    """操作符/函数的元数据：arity、优先级、结合性以及 Operators 中的实现方法名"""

    def __init__(self, name, method, arity, precedence=0, associativity=Associativity.LEFT):
        self.name = name
        self.method = method
        self.arity = arity
        self.precedence = precedence
        self.associativity = associativity


# 操作符与函数定义字典
OPERATOR_DEFINITIONS = {
    # 二元操作符
    '+': OperatorSpec('+', 'add', arity=2, precedence=1),
    '-': OperatorSpec('-', 'sub', arity=2, precedence=1),
    '*': OperatorSpec('*', 'mul', arity=2, precedence=2),
    '/': OperatorSpec('/', 'div', arity=2, precedence=2),
    '^': OperatorSpec('^', 'power', arity=2, precedence=3, associativity=Associativity.RIGHT),

    # 一元负号，优先级高于所有二元操作符（包括 ^）
    UNARY_MINUS: OperatorSpec(UNARY_MINUS, 'neg', arity=1, precedence=4,
                              associativity=Associativity.RIGHT),

    # 函数
    'ln': OperatorSpec('ln', 'ln', arity=1),
    'log': OperatorSpec('log', 'log', arity=2),  # log(value, base)
    'sin': OperatorSpec('sin', 'sin', arity=1),
    'cos': OperatorSpec('cos', 'cos', arity=1),
    'tan': OperatorSpec('tan', 'tan', arity=1),
    'exp': OperatorSpec('exp', 'exp', arity=1),
    'sec': OperatorSpec('sec', 'sec', arity=1),
    'cosec': OperatorSpec('cosec', 'cosec', arity=1),
    'cot': OperatorSpec('cot', 'cot', arity=1),
}


def precedence_of(op):
    """操作符优先级；未知文本返回0"""
    spec = OPERATOR_DEFINITIONS.get(op)
    return spec.precedence if spec else 0


def associativity_of(op):
    spec = OPERATOR_DEFINITIONS.get(op)
    return spec.associativity if spec else Associativity.LEFT
