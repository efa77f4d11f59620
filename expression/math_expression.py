"""MathExpression - 解析一次、可重复求值的单变量表达式"""
import logging

from expression.tokenizer import Tokenizer
from expression.shunting_yard import ShuntingYardParser
from expression.rpn_evaluator import RPNEvaluator

logger = logging.getLogger(__name__)


class MathExpression:
    """
    由中缀字符串构造，保存后缀 Token 序列以及是否含变量 x。
    构造后只读：后缀序列为 tuple，求值只遍历不修改，
    因此同一实例可被多次（包括多线程）求值。
    """

    __slots__ = ('_infix', '_tokens', '_postfix', '_is_function')

    def __init__(self, infix_expression, conflict_policy=None,
                 reject_unknown_characters=None, respect_associativity=None):
        tokenizer = Tokenizer(conflict_policy=conflict_policy,
                              reject_unknown_characters=reject_unknown_characters)
        parser = ShuntingYardParser(respect_associativity=respect_associativity)

        self._infix = infix_expression
        self._tokens = tokenizer.tokenize(infix_expression)
        self._postfix = parser.to_postfix(self._tokens)
        self._is_function = any(token.is_variable for token in self._tokens)

        logger.debug(f"Parsed '{infix_expression}' -> {self.to_postfix_string()}")

    @property
    def infix(self):
        return self._infix

    @property
    def tokens(self):
        return self._tokens

    @property
    def postfix(self):
        return self._postfix

    @property
    def is_function_of_x(self):
        return self._is_function

    def evaluate(self, x=None):
        """不传 x 时不做代入（含 x 的表达式会抛出 InvalidSyntaxError）"""
        return RPNEvaluator.evaluate(self._postfix, x)

    def __call__(self, x=None):
        return self.evaluate(x)

    def root(self, a, b, **kwargs):
        """在 [a, b] 上求根，参数见 solver.root_finder.find_root"""
        from solver.root_finder import find_root
        return find_root(self, a, b, **kwargs)

    def to_postfix_string(self):
        return ' '.join(token.text for token in self._postfix)

    def __str__(self):
        return self.to_postfix_string()

    def __repr__(self):
        return f"MathExpression({self._infix!r})"
