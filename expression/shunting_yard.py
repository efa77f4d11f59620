"""调度场算法 - 中缀Token序列转后缀(RPN)Token序列"""
import logging

from config.config import PARSER_CONFIG
from expression.token_system import TokenType, Associativity, precedence_of, associativity_of
from expression.exceptions import InvalidSyntaxError

logger = logging.getLogger(__name__)


class ShuntingYardParser:
    """中缀 -> 后缀

    respect_associativity=False 时（默认）弹栈条件统一为
    "栈顶优先级 >= 当前优先级"，因此 ^ 表现为左结合：2^3^2 = (2^3)^2。
    为 True 时右结合操作符（^、一元负号）仅在栈顶优先级严格更高时弹出。
    """

    def __init__(self, respect_associativity=None):
        if respect_associativity is None:
            respect_associativity = PARSER_CONFIG['respect_associativity']
        self.respect_associativity = respect_associativity

    def _should_pop(self, top, incoming):
        if top.type != TokenType.OPERATOR:
            return False
        top_precedence = precedence_of(top.text)
        incoming_precedence = precedence_of(incoming.text)
        if not self.respect_associativity:
            return top_precedence >= incoming_precedence
        if associativity_of(incoming.text) == Associativity.RIGHT:
            return top_precedence > incoming_precedence
        return top_precedence >= incoming_precedence

    def to_postfix(self, tokens):
        """
        Args:
            tokens: 中缀顺序的 Token 序列
        Returns:
            后缀顺序的 Token 元组
        """
        output = []
        operator_stack = []

        for token in tokens:
            if token.type == TokenType.LITERAL:
                output.append(token)

            elif token.type == TokenType.OPERATOR:
                while operator_stack and self._should_pop(operator_stack[-1], token):
                    output.append(operator_stack.pop())
                operator_stack.append(token)

            elif token.type in (TokenType.LEFT_PAREN, TokenType.FUNCTION):
                operator_stack.append(token)

            elif token.type == TokenType.RIGHT_PAREN:
                while operator_stack and operator_stack[-1].type != TokenType.LEFT_PAREN:
                    output.append(operator_stack.pop())
                if not operator_stack:
                    raise InvalidSyntaxError("Mismatched parentheses!")
                operator_stack.pop()

                # 函数放在其参数之后
                if operator_stack and operator_stack[-1].type == TokenType.FUNCTION:
                    output.append(operator_stack.pop())

            elif token.type == TokenType.COMMA:
                while operator_stack and operator_stack[-1].type != TokenType.LEFT_PAREN:
                    output.append(operator_stack.pop())
                if not operator_stack:
                    raise InvalidSyntaxError("Syntax error! Mismatched parentheses/misplaced comma")

        while operator_stack:
            token = operator_stack.pop()
            if token.type == TokenType.LEFT_PAREN:
                raise InvalidSyntaxError("Mismatched parentheses!")
            output.append(token)

        return tuple(output)


def to_postfix(tokens, **kwargs):
    return ShuntingYardParser(**kwargs).to_postfix(tokens)
