"""词法分析器 - 正则识别器 + 按起始位置合并"""
import re
import logging

from config.config import TOKENIZER_CONFIG, CONFLICT_POLICIES
from expression.token_system import Token, TokenType, UNARY_MINUS
from expression.exceptions import InvalidSyntaxError

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r'\s')

# 数字允许多个小数点段（如 1.2.3），数值合法性留到求值时检查
_NUMBER = r'\d+(?:\.\d+)*'
# 变量 x 不能与其他单词字符相邻（exp 中的 x 不是变量）
_VARIABLE = r'(?<!\w)x(?!\w)'

# 识别器，按优先级排列（priority 策略下靠前者胜出）
RECOGNIZERS = (
    ('literal', re.compile(f'{_NUMBER}|{_VARIABLE}'), TokenType.LITERAL),
    # 二元操作符：只在 ')'、数字或 x 之后
    ('operator', re.compile(r'(?:(?<=[)\d])|(?<=(?<!\w)x))[-+*/^]'), TokenType.OPERATOR),
    # 一元负号：表达式开头，或在 ( + - * / ^ , 之后且后面跟数字、x、函数名或 (
    ('unary_minus', re.compile(r'^-|(?<=[(+\-*/^,])-(?=\d|x(?!\w)|[A-Za-z]+\(|\()'), TokenType.OPERATOR),
    ('left_paren', re.compile(r'\('), TokenType.LEFT_PAREN),
    ('right_paren', re.compile(r'\)'), TokenType.RIGHT_PAREN),
    # 函数名：紧跟 '('，位于开头或 操作符 / ( / , 之后
    ('function', re.compile(r'(?:^|(?<=[-+*/^(,]))[A-Za-z]+(?=\()'), TokenType.FUNCTION),
    ('comma', re.compile(r','), TokenType.COMMA),
)


class Tokenizer:
    """把中缀表达式字符串转换为有序的 Token 序列

    每个识别器独立地在去空白后的字符串上匹配，产生 (起始位置 -> Token)；
    之后按起始位置升序合并。两个识别器声明同一起始位置时：
    - strict: 抛出 InvalidSyntaxError（原有行为）
    - priority: 保留 RECOGNIZERS 中靠前的识别器的结果
    """

    def __init__(self, conflict_policy=None, reject_unknown_characters=None):
        self.conflict_policy = conflict_policy or TOKENIZER_CONFIG['conflict_policy']
        if self.conflict_policy not in CONFLICT_POLICIES:
            raise ValueError(f"Unknown conflict policy: {self.conflict_policy}")
        if reject_unknown_characters is None:
            reject_unknown_characters = TOKENIZER_CONFIG['reject_unknown_characters']
        self.reject_unknown_characters = reject_unknown_characters

    @staticmethod
    def strip_whitespace(expression):
        return _WHITESPACE.sub('', expression or '')

    def tokenize(self, expression):
        """
        Args:
            expression: 中缀表达式字符串
        Returns:
            Token 元组，按在字符串中的位置排序
        """
        text = self.strip_whitespace(expression)
        if not text:
            raise InvalidSyntaxError("Expression is empty")

        token_map = {}  # 起始位置 -> (识别器名, Token)
        covered = bytearray(len(text))

        for name, pattern, token_type in RECOGNIZERS:
            for match in pattern.finditer(text):
                start = match.start()
                covered[start:match.end()] = b'\x01' * (match.end() - start)

                token_text = UNARY_MINUS if name == 'unary_minus' else match.group()
                token = Token(token_text, token_type)

                if start in token_map:
                    other_name, other = token_map[start]
                    if self.conflict_policy == 'strict':
                        raise InvalidSyntaxError(
                            f"Ambiguous token at position {start}: "
                            f"'{other.text}' ({other_name}) and '{token.text}' ({name})",
                            position=start
                        )
                    logger.debug(f"Token conflict at {start}: keeping {other_name} over {name}")
                    continue
                token_map[start] = (name, token)

        if self.reject_unknown_characters:
            for position, flag in enumerate(covered):
                if not flag:
                    raise InvalidSyntaxError(
                        f"Unexpected character '{text[position]}' at position {position}",
                        position=position
                    )

        tokens = tuple(token_map[start][1] for start in sorted(token_map))
        logger.debug(f"Tokenized '{text}' into {len(tokens)} tokens")
        return tokens


def tokenize(expression, **kwargs):
    """便捷函数：使用默认配置分词"""
    return Tokenizer(**kwargs).tokenize(expression)
