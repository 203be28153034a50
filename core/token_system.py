"""core/token_system.py"""
import logging
from dataclasses import dataclass
from enum import Enum

from core.errors import InvalidCharacter, InvalidNumber

logger = logging.getLogger(__name__)


class TokenType(Enum):
    NUMBER = "number"  # 数字
    OPERATOR = "operator"  # 操作符和括号


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: object  # NUMBER为float，OPERATOR为单字符符号

    @classmethod
    def number(cls, value):
        return cls(TokenType.NUMBER, float(value))

    @classmethod
    def operator(cls, symbol):
        return cls(TokenType.OPERATOR, symbol)

    @property
    def is_number(self):
        return self.type == TokenType.NUMBER

    def is_operator(self, symbol=None):
        if self.type != TokenType.OPERATOR:
            return False
        return symbol is None or self.value == symbol

    def __str__(self):
        if self.is_number:
            return format_number(self.value)
        return self.value


def format_number(value):
    """float的精确显示（可无损回读），整数值省略 '.0'"""
    text = repr(float(value))
    if text.endswith('.0'):
        text = text[:-2]
    return text


# 字符分类
WHITESPACE = frozenset(' \t\n')
NUMBER_CHARS = frozenset('0123456789.')
OPERATOR_SYMBOLS = frozenset('+-*/^()')


def tokenize(expr):
    """
    把表达式字符串切分为Token序列
    Args:
        expr: 原始表达式
    Returns:
        Token列表（按输入顺序）
    Raises:
        InvalidNumber: 数字中出现多个小数点，或没有任何数字
        InvalidCharacter: 出现不支持的字符
    """
    tokens = []
    i = 0
    n = len(expr)

    while i < n:
        c = expr[i]

        if c in WHITESPACE:
            i += 1

        elif c in NUMBER_CHARS:
            start = i
            while i < n and expr[i] in NUMBER_CHARS:
                i += 1
            text = expr[start:i]
            if text.count('.') > 1 or text == '.':
                raise InvalidNumber(f"Invalid number: {text}", fragment=text, position=start)
            tokens.append(Token.number(text))

        elif c in OPERATOR_SYMBOLS:
            tokens.append(Token.operator(c))
            i += 1

        else:
            raise InvalidCharacter(f"Invalid character: {c}", fragment=c, position=i)

    logger.debug(f"Tokenized {len(tokens)} tokens from {expr!r}")
    return tokens


def format_tokens(tokens):
    """Token序列转为空格分隔的字符串，例如 '1 2 + 3 *'"""
    return ' '.join(str(token) for token in tokens)
