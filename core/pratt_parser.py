"""Pratt解析器 - 基于绑定力的递归下降，输出语法树

绑定力由操作符表推导：
    左绑定力 lbp = precedence - 1       (+ - -> 1, * / -> 2, ^ -> 3)
    右递归绑定力 = lbp（左结合）或 lbp - 1（右结合）
一元 + / - 以固定绑定力 PREFIX_BINDING_POWER 解析其操作数。
"""
import logging

from core.ast_nodes import BINARY_NODES, Negate, Number
from core.errors import ExpressionTooDeep, MismatchedParentheses, UnexpectedToken
from core.operators import LEFT_PAREN, OPERATOR_TABLE, RIGHT_PAREN

logger = logging.getLogger(__name__)

PREFIX_BINDING_POWER = 5
DEFAULT_MAX_DEPTH = 200

LEFT_BINDING_POWER = {symbol: info.precedence - 1 for symbol, info in OPERATOR_TABLE.items()}


class TokenCursor:
    """Token序列上的扫描位置，由解析器显式持有"""

    def __init__(self, tokens):
        self.tokens = list(tokens)
        self.pos = 0

    def peek(self):
        """当前Token，已到末尾时返回None"""
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def next(self):
        """返回当前Token并前进，已到末尾时返回None"""
        token = self.peek()
        if token is not None:
            self.pos += 1
        return token

    def at_end(self):
        return self.pos >= len(self.tokens)

    def remaining(self):
        return self.tokens[self.pos:]


class PrattParser:

    def __init__(self, cursor, max_depth=DEFAULT_MAX_DEPTH):
        self.cursor = cursor
        self.max_depth = max_depth
        self._depth = 0

    @staticmethod
    def lbp(token):
        """左绑定力；非操作符（含括号）为0，终止解析循环"""
        if token is None or not token.is_operator():
            return 0
        return LEFT_BINDING_POWER.get(token.value, 0)

    def parse_expression(self, rbp=0):
        """
        解析一个完整表达式
        Args:
            rbp: 最小绑定力，只有lbp严格大于它的中缀操作符才会被吸收
        Returns:
            语法树根节点
        """
        self._depth += 1
        if self._depth > self.max_depth:
            raise ExpressionTooDeep(
                f"Expression nesting exceeds {self.max_depth} levels",
                position=self.cursor.pos,
            )
        try:
            left = self.nud(self.cursor.next())
            while rbp < self.lbp(self.cursor.peek()):
                left = self.led(self.cursor.next(), left)
            return left
        finally:
            self._depth -= 1

    def nud(self, token):
        """前缀位置：数字、括号表达式、一元 + / -"""
        if token is None:
            raise UnexpectedToken("Unexpected end of input", position=self.cursor.pos)

        if token.is_number:
            return Number(token.value)

        if token.value == LEFT_PAREN:
            expr = self.parse_expression(0)
            closing = self.cursor.next()
            if closing is None or closing.value != RIGHT_PAREN:
                raise MismatchedParentheses("Mismatched parentheses", fragment=LEFT_PAREN,
                                            position=self.cursor.pos)
            return expr

        if token.value == '+':
            return self.parse_expression(PREFIX_BINDING_POWER)

        if token.value == '-':
            return Negate(self.parse_expression(PREFIX_BINDING_POWER))

        raise UnexpectedToken(f"Unexpected token: {token}", fragment=str(token),
                              position=self.cursor.pos - 1)

    def led(self, token, left):
        """中缀位置：按结合性决定右侧的递归绑定力"""
        bp = self.lbp(token)
        if OPERATOR_TABLE[token.value].is_right_assoc:
            bp -= 1
        return BINARY_NODES[token.value](left, self.parse_expression(bp))


def parse(tokens, max_depth=DEFAULT_MAX_DEPTH):
    """
    从位置0解析一个表达式
    Returns:
        (语法树, cursor)；是否有剩余Token由调用方检查
    """
    cursor = TokenCursor(tokens)
    tree = PrattParser(cursor, max_depth=max_depth).parse_expression()
    logger.debug(f"Parsed {cursor.pos} of {len(cursor.tokens)} tokens")
    return tree, cursor
