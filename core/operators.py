"""core/operators.py"""
import logging
from dataclasses import dataclass
from enum import Enum

import numpy as np

from core.errors import DivisionByZero, UnknownOperator

logger = logging.getLogger(__name__)


class Associativity(Enum):
    LEFT = "L"
    RIGHT = "R"


@dataclass(frozen=True)
class OperatorInfo:
    symbol: str
    precedence: int
    associativity: Associativity

    @property
    def is_left_assoc(self):
        return self.associativity == Associativity.LEFT

    @property
    def is_right_assoc(self):
        return self.associativity == Associativity.RIGHT


# 操作符优先级和结合性表（全局只读）
OPERATOR_TABLE = {
    '+': OperatorInfo('+', 2, Associativity.LEFT),
    '-': OperatorInfo('-', 2, Associativity.LEFT),
    '*': OperatorInfo('*', 3, Associativity.LEFT),
    '/': OperatorInfo('/', 3, Associativity.LEFT),
    '^': OperatorInfo('^', 4, Associativity.RIGHT),
}

LEFT_PAREN = '('
RIGHT_PAREN = ')'


def get_operator_info(symbol):
    """查询操作符信息，不在表中时抛出UnknownOperator"""
    info = OPERATOR_TABLE.get(symbol)
    if info is None:
        raise UnknownOperator(f"Unknown operator: {symbol}", fragment=symbol)
    return info


class Operators:
    """所有算术操作符的静态方法集合，统一使用float64语义"""

    # 一元操作符====================

    @staticmethod
    def neg(operand):
        """取负"""
        return float(-np.float64(operand))

    # 二元操作符========================================
    @staticmethod
    def add(operand1, operand2):
        with np.errstate(all='ignore'):
            return float(np.float64(operand1) + np.float64(operand2))

    @staticmethod
    def sub(operand1, operand2):
        with np.errstate(all='ignore'):
            return float(np.float64(operand1) - np.float64(operand2))

    @staticmethod
    def mul(operand1, operand2):
        with np.errstate(all='ignore'):
            return float(np.float64(operand1) * np.float64(operand2))

    @staticmethod
    def div(operand1, operand2):
        """除法：在相除之前检查除数是否恰好为0"""
        if operand2 == 0:
            raise DivisionByZero("Division by zero", fragment='/')
        with np.errstate(all='ignore'):
            return float(np.float64(operand1) / np.float64(operand2))

    @staticmethod
    def pow(operand1, operand2):
        """
        实数幂运算
        负数的分数次幂返回nan，溢出返回inf，不做特殊处理
        """
        with np.errstate(all='ignore'):
            return float(np.power(np.float64(operand1), np.float64(operand2)))

    @staticmethod
    def apply(symbol, operand1, operand2):
        """按符号调用对应的二元操作"""
        method_name = BINARY_OPERATORS.get(symbol)
        if method_name is None:
            raise UnknownOperator(f"Unknown operator: {symbol}", fragment=symbol)
        return getattr(Operators, method_name)(operand1, operand2)


# 符号 -> Operators方法名
BINARY_OPERATORS = {
    '+': 'add',
    '-': 'sub',
    '*': 'mul',
    '/': 'div',
    '^': 'pow',
}
