"""core/ast_nodes.py - Pratt解析器输出的语法树节点"""
from dataclasses import dataclass

from core.token_system import format_number


@dataclass(frozen=True)
class Node:
    pass


@dataclass(frozen=True)
class Number(Node):
    value: float


@dataclass(frozen=True)
class Negate(Node):
    operand: Node


@dataclass(frozen=True)
class BinaryNode(Node):
    left: Node
    right: Node

    symbol = None


@dataclass(frozen=True)
class Add(BinaryNode):
    symbol = '+'


@dataclass(frozen=True)
class Sub(BinaryNode):
    symbol = '-'


@dataclass(frozen=True)
class Mul(BinaryNode):
    symbol = '*'


@dataclass(frozen=True)
class Div(BinaryNode):
    symbol = '/'


@dataclass(frozen=True)
class Pow(BinaryNode):
    symbol = '^'


# 操作符 -> 节点类型
BINARY_NODES = {cls.symbol: cls for cls in (Add, Sub, Mul, Div, Pow)}


def to_sexpr(node):
    """语法树转为前缀S表达式，例如 (+ 1 (* 2 3))"""
    parts = []
    # 栈中是待输出的节点或字面字符串
    stack = [node]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, Number):
            parts.append(format_number(item.value))
        elif isinstance(item, Negate):
            parts.append("(neg ")
            stack.extend([")", item.operand])
        elif isinstance(item, BinaryNode):
            parts.append(f"({item.symbol} ")
            stack.extend([")", item.right, " ", item.left])
        else:
            raise TypeError(f"Unknown AST node: {type(item).__name__}")
    return ''.join(parts)
