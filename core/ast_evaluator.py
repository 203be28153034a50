"""语法树求值器 - 后序遍历，调用统一的Operators类"""
import logging

from core.ast_nodes import BinaryNode, Negate, Number
from core.errors import UnknownOperator
from core.operators import Operators

logger = logging.getLogger(__name__)


class ASTEvaluator:
    """评估Pratt解析器输出的语法树"""

    @staticmethod
    def evaluate(node):
        """
        用显式栈做后序遍历，树的深度不受解释器递归限制
        Args:
            node: 语法树根节点
        Returns:
            float结果（可能为nan/inf）
        Raises:
            DivisionByZero: Div节点的右操作数恰好为0
            UnknownOperator: 未知节点类型
        """
        stack = [(node, False)]
        values = []

        while stack:
            current, children_done = stack.pop()

            if isinstance(current, Number):
                values.append(current.value)

            elif isinstance(current, Negate):
                if children_done:
                    values.append(Operators.neg(values.pop()))
                else:
                    stack.append((current, True))
                    stack.append((current.operand, False))

            elif isinstance(current, BinaryNode):
                if children_done:
                    right = values.pop()
                    left = values.pop()
                    values.append(Operators.apply(current.symbol, left, right))
                else:
                    # 左子树后入栈，先求值
                    stack.append((current, True))
                    stack.append((current.right, False))
                    stack.append((current.left, False))

            else:
                raise UnknownOperator(f"Unknown AST node: {type(current).__name__}",
                                      fragment=type(current).__name__)

        return values[0]
