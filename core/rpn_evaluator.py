"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from core.errors import InsufficientOperands, InvalidExpression, UnknownOperator
from core.operators import BINARY_OPERATORS, Operators
from core.token_system import TokenType, format_tokens

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(token_sequence):
        """
        评估后缀Token序列
        Args:
            token_sequence: to_postfix() 的输出
        Returns:
            float结果（可能为nan/inf）
        Raises:
            InsufficientOperands: 操作符可用的操作数不足两个
            DivisionByZero: 除数恰好为0
            UnknownOperator: 序列中出现非二元操作符（如括号）
            InvalidExpression: 结束时栈中不是恰好一个值
        """
        stack = []

        for position, token in enumerate(token_sequence):
            if token.type == TokenType.NUMBER:
                stack.append(token.value)
                continue

            # ================== 二元操作符处理 ==================
            if token.value not in BINARY_OPERATORS:
                logger.debug(f"Unknown operator in postfix sequence: {token.value}")
                raise UnknownOperator(f"Unknown operator: {token.value}", fragment=token.value, position=position)

            if len(stack) < 2:
                logger.debug(f"Insufficient operands for {token.value}")
                raise InsufficientOperands(
                    f"Insufficient operands for {token.value}", fragment=token.value, position=position
                )

            operand2 = stack.pop()  # 右操作数
            operand1 = stack.pop()  # 左操作数
            stack.append(Operators.apply(token.value, operand1, operand2))

        # 返回结果处理
        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1: "
                         f"{format_tokens(token_sequence)!r}")
            raise InvalidExpression(
                f"Invalid expression: {len(stack)} values left after evaluation, expected 1",
                fragment=format_tokens(token_sequence),
            )
        return stack[0]
