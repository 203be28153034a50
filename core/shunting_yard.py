"""Shunting-yard: 中缀Token序列 -> 后缀(RPN)Token序列"""
import logging

from core.errors import MismatchedParentheses
from core.operators import LEFT_PAREN, RIGHT_PAREN, get_operator_info
from core.token_system import format_tokens

logger = logging.getLogger(__name__)


def _should_pop(info, top):
    """栈顶操作符是否应先于当前操作符输出"""
    if not top.is_operator() or top.value == LEFT_PAREN:
        return False
    top_info = get_operator_info(top.value)
    if info.is_left_assoc:
        return info.precedence <= top_info.precedence
    return info.precedence < top_info.precedence


def to_postfix(tokens):
    """
    使用Shunting-yard算法把中缀Token转换为后缀Token
    Args:
        tokens: tokenize() 的输出
    Returns:
        后缀Token列表（只含数字和二元操作符，不含括号）
    Raises:
        MismatchedParentheses: 括号不匹配
        UnknownOperator: 操作符不在优先级表中
    """
    output = []
    stack = []

    for position, token in enumerate(tokens):
        if token.is_number:
            output.append(token)

        elif token.value == LEFT_PAREN:
            stack.append(token)

        elif token.value == RIGHT_PAREN:
            # 弹出直到匹配的 '('
            while stack and stack[-1].value != LEFT_PAREN:
                output.append(stack.pop())
            if not stack:
                raise MismatchedParentheses("Mismatched parentheses", fragment=RIGHT_PAREN, position=position)
            stack.pop()

        else:
            info = get_operator_info(token.value)
            while stack and _should_pop(info, stack[-1]):
                output.append(stack.pop())
            stack.append(token)

    while stack:
        top = stack.pop()
        if top.value in (LEFT_PAREN, RIGHT_PAREN):
            raise MismatchedParentheses("Mismatched parentheses", fragment=top.value)
        output.append(top)

    logger.debug(f"Postfix: {format_tokens(output)}")
    return output
