"""计算器入口 - 两种求值路径共享的边界检查和结果封装"""
import logging
from dataclasses import dataclass
from typing import Optional

from config.config import EVALUATOR_CONFIG
from core.ast_evaluator import ASTEvaluator
from core.errors import EmptyInput, EvalError, MismatchedParentheses, UnexpectedTrailingInput
from core.operators import RIGHT_PAREN
from core.pratt_parser import parse
from core.rpn_evaluator import RPNEvaluator
from core.shunting_yard import to_postfix
from core.token_system import tokenize

logger = logging.getLogger(__name__)

SHUNTING_YARD = "shunting_yard"
PRATT = "pratt"


def _check_input(expression):
    if expression is None or not expression.strip():
        raise EmptyInput("Input is empty")


def parse_postfix(expression):
    """表达式 -> 后缀Token序列"""
    _check_input(expression)
    return to_postfix(tokenize(expression))


def parse_ast(expression, max_depth=None):
    """
    表达式 -> 语法树，并检查剩余Token
    多出的 ')' 视为括号不匹配，其他剩余Token视为多余输入
    """
    _check_input(expression)
    if max_depth is None:
        max_depth = EVALUATOR_CONFIG["max_depth"]

    tree, cursor = parse(tokenize(expression), max_depth=max_depth)

    leftover = cursor.peek()
    if leftover is not None:
        if leftover.is_operator(RIGHT_PAREN):
            raise MismatchedParentheses("Mismatched parentheses", fragment=RIGHT_PAREN, position=cursor.pos)
        raise UnexpectedTrailingInput(
            f"Unexpected input after end of expression: {leftover}",
            fragment=str(leftover),
            position=cursor.pos,
        )
    return tree


def evaluate_shunting_yard(expression):
    """Shunting-yard + RPN求值"""
    return RPNEvaluator.evaluate(parse_postfix(expression))


def evaluate_pratt(expression, max_depth=None):
    """Pratt解析 + 语法树求值"""
    return ASTEvaluator.evaluate(parse_ast(expression, max_depth=max_depth))


def evaluate(expression, method=SHUNTING_YARD):
    if method == SHUNTING_YARD:
        return evaluate_shunting_yard(expression)
    if method == PRATT:
        return evaluate_pratt(expression)
    raise ValueError(f"Unknown evaluation method: {method}")


@dataclass
class EvaluationResult:
    """单次求值的结果：value和error二者必有其一"""

    expression: str
    method: str
    value: Optional[float] = None
    error: Optional[EvalError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[str]:
        return self.error.kind if self.error is not None else None

    @property
    def message(self) -> Optional[str]:
        return self.error.message if self.error is not None else None


def try_evaluate(expression, method=SHUNTING_YARD):
    """与evaluate相同，但把EvalError封装进结果而不是抛出"""
    try:
        value = evaluate(expression, method)
    except EvalError as e:
        logger.debug(f"[{method}] {expression!r} failed: {e.kind}: {e.message}")
        return EvaluationResult(expression, method, error=e)
    return EvaluationResult(expression, method, value=value)
