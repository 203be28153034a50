"""核心模块 - Token系统、两种求值算法和操作符"""
from .token_system import TokenType, Token, tokenize, format_tokens, format_number
from .operators import Operators, OPERATOR_TABLE, Associativity, OperatorInfo
from .shunting_yard import to_postfix
from .rpn_evaluator import RPNEvaluator
from .pratt_parser import PrattParser, TokenCursor, parse
from .ast_evaluator import ASTEvaluator
from .errors import EvalError
from .calculator import (
    evaluate, evaluate_shunting_yard, evaluate_pratt,
    parse_postfix, parse_ast, try_evaluate, EvaluationResult
)

__all__ = [
    'TokenType', 'Token', 'tokenize', 'format_tokens', 'format_number',
    'Operators', 'OPERATOR_TABLE', 'Associativity', 'OperatorInfo',
    'to_postfix', 'RPNEvaluator',
    'PrattParser', 'TokenCursor', 'parse', 'ASTEvaluator',
    'EvalError',
    'evaluate', 'evaluate_shunting_yard', 'evaluate_pratt',
    'parse_postfix', 'parse_ast', 'try_evaluate', 'EvaluationResult'
]
