"""Pratt parser and AST evaluator tests."""

import math

import pytest

from core.ast_evaluator import ASTEvaluator
from core.ast_nodes import Add, Div, Mul, Negate, Number, Pow, Sub, to_sexpr
from core.errors import (
    DivisionByZero, ExpressionTooDeep, MismatchedParentheses,
    UnexpectedToken, UnknownOperator,
)
from core.pratt_parser import PrattParser, TokenCursor, parse
from core.token_system import tokenize


def _tree(expr):
    tree, cursor = parse(tokenize(expr))
    assert cursor.at_end()
    return tree


def _eval(expr):
    return ASTEvaluator.evaluate(_tree(expr))


# --- Tree shape ---

def test_number_leaf():
    assert _tree("7") == Number(7.0)


def test_precedence_tree():
    assert _tree("1+2*3") == Add(Number(1.0), Mul(Number(2.0), Number(3.0)))


def test_left_fold():
    assert _tree("1-2-3") == Sub(Sub(Number(1.0), Number(2.0)), Number(3.0))
    assert _tree("8/4/2") == Div(Div(Number(8.0), Number(4.0)), Number(2.0))


def test_right_fold_power():
    assert _tree("2^3^2") == Pow(Number(2.0), Pow(Number(3.0), Number(2.0)))


def test_unary_minus():
    assert _tree("-3+4") == Add(Negate(Number(3.0)), Number(4.0))
    assert _tree("-(3+4)") == Negate(Add(Number(3.0), Number(4.0)))


def test_unary_plus_is_dropped():
    assert _tree("+5") == Number(5.0)


def test_sexpr():
    assert to_sexpr(_tree("-(1+2)*3")) == "(* (neg (+ 1 2)) 3)"


def test_sexpr_keeps_all_digits():
    assert to_sexpr(_tree("0.30000000000000004-0.5")) == "(- 0.30000000000000004 0.5)"


def test_sexpr_deep_left_fold():
    sexpr = to_sexpr(_tree("-".join(["1"] * 5000)))
    assert sexpr.startswith("(- " * 10)
    assert sexpr.count("(") == 4999


# --- Cursor ---

def test_parser_stops_at_trailing_tokens():
    tree, cursor = parse(tokenize("1 2"))
    assert tree == Number(1.0)
    assert not cursor.at_end()
    assert [t.value for t in cursor.remaining()] == [2.0]


def test_parser_stops_at_close_paren():
    tree, cursor = parse(tokenize("1+2)"))
    assert tree == Add(Number(1.0), Number(2.0))
    assert cursor.peek().is_operator(')')


def test_cursor_is_explicit():
    cursor = TokenCursor(tokenize("1+2"))
    PrattParser(cursor).parse_expression()
    assert cursor.pos == 3
    assert cursor.next() is None


# --- Parse errors ---

def test_missing_operand_at_end():
    with pytest.raises(UnexpectedToken):
        parse(tokenize("1+"))


def test_empty_token_list():
    with pytest.raises(UnexpectedToken):
        parse([])


def test_operator_in_prefix_position():
    with pytest.raises(UnexpectedToken) as exc_info:
        parse(tokenize("*2"))
    assert exc_info.value.fragment == "*"


def test_unclosed_paren():
    with pytest.raises(MismatchedParentheses):
        parse(tokenize("(1+2"))


def test_paren_closed_by_wrong_token():
    with pytest.raises(MismatchedParentheses):
        parse(tokenize("(1 2)"))


def test_nesting_limit():
    expr = "(" * 50 + "1" + ")" * 50
    assert ASTEvaluator.evaluate(parse(tokenize(expr), max_depth=60)[0]) == pytest.approx(1.0)
    with pytest.raises(ExpressionTooDeep):
        parse(tokenize(expr), max_depth=40)


def test_unary_chain_counts_toward_depth():
    with pytest.raises(ExpressionTooDeep):
        parse(tokenize("-" * 300 + "1"))


# --- Evaluation ---

def test_evaluate_precedence():
    assert _eval("1+2*3") == pytest.approx(7.0)
    assert _eval("(1+2)*3") == pytest.approx(9.0)


def test_evaluate_power():
    assert _eval("2^3^2") == pytest.approx(512.0)


def test_evaluate_unary():
    assert _eval("-3+4") == pytest.approx(1.0)
    assert _eval("-(3+4)") == pytest.approx(-7.0)
    assert _eval("--2") == pytest.approx(2.0)


def test_evaluate_deep_left_fold():
    assert _eval("-".join(["1"] * 5000)) == pytest.approx(1.0 - 4999.0)
    assert _eval("*".join(["1"] * 5000)) == pytest.approx(1.0)


def test_evaluate_operand_order():
    assert _eval("8/2") == pytest.approx(4.0)
    assert _eval("2^3") == pytest.approx(8.0)


def test_unary_minus_binds_tighter_than_power():
    assert _eval("-2^2") == pytest.approx(4.0)


def test_division_by_zero():
    with pytest.raises(DivisionByZero):
        _eval("1/0")
    with pytest.raises(DivisionByZero):
        _eval("1/-0")


def test_negative_base_fractional_power_is_nan():
    assert math.isnan(_eval("(-8)^(1/3)"))


def test_unknown_node_type():
    with pytest.raises(UnknownOperator):
        ASTEvaluator.evaluate("not a node")
