"""交叉验证模块 - 用两种算法求值同一批表达式并比较结果"""
import logging

import numpy as np
import pandas as pd

from config.config import CROSS_VALIDATION_CONFIG
from core.calculator import PRATT, SHUNTING_YARD, try_evaluate
from utils.metrics import calculate_agreement_rate, calculate_max_abs_diff

logger = logging.getLogger(__name__)

REPORT_COLUMNS = [
    'expression', 'shunting_yard', 'shunting_yard_error',
    'pratt', 'pratt_error', 'status', 'agree'
]


def _values_close(value1, value2, rel_tol, abs_tol):
    # nan与nan、inf与inf视为一致
    return bool(np.isclose(value1, value2, rtol=rel_tol, atol=abs_tol, equal_nan=True))


def cross_validate_expression(expression, rel_tol=None, abs_tol=None):
    """
    用Shunting-yard和Pratt两条路径分别求值一个表达式

    Returns:
    - row: 包含两侧结果、错误类型、status和agree的字典
    """
    rel_tol = CROSS_VALIDATION_CONFIG['rel_tol'] if rel_tol is None else rel_tol
    abs_tol = CROSS_VALIDATION_CONFIG['abs_tol'] if abs_tol is None else abs_tol

    sy = try_evaluate(expression, SHUNTING_YARD)
    pp = try_evaluate(expression, PRATT)

    if sy.ok and pp.ok:
        status = 'match' if _values_close(sy.value, pp.value, rel_tol, abs_tol) else 'mismatch'
    elif not sy.ok and not pp.ok:
        status = 'both_failed'
    elif not sy.ok:
        status = 'shunting_yard_failed'
    else:
        status = 'pratt_failed'

    if status == 'mismatch':
        logger.warning(f"Results differ for {expression!r}: shunting_yard={sy.value}, pratt={pp.value}")

    return {
        'expression': expression,
        'shunting_yard': sy.value if sy.ok else np.nan,
        'shunting_yard_error': sy.kind,
        'pratt': pp.value if pp.ok else np.nan,
        'pratt_error': pp.kind,
        'status': status,
        'agree': status in ('match', 'both_failed'),
    }


def cross_validate_expressions(expressions, rel_tol=None, abs_tol=None):
    """
    对多个表达式进行交叉验证

    Returns:
    - report: 每个表达式一行的DataFrame，列见 REPORT_COLUMNS
    """
    rows = [cross_validate_expression(expr, rel_tol, abs_tol) for expr in expressions]
    report = pd.DataFrame(rows, columns=REPORT_COLUMNS)

    if len(report) > 0:
        both_ok = report['status'].isin(['match', 'mismatch'])
        logger.info(f"Cross-validated {len(report)} expressions")
        logger.info(f"Agreement rate: {calculate_agreement_rate(report):.4f}")
        logger.info(f"Max abs diff: "
                    f"{calculate_max_abs_diff(report.loc[both_ok, 'shunting_yard'], report.loc[both_ok, 'pratt']):.3e}")
        logger.debug(f"Status counts: {report['status'].value_counts().to_dict()}")

    return report
