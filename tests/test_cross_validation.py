"""Cross-validation, metrics and expression loading tests."""

import math

import numpy as np
import pandas as pd
import pytest

from data.data_loader import load_expressions, save_report
from utils.metrics import calculate_agreement_rate, calculate_max_abs_diff
from validation.cross_validation import (
    REPORT_COLUMNS, cross_validate_expression, cross_validate_expressions,
)


# --- Single expression ---

def test_match():
    row = cross_validate_expression("2^3^2")
    assert row['status'] == 'match'
    assert row['agree']
    assert row['shunting_yard'] == pytest.approx(512.0)
    assert row['pratt'] == pytest.approx(512.0)
    assert row['shunting_yard_error'] is None


def test_both_failed():
    row = cross_validate_expression("1/0")
    assert row['status'] == 'both_failed'
    assert row['agree']
    assert row['shunting_yard_error'] == 'DivisionByZero'
    assert row['pratt_error'] == 'DivisionByZero'
    assert math.isnan(row['shunting_yard'])


def test_unary_fails_only_on_shunting_yard():
    row = cross_validate_expression("-3+4")
    assert row['status'] == 'shunting_yard_failed'
    assert not row['agree']
    assert row['shunting_yard_error'] == 'InsufficientOperands'
    assert row['pratt'] == pytest.approx(1.0)


def test_nan_results_agree():
    row = cross_validate_expression("(0-8)^(1/3)")
    assert row['status'] == 'match'


# --- Batch report ---

def test_report_frame():
    report = cross_validate_expressions(["1+2*3", "1/0", "-1", "1 2"])
    assert isinstance(report, pd.DataFrame)
    assert list(report.columns) == REPORT_COLUMNS
    assert report['status'].tolist() == ['match', 'both_failed', 'shunting_yard_failed', 'both_failed']
    assert report.loc[3, 'pratt_error'] == 'UnexpectedTrailingInput'
    assert calculate_agreement_rate(report) == pytest.approx(0.75)


def test_empty_report():
    report = cross_validate_expressions([])
    assert list(report.columns) == REPORT_COLUMNS
    assert len(report) == 0
    assert math.isnan(calculate_agreement_rate(report))


# --- Metrics ---

def test_max_abs_diff_ignores_non_finite():
    a = [1.0, np.nan, np.inf, 3.0]
    b = [1.5, 2.0, np.inf, 3.0]
    assert calculate_max_abs_diff(a, b) == pytest.approx(0.5)


def test_max_abs_diff_empty():
    assert calculate_max_abs_diff([], []) == 0.0


# --- Loading and saving ---

def test_load_text_file(tmp_path):
    path = tmp_path / "exprs.txt"
    path.write_text("# sample\n1+2\n\n  2^3  \n", encoding="utf-8")
    assert load_expressions(path) == ["1+2", "2^3"]


def test_load_csv_keeps_strings(tmp_path):
    path = tmp_path / "exprs.csv"
    path.write_text("id,expression\n1,3\n2,(1+2)*3\n", encoding="utf-8")
    assert load_expressions(path) == ["3", "(1+2)*3"]


def test_load_csv_custom_column(tmp_path):
    path = tmp_path / "exprs.csv"
    path.write_text("formula\n1-2-3\n", encoding="utf-8")
    assert load_expressions(path, column="formula") == ["1-2-3"]


def test_load_csv_missing_column(tmp_path):
    path = tmp_path / "exprs.csv"
    path.write_text("formula\n1\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_expressions(path)


def test_save_report(tmp_path):
    report = cross_validate_expressions(["1+1", "1/0"])
    output = save_report(report, str(tmp_path / "report.csv"))
    saved = pd.read_csv(output)
    assert saved['status'].tolist() == ['match', 'both_failed']
