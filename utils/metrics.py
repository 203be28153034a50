"""utils/metrics.py"""
import numpy as np


def calculate_agreement_rate(report):
    """两种算法结论一致（同值或同时失败）的比例，空表返回nan"""
    if len(report) == 0:
        return float('nan')
    return float(np.mean(report['agree'].astype(bool)))


def calculate_max_abs_diff(values1, values2):
    """
    两组结果的最大绝对差
    只比较双方都是有限值的位置，没有可比较的位置时返回0
    """
    a = np.asarray(values1, dtype=float)
    b = np.asarray(values2, dtype=float)
    mask = np.isfinite(a) & np.isfinite(b)
    if not mask.any():
        return 0.0
    return float(np.max(np.abs(a[mask] - b[mask])))
