"""工具模块"""
from .metrics import calculate_agreement_rate, calculate_max_abs_diff

__all__ = ['calculate_agreement_rate', 'calculate_max_abs_diff']
