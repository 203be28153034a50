"""验证模块"""
from .cross_validation import cross_validate_expressions, cross_validate_expression

__all__ = ['cross_validate_expressions', 'cross_validate_expression']
