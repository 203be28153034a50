"""数据模块 - 表达式批量读写"""
from .data_loader import load_expressions, save_report

__all__ = ['load_expressions', 'save_report']
