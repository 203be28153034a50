"""表达式批量加载模块"""
import logging

import pandas as pd

from config.config import DATA_CONFIG

logger = logging.getLogger(__name__)


def load_expressions(file_path, column=None):
    """
    从文件加载待求值的表达式

    Parameters:
    - file_path: CSV文件（取 column 列）或文本文件（每行一个表达式）
    - column: CSV中的表达式列名, 默认为 DATA_CONFIG['expression_column']

    Returns:
    - expressions: 表达式字符串列表（保持文件中的顺序）
    """
    logger.info(f"Loading expressions from {file_path}")
    file_path = str(file_path)

    if file_path.endswith('.csv'):
        column = column or DATA_CONFIG['expression_column']
        # 全部按字符串读取，避免 "3" 之类被解析为数字
        df = pd.read_csv(file_path, dtype=str, keep_default_na=False)
        if column not in df.columns:
            raise ValueError(f"Column '{column}' not found in {file_path}. "
                             f"Available columns: {list(df.columns)}")
        expressions = df[column].tolist()
    else:
        comment_prefix = DATA_CONFIG['comment_prefix']
        with open(file_path, 'r', encoding='utf-8') as f:
            lines = [line.strip() for line in f]
        expressions = [line for line in lines if line and not line.startswith(comment_prefix)]

    logger.info(f"Loaded {len(expressions)} expressions")
    return expressions


def save_report(report, output_path=None):
    """把交叉验证结果表保存为CSV"""
    output_path = output_path or DATA_CONFIG['default_output_path']
    logger.info(f"Saving report to {output_path}")
    report.to_csv(output_path, index=False)
    return output_path
