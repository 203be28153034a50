"""配置文件"""

# 求值参数
EVALUATOR_CONFIG = {
    "default_method": "shunting_yard",  # shunting_yard / pratt / both
    "methods": ["shunting_yard", "pratt"],
    "max_depth": 200,  # Pratt解析的最大嵌套深度
}

# 交叉验证参数（两种算法结果比较）
CROSS_VALIDATION_CONFIG = {
    "rel_tol": 1e-9,
    "abs_tol": 1e-12,
}

# 批量表达式输入
DATA_CONFIG = {
    "expression_column": "expression",  # CSV中的表达式列
    "comment_prefix": "#",  # 文本文件中的注释行
    "default_output_path": "cross_validation.csv",
}

# 日志
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert EVALUATOR_CONFIG["max_depth"] > 0, "max_depth必须为正数"
    assert EVALUATOR_CONFIG["default_method"] in EVALUATOR_CONFIG["methods"] + ["both"], \
        f"未知的默认求值方法: {EVALUATOR_CONFIG['default_method']}"
    assert CROSS_VALIDATION_CONFIG["rel_tol"] >= 0, "rel_tol不能为负"
    assert CROSS_VALIDATION_CONFIG["abs_tol"] >= 0, "abs_tol不能为负"
    assert LOGGING_CONFIG["level"] in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
    return True
