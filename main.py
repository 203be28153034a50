"""主程序入口 - 用Shunting-yard和/或Pratt算法计算算术表达式"""
import argparse
import logging
import sys

from config.config import DATA_CONFIG, EVALUATOR_CONFIG, LOGGING_CONFIG, validate_config
from core import format_number, format_tokens, parse_ast, parse_postfix, try_evaluate
from core.ast_nodes import to_sexpr
from core.errors import EvalError
from data.data_loader import load_expressions, save_report
from validation.cross_validation import cross_validate_expressions

logger = logging.getLogger(__name__)


def _format_result(result):
    if result.ok:
        return f"{result.expression} = {format_number(result.value)}"
    return f"{result.expression} -> {result.kind}: {result.message}"


def _show_intermediate(expression, args):
    """打印后缀式/语法树；解析失败时只记录日志，错误由求值步骤报告"""
    if args.show_postfix:
        try:
            print(f"  postfix: {format_tokens(parse_postfix(expression))}")
        except EvalError as e:
            logger.debug(f"No postfix form for {expression!r}: {e.kind}")
    if args.show_ast:
        try:
            print(f"  ast: {to_sexpr(parse_ast(expression))}")
        except EvalError as e:
            logger.debug(f"No AST for {expression!r}: {e.kind}")


def main(args):
    """
    Returns:
        退出码：全部成功为0，有表达式失败为1，没有输入为2
    """
    validate_config()

    expressions = list(args.expressions)
    if args.file:
        expressions.extend(load_expressions(args.file, args.column))

    if not expressions:
        logger.error("No expressions given. Pass expressions as arguments or use --file.")
        return 2

    logger.info(f"Evaluating {len(expressions)} expressions with method={args.method}")

    if args.cross_validate:
        report = cross_validate_expressions(expressions)
        print(report.to_string(index=False))
        if args.output_path:
            save_report(report, args.output_path)
        return 0 if report['agree'].all() else 1

    methods = EVALUATOR_CONFIG["methods"] if args.method == "both" else [args.method]
    failed = 0

    for expression in expressions:
        for method in methods:
            result = try_evaluate(expression, method)
            prefix = f"[{method}] " if len(methods) > 1 else ""
            print(prefix + _format_result(result))
            if not result.ok:
                failed += 1
        _show_intermediate(expression, args)

    if failed:
        logger.warning(f"{failed} evaluations failed")
        return 1
    return 0


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Arithmetic expression calculator (Shunting-yard / Pratt)")

    parser.add_argument(
        "expressions",
        nargs="*",
        help="Expressions to evaluate, e.g. '2^3^2' '(1+2)*3'"
    )
    parser.add_argument(
        "--method",
        type=str,
        choices=EVALUATOR_CONFIG["methods"] + ["both"],
        default=EVALUATOR_CONFIG["default_method"],
        help="Evaluation algorithm to use"
    )
    parser.add_argument(
        "--file",
        type=str,
        default=None,
        help="Path to a CSV file or a text file with one expression per line"
    )
    parser.add_argument(
        "--column",
        type=str,
        default=DATA_CONFIG["expression_column"],
        help="Name of the expression column when --file is a CSV"
    )
    parser.add_argument(
        "--show_postfix",
        action="store_true",
        help="Print the postfix (RPN) form of each expression"
    )
    parser.add_argument(
        "--show_ast",
        action="store_true",
        help="Print the Pratt parse tree of each expression"
    )
    parser.add_argument(
        "--cross_validate",
        action="store_true",
        help="Evaluate with both algorithms and print an agreement table"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=None,
        help="Path to save the cross-validation table as CSV"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )
    return parser.parse_args(argv)


if __name__ == "__main__":
    args = parse_args()

    # 设置日志
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOGGING_CONFIG["format"]
    )
    sys.exit(main(args))
