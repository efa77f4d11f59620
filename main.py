"""主程序入口 - 表达式求值、求根与制表"""
import argparse
import logging
import sys

from config.config import ROOT_FINDER_CONFIG, SAMPLING_CONFIG, ROOT_METHODS, validate_config
from expression import MathExpression, ExpressionError
from solver import find_root, find_roots
from utils import tabulate

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(description="Single-variable expression calculator")

    parser.add_argument(
        "expression",
        type=str,
        help="Infix expression in x, e.g. 'x^2-4' or 'log(8,2)'"
    )
    parser.add_argument(
        "--x",
        type=float,
        default=None,
        help="Value substituted for x"
    )
    parser.add_argument(
        "--root",
        type=float,
        nargs=2,
        metavar=("A", "B"),
        help="Find a root of the expression in [A, B]"
    )
    parser.add_argument(
        "--roots",
        type=float,
        nargs=2,
        metavar=("A", "B"),
        help="Find all roots the sampling grid brackets in [A, B]"
    )
    parser.add_argument(
        "--table",
        type=float,
        nargs=3,
        metavar=("START", "STOP", "NUM"),
        help="Tabulate the expression on NUM points between START and STOP"
    )
    parser.add_argument(
        "--method",
        type=str,
        choices=ROOT_METHODS,
        default=ROOT_FINDER_CONFIG["method"],
        help="Root finding method"
    )
    parser.add_argument(
        "--postfix",
        action="store_true",
        help="Print the postfix form of the expression"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def main(args):
    validate_config()

    expression = MathExpression(args.expression)
    logger.info(f"Parsed expression: {args.expression}")

    if args.postfix:
        print(expression.to_postfix_string())

    if args.root:
        a, b = args.root
        print(find_root(expression, a, b, method=args.method))
    elif args.roots:
        a, b = args.roots
        roots = find_roots(expression, a, b, num_points=SAMPLING_CONFIG["num_points"], method=args.method)
        print(", ".join(f"{r}" for r in roots) if roots else "no roots found")
    elif args.table:
        start, stop, num = args.table
        print(tabulate(expression, start, stop, int(num)).to_string())
    else:
        print(expression.evaluate(args.x))

    return 0


if __name__ == "__main__":
    args = build_parser().parse_args()

    # 设置日志
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        sys.exit(main(args))
    except ExpressionError as e:
        logger.error(f"{type(e).__name__}: {e}")
        sys.exit(1)
