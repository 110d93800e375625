"""主程序入口 - 检查后缀表达式能否凑出10"""
import argparse
import logging
import sys

import pandas as pd

from config.config import CLI_CONFIG, validate_config
from core import RPNDecoder, RPNEncoder, RPNValidator
from puzzle import PuzzleChecker

# 设置日志
logging.basicConfig(
    level=CLI_CONFIG['log_level'],
    format=CLI_CONFIG['log_format']
)
logger = logging.getLogger(__name__)


def _check_and_print(checker, expression, decode=False):
    result = checker.check(expression)
    print(result)
    if decode and RPNValidator.is_valid(expression.strip()):
        print(RPNDecoder.decode(expression.strip()))


def main(args):
    logging.getLogger().setLevel(args.log_level.upper())
    validate_config()

    if args.encode is not None:
        try:
            print(RPNEncoder.encode(args.encode))
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        return 0

    checker = PuzzleChecker()

    if args.batch_path:
        logger.info(f"Loading expressions from {args.batch_path}")
        with open(args.batch_path, 'r', encoding='utf-8') as f:
            lines = [line for line in f if line.strip()]
        report = checker.check_batch(lines)
        logger.info(f"Saving report to {args.output_path}")
        report.to_csv(args.output_path, index=False)
        with pd.option_context('display.max_rows', None, 'display.width', 120):
            print(report.to_string(index=False))
        return 0

    if args.infix is not None:
        print(checker.check_infix(args.infix))
        return 0

    if args.expression is not None:
        _check_and_print(checker, args.expression, decode=args.decode)
        return 0

    for line in sys.stdin:
        if not line.strip():
            continue
        _check_and_print(checker, line, decode=args.decode)
    return 0


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Make-10 postfix checker")

    parser.add_argument(
        "--expression",
        type=str,
        default=None,
        help="Postfix expression to check, e.g. 1234+++ (reads stdin when omitted)"
    )
    parser.add_argument(
        "--decode",
        action="store_true",
        help="Also print the infix form of valid expressions"
    )
    parser.add_argument(
        "--encode",
        type=str,
        default=None,
        help="Print the postfix form of an infix expression and exit"
    )
    parser.add_argument(
        "--infix",
        type=str,
        default=None,
        help="Infix expression to check, e.g. \"(1 + 9) * 2 / 2\""
    )
    parser.add_argument(
        "--batch_path",
        type=str,
        default=None,
        help="File with one postfix expression per line"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=CLI_CONFIG['output_path'],
        help="Path to save the batch report CSV"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=CLI_CONFIG['log_level'],
        help="Logging level (default: WARNING)"
    )
    return parser.parse_args(argv)


def cli():
    sys.exit(main(parse_args()))


if __name__ == "__main__":
    cli()
