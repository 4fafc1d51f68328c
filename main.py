"""主程序入口 - 对命令行给出的RPN公式求值并输出中缀形式"""
import argparse
import logging
import sys

import pandas as pd

from config.config import LOGGING_CONFIG, validate_config
from core import RPNEvaluator, InfixRenderer
from utils.report import tabulate_formulas, summarize

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(description="RPN integer calculator")

    parser.add_argument(
        "formulas",
        nargs="+",
        help="RPN formulas, e.g. \"6 1 - 1 1 + *\" (quote each formula)"
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Print remaining tokens and the operand stack after every step"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=None,
        help="Save the results table to this CSV file"
    )
    return parser


def main(args):
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOGGING_CONFIG['format']
    )
    validate_config()

    evaluator = RPNEvaluator(trace=args.trace)
    renderer = InfixRenderer()
    df = tabulate_formulas(args.formulas, evaluator=evaluator, renderer=renderer)

    for row in df.itertuples(index=False):
        if pd.isna(row.error):
            print(f"{row.infix} = {row.value}")
        else:
            print(f"{row.formula}: error: {row.error}")

    if args.output_path:
        logger.info(f"Saving results to {args.output_path}")
        df.to_csv(args.output_path, index=False)

    stats = summarize(df)
    logger.info(f"Evaluated {stats['total']} formulas: {stats['ok']} ok, {stats['failed']} failed")
    return 0 if stats['failed'] == 0 else 1


if __name__ == "__main__":
    sys.exit(main(build_parser().parse_args()))
