"""主程序入口 - 中缀表达式求值控制台"""
import argparse
import logging
import sys

from config.config import *
from core import ExpressionEvaluator, ExpressionError

logger = logging.getLogger(__name__)

BANNER = """Welcome to the Infix Expression Parser!
You can perform mathematical and logical evaluations.
Supported operations:
  +   Addition (e.g., 3 + 2 = 5)
  -   Subtraction (e.g., 5 - 3 = 2)
  *   Multiplication (e.g., 4 * 3 = 12)
  /   Division (e.g., 8 / 2 = 4)
  %   Modulus (e.g., 5 % 2 = 1)
  ^   Power (e.g., 2 ^ 3 = 8)
  >   Greater than (e.g., 5 > 3 = true)
  <   Less than (e.g., 3 < 5 = true)
  >=  Greater than or equal to (e.g., 5 >= 5 = true, needs --extended_merge)
  <=  Less than or equal to (e.g., 4 <= 5 = true, needs --extended_merge)
  ==  Equality (e.g., 5 == 5 = true)
  !=  Not equal (e.g., 5 != 3 = true)
  &&  Logical AND (e.g., 1 && 0 = false)
  ||  Logical OR (e.g., 1 || 0 = true)

You can use multiple operations in a single expression.
Example: (3 + 2) * 4 > 10 && 1 == 1 evaluates to true.
Type 'quit' to exit the program."""


def evaluate_line(evaluator, expression, out=None, err=None):
    """求值一行并打印结果；返回 (结果文本或None, 错误信息或None)"""
    out = out or sys.stdout
    err = err or sys.stderr
    try:
        result = evaluator.eval(expression)
    except ExpressionError as e:
        print(f"{CONSOLE_CONFIG['error_prefix']}{e.message}", file=err)
        return None, e.message
    print(f"{CONSOLE_CONFIG['result_prefix']}{result}", file=out)
    return result, None


def run_console(evaluator, show_banner=True, stdin=None, out=None, err=None):
    """交互循环：读入一行、转小写、quit 退出"""
    stdin = stdin or sys.stdin
    out = out or sys.stdout
    if show_banner:
        print(BANNER, file=out)

    records = []
    while True:
        print(CONSOLE_CONFIG["prompt"], end="", file=out, flush=True)
        line = stdin.readline()
        if not line:
            # EOF
            print(file=out)
            break

        expression = line.rstrip("\n")
        if CONSOLE_CONFIG["lowercase_input"]:
            expression = expression.lower()

        if expression == CONSOLE_CONFIG["quit_command"]:
            print(CONSOLE_CONFIG["farewell"], file=out)
            break
        result, error = evaluate_line(evaluator, expression, out, err)
        records.append((expression, result, error))
    return records


def save_results(records, results_path):
    logger.info(f"Saving results to {results_path}")
    with open(results_path, 'w', encoding='utf-8') as f:
        f.write("=== Expression Results ===\n")
        for expression, result, error in records:
            if error is None:
                f.write(f"{expression} -> {result}\n")
            else:
                f.write(f"{expression} -> {CONSOLE_CONFIG['error_prefix']}{error}\n")


def main(args):
    validate_config()

    if args.extended_merge:
        logger.warning("Extended tokenizer merging enabled: >= and <= are single tokens")
        evaluator = ExpressionEvaluator.extended()
    else:
        evaluator = ExpressionEvaluator()

    if args.expressions:
        records = []
        for expression in args.expressions:
            result, error = evaluate_line(evaluator, expression)
            records.append((expression, result, error))
    else:
        records = run_console(evaluator, show_banner=not args.no_banner)

    if args.save_results:
        save_results(records, args.results_path)

    failed = sum(1 for _, _, error in records if error is not None)
    logger.info(f"Evaluated {len(records)} expressions, {failed} failed")
    return 1 if args.expressions and failed else 0


def build_parser():
    parser = argparse.ArgumentParser(description="Infix Expression Parser")

    parser.add_argument(
        "expressions",
        nargs="*",
        help="Expressions to evaluate; starts the interactive console when omitted"
    )
    parser.add_argument(
        "--no_banner",
        action="store_true",
        help="Do not print the help banner in interactive mode"
    )
    parser.add_argument(
        "--extended_merge",
        action="store_true",
        help="Also tokenize >= and <= as single operators"
    )
    parser.add_argument(
        "--save_results",
        action="store_true",
        help="Save the evaluated expressions and results to a file"
    )
    parser.add_argument(
        "--results_path",
        type=str,
        default=CONSOLE_CONFIG["results_path"],
        help="Path to save the results"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)"
    )
    return parser


def cli(argv=None):
    args = build_parser().parse_args(argv)
    # 设置日志
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOGGING_CONFIG["format"]
    )
    return main(args)


if __name__ == "__main__":
    sys.exit(cli())
