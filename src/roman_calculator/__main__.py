"""Main entry point for the Roman numeral calculator package."""
import sys
import argparse

from .evaluator import evaluate_expression
from .common.config import DEBUG, PROMPT, RESULT_PREFIX, ERROR_PREFIX, DEBUG_PREFIX
from .common.errors import CalculatorError


def read_expression() -> str:
    """Prompt the user once and read one line of input."""
    print(PROMPT)
    return input()


def print_debug(result) -> None:
    """Print how the expression was parsed."""
    parsed = result.expression
    print(f"{DEBUG_PREFIX}left='{parsed.left}' operator='{parsed.operator.symbol}' right='{parsed.right}'")
    print(f"{DEBUG_PREFIX}format={result.number_format.value} "
          f"operands=({result.left_value}, {result.right_value}) value={result.value}")


def run_calculation(expression: str, debug: bool = DEBUG) -> None:
    """Evaluate an expression and print the result or the error message."""
    try:
        result = evaluate_expression(expression)
    except CalculatorError as e:
        print(f"{ERROR_PREFIX}{e}")
        return

    if debug:
        print_debug(result)
    print(f"{RESULT_PREFIX}{result.display}")


def main(argv=None):
    """Read one expression and print its result."""
    # Parse command line arguments
    parser = argparse.ArgumentParser(
        description='Calculator for Arabic (1-10) or Roman (I-X) numbers, e.g. "3 + 4" or "X - I"'
    )
    parser.add_argument('expression', nargs='*',
                        help='Expression to evaluate; prompts for one if omitted')
    # Expressions may start with an operator ("-5+3"), which argparse
    # would otherwise reject as an unknown option
    args, leftover = parser.parse_known_args(argv)
    tokens = (args.expression or []) + leftover

    if tokens:
        expression = " ".join(tokens)
    else:
        try:
            expression = read_expression()
        except (EOFError, KeyboardInterrupt):
            sys.exit(0)

    run_calculation(expression)


if __name__ == "__main__":
    main()
