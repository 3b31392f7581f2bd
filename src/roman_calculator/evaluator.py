"""Evaluate single binary expressions written in Roman or Arabic numerals.

This module turns raw input such as "3 + 4" or "X - I" into a result string.
The pipeline is strictly linear:
1. Split the trimmed input at the first operator character
2. Classify both operands as Roman or Arabic (they must agree)
3. Validate and decode the operands, then check their range
4. Apply the operator and format the result in the input's notation

Any failure raises an exception from common.errors; nothing is returned
partially.
"""
import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .common.errors import (
    InvalidExpressionError,
    MixedOrInvalidFormatError,
    ResultBelowOneError,
)
from .common.operations import OPERATOR_SYMBOLS, Operator
from .common.roman_numerals import convert_int_to_roman, convert_roman_to_int
from .common.validators import (
    parse_arabic_number,
    validate_operand_range,
    validate_roman_numeral,
)


ROMAN_OPERAND_PATTERN = re.compile(r"[IVXLCDM]+")
ARABIC_OPERAND_PATTERN = re.compile(r"\d+", re.ASCII)


class NumberFormat(str, Enum):
    """Notation the operands of an expression are written in."""

    ROMAN = "roman"
    ARABIC = "arabic"


class ParsedExpression(BaseModel):
    """An expression split into its two operands and operator."""

    model_config = ConfigDict(frozen=True)

    left: str
    operator: Operator
    right: str


class EvaluationResult(BaseModel):
    """Everything known about a successfully evaluated expression."""

    model_config = ConfigDict(frozen=True)

    expression: ParsedExpression
    number_format: NumberFormat
    left_value: int
    right_value: int
    value: int
    display: str


def is_roman(operand: str) -> bool:
    """Return True if the operand consists only of Roman symbols."""
    return ROMAN_OPERAND_PATTERN.fullmatch(operand) is not None


def is_arabic(operand: str) -> bool:
    """Return True if the operand consists only of decimal digits."""
    return ARABIC_OPERAND_PATTERN.fullmatch(operand) is not None


def classify_operand(operand: str) -> Optional[NumberFormat]:
    """Classify an operand as Roman, Arabic, or neither (None).

    Empty operands are neither.
    """
    if is_roman(operand):
        return NumberFormat.ROMAN
    if is_arabic(operand):
        return NumberFormat.ARABIC
    return None


def parse_expression(text: str) -> ParsedExpression:
    """Split an expression at the first operator character.

    The input is trimmed first, then scanned left to right for the first
    of + - * /. Text on either side of it becomes the (trimmed) operands.

    Args:
        text: Raw expression, e.g. " V * II "

    Returns:
        ParsedExpression with left, operator and right

    Raises:
        InvalidExpressionError: If the input contains no operator character

    Note:
        A leading minus sign is taken as the operator, so "-5+3" parses as
        left="" operator="-" right="5+3". Negative operands are not supported
        and this is rejected later as an invalid format.
    """
    text = text.strip()

    op_index = next((i for i, char in enumerate(text) if char in OPERATOR_SYMBOLS), None)
    if op_index is None:
        raise InvalidExpressionError(f"Invalid input: no operator found in '{text}'")

    return ParsedExpression(
        left=text[:op_index].strip(),
        operator=Operator.from_symbol(text[op_index]),
        right=text[op_index + 1:].strip(),
    )


def _decode_operands(parsed: ParsedExpression) -> tuple[NumberFormat, int, int]:
    """Check that both operands share a format and decode them to integers."""
    left_format = classify_operand(parsed.left)
    right_format = classify_operand(parsed.right)

    if left_format is None or left_format != right_format:
        raise MixedOrInvalidFormatError(
            f"Mixed number formats or invalid numbers: '{parsed.left}' and '{parsed.right}'"
        )

    if left_format is NumberFormat.ROMAN:
        # Both operands are validated before either is decoded
        validate_roman_numeral(parsed.left)
        validate_roman_numeral(parsed.right)
        left_value = convert_roman_to_int(parsed.left)
        right_value = convert_roman_to_int(parsed.right)
    else:
        left_value = parse_arabic_number(parsed.left)
        right_value = parse_arabic_number(parsed.right)

    roman = left_format is NumberFormat.ROMAN
    validate_operand_range(left_value, roman=roman)
    validate_operand_range(right_value, roman=roman)

    return left_format, left_value, right_value


def format_result(value: int, number_format: NumberFormat) -> str:
    """Render a result in the notation the operands were written in.

    Raises:
        ResultBelowOneError: If a Roman result is zero or negative
    """
    if number_format is NumberFormat.ARABIC:
        return str(value)

    if value < 1:
        raise ResultBelowOneError(f"Roman numerals cannot be less than I, got {value}")
    return convert_int_to_roman(value)


def evaluate_expression(text: str) -> EvaluationResult:
    """Evaluate an expression and return the full evaluation record.

    Args:
        text: Raw expression such as "3+4" or "X - I"

    Returns:
        EvaluationResult with decoded operands, integer value and display string

    Raises:
        CalculatorError: Any subclass from common.errors, see evaluate()
    """
    parsed = parse_expression(text)
    number_format, left_value, right_value = _decode_operands(parsed)
    value = parsed.operator.apply(left_value, right_value)

    return EvaluationResult(
        expression=parsed,
        number_format=number_format,
        left_value=left_value,
        right_value=right_value,
        value=value,
        display=format_result(value, number_format),
    )


def evaluate(text: str) -> str:
    """Evaluate a single binary expression and return the result string.

    Operands must both be Arabic numbers or both be Roman numerals, each in
    the range 1..10. Roman input yields a Roman result, Arabic input a
    decimal one (which may be negative). Division truncates toward zero.

    Args:
        text: Raw expression such as "3+4", "X - I" or "10 / 2"

    Returns:
        The result, e.g. "7", "IX", "5" or "-5"

    Raises:
        InvalidExpressionError: No operator character in the input
        MixedOrInvalidFormatError: Operands are not both Roman or both Arabic
        InvalidRomanNumeralError: A Roman operand is not canonical
        InvalidNumberError: An Arabic operand cannot be parsed
        OutOfRangeError: An operand is outside 1..10
        ResultBelowOneError: A Roman result is below I

    Examples:
        >>> evaluate("3+4")
        '7'
        >>> evaluate("V*II")
        'X'
    """
    return evaluate_expression(text).display
