"""Validation utilities for the calculator package.

This module provides reusable operand checks, ensuring consistent error
messages for Roman and Arabic input alike.
"""
from .config import MIN_OPERAND, MAX_OPERAND
from .errors import InvalidNumberError, InvalidRomanNumeralError, OutOfRangeError
from .roman_numerals import convert_int_to_roman, is_valid_roman


def validate_roman_numeral(operand: str) -> None:
    """Validate that an operand is a canonical Roman numeral.

    Args:
        operand: Roman-classified operand text (e.g., "IX")

    Raises:
        InvalidRomanNumeralError: If the operand breaks the canonical grammar
            (e.g., "IIII", "VX", "IC")
    """
    if not is_valid_roman(operand):
        raise InvalidRomanNumeralError(f"Invalid Roman numeral: '{operand}'")


def parse_arabic_number(operand: str) -> int:
    """Parse an Arabic operand as a base-10 integer.

    Args:
        operand: Arabic-classified operand text (e.g., "7")

    Returns:
        The parsed integer

    Raises:
        InvalidNumberError: If the text is not a valid base-10 integer
    """
    try:
        return int(operand, 10)
    except ValueError as e:
        raise InvalidNumberError(f"Invalid number: '{operand}'") from e


def validate_operand_range(value: int, roman: bool = False) -> None:
    """Validate that an operand value lies in the supported range.

    Args:
        value: Decoded operand value
        roman: Whether the operand was written as a Roman numeral, used to
               phrase the error message in the same notation

    Raises:
        OutOfRangeError: If value is outside MIN_OPERAND..MAX_OPERAND
    """
    if MIN_OPERAND <= value <= MAX_OPERAND:
        return

    if roman:
        low, high = convert_int_to_roman(MIN_OPERAND), convert_int_to_roman(MAX_OPERAND)
        raise OutOfRangeError(
            f"Roman numerals must be between {low} and {high} inclusive, got {value}"
        )
    raise OutOfRangeError(
        f"Numbers must be between {MIN_OPERAND} and {MAX_OPERAND} inclusive, got {value}"
    )
