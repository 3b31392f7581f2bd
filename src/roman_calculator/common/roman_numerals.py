"""Roman numeral conversion utilities for the calculator package.

This module provides bidirectional conversion between Roman numerals and integers,
plus a grammar check for canonical (standard subtractive) numerals. Only uppercase
numerals are accepted; the lookup tables are built once at import time.
"""
import re
from types import MappingProxyType

from .errors import InvalidArgumentError, InvalidRomanNumeralError


# Mapping of single Roman symbols to their values
ROMAN_SYMBOL_VALUES = MappingProxyType({
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
})

# Canonical symbol groups in descending order of value,
# including the subtractive pairs
ROMAN_VALUE_GROUPS = (
    (1000, "M"),
    (900, "CM"),   # 1000 - 100
    (500, "D"),
    (400, "CD"),   # 500 - 100
    (100, "C"),
    (90, "XC"),    # 100 - 10
    (50, "L"),
    (40, "XL"),    # 50 - 10
    (10, "X"),
    (9, "IX"),     # 10 - 1
    (5, "V"),
    (4, "IV"),     # 5 - 1
    (1, "I"),
)

CANONICAL_ROMAN_PATTERN = re.compile(
    r"^M{0,4}(CM|CD|D?C{0,3})(XC|XL|L?X{0,3})(IX|IV|V?I{0,3})$"
)


def is_valid_roman(s: str) -> bool:
    """Check whether a string is a well-formed canonical Roman numeral.

    The check is case-sensitive and rejects any extraneous characters,
    including surrounding whitespace.

    Args:
        s: Candidate Roman numeral string

    Returns:
        True if the string is a canonical Roman numeral, False otherwise

    Examples:
        >>> is_valid_roman("IX")
        True
        >>> is_valid_roman("IIII")
        False
        >>> is_valid_roman("iv")
        False

    Note:
        The grammar matches the empty string structurally, so empty input
        is rejected explicitly.
    """
    if not s:
        return False
    return CANONICAL_ROMAN_PATTERN.fullmatch(s) is not None


def convert_roman_to_int(roman: str) -> int:
    """Convert a Roman numeral string to an integer.

    The numeral is decoded in a single left-to-right pass. Whenever a symbol is
    worth more than the one before it, the previous symbol was already added and
    is now subtracted twice, so it counts as negative (e.g., IV = 1 + 5 - 2 = 4).

    Args:
        roman: Uppercase Roman numeral string (e.g., "XIV", "IX")

    Returns:
        Integer value of the Roman numeral

    Raises:
        InvalidRomanNumeralError: If the string contains a character that is not
            a Roman symbol

    Examples:
        >>> convert_roman_to_int("XIV")
        14
        >>> convert_roman_to_int("IX")
        9

    Note:
        The grammar is not checked here. Callers should run is_valid_roman()
        first, since malformed numerals such as "IIV" still decode positionally.
    """
    int_value = 0
    previous = 0

    for char in roman:
        if char not in ROMAN_SYMBOL_VALUES:
            raise InvalidRomanNumeralError(f"Invalid Roman numeral character: {char}")

        current = ROMAN_SYMBOL_VALUES[char]
        if previous and current > previous:
            int_value += current - 2 * previous
        else:
            int_value += current
        previous = current

    return int_value


def convert_int_to_roman(num: int) -> str:
    """Convert a positive integer to its canonical Roman numeral.

    Uses the greedy algorithm: repeatedly take the largest symbol group whose
    value still fits into the remaining number.

    Args:
        num: Positive integer to convert

    Returns:
        Uppercase canonical Roman numeral string

    Raises:
        InvalidArgumentError: If num is not a positive integer

    Examples:
        >>> convert_int_to_roman(14)
        'XIV'
        >>> convert_int_to_roman(1994)
        'MCMXCIV'
    """
    if isinstance(num, bool) or not isinstance(num, int) or num <= 0:
        raise InvalidArgumentError(f"Roman numeral must be greater than 0, got {num}")

    result = []

    for value, group in ROMAN_VALUE_GROUPS:
        while num >= value:
            result.append(group)
            num -= value

    return ''.join(result)
