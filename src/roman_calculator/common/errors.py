"""Exceptions raised while evaluating calculator expressions.

Every error derives from CalculatorError, which itself is a ValueError, so
callers can catch the whole family with a single except clause. The message
of each exception is meant to be shown to the user verbatim.
"""


class CalculatorError(ValueError):
    """Base class for all expression evaluation failures."""


class InvalidExpressionError(CalculatorError):
    """The input does not contain an operator character."""


class MixedOrInvalidFormatError(CalculatorError):
    """The operands are not both Roman numerals or both Arabic numbers."""


class InvalidRomanNumeralError(CalculatorError):
    """A Roman operand is not a well-formed canonical numeral."""


class InvalidNumberError(CalculatorError):
    """An Arabic operand could not be parsed as an integer."""


class OutOfRangeError(CalculatorError):
    """An operand lies outside the supported operand range."""


class UnknownOperatorError(CalculatorError):
    """An operator symbol does not map to a known operation."""


class ResultBelowOneError(CalculatorError):
    """A Roman-mode result is zero or negative and cannot be rendered."""


class InvalidArgumentError(CalculatorError):
    """A value passed to a numeral conversion is not convertible."""
