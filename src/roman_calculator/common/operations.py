"""Arithmetic operators supported by the calculator."""
from enum import Enum

from .errors import UnknownOperatorError


class Operator(Enum):
    """The four binary operators, valued by their symbol."""

    ADDITION = "+"
    SUBTRACTION = "-"
    MULTIPLICATION = "*"
    DIVISION = "/"

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def from_symbol(cls, symbol: str) -> "Operator":
        """Look up an operator by its symbol.

        Raises:
            UnknownOperatorError: If the symbol is not one of + - * /
        """
        for operator in cls:
            if operator.value == symbol:
                return operator
        raise UnknownOperatorError(f"Invalid operation symbol: '{symbol}'")

    def apply(self, left: int, right: int) -> int:
        """Apply the operator to two integers.

        Division truncates toward zero.
        """
        if self is Operator.ADDITION:
            return left + right
        if self is Operator.SUBTRACTION:
            return left - right
        if self is Operator.MULTIPLICATION:
            return left * right
        # right is never 0 here, operands are range checked beforehand
        quotient = abs(left) // abs(right)
        return quotient if (left < 0) == (right < 0) else -quotient


# Characters that mark the operator position in an expression
OPERATOR_SYMBOLS = frozenset(operator.value for operator in Operator)
