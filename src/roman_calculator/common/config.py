"""Configuration constants for the calculator package.

This module contains the operand limits and the console text used by the
command-line interface.

Environment Variables:
    ROMAN_CALCULATOR_DEBUG: Set to "1" to print parsing details before the result
"""
import os

# Debug mode prints the parsed expression and operand format
DEBUG = os.getenv("ROMAN_CALCULATOR_DEBUG", "0") == "1"

# Inclusive operand range, applies to both Roman and Arabic input
MIN_OPERAND = 1
MAX_OPERAND = 10

# Console text
PROMPT = "Enter an expression: "
RESULT_PREFIX = "Result: "
ERROR_PREFIX = "Error: "
DEBUG_PREFIX = "Debug: "
