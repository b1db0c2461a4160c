"""
Functions module.

This module contains the built-in math functions and constants.
Functions are registered via the @FunctionMap.register decorator
when math_functions is imported.
"""

from clicalc.functions.function_map import FunctionMap, MathFunction
from clicalc.functions.math_functions import CONSTANTS, truncate_to_int

__all__ = [
    "CONSTANTS",
    "FunctionMap",
    "MathFunction",
    "truncate_to_int",
]
