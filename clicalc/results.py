"""
Runtime values produced by the evaluator.

An expression evaluates to exactly one of two variants, Number or Bool.
There is no implicit conversion between them.
"""

from dataclasses import dataclass

import numpy as np


class InterpreterResult:
    """Base class for evaluation results."""

    type_name: str = "value"


@dataclass(frozen=True)
class Number(InterpreterResult):
    """A double-precision numeric result."""

    value: float
    type_name = "number"

    def __str__(self) -> str:
        if np.isnan(self.value):
            return "NaN"
        return np.format_float_positional(self.value, trim="-")


@dataclass(frozen=True)
class Bool(InterpreterResult):
    """A boolean result."""

    value: bool
    type_name = "boolean"

    def __str__(self) -> str:
        return "true" if self.value else "false"
