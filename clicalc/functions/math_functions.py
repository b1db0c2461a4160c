"""
Built-in math functions and named constants.

Functions:
- Rounding: abs, floor, ceil, round, trunc, fract, sign
- Powers and roots: sqrt, cbrt, exp, pow, root, hypot
- Logarithms: ln, log, logn
- Trigonometry: sin, cos, tan, asin, acos, atan, deg, rad
- Hyperbolic: sinh, cosh, tanh, asinh, acosh, atanh
- Aggregates: max, min, sum
- Other: factorial (alias fact)

All functions receive their already-evaluated arguments as a list of
floats and follow IEEE-754 double semantics: out-of-domain input gives
NaN and overflow gives inf. Callers are expected to run them under
numpy.errstate(all="ignore").
"""

import math
from functools import reduce

import numpy as np

from clicalc.functions.function_map import FunctionMap

CONSTANTS: dict[str, float] = {
    "pi": float(np.pi),
    "e": float(np.e),
    "tau": float(2 * np.pi),
    "phi": 1.618033988749895,
}

# Simple one-argument functions backed directly by a numpy ufunc
UNARY_UFUNCS = {
    "abs": np.abs,
    "sqrt": np.sqrt,
    "cbrt": np.cbrt,
    "exp": np.exp,
    "ln": np.log,
    "floor": np.floor,
    "ceil": np.ceil,
    "trunc": np.trunc,
    "sin": np.sin,
    "cos": np.cos,
    "tan": np.tan,
    "asin": np.arcsin,
    "acos": np.arccos,
    "atan": np.arctan,
    "sinh": np.sinh,
    "cosh": np.cosh,
    "tanh": np.tanh,
    "asinh": np.arcsinh,
    "acosh": np.arccosh,
    "atanh": np.arctanh,
    "deg": np.degrees,
    "rad": np.radians,
}


def _register_ufunc(name: str, ufunc: np.ufunc) -> None:
    FunctionMap.register(name)(lambda args: float(ufunc(args[0])))


for _name, _ufunc in UNARY_UFUNCS.items():
    _register_ufunc(_name, _ufunc)


def truncate_to_int(value: float) -> int:
    """
    Truncate a float toward zero into the signed 64-bit range.

    Out-of-range values saturate at the range limits; NaN becomes 0.
    """
    if math.isnan(value):
        return 0
    if value >= 2.0**63:
        return 2**63 - 1
    if value <= -(2.0**63):
        return -(2**63)
    return int(value)


@FunctionMap.register("round")
def round_half_away(args: list[float]) -> float:
    """Round to the nearest integer, ties away from zero."""
    x = args[0]
    if not math.isfinite(x):
        return x
    whole = float(np.trunc(x))
    if abs(x - whole) >= 0.5:
        whole += math.copysign(1.0, x)
    return whole


@FunctionMap.register("fract")
def fract(args: list[float]) -> float:
    x = args[0]
    return float(np.subtract(x, np.trunc(x)))


@FunctionMap.register("sign")
def sign(args: list[float]) -> float:
    """1.0 or -1.0 following the sign bit (so -0.0 gives -1.0); NaN stays NaN."""
    x = args[0]
    if math.isnan(x):
        return x
    return math.copysign(1.0, x)


@FunctionMap.register("factorial", "fact")
def factorial(args: list[float]) -> float:
    """Product of 2..trunc(x) as floats; 1 for anything below 2."""
    result = 1.0
    for n in range(2, truncate_to_int(args[0]) + 1):
        result *= n
        if math.isinf(result):
            break
    return result


@FunctionMap.register("log", signature="[base,] x")
def log(args: list[float]) -> float:
    """log(x) is base 10; log(base, x) uses an explicit base."""
    if len(args) == 1:
        return float(np.log10(args[0]))
    return logn(args)


@FunctionMap.register("logn", min_args=2, signature="base, x")
def logn(args: list[float]) -> float:
    base, x = args[0], args[1]
    return float(np.divide(np.log(x), np.log(base)))


@FunctionMap.register("pow", min_args=2, signature="x, exponent")
def power(args: list[float]) -> float:
    return float(np.power(args[0], args[1]))


@FunctionMap.register("root", min_args=2, signature="n, x")
def root(args: list[float]) -> float:
    """The n-th root of x, computed as x ^ (1 / n)."""
    n, x = args[0], args[1]
    return float(np.power(x, np.divide(1.0, n)))


@FunctionMap.register("hypot", min_args=2, signature="x, y")
def hypot(args: list[float]) -> float:
    return float(np.hypot(args[0], args[1]))


@FunctionMap.register("max", signature="x, ...")
def maximum(args: list[float]) -> float:
    return float(reduce(np.fmax, args))


@FunctionMap.register("min", signature="x, ...")
def minimum(args: list[float]) -> float:
    return float(reduce(np.fmin, args))


@FunctionMap.register("sum", min_args=0, signature="...")
def total(args: list[float]) -> float:
    return sum(args, 0.0)
