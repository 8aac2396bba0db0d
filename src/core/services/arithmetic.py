"""Arithmetic fixture module: four pure operations over two numbers."""

from __future__ import annotations

import math

Number = int | float


def add(a: Number, b: Number) -> Number:
    return a + b


def sub(a: Number, b: Number) -> Number:
    return a - b


def mul(a: Number, b: Number) -> Number:
    return a * b


def div(a: Number, b: Number) -> float:
    """Divide `a` by `b` following IEEE-754.

    Python raises `ZeroDivisionError` for `x / 0`; here a zero divisor yields
    `inf`/`-inf` (signed by both operands) or `nan` for `0 / 0`.
    """

    if b == 0:
        if a == 0 or (isinstance(a, float) and math.isnan(a)):
            return math.nan
        # Compare rather than convert: huge ints overflow float().
        flip = (a < 0) != (math.copysign(1.0, b) < 0)
        return -math.inf if flip else math.inf
    return a / b
