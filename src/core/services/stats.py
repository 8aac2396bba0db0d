"""Statistics fixture module.

Operates over an ordered sequence of numbers. The filters return new lists
and keep the relative order of the elements they retain; zero-valued elements
belong to neither `positive` nor `negative`.
"""

from __future__ import annotations

from typing import Iterable

from core.services.arithmetic import Number


def total(values: Iterable[Number]) -> Number:
    """Sum of `values`; `0` for an empty input."""

    return sum(values, 0)


def positive(values: Iterable[Number]) -> list[Number]:
    return [v for v in values if v > 0]


def negative(values: Iterable[Number]) -> list[Number]:
    return [v for v in values if v < 0]


def zeros(values: Iterable[Number]) -> list[Number]:
    """Elements equal to zero, in original order."""

    return [v for v in values if v == 0]
