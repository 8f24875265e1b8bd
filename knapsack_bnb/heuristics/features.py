# -*- coding: utf-8 -*-
"""
Derived item features used to order the search.

This module is intentionally pure/stateless and performs no mutation or I/O.

int and Fraction data are handled exactly (as Fraction); float and Decimal
data go through float.
"""

from __future__ import annotations
from fractions import Fraction
from numbers import Rational
from typing import Any


def is_exact(*numbers: Any) -> bool:
    """True iff every argument is an int or a Fraction."""
    return all(isinstance(x, Rational) for x in numbers)


def exact_ratio(value: Any, cost: Any) -> Any:
    """
    value/cost without losing precision where the data allows it.

    Returns a Fraction for int/Fraction data and a float otherwise;
    +inf if cost == 0.
    """
    if cost == 0:
        return float("inf")
    if is_exact(value, cost):
        return Fraction(value) / Fraction(cost)
    return float(value) / float(cost)


def efficiency_ratio(value: Any, cost: Any) -> float:
    """
    value/cost as a float; convention:
      if cost == 0 -> +inf  (a free item is always maximally efficient)
    """
    return float(exact_ratio(value, cost))


def ratio_sort_key(item: Any) -> Any:
    """
    Sort key for descending efficiency.

    Python sorts ascending, so the ratio is negated. Sorting is stable:
    items with equal ratios keep their relative order. Keys compare exactly
    for int/Fraction data, so huge ints never go through float.
    """
    return -exact_ratio(item.value, item.cost)
