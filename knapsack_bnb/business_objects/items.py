# -*- coding: utf-8 -*-
"""
Item model for the knapsack instance.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any

from knapsack_bnb.heuristics.features import efficiency_ratio, exact_ratio
from .errors import InvalidInstanceError


@dataclass(frozen=True)
class Item:
    """
    A (value, cost) pair that can be selected into the knapsack.

    Attributes
    ----------
    value : number
        Nonnegative objective contribution per selected unit.
    cost : number
        Nonnegative budget consumption per selected unit.

    Value and cost may be any numeric type supporting ordering, addition,
    subtraction, multiplication by an int and conversion to float
    (int, float, Fraction, Decimal). They need not share a type.
    """
    value: Any
    cost: Any

    def __post_init__(self) -> None:  # type: ignore[override]
        if self.value < 0:
            raise InvalidInstanceError(f"Item value must be >= 0 (got {self.value!r}).")
        if self.cost < 0:
            raise InvalidInstanceError(f"Item cost must be >= 0 (got {self.cost!r}).")

    @property
    def ratio(self) -> float:
        """Efficiency value/cost as a float; +inf for a free item."""
        return efficiency_ratio(self.value, self.cost)

    @property
    def is_free(self) -> bool:
        return self.cost == 0

    def precedes(self, other: "Item") -> bool:
        """True iff this item is strictly more efficient than `other`."""
        return exact_ratio(self.value, self.cost) > exact_ratio(other.value, other.cost)
