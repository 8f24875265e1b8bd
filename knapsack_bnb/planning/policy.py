# -*- coding: utf-8 -*-
"""
Policy (configuration knobs) for the knapsack solvers.

Variant:
  - variant: {"zero_one", "unbounded"}
      "zero_one"  -> each item selected at most once
      "unbounded" -> each item selected any nonnegative number of times

Free items (cost == 0):
  - free_copies: copies of each positive-value free item taken in the
    unbounded variant. Free items never consume budget, so any positive
    count is feasible; the count is a caller decision, not an optimum.
    The 0/1 variant always takes a positive-value free item exactly once.

Reference solver:
  - brute_force_max_items: largest instance the exhaustive solver accepts.
"""

from __future__ import annotations
from dataclasses import dataclass

from knapsack_bnb.business_objects.errors import PolicyError

ZERO_ONE = "zero_one"
UNBOUNDED = "unbounded"

_ALLOWED_VARIANTS = {ZERO_ONE, UNBOUNDED}


@dataclass(frozen=True)
class SolverPolicy:
    """
    Solver knobs (pure data holder).

    Attributes
    ----------
    variant : str
        "zero_one" | "unbounded".
    free_copies : int
        Copies of each positive-value free item in the unbounded variant.
    brute_force_max_items : int
        Size guard for the exhaustive reference solver.
    """
    variant: str = ZERO_ONE
    free_copies: int = 1
    brute_force_max_items: int = 20

    def __post_init__(self) -> None:  # type: ignore[override]
        if self.variant not in _ALLOWED_VARIANTS:
            raise PolicyError(
                f"Unknown variant '{self.variant}'. "
                f"Allowed: {sorted(_ALLOWED_VARIANTS)}"
            )
        if self.free_copies < 0:
            raise PolicyError("SolverPolicy.free_copies must be >= 0.")
        if self.brute_force_max_items < 0:
            raise PolicyError("SolverPolicy.brute_force_max_items must be >= 0.")

    @property
    def unbounded(self) -> bool:
        return self.variant == UNBOUNDED
