# -*- coding: utf-8 -*-
"""
Solution models for knapsack results.

A solution is bound to the Instance it was produced for and records one
decision per original item index:
  - ZeroOneSolution:   taken / not taken
  - UnboundedSolution: number of copies taken

Both start as "nothing taken" and are filled in by the solver's result
assembly step; callers only read them afterwards.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from knapsack_bnb.business_objects.errors import InvalidInstanceError
from knapsack_bnb.business_objects.instance import Instance
from .state import SearchStats


@dataclass
class _CountSolution:
    instance: Instance
    stats: Optional[SearchStats] = field(default=None, compare=False)
    _counts: List[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:  # type: ignore[override]
        self._counts = [0] * self.instance.item_count()

    def _check_index(self, i: int) -> None:
        if not 0 <= i < len(self._counts):
            raise IndexError(f"Item index {i} out of range [0, {len(self._counts)}).")

    def is_taken(self, i: int) -> bool:
        self._check_index(i)
        return self._counts[i] > 0

    def count(self, i: int) -> int:
        self._check_index(i)
        return self._counts[i]

    def remove(self, i: int) -> None:
        self._check_index(i)
        self._counts[i] = 0

    def selected_indices(self) -> List[int]:
        return [i for i, n in enumerate(self._counts) if n > 0]

    @property
    def counts(self) -> Tuple[int, ...]:
        return tuple(self._counts)

    @property
    def total_value(self) -> Any:
        total: Any = 0
        for n, it in zip(self._counts, self.instance):
            if n:
                total += n * it.value
        return total

    @property
    def total_cost(self) -> Any:
        total: Any = 0
        for n, it in zip(self._counts, self.instance):
            if n:
                total += n * it.cost
        return total


@dataclass
class ZeroOneSolution(_CountSolution):
    """
    0/1 decisions: each item is either taken once or not at all.

    Attributes
    ----------
    instance : Instance
        The instance this solution refers to (read-only).
    stats : SearchStats | None
        Counters of the search that produced the solution, if any.
    """

    def add(self, i: int) -> None:
        self._check_index(i)
        self._counts[i] = 1

    def set(self, i: int, taken: bool) -> None:
        self._check_index(i)
        self._counts[i] = 1 if taken else 0

    def __getitem__(self, i: int) -> bool:
        return self.is_taken(i)

    @property
    def taken(self) -> Tuple[bool, ...]:
        return tuple(n > 0 for n in self._counts)


@dataclass
class UnboundedSolution(_CountSolution):
    """
    Unbounded decisions: a nonnegative copy count per item.

    Attributes
    ----------
    instance : Instance
        The instance this solution refers to (read-only).
    stats : SearchStats | None
        Counters of the search that produced the solution, if any.
    """

    def add(self, i: int) -> None:
        """Take one more copy of item i."""
        self._check_index(i)
        self._counts[i] += 1

    def set(self, i: int, copies: int) -> None:
        self._check_index(i)
        if copies < 0:
            raise InvalidInstanceError(f"Copy count must be >= 0 (got {copies}).")
        self._counts[i] = int(copies)

    def __getitem__(self, i: int) -> int:
        return self.count(i)
