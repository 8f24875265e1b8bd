# -*- coding: utf-8 -*-
"""
Run-time state containers for the branch-and-bound search.

This module defines:
  - WorkingItem:  an item carried together with its original index
  - WorkingSet:   immutable preprocessing result (sorted items, free items, dropped indices)
  - Decision:     one entry of the search's LIFO decision stack
  - SearchState:  mutable running totals of a single search
  - SearchStats:  per-call counters reported with the solution

Notes
-----
- Business (timeless) entities live in `business_objects/`:
  * business_objects.items.Item
  * business_objects.instance.Instance
- Everything below is created fresh for one solve call and never shared.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from knapsack_bnb.business_objects.items import Item
from knapsack_bnb.business_objects.instance import Instance
from knapsack_bnb.heuristics.features import ratio_sort_key


# ----------------------------
# Preprocessing (immutable)
# ----------------------------

@dataclass(frozen=True)
class WorkingItem:
    """
    An item together with its index in the originating Instance.

    Keeping both in one record means sorting cannot separate an item from
    its identity.
    """
    item: Item
    index: int


@dataclass(frozen=True)
class WorkingSet:
    """
    Preprocessed view of an Instance for one solve.

    Attributes
    ----------
    items : tuple[WorkingItem, ...]
        Positive-cost items with cost <= budget, sorted by descending ratio.
    free : tuple[WorkingItem, ...]
        Zero-cost items in original order (decided outside the search).
    dropped : tuple[int, ...]
        Original indices of items costing more than the whole budget.
    budget : number
        The instance budget.
    """
    items: Tuple[WorkingItem, ...]
    free: Tuple[WorkingItem, ...]
    dropped: Tuple[int, ...]
    budget: Any

    def __len__(self) -> int:
        return len(self.items)


def prepare_working_set(instance: Instance) -> WorkingSet:
    """
    Filter out infeasible-alone items, split off free items and sort the rest.

    An item whose own cost exceeds the budget can never be part of a
    feasible selection in either variant (one unit is already too much).
    """
    budget = instance.budget
    searchable: List[WorkingItem] = []
    free: List[WorkingItem] = []
    dropped: List[int] = []

    for idx, it in enumerate(instance):
        if it.cost > budget:
            dropped.append(idx)
        elif it.is_free:
            free.append(WorkingItem(item=it, index=idx))
        else:
            searchable.append(WorkingItem(item=it, index=idx))

    searchable.sort(key=lambda w: ratio_sort_key(w.item))

    return WorkingSet(
        items=tuple(searchable),
        free=tuple(free),
        dropped=tuple(dropped),
        budget=budget,
    )


# ----------------------------
# Search runtime (mutable)
# ----------------------------

@dataclass
class Decision:
    """
    One committed decision on the search stack.

    Attributes
    ----------
    position : int
        Position in the sorted working list.
    copies : int
        Units currently taken (always 1 in the 0/1 variant).
    value_before, budget_before :
        Running totals just before this position was committed; undoing
        restores from them instead of subtracting.
    """
    position: int
    copies: int
    value_before: Any
    budget_before: Any


@dataclass
class SearchState:
    """
    Running totals of the path committed so far.

    Attributes
    ----------
    depth : int
        Next position in the working list to consider.
    value : number
        Total value of the committed decisions.
    budget_left : number
        Budget not yet consumed by the committed decisions.
    stack : list[Decision]
        LIFO of committed decisions.
    """
    depth: int
    value: Any
    budget_left: Any
    stack: List[Decision] = field(default_factory=list)

    def snapshot(self) -> List[Tuple[int, int]]:
        """Copy the stack as (position, copies) pairs."""
        return [(d.position, d.copies) for d in self.stack]


@dataclass
class SearchStats:
    """Counters collected during one search."""
    commits: int = 0
    prunes: int = 0
    backtracks: int = 0
    incumbent_updates: int = 0
    bound_evaluations: int = 0

    def as_dict(self) -> Dict[str, int]:
        return {
            "commits": self.commits,
            "prunes": self.prunes,
            "backtracks": self.backtracks,
            "incumbent_updates": self.incumbent_updates,
            "bound_evaluations": self.bound_evaluations,
        }
