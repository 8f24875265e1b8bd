# -*- coding: utf-8 -*-
"""
Fractional-relaxation upper bound for the branch-and-bound search.

Given working items sorted by descending efficiency and a partial state
(value, budget_left) committed for positions < depth, return a number that
is never below the best total value reachable using positions >= depth.

0/1 (Dantzig bound):
    take items whole while they fit; the first one that does not fit is
    taken fractionally (budget_left * ratio) and the scan stops.

Unbounded:
    take floor(budget_left / cost) whole copies of the item at `depth`,
    then fill the remainder fractionally at the ratio of the next position.
    This is the LP optimum once x[depth] is capped at its integral maximum,
    so it stays admissible. Flooring every following item as well is NOT:
    it can drop below an integral completion that uses fewer copies of the
    first item.

Whole items are summed in their own numeric type. The fractional term is a
Fraction for int/Fraction data and a float otherwise, so the bound of exact
data is exact and pruning never loses a strictly better subtree to rounding.

Working items must have strictly positive cost (free items are removed
during preprocessing), so every ratio here is finite.
"""

from __future__ import annotations
from fractions import Fraction
from typing import TYPE_CHECKING, Any, Sequence

from knapsack_bnb.heuristics.features import is_exact

if TYPE_CHECKING:  # pragma: no cover - typing only
    from knapsack_bnb.business_objects.items import Item
    from knapsack_bnb.planning.state import WorkingItem


def _fill(budget_left: Any, item: "Item") -> Any:
    """Value of spending `budget_left` on a fraction of `item`."""
    if is_exact(budget_left, item.value, item.cost):
        return Fraction(budget_left) * Fraction(item.value) / Fraction(item.cost)
    return float(budget_left) * float(item.value) / float(item.cost)


def _add(total: Any, term: Any) -> Any:
    # Decimal does not mix with float or Fraction
    try:
        return total + term
    except TypeError:
        return float(total) + float(term)


def _zero_one_bound(
    working: Sequence["WorkingItem"],
    depth: int,
    value: Any,
    budget_left: Any,
) -> Any:
    bound = value
    for pos in range(depth, len(working)):
        item = working[pos].item
        if budget_left < item.cost:
            return _add(bound, _fill(budget_left, item))
        budget_left -= item.cost
        bound = _add(bound, item.value)
    return bound


def _unbounded_bound(
    working: Sequence["WorkingItem"],
    depth: int,
    value: Any,
    budget_left: Any,
) -> Any:
    bound = value
    if depth >= len(working):
        return bound

    first = working[depth].item
    if budget_left < first.cost:
        return _add(bound, _fill(budget_left, first))

    copies = int(budget_left // first.cost)
    bound = _add(bound, copies * first.value)
    remainder = budget_left - copies * first.cost

    if depth + 1 < len(working):
        bound = _add(bound, _fill(remainder, working[depth + 1].item))
    return bound


def fractional_upper_bound(
    working: Sequence["WorkingItem"],
    depth: int,
    value: Any,
    budget_left: Any,
    *,
    unbounded: bool = False,
) -> Any:
    """
    Upper bound on the total value reachable from a partial state.

    Parameters
    ----------
    working : sequence of WorkingItem
        Items sorted by descending efficiency ratio.
    depth : int
        First position still open for decisions.
    value, budget_left :
        Running totals of the decisions committed for positions < depth.
        Local copies are used; the caller's values are never modified.
    unbounded : bool
        Select the unbounded-variant rule (repeated copies allowed).

    Returns
    -------
    number
        int or Fraction for int/Fraction data, float or Decimal otherwise.
    """
    if unbounded:
        return _unbounded_bound(working, depth, value, budget_left)
    return _zero_one_bound(working, depth, value, budget_left)
