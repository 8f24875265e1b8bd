# -*- coding: utf-8 -*-
"""
Exhaustive reference solver for small instances.

Enumerates every subset (0/1) or every count vector with
count[i] <= floor(budget / cost[i]) (unbounded) and keeps the best feasible
one. Exponential by construction; guarded by
SolverPolicy.brute_force_max_items. Free items follow the same policy as the
branch-and-bound solver so both return comparable solutions.
"""

from __future__ import annotations
import itertools
import logging
from typing import Any, List, Optional, Sequence

from knapsack_bnb.business_objects.errors import PolicyError
from knapsack_bnb.business_objects.instance import Instance
from knapsack_bnb.planning.policy import SolverPolicy
from knapsack_bnb.planning.solution import UnboundedSolution, ZeroOneSolution
from knapsack_bnb.planning.solvers.branch_and_bound import Solution

logger = logging.getLogger(__name__)


def _count_ranges(instance: Instance, policy: SolverPolicy) -> List[Sequence[int]]:
    free_copies = policy.free_copies if policy.unbounded else 1
    ranges: List[Sequence[int]] = []
    for it in instance:
        if it.cost > instance.budget:
            ranges.append((0,))
        elif it.cost == 0:
            ranges.append((free_copies if it.value > 0 else 0,))
        elif policy.unbounded:
            ranges.append(range(int(instance.budget // it.cost) + 1))
        else:
            ranges.append((0, 1))
    return ranges


def run_brute_force(instance: Instance, policy: Optional[SolverPolicy] = None) -> Solution:
    """
    Return an optimal solution by full enumeration.

    Raises
    ------
    PolicyError
        If the instance has more items than policy.brute_force_max_items.
    """
    if policy is None:
        policy = SolverPolicy()
    if instance.item_count() > policy.brute_force_max_items:
        raise PolicyError(
            f"Brute force refuses {instance.item_count()} items "
            f"(limit {policy.brute_force_max_items})."
        )

    items = instance.items
    best_counts: Sequence[int] = [0] * len(items)
    best_value: Optional[Any] = None
    visited = 0

    for counts in itertools.product(*_count_ranges(instance, policy)):
        visited += 1
        cost: Any = 0
        value: Any = 0
        for n, it in zip(counts, items):
            if n:
                cost += n * it.cost
                value += n * it.value
        if cost > instance.budget:
            continue
        if best_value is None or value > best_value:
            best_value = value
            best_counts = counts

    if policy.unbounded:
        solution: Solution = UnboundedSolution(instance=instance)
    else:
        solution = ZeroOneSolution(instance=instance)
    for idx, n in enumerate(best_counts):
        if n:
            solution.set(idx, n if policy.unbounded else True)

    logger.debug(
        "brute_force.done",
        extra={"variant": policy.variant, "items": len(items), "visited": visited},
    )
    return solution
