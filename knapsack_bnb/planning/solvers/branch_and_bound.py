# -*- coding: utf-8 -*-
"""
Exact branch-and-bound solver for the 0/1 and unbounded knapsack problems.

Pipeline per solve call:
  1) Preprocess: drop items costing more than the budget, split off free
     (zero-cost) items, sort the rest by descending value/cost ratio.
  2) Search: iterative depth-first search over the sorted items with an
     explicit decision stack, alternating DESCEND and BACKTRACK modes.
     Before committing a position, the fractional upper bound from that
     position is compared with the incumbent; if it cannot beat it, the
     whole forward scan is abandoned.
  3) Assemble: map the best decision stack back to original item indices
     and write it into a fresh Solution, then add the free items.

The solver objects only hold an immutable SolverPolicy; all working state
is local to one call, so a single solver can be reused and shared across
threads on independent instances.
"""

from __future__ import annotations
import logging
from dataclasses import replace
from enum import Enum
from typing import Any, List, Optional, Tuple, Union

from knapsack_bnb.business_objects.errors import StateValidationError
from knapsack_bnb.business_objects.instance import Instance
from knapsack_bnb.heuristics.bounds import fractional_upper_bound
from knapsack_bnb.planning.policy import SolverPolicy, UNBOUNDED, ZERO_ONE
from knapsack_bnb.planning.solution import UnboundedSolution, ZeroOneSolution
from knapsack_bnb.planning.state import (
    Decision,
    SearchState,
    SearchStats,
    WorkingItem,
    WorkingSet,
    prepare_working_set,
)

logger = logging.getLogger(__name__)

Solution = Union[ZeroOneSolution, UnboundedSolution]

# Best decision sequence: (position in working list, copies) pairs.
DecisionTrail = List[Tuple[int, int]]


class Mode(Enum):
    DESCEND = "descend"
    BACKTRACK = "backtrack"


def _search(
    working: Tuple[WorkingItem, ...],
    budget: Any,
    *,
    unbounded: bool,
    stats: SearchStats,
) -> Tuple[DecisionTrail, Any]:
    """
    Run the iterative branch-and-bound over `working` (sorted, positive costs).

    Returns the best decision trail and its value. The incumbent starts at
    the empty selection (value 0), so an empty trail is returned when
    nothing can be taken.
    """
    n = len(working)
    state = SearchState(depth=0, value=0, budget_left=budget)
    best_value: Any = 0
    best_trail: DecisionTrail = []
    mode = Mode.DESCEND

    while True:
        if mode is Mode.DESCEND:
            while state.depth < n:
                item = working[state.depth].item
                if state.budget_left < item.cost:
                    state.depth += 1
                    continue

                stats.bound_evaluations += 1
                bound = fractional_upper_bound(
                    working, state.depth, state.value, state.budget_left, unbounded=unbounded
                )
                if bound <= best_value:
                    stats.prunes += 1
                    break

                copies = int(state.budget_left // item.cost) if unbounded else 1
                state.stack.append(
                    Decision(
                        position=state.depth,
                        copies=copies,
                        value_before=state.value,
                        budget_before=state.budget_left,
                    )
                )
                state.value = state.value + copies * item.value
                state.budget_left = state.budget_left - copies * item.cost
                state.depth += 1
                stats.commits += 1

            if state.value > best_value:
                best_value = state.value
                best_trail = state.snapshot()
                stats.incumbent_updates += 1
            mode = Mode.BACKTRACK
            continue

        # Mode.BACKTRACK
        if not state.stack:
            break
        stats.backtracks += 1
        top = state.stack[-1]
        top.copies -= 1
        if top.copies == 0:
            state.stack.pop()
        item = working[top.position].item
        state.value = top.value_before + top.copies * item.value
        state.budget_left = top.budget_before - top.copies * item.cost
        state.depth = top.position + 1
        mode = Mode.DESCEND

    return best_trail, best_value


def _free_copies(policy: SolverPolicy) -> int:
    return policy.free_copies if policy.unbounded else 1


def _assemble(
    instance: Instance,
    ws: WorkingSet,
    trail: DecisionTrail,
    policy: SolverPolicy,
    stats: SearchStats,
) -> Solution:
    """Translate working-list positions back to instance indices."""
    if policy.unbounded:
        solution: Solution = UnboundedSolution(instance=instance, stats=stats)
    else:
        solution = ZeroOneSolution(instance=instance, stats=stats)

    for position, copies in trail:
        idx = ws.items[position].index
        if solution.is_taken(idx):
            raise StateValidationError(f"Instance index {idx} decided twice during assembly.")
        solution.set(idx, copies if policy.unbounded else True)

    free_copies = _free_copies(policy)
    for w in ws.free:
        if w.item.value > 0 and free_copies > 0:
            solution.set(w.index, free_copies if policy.unbounded else True)

    return solution


def run_branch_and_bound(instance: Instance, policy: Optional[SolverPolicy] = None) -> Solution:
    """
    Solve `instance` to optimality.

    Parameters
    ----------
    instance : Instance
        Budget and items; not modified.
    policy : SolverPolicy | None
        Variant and free-item handling. Defaults to the 0/1 variant.

    Returns
    -------
    ZeroOneSolution | UnboundedSolution
        Optimal selection with `total_cost <= instance.budget`.
    """
    if policy is None:
        policy = SolverPolicy()

    ws = prepare_working_set(instance)
    stats = SearchStats()
    trail, best_value = _search(ws.items, ws.budget, unbounded=policy.unbounded, stats=stats)
    solution = _assemble(instance, ws, trail, policy, stats)

    logger.debug(
        "bnb.done",
        extra={
            "variant": policy.variant,
            "items": instance.item_count(),
            "working": len(ws),
            "dropped": len(ws.dropped),
            "free": len(ws.free),
            "best_value": best_value,
            **stats.as_dict(),
        },
    )
    return solution


class BranchAndBound:
    """
    Stateless 0/1 knapsack solver.

    Usage
    -----
    >>> inst = Instance.from_pairs(50, [(60, 10), (100, 20), (120, 30)])
    >>> BranchAndBound().solve(inst).selected_indices()
    [1, 2]
    """
    variant = ZERO_ONE

    def __init__(self, policy: Optional[SolverPolicy] = None) -> None:
        if policy is None:
            policy = SolverPolicy(variant=self.variant)
        elif policy.variant != self.variant:
            policy = replace(policy, variant=self.variant)
        self.policy = policy

    def solve(self, instance: Instance) -> Solution:
        return run_branch_and_bound(instance, self.policy)


class UnboundedBranchAndBound(BranchAndBound):
    """Stateless unbounded knapsack solver (repeated copies allowed)."""
    variant = UNBOUNDED

