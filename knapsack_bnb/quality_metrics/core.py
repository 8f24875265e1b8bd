# -*- coding: utf-8 -*-
"""
quality_metrics/core.py

Pure helpers to report on and verify knapsack solutions.
- No side effects
- Works off an Instance and a solved ZeroOneSolution / UnboundedSolution

Public API:
  - recompute_totals(instance, decisions) -> (value, cost)
  - check_feasibility(instance, solution) -> None (raises on violation)
  - root_bound(instance, unbounded=False, free_copies=1) -> float
  - compute_solution_metrics(instance, solution, policy=None) -> Dict[str, float]
"""

from __future__ import annotations
from typing import Any, Dict, Optional, Sequence, Tuple

from knapsack_bnb.business_objects.errors import StateValidationError
from knapsack_bnb.business_objects.instance import Instance
from knapsack_bnb.heuristics.bounds import fractional_upper_bound
from knapsack_bnb.planning.policy import SolverPolicy
from knapsack_bnb.planning.solution import UnboundedSolution
from knapsack_bnb.planning.state import prepare_working_set


def recompute_totals(instance: Instance, decisions: Sequence[Any]) -> Tuple[Any, Any]:
    """
    Recompute (total value, total cost) from raw items and per-index decisions.

    `decisions[i]` may be a bool (0/1) or a copy count (unbounded).
    """
    if len(decisions) != instance.item_count():
        raise StateValidationError(
            f"Expected {instance.item_count()} decisions, got {len(decisions)}."
        )
    value: Any = 0
    cost: Any = 0
    for d, it in zip(decisions, instance):
        n = int(d)
        if n:
            value += n * it.value
            cost += n * it.cost
    return value, cost


def check_feasibility(instance: Instance, solution: Any) -> None:
    """Raise StateValidationError if the solution exceeds the budget."""
    used = solution.total_cost
    if used > instance.budget:
        raise StateValidationError(
            f"Solution cost {used!r} exceeds budget {instance.budget!r}."
        )


def root_bound(instance: Instance, unbounded: bool = False, free_copies: int = 1) -> float:
    """
    Fractional upper bound of the whole instance.

    Free items contribute `free_copies` copies each (always one in the 0/1 variant).
    """
    ws = prepare_working_set(instance)
    copies = free_copies if unbounded else 1
    free_value = sum(copies * w.item.value for w in ws.free if w.item.value > 0)
    bound = fractional_upper_bound(ws.items, 0, 0, ws.budget, unbounded=unbounded)
    return float(free_value) + float(bound)


def compute_solution_metrics(
    instance: Instance,
    solution: Any,
    policy: Optional[SolverPolicy] = None,
) -> Dict[str, float]:
    """
    `policy` is the one the solution was solved with; only its free_copies
    matters here (the default policy takes each free item once).

    Returns:
      {
        "TV": ...,              # total value
        "TC": ...,              # total cost
        "Budget": ...,
        "Slack": ...,           # budget - total cost
        "BU": ...,              # budget utilization, percent (0..100)
        "Items Selected": ...,
        "Units Selected": ...,
        "Root Bound": ...,      # fractional bound of the instance
        "Bound Gap": ...,       # root bound - total value (>= 0 up to rounding)
      }
    """
    unbounded = isinstance(solution, UnboundedSolution)
    tv = float(solution.total_value)
    tc = float(solution.total_cost)
    budget = float(instance.budget)

    BU = 0.0 if budget == 0.0 else (tc / budget) * 100.0
    free_copies = policy.free_copies if policy is not None else 1
    rb = root_bound(instance, unbounded=unbounded, free_copies=free_copies)

    return {
        "TV": tv,
        "TC": tc,
        "Budget": budget,
        "Slack": budget - tc,
        "BU": float(BU),
        "Items Selected": float(len(solution.selected_indices())),
        "Units Selected": float(sum(solution.counts)),
        "Root Bound": float(rb),
        "Bound Gap": float(rb - tv),
    }
