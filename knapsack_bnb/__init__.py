# -*- coding: utf-8 -*-
"""
knapsack_bnb: exact branch-and-bound solvers for the 0/1 and unbounded
knapsack problems over generic nonnegative numeric values and costs.

Typical use:

    from knapsack_bnb import Instance, BranchAndBound

    inst = Instance(budget=50)
    inst.add_item(60, 10)
    inst.add_item(100, 20)
    inst.add_item(120, 30)
    sol = BranchAndBound().solve(inst)
    sol.total_value   # 220
"""

from .business_objects import (
    InvalidInstanceError,
    PolicyError,
    StateValidationError,
    Item,
    Instance,
)
from .planning import SolverPolicy, ZeroOneSolution, UnboundedSolution
from .planning.solvers import (
    BranchAndBound,
    UnboundedBranchAndBound,
    run_branch_and_bound,
    run_brute_force,
)

# Generic entry point: solve(instance, policy=None)
solve = run_branch_and_bound

__all__ = [
    "InvalidInstanceError",
    "PolicyError",
    "StateValidationError",
    "Item",
    "Instance",
    "SolverPolicy",
    "ZeroOneSolution",
    "UnboundedSolution",
    "BranchAndBound",
    "UnboundedBranchAndBound",
    "run_branch_and_bound",
    "run_brute_force",
    "solve",
]
