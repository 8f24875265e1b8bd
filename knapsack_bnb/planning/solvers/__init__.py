# -*- coding: utf-8 -*-
"""
Exact knapsack solvers.

  - branch_and_bound: the production solver (0/1 and unbounded)
  - brute_force:      exhaustive reference for small instances
"""

from .branch_and_bound import (
    BranchAndBound,
    UnboundedBranchAndBound,
    run_branch_and_bound,
)
from .brute_force import run_brute_force

__all__ = [
    "BranchAndBound",
    "UnboundedBranchAndBound",
    "run_branch_and_bound",
    "run_brute_force",
]
