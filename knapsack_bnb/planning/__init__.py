# -*- coding: utf-8 -*-
"""
Planning layer public API.

This module exposes the core solve-time data contracts:
  - Policy configuration (SolverPolicy)
  - Preprocessing and search state (WorkingItem, WorkingSet, SearchStats)
  - Solution models (ZeroOneSolution, UnboundedSolution)

Solvers live in `planning.solvers` and are intentionally not exported here
to keep this module free of import cycles. Import them explicitly.
"""

from .policy import SolverPolicy, ZERO_ONE, UNBOUNDED
from .state import WorkingItem, WorkingSet, SearchStats, prepare_working_set
from .solution import ZeroOneSolution, UnboundedSolution

__all__ = [
    "SolverPolicy",
    "ZERO_ONE",
    "UNBOUNDED",
    "WorkingItem",
    "WorkingSet",
    "SearchStats",
    "prepare_working_set",
    "ZeroOneSolution",
    "UnboundedSolution",
]
