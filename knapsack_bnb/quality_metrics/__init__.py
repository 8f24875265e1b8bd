# -*- coding: utf-8 -*-
"""
Solution reporting and verification helpers.
"""

from .core import check_feasibility, compute_solution_metrics, recompute_totals, root_bound

__all__ = [
    "check_feasibility",
    "compute_solution_metrics",
    "recompute_totals",
    "root_bound",
]
