#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Solve a small knapsack instance with both variants and print the results.

This script does NOT use argparse.
Just set the variables at the top of the file and run:

    python scripts/run_example.py
"""

from __future__ import annotations
import logging
from typing import List, Tuple

# ====== CONFIGURATION ======
BUDGET = 50

# (value, cost) pairs; an item's index is its position in this list
ITEMS: List[Tuple[int, int]] = [
    (60, 10),
    (100, 20),
    (120, 30),
    (1000, 999),   # costs more than the budget; filtered before search
]

# Copies of each positive-value zero-cost item in the unbounded variant
FREE_COPIES = 1

LOG_LEVEL = logging.DEBUG
# ============================

from knapsack_bnb import Instance, SolverPolicy, run_branch_and_bound
from knapsack_bnb.quality_metrics import compute_solution_metrics
from knapsack_bnb.utils import setup_json_logging


def main() -> None:
    setup_json_logging(LOG_LEVEL)

    instance = Instance.from_pairs(BUDGET, ITEMS)

    for variant in ("zero_one", "unbounded"):
        policy = SolverPolicy(variant=variant, free_copies=FREE_COPIES)
        solution = run_branch_and_bound(instance, policy)
        metrics = compute_solution_metrics(instance, solution, policy)

        print(f"\n=== {variant} (budget {BUDGET}) ===")
        for idx in solution.selected_indices():
            it = instance[idx]
            print(f"  - item {idx}: value={it.value} cost={it.cost} x{solution.count(idx)}")
        print(f"Total value: {solution.total_value}")
        print(f"Total cost:  {solution.total_cost}")
        print(f"Root bound:  {metrics['Root Bound']:.2f} (gap {metrics['Bound Gap']:.2f})")


if __name__ == "__main__":
    main()
