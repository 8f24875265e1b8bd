# -*- coding: utf-8 -*-
from __future__ import annotations

import pytest

from knapsack_bnb import Instance, PolicyError, SolverPolicy, run_brute_force


def test_brute_force_classic(classic_instance):
    sol = run_brute_force(classic_instance)
    assert sol.selected_indices() == [1, 2]
    assert sol.total_value == 220


def test_brute_force_unbounded():
    sol = run_brute_force(Instance.from_pairs(35, [(60, 10)]), SolverPolicy(variant="unbounded"))
    assert sol.counts == (3,)


def test_brute_force_handles_free_and_expensive_items():
    inst = Instance.from_pairs(5, [(7, 0), (10, 5), (1000, 999)])
    sol = run_brute_force(inst)
    assert sol.taken == (True, True, False)
    sol = run_brute_force(inst, SolverPolicy(variant="unbounded", free_copies=2))
    assert sol.counts == (2, 1, 0)


def test_brute_force_size_guard():
    inst = Instance.from_pairs(10, [(1, 1)] * 21)
    with pytest.raises(PolicyError):
        run_brute_force(inst)
    sol = run_brute_force(Instance.from_pairs(3, [(1, 1)] * 4), SolverPolicy(brute_force_max_items=4))
    assert sol.total_value == 3
