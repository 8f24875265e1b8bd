# -*- coding: utf-8 -*-
from __future__ import annotations

import random
from fractions import Fraction

from knapsack_bnb import (
    Instance,
    SolverPolicy,
    UnboundedBranchAndBound,
    UnboundedSolution,
    run_branch_and_bound,
    run_brute_force,
)
from knapsack_bnb.quality_metrics import recompute_totals

UNBOUNDED = SolverPolicy(variant="unbounded")


def test_single_item_repeated():
    inst = Instance.from_pairs(35, [(60, 10)])
    sol = UnboundedBranchAndBound().solve(inst)
    assert isinstance(sol, UnboundedSolution)
    assert sol[0] == 3
    assert sol.counts == (3,)
    assert sol.total_value == 180
    assert sol.total_cost == 30
    assert inst.budget - sol.total_cost == 5


def test_fewer_copies_of_best_item_can_win():
    # Greedy would take one copy of item 0 (500); four copies of item 1 give 792.
    inst = Instance.from_pairs(800, [(500, 500), (198, 200), (15, 150)])
    sol = run_branch_and_bound(inst, UNBOUNDED)
    assert sol.counts == (0, 4, 0)
    assert sol.total_value == 792
    assert sol.total_cost == 800


def test_classic_instance_unbounded(classic_instance):
    sol = UnboundedBranchAndBound().solve(classic_instance)
    assert sol.counts == (5, 0, 0)
    assert sol.total_value == 300
    assert sol.total_cost == 50


def test_degenerate_inputs():
    assert UnboundedBranchAndBound().solve(Instance(budget=10)).total_value == 0
    sol = UnboundedBranchAndBound().solve(Instance.from_pairs(0, [(5, 1)]))
    assert sol.total_value == 0
    assert sol.total_cost == 0
    sol = UnboundedBranchAndBound().solve(Instance.from_pairs(5, [(10, 5), (1000, 999)]))
    assert sol.counts == (1, 0)


def test_free_items_follow_policy():
    inst = Instance.from_pairs(10, [(7, 0), (10, 5), (0, 0)])
    sol = run_branch_and_bound(inst, SolverPolicy(variant="unbounded", free_copies=3))
    assert sol.counts == (3, 2, 0)
    assert sol.total_value == 41
    assert sol.total_cost == 10

    sol = run_branch_and_bound(inst, SolverPolicy(variant="unbounded", free_copies=0))
    assert sol.counts == (0, 2, 0)

    assert UnboundedBranchAndBound().solve(inst).counts == (1, 2, 0)


def test_matches_brute_force_on_random_instances(make_random_instance):
    bnb = UnboundedBranchAndBound()
    for seed in range(20):
        inst = make_random_instance(seed, n_items=4, min_cost=4, max_cost=20, budget_frac=0.5)
        sol = bnb.solve(inst)
        ref = run_brute_force(inst, UNBOUNDED)
        assert sol.total_value == ref.total_value
        assert sol.total_cost <= inst.budget
        assert recompute_totals(inst, sol.counts) == (sol.total_value, sol.total_cost)


def test_fraction_data_matches_brute_force():
    for seed in range(10):
        rng = random.Random(seed)
        pairs = [
            (Fraction(rng.randint(0, 30), 2), Fraction(rng.randint(6, 14), rng.randint(1, 2)))
            for _ in range(4)
        ]
        inst = Instance.from_pairs(Fraction(41, 2), pairs)
        sol = run_branch_and_bound(inst, UNBOUNDED)
        assert sol.total_value == run_brute_force(inst, UNBOUNDED).total_value
        assert sol.total_cost <= inst.budget


def test_unbounded_never_worse_than_zero_one(make_random_instance):
    for seed in range(15):
        inst = make_random_instance(seed, n_items=8)
        zero_one = run_branch_and_bound(inst).total_value
        unbounded = run_branch_and_bound(inst, UNBOUNDED).total_value
        assert unbounded >= zero_one


def test_budget_monotonicity():
    pairs = [(13, 7), (22, 11), (8, 5), (30, 17)]
    previous = 0
    for budget in range(0, 60, 2):
        value = UnboundedBranchAndBound().solve(Instance.from_pairs(budget, pairs)).total_value
        assert value >= previous
        previous = value


def test_large_int_data_matches_brute_force():
    # ratios differ only far below float precision
    for seed in range(10):
        rng = random.Random(seed)
        pairs = []
        for _ in range(4):
            cost = rng.randint(1, 4)
            pairs.append((2**54 * cost + rng.randint(0, 50), cost))
        inst = Instance.from_pairs(10, pairs)
        sol = UnboundedBranchAndBound().solve(inst)
        assert sol.total_value == run_brute_force(inst, UNBOUNDED).total_value
        assert sol.total_cost <= 10
