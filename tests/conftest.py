# -*- coding: utf-8 -*-
from __future__ import annotations

import random
from typing import Callable

import pytest

from knapsack_bnb import Instance


@pytest.fixture
def classic_instance() -> Instance:
    """Three items, budget 50: optimum takes items 1 and 2 (value 220)."""
    return Instance.from_pairs(50, [(60, 10), (100, 20), (120, 30)])


@pytest.fixture
def make_random_instance() -> Callable[..., Instance]:
    """Factory for reproducible random instances with integer data."""

    def _make(
        seed: int,
        n_items: int,
        max_value: int = 50,
        min_cost: int = 1,
        max_cost: int = 20,
        budget_frac: float = 0.5,
    ) -> Instance:
        rng = random.Random(seed)
        pairs = [
            (rng.randint(0, max_value), rng.randint(min_cost, max_cost))
            for _ in range(n_items)
        ]
        total_cost = sum(c for _, c in pairs)
        budget = int(total_cost * budget_frac)
        return Instance.from_pairs(budget, pairs)

    return _make
