# -*- coding: utf-8 -*-
from __future__ import annotations

from knapsack_bnb import Instance
from knapsack_bnb.planning import prepare_working_set


def test_prepare_filters_sorts_and_keeps_identity():
    inst = Instance.from_pairs(
        20,
        [
            (10, 10),    # ratio 1.0
            (1000, 999), # too expensive
            (30, 10),    # ratio 3.0
            (4, 0),      # free
            (20, 10),    # ratio 2.0
        ],
    )
    ws = prepare_working_set(inst)

    assert [w.index for w in ws.items] == [2, 4, 0]
    assert [w.item for w in ws.items] == [inst[2], inst[4], inst[0]]
    assert [w.index for w in ws.free] == [3]
    assert ws.dropped == (1,)
    assert ws.budget == 20
    assert len(ws) == 3


def test_prepare_keeps_insertion_order_on_ties():
    inst = Instance.from_pairs(100, [(2, 1), (4, 2), (6, 3)])
    ws = prepare_working_set(inst)
    assert [w.index for w in ws.items] == [0, 1, 2]


def test_prepare_item_costing_exactly_budget_is_kept():
    inst = Instance.from_pairs(5, [(10, 5), (11, 6)])
    ws = prepare_working_set(inst)
    assert [w.index for w in ws.items] == [0]
    assert ws.dropped == (1,)


def test_prepare_empty_instance():
    ws = prepare_working_set(Instance(budget=3))
    assert ws.items == ()
    assert ws.free == ()
    assert ws.dropped == ()
