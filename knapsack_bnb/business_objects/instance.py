# -*- coding: utf-8 -*-
"""
Instance model: a budget plus an ordered collection of items.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, List, Tuple

from .errors import InvalidInstanceError
from .items import Item


@dataclass
class Instance:
    """
    Knapsack problem input.

    An item's index is its append order; that index is the handle used by
    solutions to report decisions. Build the instance once, then treat it
    as read-only while solving.

    Attributes
    ----------
    budget : number
        Nonnegative maximum total cost of a selection.
    """
    budget: Any = 0
    _items: List[Item] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:  # type: ignore[override]
        self.set_budget(self.budget)

    @classmethod
    def from_pairs(cls, budget: Any, pairs: Iterable[Tuple[Any, Any]]) -> "Instance":
        """Build an instance from (value, cost) pairs, indexed in iteration order."""
        inst = cls(budget=budget)
        for value, cost in pairs:
            inst.add_item(value, cost)
        return inst

    def set_budget(self, budget: Any) -> None:
        if budget < 0:
            raise InvalidInstanceError(f"Instance budget must be >= 0 (got {budget!r}).")
        self.budget = budget

    def add_item(self, value: Any, cost: Any) -> int:
        """Append an item and return its index."""
        self._items.append(Item(value=value, cost=cost))
        return len(self._items) - 1

    @property
    def items(self) -> Tuple[Item, ...]:
        return tuple(self._items)

    def item_count(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Item:
        return self._items[index]

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)
