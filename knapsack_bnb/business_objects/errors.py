# -*- coding: utf-8 -*-
"""
Common exceptions for the business objects layer.
"""


class InvalidInstanceError(ValueError):
    """Raised when an item or budget violates the non-negativity precondition."""


class PolicyError(ValueError):
    """Raised when solver configuration knobs are out of range."""


class StateValidationError(ValueError):
    """Raised when a solution violates domain constraints (e.g. over budget)."""
