# -*- coding: utf-8 -*-
"""
Public exports for the business objects layer.
"""

from .errors import InvalidInstanceError, PolicyError, StateValidationError
from .items import Item
from .instance import Instance

__all__ = [
    # errors
    "InvalidInstanceError",
    "PolicyError",
    "StateValidationError",
    # core models
    "Item",
    "Instance",
]
