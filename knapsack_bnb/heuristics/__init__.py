# -*- coding: utf-8 -*-
"""
Pure helpers used by the search: item features and the upper-bound estimator.
"""

from .features import efficiency_ratio, exact_ratio, is_exact, ratio_sort_key
from .bounds import fractional_upper_bound

__all__ = [
    "efficiency_ratio",
    "exact_ratio",
    "is_exact",
    "ratio_sort_key",
    "fractional_upper_bound",
]
