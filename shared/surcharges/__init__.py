"""
Shared Surcharges

Base class and utilities for surcharges.
"""

from .base import Surcharge, round_money

__all__ = [
    "Surcharge",
    "round_money",
]
