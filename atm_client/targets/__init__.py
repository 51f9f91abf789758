"""
Price target calculation module.

Derives four price targets from the current price and the daily volatility.
"""
from .calculator import TargetCalculator
from .models import TargetInputs, TargetResult

__all__ = ["TargetCalculator", "TargetInputs", "TargetResult"]
