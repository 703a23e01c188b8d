"""
Calculators Package

Provides all calculation components for one ROI recompute.
"""

from .book import BookCommissionCalculator
from .revenue import RevenueCalculator
from .scenarios import ScenarioTableBuilder
from .wse import WseSizer

__all__ = [
    "BookCommissionCalculator",
    "WseSizer",
    "RevenueCalculator",
    "ScenarioTableBuilder",
]
