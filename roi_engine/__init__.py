"""
ESI CHANNEL PARTNER ROI CALCULATOR
Commission and revenue projection engine
"""

from .models import CalculatorInputs, CalculatorResult
from .processor import RoiProcessor, compute
from .session import CalculatorSession

__all__ = ['RoiProcessor', 'CalculatorInputs', 'CalculatorResult', 'CalculatorSession', 'compute']
