"""
ROI Processor - Main Orchestrator

Recomputes the full derived model from the current inputs through
discrete, testable steps. Pure: no state survives between calls.
"""

from typing import Any

from .calculators import (
    BookCommissionCalculator,
    RevenueCalculator,
    ScenarioTableBuilder,
    WseSizer,
)
from .models import CalculatorInputs, CalculatorResult, ProcessingContext
from .output import OutputBuilder
from .validators import InputValidator


class RoiProcessor:
    """
    Main orchestrator for one recompute.

    Implements a clear pipeline pattern:
    1. Validate Input
    2. Build Context
    3. Aggregate Book Commission (+ master plan)
    4. Size WSE and Gross Management Fee
    5. Apply Commission Rate, Blend Revenue
    6. Build Scenario Rows
    """

    def __init__(self):
        self.validator = InputValidator()
        self.book_calculator = BookCommissionCalculator()
        self.wse_sizer = WseSizer()
        self.revenue_calculator = RevenueCalculator()
        self.scenario_builder = ScenarioTableBuilder()
        self.output_builder = OutputBuilder()

    def compute(self, inputs: CalculatorInputs) -> CalculatorResult:
        """
        Recompute every derived value.

        Args:
            inputs: Current calculator inputs

        Returns:
            CalculatorResult with all derived values
        """
        # Step 1: Validate
        self.validator.validate(inputs)

        # Step 2: Build context
        ctx = ProcessingContext(inputs=inputs)

        # Step 3: Book commission and master plan bonus
        ctx.book = self.book_calculator.calculate(ctx)

        # Step 4: WSE sizing and gross management fee
        ctx.wse = self.wse_sizer.calculate(ctx)

        # Step 5: Management fee commission and blended revenue
        ctx.revenue = self.revenue_calculator.calculate(ctx)

        # Step 6: Per-tier scenarios against the shared fee pool
        ctx.scenarios = self.scenario_builder.build(ctx)

        return CalculatorResult(
            book=ctx.book,
            wse=ctx.wse,
            revenue=ctx.revenue,
            scenarios=ctx.scenarios,
        )

    def process_from_dict(self, data: dict[str, Any]) -> dict[str, Any]:
        """
        Compute from a raw payload and return the API response dict.

        Convenience method for the HTTP surfaces.
        """
        inputs = CalculatorInputs.from_dict(data)
        result = self.compute(inputs)
        return {
            "inputs": inputs.to_dict(),
            "results": self.output_builder.to_values(result),
            "display": self.output_builder.build(result, inputs),
        }


def compute(inputs: CalculatorInputs) -> CalculatorResult:
    """Pure function form of RoiProcessor.compute."""
    return RoiProcessor().compute(inputs)
