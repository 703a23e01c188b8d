"""
WSE Sizer

Sizes the worksite-employee population from whichever input mode is
active and derives the gross management fee on the converted share.
"""

import math
from decimal import ROUND_HALF_UP, Decimal

from ..coercion import as_number
from ..models import InputMode, ProcessingContext, WseSizing


def round_half_up(value: float) -> int | float:
    """
    Round to the nearest whole employee, halves rounding up (away from zero).

    Values that overflowed past the float range (inf, nan) pass through.
    """
    if not math.isfinite(value):
        return value
    return int(Decimal(str(value)).to_integral_value(rounding=ROUND_HALF_UP))


class WseSizer:
    """Calculates total/converted WSE, payroll and gross management fee."""

    def calculate(self, ctx: ProcessingContext) -> WseSizing:
        inputs = ctx.inputs

        total_wse = self._total_wse(ctx)
        converted = round_half_up(total_wse * (as_number(inputs.conversion_rate) / 100))

        return WseSizing(
            total_wse=total_wse,
            converted_wse=converted,
            total_payroll=total_wse * as_number(inputs.avg_annual_wage),
            gross_mgmt_fee=converted * as_number(inputs.mgmt_fee_per_wse),
        )

    def _total_wse(self, ctx: ProcessingContext) -> float:
        """
        Only the active mode's fields are read; values left behind in the
        other mode's fields never leak into the total.
        """
        inputs = ctx.inputs
        if inputs.input_mode == InputMode.BY_CLIENTS:
            return as_number(inputs.clients) * as_number(inputs.avg_wse_per_client)
        return as_number(inputs.total_wse_direct)
