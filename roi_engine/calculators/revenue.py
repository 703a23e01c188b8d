"""
Revenue Calculator

Applies the management-fee commission rate, scales the book portion and
derives the headline value-added and share metrics.
"""

from ..coercion import as_number
from ..models import ProcessingContext, RevenueSummary


def share_of(part: float, total: float) -> float:
    """part as a percentage of total; 0 when total is not positive."""
    if total > 0:
        return (part / total) * 100
    return 0.0


def uplift_pct(value_added: float, base: float) -> float | None:
    """Value added as a percentage of base; None when base is not positive."""
    if base > 0:
        return (value_added / base) * 100
    return None


class RevenueCalculator:
    """Calculates the blended total revenue and uplift metrics."""

    def commission_from_rate(self, gross_mgmt_fee: float, rate_pct) -> float:
        """Commission earned on the gross management fee at rate_pct percent."""
        return gross_mgmt_fee * (as_number(rate_pct) / 100)

    def calculate(self, ctx: ProcessingContext) -> RevenueSummary:
        """
        total_revenue = mgmt_fee_commission + adjusted_book + master_plan_commission

        The commission rate is a single parameter: the fixed default or a
        user-supplied percentage both arrive through inputs.commission_pct.
        """
        inputs = ctx.inputs
        book = ctx.book

        mgmt_fee_commission = self.commission_from_rate(ctx.wse.gross_mgmt_fee, inputs.commission_pct)
        adjusted_book = book.total_book_commission * (as_number(inputs.book_pct) / 100)
        total_revenue = mgmt_fee_commission + adjusted_book + book.master_plan_commission
        value_added_abs = total_revenue - book.total_book_commission

        return RevenueSummary(
            mgmt_fee_commission=mgmt_fee_commission,
            adjusted_book=adjusted_book,
            total_revenue=total_revenue,
            value_added_abs=value_added_abs,
            value_added_pct=uplift_pct(value_added_abs, book.total_book_commission),
            mgmt_share=share_of(mgmt_fee_commission, total_revenue),
            book_share=share_of(adjusted_book, total_revenue),
        )
