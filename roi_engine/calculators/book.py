"""
Book Commission Calculator

Aggregates the partner's existing book of business and the optional
master plan bonus on top of it.
"""

from ..coercion import as_number
from ..models import BookCommission, ProcessingContext, Tier


def tier_commission(tier: Tier) -> float:
    """Commission earned on one book line: amount x pct%."""
    return as_number(tier.amount) * (as_number(tier.pct) / 100)


class BookCommissionCalculator:
    """Sums tier commissions and derives the master plan commission."""

    def calculate(self, ctx: ProcessingContext) -> BookCommission:
        inputs = ctx.inputs

        commissions = [tier_commission(t) for t in inputs.tiers]
        total = sum(commissions, 0.0)

        return BookCommission(
            tier_commissions=commissions,
            total_book_commission=total,
            master_plan_commission=total * (as_number(inputs.master_plan_pct) / 100),
        )
