"""
Scenario Table Builder

Builds one comparison row per book tier plus a totals row.

The management fee commission is a single pool computed from the aggregate
WSE inputs. Every row is shown against that same pool side by side; the pool
is not apportioned across tiers, so the totals row counts it once per row.
"""

from ..coercion import as_number
from ..models import ProcessingContext, ScenarioRow, ScenarioTable, ScenarioTotals
from .book import tier_commission
from .revenue import share_of, uplift_pct


class ScenarioTableBuilder:
    """Builds per-tier scenario rows and their totals."""

    def build(self, ctx: ProcessingContext) -> ScenarioTable:
        inputs = ctx.inputs
        mgmt_commission = ctx.revenue.mgmt_fee_commission
        book_pct = as_number(inputs.book_pct)
        master_pct = as_number(inputs.master_plan_pct)

        rows = [
            self._build_row(tier.label, tier_commission(tier), mgmt_commission, book_pct, master_pct)
            for tier in inputs.tiers
        ]
        return ScenarioTable(
            rows=rows,
            totals=self._build_totals(rows, ctx.book.total_book_commission),
        )

    def _build_row(
        self,
        label: str,
        book_commission: float,
        mgmt_commission: float,
        book_pct: float,
        master_pct: float,
    ) -> ScenarioRow:
        adjusted_book = book_commission * (book_pct / 100)
        master = book_commission * (master_pct / 100)
        total_revenue = mgmt_commission + adjusted_book + master
        uplift_abs = total_revenue - book_commission
        # Row-level uplift on an empty book reads as 0 rather than undefined
        row_uplift_pct = uplift_pct(uplift_abs, book_commission)

        return ScenarioRow(
            label=label,
            mgmt_commission=mgmt_commission,
            book_commission=book_commission,
            adjusted_book=adjusted_book,
            master=master,
            total_revenue=total_revenue,
            uplift_abs=uplift_abs,
            uplift_pct=row_uplift_pct if row_uplift_pct is not None else 0.0,
            mgmt_share=share_of(mgmt_commission, total_revenue),
            book_share=share_of(adjusted_book, total_revenue),
        )

    def _build_totals(self, rows: list[ScenarioRow], total_book_base: float) -> ScenarioTotals:
        totals = ScenarioTotals(total_book_base=total_book_base)
        for row in rows:
            totals.mgmt_commission += row.mgmt_commission
            totals.adjusted_book += row.adjusted_book
            totals.master += row.master
            totals.total_revenue += row.total_revenue

        totals.value_added_abs = totals.total_revenue - total_book_base
        totals.value_added_pct = uplift_pct(totals.value_added_abs, total_book_base)
        totals.mgmt_share_total = share_of(totals.mgmt_commission, totals.total_revenue)
        totals.book_share_total = share_of(totals.adjusted_book, totals.total_revenue)
        return totals
