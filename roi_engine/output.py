"""
Output Builder

Turns a CalculatorResult into display-ready values for the presentation
and export surfaces. Never mutates the result.
"""

import math
from dataclasses import asdict
from decimal import ROUND_HALF_UP, Decimal

from .models import CalculatorInputs, CalculatorResult, InputMode

PLACEHOLDER = "—"

TITLE = "ESI Channel Partner ROI Calculator"
INTRO = (
    "A high level summary of your estimated commissions and revenue "
    "outcomes based on the inputs below."
)
DISCLAIMER = (
    "This calculator provides a high level illustration based solely on the "
    "information entered above. It is not a quote or guarantee. For advanced "
    "AOR scenarios, custom commission structures, multi-tier book analysis, or "
    "full revenue optimization models, please contact our sales team.\n\n"
    "Your current book commission is estimated based on your annualized group "
    "health insurance billing. If eligible, placing your book on ESI's Master "
    "Health Plan may provide an additional commission percentage (default: 1 "
    "percent in this model). Actual qualification depends on underwriting "
    "requirements and plan participation rules."
)

MODE_LABELS = {
    InputMode.BY_CLIENTS: "Estimate by clients x avg. WSE",
    InputMode.BY_WSE: "Enter total WSE directly",
}


def _undefined(value) -> bool:
    """None, or a float that overflowed to inf/nan."""
    return value is None or not math.isfinite(value)


def format_currency(value) -> str:
    """Whole US dollars, e.g. $12,500 or -$1,250."""
    if _undefined(value):
        return PLACEHOLDER
    dollars = int(Decimal(str(value)).to_integral_value(rounding=ROUND_HALF_UP))
    sign = "-" if dollars < 0 else ""
    return f"{sign}${abs(dollars):,}"


def format_pct(value) -> str:
    """One decimal place, e.g. 12.5%."""
    if _undefined(value):
        return PLACEHOLDER
    return f"{value:.1f}%"


def format_count(value) -> str:
    if _undefined(value):
        return PLACEHOLDER
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,}"


def _entry(value, formatter) -> dict:
    return {"value": value, "display": formatter(value)}


class OutputBuilder:
    """Builds the display payload."""

    def to_values(self, result: CalculatorResult) -> dict:
        """Raw numeric results, no formatting."""
        return asdict(result)

    def build(self, result: CalculatorResult, inputs: CalculatorInputs) -> dict:
        """Construct the complete display payload from the current result."""
        return {
            "title": TITLE,
            "intro": INTRO,
            "summary_cards": self._build_summary_cards(result),
            "book": self._build_book(result, inputs),
            "opportunity": self._build_opportunity(result, inputs),
            "headline": self._build_headline(result),
            "scenarios": self._build_scenarios(result),
            "talking_points": self._build_talking_points(result, inputs),
            "disclaimer": DISCLAIMER,
        }

    def _build_summary_cards(self, result: CalculatorResult) -> list[dict]:
        wse = result.wse
        return [
            {
                "title": "Current Annual Commission (Book)",
                **_entry(result.book.total_book_commission, format_currency),
            },
            {
                "title": "Converted WSE to ESI",
                **_entry(wse.converted_wse, format_count),
                "caption": f"of {format_count(wse.total_wse)} total WSE",
            },
            {
                "title": "Gross Management Fee (Annual)",
                **_entry(wse.gross_mgmt_fee, format_currency),
            },
        ]

    def _build_book(self, result: CalculatorResult, inputs: CalculatorInputs) -> dict:
        tiers = []
        for tier, commission in zip(inputs.tiers, result.book.tier_commissions):
            tiers.append({
                "label": tier.label,
                "amount": _entry(tier.amount, self._format_raw_currency),
                "pct": _entry(tier.pct, self._format_raw_pct),
                "commission": _entry(commission, format_currency),
            })
        return {
            "tiers": tiers,
            "total_book_commission": _entry(result.book.total_book_commission, format_currency),
            "master_plan_commission": _entry(result.book.master_plan_commission, format_currency),
        }

    def _build_opportunity(self, result: CalculatorResult, inputs: CalculatorInputs) -> dict:
        wse = result.wse
        return {
            "input_mode": inputs.input_mode.value,
            "input_mode_label": MODE_LABELS[inputs.input_mode],
            "total_wse": _entry(wse.total_wse, format_count),
            "converted_wse": _entry(wse.converted_wse, format_count),
            "total_payroll": _entry(wse.total_payroll, format_currency),
            "gross_mgmt_fee": _entry(wse.gross_mgmt_fee, format_currency),
            "conversion_rate": self._format_rate(inputs.conversion_rate),
        }

    def _build_headline(self, result: CalculatorResult) -> dict:
        revenue = result.revenue
        return {
            "mgmt_fee_commission": _entry(revenue.mgmt_fee_commission, format_currency),
            "adjusted_book": _entry(revenue.adjusted_book, format_currency),
            "master_plan_commission": _entry(result.book.master_plan_commission, format_currency),
            "total_revenue": _entry(revenue.total_revenue, format_currency),
            "value_added_abs": _entry(revenue.value_added_abs, format_currency),
            "value_added_pct": _entry(revenue.value_added_pct, format_pct),
            "mgmt_share": _entry(revenue.mgmt_share, format_pct),
            "book_share": _entry(revenue.book_share, format_pct),
        }

    def _build_scenarios(self, result: CalculatorResult) -> dict:
        table = result.scenarios
        rows = [
            {
                "label": row.label,
                "mgmt_commission": _entry(row.mgmt_commission, format_currency),
                "mgmt_share": _entry(row.mgmt_share, format_pct),
                "adjusted_book": _entry(row.adjusted_book, format_currency),
                "book_share": _entry(row.book_share, format_pct),
                "total_revenue": _entry(row.total_revenue, format_currency),
                "uplift_pct": _entry(row.uplift_pct, format_pct),
                "uplift_abs": _entry(row.uplift_abs, format_currency),
            }
            for row in table.rows
        ]

        # A totals row only adds information once there are several books
        totals = None
        if len(table.rows) > 1:
            t = table.totals
            totals = {
                "label": "Total",
                "mgmt_commission": _entry(t.mgmt_commission, format_currency),
                "mgmt_share": _entry(t.mgmt_share_total, format_pct),
                "adjusted_book": _entry(t.adjusted_book, format_currency),
                "book_share": _entry(t.book_share_total, format_pct),
                "total_revenue": _entry(t.total_revenue, format_currency),
                "uplift_pct": _entry(t.value_added_pct, format_pct),
                "uplift_abs": _entry(t.value_added_abs, format_currency),
            }
        return {"rows": rows, "totals": totals}

    def _build_talking_points(self, result: CalculatorResult, inputs: CalculatorInputs) -> list[str]:
        revenue = result.revenue
        return [
            "Your current book commission is based on your annualized book of "
            "business. This calculator uses your entered book structure to "
            "estimate those totals.",
            "ESI's management fee creates a new supplemental revenue stream that "
            "adds to your existing book rather than replacing it.",
            f"You indicated a {self._format_rate(inputs.conversion_rate)} conversion, "
            f"this scenario generates {format_currency(revenue.mgmt_fee_commission)} in "
            f"management-fee commissions, bringing your total estimated revenue to "
            f"{format_currency(revenue.total_revenue)}.",
            "All values shown are illustrative. Actual compensation depends on client "
            "mix, underwriting requirements, eligibility, and final agreements.",
        ]

    @staticmethod
    def _format_rate(value) -> str:
        """Slider readout: whole percent."""
        if value == "":
            return "0%"
        if not math.isfinite(value):
            return PLACEHOLDER
        return f"{int(Decimal(str(value)).to_integral_value(rounding=ROUND_HALF_UP))}%"

    @staticmethod
    def _format_raw_currency(value) -> str:
        # Blank fields stay blank while being edited
        if value == "":
            return ""
        return format_currency(value)

    @staticmethod
    def _format_raw_pct(value) -> str:
        if value == "":
            return ""
        return f"{value:g}%"
