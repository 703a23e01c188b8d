"""
Unit Tests for the Output Builder

Tests verify display formatting and that undefined ratios render as a
placeholder rather than as a number.
"""

import pytest

from roi_engine import CalculatorInputs, RoiProcessor
from roi_engine.models import Tier
from roi_engine.output import PLACEHOLDER, OutputBuilder, format_count, format_currency, format_pct


class TestFormatters:
    """Test the display formatters."""

    def test_currency_whole_dollars(self):
        assert format_currency(12500) == "$12,500"
        assert format_currency(135000.0) == "$135,000"

    def test_currency_rounds_half_up(self):
        assert format_currency(0.5) == "$1"
        assert format_currency(1234.49) == "$1,234"

    def test_currency_negative(self):
        assert format_currency(-1250) == "-$1,250"

    def test_currency_negative_rounding_to_zero(self):
        assert format_currency(-0.2) == "$0"

    def test_pct_one_decimal(self):
        assert format_pct(163) == "163.0%"
        assert format_pct(61.5969) == "61.6%"

    def test_undefined_renders_placeholder(self):
        assert format_pct(None) == PLACEHOLDER
        assert format_currency(None) == PLACEHOLDER

    def test_count(self):
        assert format_count(90) == "90"
        assert format_count(3600.0) == "3,600"
        assert format_count(12.5) == "12.5"

    def test_overflowed_values_render_placeholder(self):
        assert format_currency(float("inf")) == PLACEHOLDER
        assert format_currency(float("-inf")) == PLACEHOLDER
        assert format_pct(float("nan")) == PLACEHOLDER
        assert format_count(float("nan")) == PLACEHOLDER

    def test_currency_beyond_decimal_precision(self):
        # More digits than the default 28-digit decimal context
        assert format_currency(1e30) == f"${10**30:,}"


class TestOutputBuilder:
    """Test the display payload."""

    @pytest.fixture
    def builder(self):
        return OutputBuilder()

    def _view(self, builder, inputs):
        return builder.build(RoiProcessor().compute(inputs), inputs)

    def test_summary_cards(self, builder):
        cards = self._view(builder, CalculatorInputs())["summary_cards"]

        assert [c["display"] for c in cards] == ["$12,500", "90", "$135,000"]
        assert cards[1]["caption"] == "of 360 total WSE"

    def test_single_tier_has_no_totals_row(self, builder):
        view = self._view(builder, CalculatorInputs())

        assert len(view["scenarios"]["rows"]) == 1
        assert view["scenarios"]["totals"] is None

    def test_multiple_tiers_have_totals_row(self, builder):
        view = self._view(builder, CalculatorInputs(tiers=[Tier.default(1), Tier.default(2)]))
        totals = view["scenarios"]["totals"]

        assert totals["label"] == "Total"
        assert totals["total_revenue"]["display"] == "$65,750"
        assert totals["uplift_abs"]["display"] == "$40,750"

    def test_scenario_row_display(self, builder):
        row = self._view(builder, CalculatorInputs())["scenarios"]["rows"][0]

        assert row["mgmt_commission"]["display"] == "$20,250"
        assert row["mgmt_share"]["display"] == "61.6%"
        assert row["book_share"]["display"] == "38.0%"
        assert row["uplift_pct"]["display"] == "163.0%"

    def test_zero_book_shows_placeholder_not_nan(self, builder):
        view = self._view(builder, CalculatorInputs(tiers=[Tier(label="Book 1", amount=0, pct=5)]))
        value_added = view["headline"]["value_added_pct"]

        assert value_added["value"] is None
        assert value_added["display"] == PLACEHOLDER
        row = view["scenarios"]["rows"][0]
        assert row["uplift_pct"]["display"] == "0.0%"
        assert row["mgmt_share"]["display"] == "100.0%"

    def test_talking_point_sentence(self, builder):
        points = self._view(builder, CalculatorInputs())["talking_points"]

        assert points[2] == (
            "You indicated a 25% conversion, this scenario generates $20,250 in "
            "management-fee commissions, bringing your total estimated revenue to $32,875."
        )

    def test_blank_tier_amount_displays_blank(self, builder):
        view = self._view(builder, CalculatorInputs(tiers=[Tier(label="Book 1", amount="", pct=5)]))
        tier = view["book"]["tiers"][0]

        assert tier["amount"]["display"] == ""
        assert tier["commission"]["display"] == "$0"

    def test_builder_does_not_mutate_result(self, builder):
        inputs = CalculatorInputs()
        result = RoiProcessor().compute(inputs)
        snapshot = builder.to_values(result)

        builder.build(result, inputs)

        assert builder.to_values(result) == snapshot

    def test_huge_tier_builds_display(self, builder):
        """A 1e308 book at 1000% overflows the commission to inf."""
        view = self._view(builder, CalculatorInputs(tiers=[Tier(label="Book 1", amount=1e308, pct=1000)]))
        tier = view["book"]["tiers"][0]

        assert tier["amount"]["display"] == f"${10**308:,}"
        assert tier["commission"]["display"] == PLACEHOLDER
        assert view["headline"]["total_revenue"]["display"] == PLACEHOLDER

    def test_overflowing_headcount_builds_display(self):
        payload = CalculatorInputs(clients=1e200, avg_wse_per_client=1e200).to_dict()
        output = RoiProcessor().process_from_dict(payload)

        assert output["display"]["summary_cards"][1]["display"] == PLACEHOLDER
        assert output["display"]["opportunity"]["gross_mgmt_fee"]["display"] == PLACEHOLDER
