"""
Domain Models for the ESI Channel Partner ROI Calculator

These dataclasses describe the calculator inputs and every derived result.
Numeric input fields hold either a float or the empty string "" while the
user is editing; the empty string displays blank and computes as 0.
"""

from dataclasses import dataclass, field, replace
from enum import Enum

from .coercion import coerce_number

Number = float | str

DEFAULT_COMMISSION_PCT = 15
DEFAULT_BOOK_PCT = 100
MAX_TIERS = 5

DEFAULT_TIER_AMOUNT = 250000
DEFAULT_TIER_PCT = 5

# =============================================================================
# INPUT MODELS
# =============================================================================


class InputMode(str, Enum):
    """How total WSE is sized."""

    BY_CLIENTS = "byClients"
    BY_WSE = "byWSE"


@dataclass
class Tier:
    """A single line in the partner's book of business."""

    label: str
    amount: Number = DEFAULT_TIER_AMOUNT
    pct: Number = DEFAULT_TIER_PCT

    @classmethod
    def default(cls, position: int) -> "Tier":
        """New tier as appended by the "+ Add Book" control (1-based position)."""
        return cls(label=f"Book {position}")

    @classmethod
    def from_dict(cls, data: dict, position: int = 1) -> "Tier":
        if not isinstance(data, dict):
            raise ValueError(f"Tier {position} must be an object, got {type(data).__name__}")
        return cls(
            label=str(data.get("label", f"Book {position}")),
            amount=coerce_number(data.get("amount", DEFAULT_TIER_AMOUNT)),
            pct=coerce_number(data.get("pct", DEFAULT_TIER_PCT)),
        )

    def to_dict(self) -> dict:
        return {"label": self.label, "amount": self.amount, "pct": self.pct}


def _default_tiers() -> list[Tier]:
    return [Tier.default(1)]


# Wire key -> attribute name. The input surface emits camelCase field ids.
FIELD_ALIASES = {
    "inputMode": "input_mode",
    "clients": "clients",
    "avgWsePerClient": "avg_wse_per_client",
    "totalWseDirect": "total_wse_direct",
    "avgAnnualWage": "avg_annual_wage",
    "mgmtFeePerWse": "mgmt_fee_per_wse",
    "conversionRate": "conversion_rate",
    "masterPlanPct": "master_plan_pct",
    "commissionPct": "commission_pct",
    "bookPct": "book_pct",
}

NUMERIC_FIELDS = tuple(name for name in FIELD_ALIASES.values() if name != "input_mode")


@dataclass
class CalculatorInputs:
    """Complete, flat input record for one calculator screen."""

    tiers: list[Tier] = field(default_factory=_default_tiers)
    input_mode: InputMode = InputMode.BY_CLIENTS
    clients: Number = 20
    avg_wse_per_client: Number = 18
    total_wse_direct: Number = 360
    avg_annual_wage: Number = 55000
    mgmt_fee_per_wse: Number = 1500
    conversion_rate: Number = 25
    master_plan_pct: Number = 1
    commission_pct: Number = DEFAULT_COMMISSION_PCT
    book_pct: Number = DEFAULT_BOOK_PCT

    def copy(self) -> "CalculatorInputs":
        """Detached copy; tiers are duplicated so edits never leak back."""
        return replace(self, tiers=[replace(t) for t in self.tiers])

    @staticmethod
    def resolve_field(field_id: str) -> str:
        """Map a wire field id (camelCase or snake_case) to the attribute name."""
        if field_id in FIELD_ALIASES:
            return FIELD_ALIASES[field_id]
        if field_id in FIELD_ALIASES.values():
            return field_id
        raise ValueError(f"Unknown input field: {field_id}")

    @classmethod
    def from_dict(cls, data: dict) -> "CalculatorInputs":
        if not isinstance(data, dict):
            raise ValueError(f"Input payload must be an object, got {type(data).__name__}")

        inputs = cls()
        raw_tiers = data.get("tiers")
        if raw_tiers is not None:
            if not isinstance(raw_tiers, list):
                raise ValueError("tiers must be a list")
            inputs.tiers = [Tier.from_dict(t, i + 1) for i, t in enumerate(raw_tiers)]

        for key, value in data.items():
            if key == "tiers":
                continue
            try:
                name = cls.resolve_field(key)
            except ValueError:
                # Unrelated keys in the payload are ignored
                continue
            if name == "input_mode":
                inputs.input_mode = InputMode(value)
            else:
                setattr(inputs, name, coerce_number(value))
        return inputs

    def to_dict(self) -> dict:
        data = {"tiers": [t.to_dict() for t in self.tiers]}
        for wire, name in FIELD_ALIASES.items():
            value = getattr(self, name)
            data[wire] = value.value if isinstance(value, InputMode) else value
        return data


# =============================================================================
# OUTPUT / RESULT MODELS
# =============================================================================


@dataclass
class BookCommission:
    """Aggregated book of business."""

    tier_commissions: list[float] = field(default_factory=list)
    total_book_commission: float = 0.0
    master_plan_commission: float = 0.0


@dataclass
class WseSizing:
    """Headcount and management fee derived from the WSE assumptions."""

    total_wse: float = 0.0
    converted_wse: int = 0
    total_payroll: float = 0.0  # Informational only
    gross_mgmt_fee: float = 0.0


@dataclass
class RevenueSummary:
    """Blended revenue and the headline uplift metrics."""

    mgmt_fee_commission: float = 0.0
    adjusted_book: float = 0.0
    total_revenue: float = 0.0
    value_added_abs: float = 0.0
    value_added_pct: float | None = None  # None when the book is not positive
    mgmt_share: float = 0.0
    book_share: float = 0.0


@dataclass
class ScenarioRow:
    """One book compared against the shared management fee pool."""

    label: str
    mgmt_commission: float
    book_commission: float
    adjusted_book: float
    master: float
    total_revenue: float
    uplift_abs: float
    uplift_pct: float
    mgmt_share: float
    book_share: float


@dataclass
class ScenarioTotals:
    """Sum of all scenario rows, measured against the grand book total."""

    mgmt_commission: float = 0.0
    adjusted_book: float = 0.0
    master: float = 0.0
    total_revenue: float = 0.0
    total_book_base: float = 0.0
    value_added_abs: float = 0.0
    value_added_pct: float | None = None
    mgmt_share_total: float = 0.0
    book_share_total: float = 0.0


@dataclass
class ScenarioTable:
    rows: list[ScenarioRow] = field(default_factory=list)
    totals: ScenarioTotals = field(default_factory=ScenarioTotals)


@dataclass
class ProcessingContext:
    """
    Holds all intermediate state during one recompute.
    This is the "bag" that flows through the pipeline.
    """

    # Input (immutable during processing)
    inputs: CalculatorInputs

    # Step results (populated as we go)
    book: BookCommission = field(default_factory=BookCommission)
    wse: WseSizing = field(default_factory=WseSizing)
    revenue: RevenueSummary = field(default_factory=RevenueSummary)
    scenarios: ScenarioTable = field(default_factory=ScenarioTable)


@dataclass
class CalculatorResult:
    """Every derived value for the current inputs. Never stored, always recomputed."""

    book: BookCommission
    wse: WseSizing
    revenue: RevenueSummary
    scenarios: ScenarioTable

    @property
    def total_book_commission(self) -> float:
        return self.book.total_book_commission

    @property
    def total_revenue(self) -> float:
        return self.revenue.total_revenue
