"""
Calculator Session

Owns the single in-memory input record for one running calculator screen.
Every mutation is followed by a full recompute, so `results` always reflects
the current inputs. Edits that would break the tier-count bound are refused
rather than validated after the fact.
"""

import logging
from contextlib import contextmanager

from .coercion import coerce_number
from .export import export_summary_pdf
from .models import MAX_TIERS, CalculatorInputs, CalculatorResult, InputMode, Tier
from .processor import RoiProcessor

logger = logging.getLogger(__name__)

TIER_FIELDS = ("label", "amount", "pct")


class CalculatorSession:
    """Mutable calculator state plus the edit operations the input surface calls."""

    def __init__(self, inputs: CalculatorInputs | None = None, processor: RoiProcessor | None = None):
        self._processor = processor or RoiProcessor()
        self.inputs = inputs.copy() if inputs is not None else CalculatorInputs()
        self.exporting = False
        self.results: CalculatorResult = self._processor.compute(self.inputs)

    @property
    def tiers(self) -> list[Tier]:
        return self.inputs.tiers

    def _recompute(self) -> CalculatorResult:
        self.results = self._processor.compute(self.inputs)
        return self.results

    # -------------------------------------------------------------------------
    # Tier editing
    # -------------------------------------------------------------------------

    def add_tier(self) -> bool:
        """Append a default tier. Refused once MAX_TIERS books exist."""
        if len(self.inputs.tiers) >= MAX_TIERS:
            return False
        self.inputs.tiers.append(Tier.default(len(self.inputs.tiers) + 1))
        self._recompute()
        return True

    def remove_tier(self, idx: int) -> bool:
        """Remove the tier at idx. Refused when it is the last remaining tier."""
        if len(self.inputs.tiers) <= 1 or not 0 <= idx < len(self.inputs.tiers):
            return False
        del self.inputs.tiers[idx]
        self._recompute()
        return True

    def update_tier(self, idx: int, field: str, value) -> bool:
        """Replace exactly one field of exactly one tier. Refused for an index outside the list."""
        if field not in TIER_FIELDS:
            raise ValueError(f"Unknown tier field: {field}. Must be one of {', '.join(TIER_FIELDS)}")

        if not 0 <= idx < len(self.inputs.tiers):
            return False

        tier = self.inputs.tiers[idx]
        if field == "label":
            tier.label = "" if value is None else str(value)
        else:
            setattr(tier, field, coerce_number(value))
        self._recompute()
        return True

    # -------------------------------------------------------------------------
    # Scalar inputs
    # -------------------------------------------------------------------------

    def set_field(self, field_id: str, raw) -> None:
        """
        Apply one (fieldId, rawValue) event from the input surface.

        Numeric fields are coerced; "" is kept so the field can redisplay blank.
        """
        name = CalculatorInputs.resolve_field(field_id)
        if name == "input_mode":
            self.set_input_mode(raw)
            return
        setattr(self.inputs, name, coerce_number(raw))
        self._recompute()

    def set_input_mode(self, mode) -> None:
        """Switch WSE sizing mode. The inactive mode's values are kept but not read."""
        self.inputs.input_mode = InputMode(mode)
        self._recompute()

    def reset_all(self) -> None:
        """Restore every input to its documented default, discarding all edits."""
        self.inputs = CalculatorInputs()
        self._recompute()

    # -------------------------------------------------------------------------
    # Export
    # -------------------------------------------------------------------------

    @contextmanager
    def _exporting(self):
        self.exporting = True
        try:
            yield
        finally:
            self.exporting = False

    def export_pdf(self, exporter=export_summary_pdf) -> bytes | None:
        """
        Render the current results view to a PDF document.

        Recomputes first so the document never shows stale numbers. Failures
        are logged and reported as None; model state is left untouched and the
        exporting flag is always cleared.
        """
        result = self._recompute()
        snapshot = self.inputs.copy()
        with self._exporting():
            try:
                return exporter(result, snapshot)
            except Exception as e:
                logger.error(f"PDF export failed: {str(e)}", exc_info=True)
                return None
