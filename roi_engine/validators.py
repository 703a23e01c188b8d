"""
Input Validation for the ROI Calculator

Numeric fields are never rejected (they are coerced instead). The only
structural rule checked here is the tier-count bound, for payloads that
arrive over the wire rather than through the session's edit operations.
Raises ValueError with clear messages for any constraint violations.
"""

from .models import MAX_TIERS, CalculatorInputs, InputMode


class InputValidator:
    """Validates calculator input according to structural rules."""

    def validate(self, inputs: CalculatorInputs) -> None:
        """
        Run all validations. Raises ValueError if any check fails.
        """
        self._validate_tiers(inputs)
        self._validate_mode(inputs)

    def _validate_tiers(self, inputs: CalculatorInputs) -> None:
        count = len(inputs.tiers)
        if count < 1:
            raise ValueError("At least one book tier is required")
        if count > MAX_TIERS:
            raise ValueError(f"At most {MAX_TIERS} book tiers are allowed, got: {count}")

    def _validate_mode(self, inputs: CalculatorInputs) -> None:
        if not isinstance(inputs.input_mode, InputMode):
            raise ValueError(
                f"Invalid inputMode: {inputs.input_mode}. Must be 'byClients' or 'byWSE'"
            )
