"""Data models for the measures converter."""

from dataclasses import dataclass
from typing import Optional

from measures_converter.config import DECIMAL_PLACES


def format_number(number: float) -> str:
    return f"{number:.{DECIMAL_PLACES}f}"


@dataclass
class ConversionResult:
    """Outcome of converting a value from one unit to another."""
    value: Optional[float]
    from_unit: str
    to_unit: str
    result: Optional[float] = None
    error: Optional[str] = None  # INVALID_NUMBER_MESSAGE or NOT_AVAILABLE_MESSAGE

    @property
    def ok(self) -> bool:
        return self.error is None

    def message(self) -> str:
        """Return the string shown to the user."""
        if not self.ok:
            return self.error
        return (
            f"{format_number(self.value)} {self.from_unit} is "
            f"{format_number(self.result)} {self.to_unit}"
        )


@dataclass
class TableIssue:
    """A consistency problem found in the conversion tables."""
    kind: str  # missing_entry, unknown_unit, unknown_target, cross_category, missing_inverse, inverse_mismatch
    unit: str
    target: Optional[str] = None
    detail: str = ""

    def __str__(self) -> str:
        pair = f"{self.unit} -> {self.target}" if self.target else self.unit
        text = f"[{self.kind}] {pair}"
        if self.detail:
            text += f": {self.detail}"
        return text
