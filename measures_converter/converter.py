"""Unit conversion engine.

Conversions are a single multiplication by a factor looked up in
CONVERSION_FACTORS[source][target]. Converting a unit to itself always
uses a factor of 1. Pairs without a recorded factor (e.g. Meter -> Pound)
are reported as not available rather than raised.
"""

import logging
import math
from typing import Optional

import pandas as pd

from measures_converter.config import (
    CONVERSION_FACTORS,
    INVALID_NUMBER_MESSAGE,
    INVERSE_TOLERANCE,
    MEASUREMENT_UNITS,
    NOT_AVAILABLE_MESSAGE,
)
from measures_converter.models import ConversionResult, TableIssue

logger = logging.getLogger(__name__)


def parse_value(text: str) -> Optional[float]:
    """Parse user input into a float, or None if it is not a number."""
    if text is None:
        return None
    text = text.strip()
    # float() also accepts "1_000" and non-ASCII digits; a plain numeric field should not
    if not text or "_" in text or not text.isascii():
        return None
    try:
        value = float(text)
    except ValueError:
        logger.debug("Could not parse %r as a number", text)
        return None
    if not math.isfinite(value):
        logger.debug("Rejected non-finite input %r", text)
        return None
    return value


def all_units(units: dict = MEASUREMENT_UNITS) -> list:
    """Every unit across all categories, in display order."""
    return [unit for category_units in units.values() for unit in category_units]


def category_of(unit: str, units: dict = MEASUREMENT_UNITS) -> Optional[str]:
    for category, category_units in units.items():
        if unit in category_units:
            return category
    return None


def get_to_units(from_unit: str) -> list:
    """Return the units a value in ``from_unit`` can be converted to.

    Only units from the same category are offered, and ``from_unit``
    itself is left out.
    """
    if not from_unit:
        return []
    category = category_of(from_unit)
    if category is None:
        return []
    return [unit for unit in MEASUREMENT_UNITS[category] if unit != from_unit]


def get_factor(from_unit: str, to_unit: str) -> Optional[float]:
    if from_unit == to_unit:
        return 1.0
    factor = CONVERSION_FACTORS.get(from_unit, {}).get(to_unit)
    if factor is None:
        logger.debug("No conversion factor recorded for %s -> %s", from_unit, to_unit)
        return None
    return float(factor)


def convert(value: float, from_unit: str, to_unit: str) -> Optional[float]:
    """Convert a magnitude, or return None when the pair is not supported."""
    factor = get_factor(from_unit, to_unit)
    if factor is None:
        return None
    return value * factor


def convert_text(text: str, from_unit: str, to_unit: str) -> ConversionResult:
    """Parse ``text`` and convert it, reporting failures in the result.

    Invalid input is reported before the unit pair is considered.
    """
    value = parse_value(text)
    if value is None:
        return ConversionResult(value=None, from_unit=from_unit, to_unit=to_unit,
                                error=INVALID_NUMBER_MESSAGE)

    result = convert(value, from_unit, to_unit)
    if result is None:
        return ConversionResult(value=value, from_unit=from_unit, to_unit=to_unit,
                                error=NOT_AVAILABLE_MESSAGE)
    return ConversionResult(value=value, from_unit=from_unit, to_unit=to_unit, result=result)


def validate_tables(
    units: dict = MEASUREMENT_UNITS,
    factors: dict = CONVERSION_FACTORS,
    tolerance: float = INVERSE_TOLERANCE,
) -> list:
    """Check the category and factor tables against each other.

    Returns a list of TableIssue; an empty list means the tables are
    consistent.
    """
    issues = []

    for unit in all_units(units):
        if unit not in factors:
            issues.append(TableIssue("missing_entry", unit, detail="no factor entry"))

    for source, targets in factors.items():
        source_category = category_of(source, units)
        if source_category is None:
            issues.append(TableIssue("unknown_unit", source, detail="not in any category"))
            continue

        for target, factor in targets.items():
            target_category = category_of(target, units)
            if target_category is None:
                issues.append(TableIssue("unknown_target", source, target))
                continue
            if target_category != source_category:
                issues.append(TableIssue(
                    "cross_category", source, target,
                    f"{source_category} vs {target_category}",
                ))
                continue

            inverse = factors.get(target, {}).get(source)
            if inverse is None:
                issues.append(TableIssue("missing_inverse", source, target))
            elif abs(factor * inverse - 1) > tolerance:
                issues.append(TableIssue(
                    "inverse_mismatch", source, target,
                    f"{factor} * {inverse} = {factor * inverse:.6g}",
                ))

    return issues


def build_factor_table(category: str) -> pd.DataFrame:
    """Square matrix of factors for one category (rows = from, columns = to)."""
    units = MEASUREMENT_UNITS[category]
    rows = []
    for from_unit in units:
        row = []
        for to_unit in units:
            factor = get_factor(from_unit, to_unit)
            row.append(math.nan if factor is None else factor)
        rows.append(row)
    df = pd.DataFrame(rows, index=units, columns=units, dtype=float)
    df.index.name = "From \\ To"
    return df
