# core/academic_years.py
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

from core.year_types import DEFAULT_CATALOG, YearType, YearTypeCatalog

logger = logging.getLogger(__name__)

# --------------------------------------------------------------------
# Academic year range helpers
# --------------------------------------------------------------------

# Accepts "2024-25", "2024/25", "AY2024-25", "AY2024/25"
YEAR_LABEL_PATTERN = re.compile(r"^(?:[Aa][Yy])?(\d{4})([-/])(\d{2})$")


@dataclass(frozen=True)
class YearLabel:
    start_year: int
    end_suffix: int
    separator: str = "-"

    def __str__(self) -> str:
        return f"{self.start_year}-{pad2(self.end_suffix)}"


def pad2(value: int) -> str:
    """Left-pad with zeros to width 2 ("5" -> "05")."""
    return f"{value:02d}"


def display_year(
    batch_year: int,
    year_type: YearType | str,
    *,
    catalog: YearTypeCatalog = DEFAULT_CATALOG,
) -> str:
    """
    Two-year display range for a year type of a batch.

    Example
    -------
    display_year(2022, "SY") -> "2023-24"
    display_year(2099, "FY") -> "2099-00"

    The batch year is not range-checked here; form validation does that.
    """
    start_year = batch_year + catalog.lookup(year_type).offset
    end_year = start_year + 1
    label = f"{start_year}-{pad2(end_year % 100)}"
    logger.debug("display_year(%s, %s) -> %s", batch_year, year_type, label)
    return label


def parse_year_label(label: str) -> Optional[YearLabel]:
    """
    Parse a typed academic-year label.

    Returns None when the text does not look like "YYYY-YY".
    """
    if not label:
        return None
    match = YEAR_LABEL_PATTERN.match(str(label).strip())
    if not match:
        return None
    start, separator, suffix = match.groups()
    return YearLabel(start_year=int(start), end_suffix=int(suffix), separator=separator)


def validate_year_label(label: str) -> list[str]:
    """Return error messages for a typed year label (empty if valid)."""
    errors = []
    if not label or not str(label).strip():
        errors.append("Year label is required.")
        return errors

    parsed = parse_year_label(label)
    if parsed is None:
        errors.append("Invalid year label format. Use: 2024-25, 2024/25 or AY2024-25.")
        return errors

    expected = (parsed.start_year + 1) % 100
    if parsed.end_suffix != expected:
        errors.append(
            f"End year must be exactly one year after start year. "
            f"Expected {pad2(expected)}, got {pad2(parsed.end_suffix)}."
        )
    return errors


def batch_year_for(
    year_label: str,
    year_type: YearType | str,
    *,
    catalog: YearTypeCatalog = DEFAULT_CATALOG,
) -> Optional[int]:
    """
    Inverse of display_year: the batch start year that yields `year_label`
    for `year_type`, or None if the label cannot be parsed.

    batch_year_for("2024-25", "TY") -> 2022
    """
    parsed = parse_year_label(year_label)
    if parsed is None:
        return None
    return parsed.start_year - catalog.lookup(year_type).offset
