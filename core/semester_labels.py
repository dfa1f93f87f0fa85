# core/semester_labels.py
"""
Semester header labels.

The backend spreadsheet generator finds result columns by matching these
headers verbatim, e.g. "SEM V (W-24)". Odd (first) semesters of a year type
are Winter and carry the academic start year; even (second) semesters are
Summer and carry the following year.

There is a single arithmetic path (`season_code`). The global semester index
flow (1..6) is an adapter that looks the semester up in the catalog and
delegates, so both report flows always produce the same strings.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import pandas as pd

from core.academic_years import display_year, pad2
from core.year_types import DEFAULT_CATALOG, YearType, YearTypeCatalog

logger = logging.getLogger(__name__)

WINTER = "W"
SUMMER = "S"
UNKNOWN_SEMESTER_CODE = "Unknown"

SCHEDULE_COLUMNS = ["semester", "year_type", "year_label", "position", "season_code", "header"]


@dataclass(frozen=True)
class SemesterLabels:
    """Labels for one year type of a batch, as sent to the backend."""
    year_type: YearType
    year_label: str
    sem1_header: str
    sem2_header: str


def season_code(
    is_second_in_year: bool,
    batch_year: int,
    year_type: YearType | str,
    *,
    catalog: YearTypeCatalog = DEFAULT_CATALOG,
) -> str:
    """
    "W-yy" for the first semester of a year type, "S-yy" for the second.

    `is_second_in_year` is the position inside the year type's semester pair,
    not the parity of the semester number.
    """
    academic_start = batch_year + catalog.lookup(year_type).offset
    if is_second_in_year:
        return f"{SUMMER}-{pad2((academic_start + 1) % 100)}"
    return f"{WINTER}-{pad2(academic_start % 100)}"


def semester_header(
    roman_label: str,
    is_second_in_year: bool,
    batch_year: int,
    year_type: YearType | str,
    *,
    catalog: YearTypeCatalog = DEFAULT_CATALOG,
) -> str:
    """
    semester_header("V", False, 2022, "TY") -> "SEM V (W-24)"
    semester_header("VI", True, 2022, "TY") -> "SEM VI (S-25)"
    """
    code = season_code(is_second_in_year, batch_year, year_type, catalog=catalog)
    return f"SEM {roman_label} ({code})"


def semester_labels(
    batch_year: int,
    year_type: YearType | str,
    *,
    catalog: YearTypeCatalog = DEFAULT_CATALOG,
) -> SemesterLabels:
    """Year label plus both semester headers for one year type."""
    spec = catalog.lookup(year_type)
    first_roman, second_roman = spec.roman_labels
    return SemesterLabels(
        year_type=spec.year_type,
        year_label=display_year(batch_year, spec.year_type, catalog=catalog),
        sem1_header=semester_header(first_roman, False, batch_year, spec.year_type, catalog=catalog),
        sem2_header=semester_header(second_roman, True, batch_year, spec.year_type, catalog=catalog),
    )


# --------------------------------------------------------------------
# Global semester index (1..6) adapter
# --------------------------------------------------------------------

def global_semester_code(
    batch_year: int,
    global_index: int,
    *,
    catalog: YearTypeCatalog = DEFAULT_CATALOG,
) -> str:
    """
    Season code for an absolute semester number of a batch.

    With the default catalog: 1 -> W-y1, 2 -> S-y2, 3 -> W-y2, 4 -> S-y3,
    5 -> W-y3, 6 -> S-y4 where yN = (batch_year + N - 1) mod 100.
    Returns "Unknown" for semesters the catalog does not contain.
    """
    located = catalog.locate_semester(global_index)
    if located is None:
        logger.warning("No semester %r in catalog; returning %s", global_index, UNKNOWN_SEMESTER_CODE)
        return UNKNOWN_SEMESTER_CODE
    spec, position = located
    return season_code(position == 1, batch_year, spec.year_type, catalog=catalog)


def global_semester_header(
    batch_year: int,
    global_index: int,
    *,
    catalog: YearTypeCatalog = DEFAULT_CATALOG,
) -> str:
    located = catalog.locate_semester(global_index)
    if located is None:
        logger.warning("No semester %r in catalog; returning %s", global_index, UNKNOWN_SEMESTER_CODE)
        return UNKNOWN_SEMESTER_CODE
    spec, position = located
    return semester_header(
        spec.roman_labels[position], position == 1, batch_year, spec.year_type, catalog=catalog
    )


def semester_schedule(
    batch_year: int,
    *,
    catalog: YearTypeCatalog = DEFAULT_CATALOG,
) -> pd.DataFrame:
    """One row per catalog semester for a batch, in semester order."""
    rows = []
    for spec in catalog:
        year_label = display_year(batch_year, spec.year_type, catalog=catalog)
        for position, (number, roman) in enumerate(zip(spec.semester_numbers, spec.roman_labels)):
            rows.append({
                "semester": number,
                "year_type": spec.year_type.value,
                "year_label": year_label,
                "position": position + 1,
                "season_code": season_code(position == 1, batch_year, spec.year_type, catalog=catalog),
                "header": semester_header(roman, position == 1, batch_year, spec.year_type, catalog=catalog),
            })
    if not rows:
        return pd.DataFrame(columns=SCHEDULE_COLUMNS)
    return pd.DataFrame(rows, columns=SCHEDULE_COLUMNS).sort_values("semester").reset_index(drop=True)
