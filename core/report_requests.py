# core/report_requests.py
"""
Request fields for the report-generation backend.

The backend receives these as multipart form fields next to the uploaded
spreadsheets. Nothing here performs I/O; screens build a request, call
`validate()`, show the errors, and hand `form_fields()` to the uploader.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from core.academic_years import validate_year_label
from core.semester_labels import global_semester_code, semester_labels
from core.settings import Settings
from core.year_types import DEFAULT_CATALOG, YearType, YearTypeCatalog

logger = logging.getLogger(__name__)

# Exactly four ASCII digits
BATCH_YEAR_PATTERN = re.compile(r"^[0-9]{4}$")


class BatchType(str, Enum):
    NEW = "new"   # first-year batch, needs the student list
    OLD = "old"   # updating an existing success index (DSY / lateral entry)


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def parse_batch_year(value) -> Optional[int]:
    """Four-digit year from typed input, or None."""
    if value is None or isinstance(value, bool):
        return None
    text = str(value).strip()
    if not BATCH_YEAR_PATTERN.match(text):
        return None
    return int(text)


def validate_batch_year(value, settings: Settings) -> Tuple[Optional[int], List[str]]:
    """
    Bounds-check a typed batch year against the configured window.

    The label engine accepts any integer; this is the boundary that keeps
    implausible years away from it.
    """
    message = "Please enter a valid batch year (e.g., 2022, 2023)."
    if value is None or isinstance(value, bool) or str(value).strip() == "":
        return None, ["Please enter the batch year."]
    year = parse_batch_year(value)
    if year is None:
        return None, [message]
    lo, hi = settings.calendar.batch_year_min, settings.calendar.batch_year_max
    if year < lo or year > hi:
        return None, [message]
    return year, []


def validate_max_marks(value: Optional[float]) -> List[str]:
    if value is None:
        return []
    if value <= 0:
        return ["Max marks must be a positive number."]
    return []


def semester_options(catalog: YearTypeCatalog = DEFAULT_CATALOG) -> List[Tuple[int, str]]:
    """[(1, "Semester I"), ..., (6, "Semester VI")] for the semester picker."""
    options = [
        (number, f"Semester {roman}")
        for spec in catalog
        for number, roman in zip(spec.semester_numbers, spec.roman_labels)
    ]
    return sorted(options)


# ============================================================================
# API REPORT (per year type)
# ============================================================================

@dataclass(frozen=True)
class ApiReportRequest:
    year_type: str
    year_label: str
    sem1_header: str
    sem2_header: str
    max_marks: Optional[float] = None

    ENDPOINT = "/api/generate-api-report"

    @classmethod
    def for_batch(
        cls,
        batch_year: int,
        year_type: YearType | str,
        max_marks: Optional[float] = None,
        *,
        catalog: YearTypeCatalog = DEFAULT_CATALOG,
    ) -> "ApiReportRequest":
        labels = semester_labels(batch_year, year_type, catalog=catalog)
        logger.info(
            "API report labels for batch %s %s: %s / %s / %s",
            batch_year, labels.year_type.value, labels.year_label, labels.sem1_header, labels.sem2_header,
        )
        return cls(
            year_type=labels.year_type.value,
            year_label=labels.year_label,
            sem1_header=labels.sem1_header,
            sem2_header=labels.sem2_header,
            max_marks=max_marks,
        )

    @property
    def download_filename(self) -> str:
        return f"API_{self.year_type}.xlsx"

    def validate(self, catalog: YearTypeCatalog = DEFAULT_CATALOG) -> List[str]:
        errors = []
        if self.year_type not in catalog:
            errors.append(f"Unknown year type: {self.year_type}")
        errors.extend(validate_year_label(self.year_label))
        if not self.sem1_header or not self.sem2_header:
            errors.append("Both semester headers are required.")
        errors.extend(validate_max_marks(self.max_marks))
        return errors

    def form_fields(self) -> Dict[str, str]:
        fields = {
            "year_type": self.year_type,
            "year_label": self.year_label,
            "sem1_header": self.sem1_header,
            "sem2_header": self.sem2_header,
        }
        if self.max_marks is not None:
            fields["max_marks"] = _format_number(self.max_marks)
        return fields


# ============================================================================
# SUCCESS INDEX (global semester number)
# ============================================================================

@dataclass(frozen=True)
class SuccessIndexRequest:
    batch_type: BatchType
    semester_number: Optional[int]
    batch_year: Optional[int | str] = None
    success_index_name: str = ""
    batch_name: str = ""
    has_result_file: bool = False
    has_student_list: bool = False
    has_previous_index: bool = False
    max_marks: Optional[float] = None

    ENDPOINT = "/api/process"

    @property
    def download_filename(self) -> str:
        return f"success_index_sem{self.semester_number}.xlsx"

    def validate(
        self,
        settings: Settings,
        catalog: YearTypeCatalog = DEFAULT_CATALOG,
    ) -> List[str]:
        """
        Form rules, in the order the page reports them.

        The student list is optional for an old batch (used to add DSY
        students); the batch year is only asked for a new batch.
        """
        errors = []
        if not self.has_result_file:
            errors.append("Please upload the Semester Results file.")

        if not self.semester_number:
            errors.append("Please select a semester.")
        elif self.semester_number not in catalog.semester_numbers():
            errors.append(f"Semester must be one of {sorted(catalog.semester_numbers())}.")

        batch_type = BatchType(self.batch_type)
        if batch_type is BatchType.NEW:
            if not self.has_student_list:
                errors.append("For a New Batch, the Student Enrollment Data file is required.")
            _, year_errors = validate_batch_year(self.batch_year, settings)
            errors.extend(year_errors)
        else:
            if not self.has_previous_index:
                errors.append("For an Old Batch, please upload the previous Success Index file.")

        errors.extend(validate_max_marks(self.max_marks))
        return errors

    def semester_code(self, catalog: YearTypeCatalog = DEFAULT_CATALOG) -> Optional[str]:
        """Season code shown next to the selected semester, new batches only."""
        if BatchType(self.batch_type) is not BatchType.NEW or not self.semester_number:
            return None
        year = parse_batch_year(self.batch_year)
        if year is None:
            return None
        return global_semester_code(year, self.semester_number, catalog=catalog)

    def form_fields(self) -> Dict[str, str]:
        fields = {"semester_number": str(self.semester_number)}
        year = parse_batch_year(self.batch_year)
        if BatchType(self.batch_type) is BatchType.NEW and year is not None:
            fields["batch_year"] = str(year)
        if self.success_index_name:
            fields["success_index_name"] = self.success_index_name
        if self.batch_name:
            fields["batch_name"] = self.batch_name
        if self.max_marks is not None:
            fields["max_marks"] = _format_number(self.max_marks)
        return fields
