# core/year_types.py
"""
Year type catalog.

A year type (FY / SY / TY) is one stage of a three-year programme. Each entry
knows how many years after the batch start it begins and which two semesters
it contains. The catalog is built explicitly and handed to the label
functions, so alternate catalogs can be swapped in.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple

# ============================================================================
# ENUMS / ERRORS
# ============================================================================


class YearType(str, Enum):
    """Wire codes sent to the backend as `year_type`."""
    FY = "FY"
    SY = "SY"
    TY = "TY"


class InvalidYearTypeError(ValueError):
    """Raised when a year type is not in the catalog."""


class CatalogError(ValueError):
    """Raised when a catalog is built from inconsistent entries."""


# ============================================================================
# DATA CLASSES
# ============================================================================


@dataclass(frozen=True)
class YearTypeSpec:
    year_type: YearType
    display_name: str
    offset: int
    semester_numbers: Tuple[int, int]
    roman_labels: Tuple[str, str]

    def validate(self) -> list[str]:
        errors = []
        if self.offset < 0:
            errors.append(f"{self.year_type.value}: offset must be non-negative")
        if len(self.semester_numbers) != 2:
            errors.append(f"{self.year_type.value}: exactly two semester numbers are required")
        if len(self.roman_labels) != len(self.semester_numbers):
            errors.append(f"{self.year_type.value}: roman labels must align with semester numbers")
        if any(n < 1 for n in self.semester_numbers):
            errors.append(f"{self.year_type.value}: semester numbers must be positive")
        return errors

    def position_of(self, semester_number: int) -> Optional[int]:
        """0 for the first (Winter) semester, 1 for the second (Summer)."""
        try:
            return self.semester_numbers.index(semester_number)
        except ValueError:
            return None


class YearTypeCatalog:
    """Read-only mapping YearType -> YearTypeSpec, kept in year order."""

    def __init__(self, specs: Iterable[YearTypeSpec]):
        ordered = list(specs)
        errors: list[str] = []
        for spec in ordered:
            errors.extend(spec.validate())

        seen = set()
        for spec in ordered:
            if spec.year_type in seen:
                errors.append(f"{spec.year_type.value}: duplicate entry")
            seen.add(spec.year_type)

        for prev, cur in zip(ordered, ordered[1:]):
            if cur.offset <= prev.offset:
                errors.append(
                    f"{cur.year_type.value}: offset {cur.offset} must be greater "
                    f"than {prev.year_type.value} offset {prev.offset}"
                )

        numbers = [n for spec in ordered for n in spec.semester_numbers]
        if len(numbers) != len(set(numbers)):
            errors.append("semester numbers must be unique across the catalog")

        if errors:
            raise CatalogError("; ".join(errors))

        self._specs: Mapping[YearType, YearTypeSpec] = MappingProxyType(
            {spec.year_type: spec for spec in ordered}
        )

    def __contains__(self, year_type) -> bool:
        try:
            self.lookup(year_type)
        except InvalidYearTypeError:
            return False
        return True

    def __iter__(self):
        return iter(self._specs.values())

    def __len__(self) -> int:
        return len(self._specs)

    def year_types(self) -> list[YearType]:
        return list(self._specs.keys())

    def lookup(self, year_type: YearType | str) -> YearTypeSpec:
        """
        Return the spec for a year type.

        Accepts the enum member or its wire code ("FY", "SY", "TY").

        Raises:
            InvalidYearTypeError: the year type is not part of this catalog.
        """
        try:
            key = YearType(year_type)
        except ValueError:
            raise InvalidYearTypeError(f"Unknown year type: {year_type!r}") from None
        spec = self._specs.get(key)
        if spec is None:
            raise InvalidYearTypeError(f"Year type {key.value} is not in the catalog")
        return spec

    def locate_semester(self, semester_number: int) -> Optional[Tuple[YearTypeSpec, int]]:
        """Map a global semester number to (spec, position) or None."""
        for spec in self._specs.values():
            position = spec.position_of(semester_number)
            if position is not None:
                return spec, position
        return None

    def semester_numbers(self) -> list[int]:
        return [n for spec in self._specs.values() for n in spec.semester_numbers]


# ============================================================================
# DEFAULT CATALOG
# ============================================================================

_ROMAN = (
    (10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"),
)


def roman_numeral(n: int) -> str:
    """Roman numeral for small positive integers (semester numbers)."""
    if n < 1:
        raise ValueError(f"roman numerals need a positive integer, got {n}")
    out = []
    for value, symbol in _ROMAN:
        while n >= value:
            out.append(symbol)
            n -= value
    return "".join(out)


def _spec(year_type: YearType, display_name: str, offset: int) -> YearTypeSpec:
    first = 2 * offset + 1
    numbers = (first, first + 1)
    return YearTypeSpec(year_type, display_name, offset, numbers, tuple(roman_numeral(n) for n in numbers))


def build_default_catalog() -> YearTypeCatalog:
    return YearTypeCatalog([
        _spec(YearType.FY, "First Year", 0),
        _spec(YearType.SY, "Second Year", 1),
        _spec(YearType.TY, "Third Year", 2),
    ])


DEFAULT_CATALOG = build_default_catalog()
