"""
Tests for core.academic_years

Test Coverage:
- display_year(): year-type offset, two-digit suffix, century wraparound
- parse_year_label() / validate_year_label(): typed labels
- batch_year_for(): inverse of display_year
"""
import pytest

from core.academic_years import (
    batch_year_for,
    display_year,
    pad2,
    parse_year_label,
    validate_year_label,
)
from core.year_types import InvalidYearTypeError, YearType, YearTypeCatalog, YearTypeSpec


def test_display_year_second_year():
    assert display_year(2022, YearType.SY) == "2023-24"


@pytest.mark.parametrize(
    "year_type, expected",
    [("FY", "2022-23"), ("SY", "2023-24"), ("TY", "2024-25")],
)
def test_display_year_per_year_type(year_type, expected):
    assert display_year(2022, year_type) == expected


def test_display_year_century_wraparound():
    assert display_year(2099, YearType.FY) == "2099-00"
    assert display_year(2098, YearType.SY) == "2099-00"


def test_display_year_zero_pads_suffix():
    assert display_year(2004, YearType.FY) == "2004-05"


def test_display_year_does_not_range_check():
    assert display_year(1899, YearType.FY) == "1899-00"


def test_display_year_unknown_year_type():
    with pytest.raises(InvalidYearTypeError):
        display_year(2022, "XY")


def test_display_year_uses_injected_catalog():
    shifted = YearTypeCatalog([
        YearTypeSpec(YearType.FY, "First Year", 1, (1, 2), ("I", "II")),
    ])
    assert display_year(2022, YearType.FY, catalog=shifted) == "2023-24"


def test_display_year_idempotent():
    assert display_year(2022, "TY") == display_year(2022, "TY")


@pytest.mark.parametrize("value, expected", [(0, "00"), (5, "05"), (24, "24"), (99, "99")])
def test_pad2(value, expected):
    assert pad2(value) == expected


@pytest.mark.parametrize("label", ["2024-25", "2024/25", "AY2024-25", "ay2024/25", " 2024-25 "])
def test_parse_year_label_accepts_common_forms(label):
    parsed = parse_year_label(label)
    assert parsed is not None
    assert parsed.start_year == 2024
    assert parsed.end_suffix == 25
    assert str(parsed) == "2024-25"


@pytest.mark.parametrize("label", ["", None, "2024", "24-25", "2024-2025", "ST2024", "2024_25"])
def test_parse_year_label_rejects_malformed(label):
    assert parse_year_label(label) is None


def test_validate_year_label_ok():
    assert validate_year_label("2099-00") == []


def test_validate_year_label_required():
    assert validate_year_label("") == ["Year label is required."]


def test_validate_year_label_format():
    errors = validate_year_label("2024")
    assert len(errors) == 1
    assert "Invalid year label format" in errors[0]


def test_validate_year_label_continuity():
    errors = validate_year_label("2024-26")
    assert errors == [
        "End year must be exactly one year after start year. Expected 25, got 26."
    ]


@pytest.mark.parametrize("year_type", ["FY", "SY", "TY"])
def test_batch_year_for_inverts_display_year(year_type):
    label = display_year(2022, year_type)
    assert batch_year_for(label, year_type) == 2022


def test_batch_year_for_malformed_label():
    assert batch_year_for("next year", "TY") is None
