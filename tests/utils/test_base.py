"""Tests for ValidationResult."""

import pytest

from attainment.utils import ValidationResult


class TestValidationResult:
    """Tests for ValidationResult dataclass."""

    def test_str_valid(self):
        """String form shows status, rows, missing and outliers."""
        result = ValidationResult(valid=True, total_rows=3142, missing_pct=0.0)
        assert str(result) == "ValidationResult(VALID, rows=3142, missing=0.0%, outliers=0)"

    def test_str_invalid(self):
        """Invalid results say INVALID."""
        result = ValidationResult(valid=False, total_rows=10, missing_pct=12.5, outliers_count=2)
        assert "INVALID" in str(result)
        assert "missing=12.5%" in str(result)

    def test_defaults(self):
        """Issues and stats default to empty containers."""
        result = ValidationResult(valid=True, total_rows=1, missing_pct=0.0)
        assert result.issues == []
        assert result.stats == {}

    def test_raise_if_invalid_passes_when_valid(self):
        """Valid results do not raise."""
        ValidationResult(valid=True, total_rows=1, missing_pct=0.0).raise_if_invalid()

    def test_raise_if_invalid_raises(self):
        """Invalid results raise ValueError listing the issues."""
        result = ValidationResult(
            valid=False, total_rows=2, missing_pct=0.0, issues=["Duplicate FIPS codes: 1"]
        )
        with pytest.raises(ValueError, match="Duplicate FIPS"):
            result.raise_if_invalid()
