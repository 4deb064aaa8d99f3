"""Validation result shared by data loaders."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ValidationResult:
    """Result of data validation.

    Attributes:
        valid: Whether the data passed all validation checks
        total_rows: Total number of rows/records in the dataset
        missing_pct: Percentage of missing values (0-100)
        outliers_count: Number of out-of-range values detected
        issues: List of validation issues found
        stats: Dictionary of summary statistics
    """

    valid: bool
    total_rows: int
    missing_pct: float
    outliers_count: int = 0
    issues: list[str] = field(default_factory=list)
    stats: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        status = "VALID" if self.valid else "INVALID"
        return (
            f"ValidationResult({status}, "
            f"rows={self.total_rows}, "
            f"missing={self.missing_pct:.1f}%, "
            f"outliers={self.outliers_count})"
        )

    def raise_if_invalid(self) -> None:
        """Raise ValueError describing the issues when validation failed.

        Raises:
            ValueError: If valid is False
        """
        if not self.valid:
            raise ValueError(
                f"Data validation failed: {self.issues}. "
                f"Missing: {self.missing_pct:.1f}%, "
                f"Outliers: {self.outliers_count}"
            )
