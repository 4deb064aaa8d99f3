"""County educational attainment records.

Loads the per-county attainment dataset (share of adults 25+ with a
bachelor's degree or higher, 2010-2014) and builds the join tables the
choropleth uses for fills and tooltips.

Record format (JSON array):
    [{"fips": 1001, "state": "AL", "area_name": "Autauga County",
      "bachelorsOrHigher": 21.9}, ...]

Example:
    >>> df = load_education(get_data_path("education") / EDUCATION_FILENAME)
    >>> validation = validate_education(df)
    >>> attainment = attainment_by_fips(df)
"""

import json
import logging
from pathlib import Path
from typing import Union

import pandas as pd
from pydantic import BaseModel, Field, ValidationError

from attainment.utils import ValidationResult

logger = logging.getLogger(__name__)

EDUCATION_FILENAME = "for_user_education.json"

COLUMNS = ["fips", "state", "area_name", "bachelors_or_higher"]


class CountyEducation(BaseModel):
    """One county's attainment record.

    Attributes:
        fips: County FIPS code
        state: Two-letter state abbreviation
        area_name: County name (e.g., "Autauga County")
        bachelors_or_higher: Percent of adults 25+ with a bachelor's or higher
    """

    fips: int
    state: str
    area_name: str
    bachelors_or_higher: float = Field(
        ...,
        alias="bachelorsOrHigher",
        ge=0,
        le=100,
        description="Percent of adults 25+ with a bachelor's degree or higher",
    )

    model_config = {"populate_by_name": True}


def records_to_dataframe(records: list[dict]) -> pd.DataFrame:
    """Validate raw records and convert them to a DataFrame.

    Args:
        records: Parsed JSON records

    Returns:
        DataFrame with columns fips, state, area_name, bachelors_or_higher

    Raises:
        ValueError: If any record fails validation
    """
    rows = []
    for i, record in enumerate(records):
        try:
            rows.append(CountyEducation.model_validate(record).model_dump())
        except ValidationError as e:
            raise ValueError(f"Invalid education record at index {i}: {e}") from e

    return pd.DataFrame(rows, columns=COLUMNS)


def load_education(path: Union[str, Path]) -> pd.DataFrame:
    """Load county education records from a JSON file.

    Args:
        path: Path to the JSON array of county records

    Returns:
        DataFrame with columns fips, state, area_name, bachelors_or_higher

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a JSON array of valid records
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Education data not found: {path}")

    try:
        records = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Malformed JSON in {path}: {e}") from e

    if not isinstance(records, list):
        raise ValueError(f"Expected a JSON array of records in {path}")

    df = records_to_dataframe(records)
    logger.info(f"Loaded {len(df)} county education records from {path}")
    return df


def validate_education(df: pd.DataFrame) -> ValidationResult:
    """Validate county education data.

    Checks:
    - Data is not empty
    - Missing values in any column
    - Duplicate FIPS codes (the join key)
    - Percentages outside [0, 100]

    Args:
        df: DataFrame from load_education()

    Returns:
        ValidationResult with quality metrics
    """
    issues = []

    if df.empty:
        return ValidationResult(
            valid=False,
            total_rows=0,
            missing_pct=100.0,
            issues=["No education records"],
        )

    total_cells = df.size
    missing_pct = float(df.isna().sum().sum() / total_cells * 100) if total_cells else 0.0
    if missing_pct > 0:
        issues.append(f"Missing values: {missing_pct:.1f}%")

    duplicates = int(df["fips"].duplicated().sum())
    if duplicates:
        issues.append(f"Duplicate FIPS codes: {duplicates}")

    pct = df["bachelors_or_higher"]
    outliers = int(((pct < 0) | (pct > 100)).sum())
    if outliers:
        issues.append(f"Percentages outside [0, 100]: {outliers}")

    stats = {
        "counties": int(df["fips"].nunique()),
        "states": int(df["state"].nunique()),
        "min_pct": float(pct.min()),
        "max_pct": float(pct.max()),
        "mean_pct": float(pct.mean()),
    }

    for issue in issues:
        logger.warning(issue)

    return ValidationResult(
        valid=len(issues) == 0,
        total_rows=len(df),
        missing_pct=missing_pct,
        outliers_count=outliers,
        issues=issues,
        stats=stats,
    )


def attainment_by_fips(df: pd.DataFrame) -> dict[int, float]:
    """Map county FIPS code to percent with a bachelor's or higher."""
    return dict(zip(df["fips"].astype(int).tolist(), df["bachelors_or_higher"].astype(float).tolist()))


def county_names_by_fips(df: pd.DataFrame) -> dict[int, str]:
    """Map county FIPS code to "Area, ST" display names."""
    names = df["area_name"] + ", " + df["state"]
    return dict(zip(df["fips"].astype(int).tolist(), names.tolist()))


def tooltip_text(fips: int, attainment: dict[int, float], names: dict[int, str]) -> str:
    """Tooltip line for a county.

    Args:
        fips: County FIPS code
        attainment: Output of attainment_by_fips()
        names: Output of county_names_by_fips()

    Returns:
        Text such as "Autauga County, AL: 21.9%"

    Raises:
        KeyError: If the county is missing from either table
    """
    return f"{names[fips]}: {attainment[fips]}%"
