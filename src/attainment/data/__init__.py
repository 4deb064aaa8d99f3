"""County education data loading and joins."""

from .education import (
    EDUCATION_FILENAME,
    CountyEducation,
    attainment_by_fips,
    county_names_by_fips,
    load_education,
    records_to_dataframe,
    tooltip_text,
    validate_education,
)

__all__ = [
    "EDUCATION_FILENAME",
    "CountyEducation",
    "load_education",
    "records_to_dataframe",
    "validate_education",
    "attainment_by_fips",
    "county_names_by_fips",
    "tooltip_text",
]
