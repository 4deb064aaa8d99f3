"""Shared pytest fixtures for attainment tests."""

import json
from pathlib import Path

import pytest

from attainment.data import records_to_dataframe


@pytest.fixture
def project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def sample_records() -> list[dict]:
    """Sample county education records (raw JSON shape)."""
    return [
        {"fips": 1001, "state": "AL", "area_name": "Autauga County", "bachelorsOrHigher": 21.9},
        {"fips": 1003, "state": "AL", "area_name": "Baldwin County", "bachelorsOrHigher": 28.6},
        {"fips": 1005, "state": "AL", "area_name": "Barbour County", "bachelorsOrHigher": 13.6},
        {"fips": 8013, "state": "CO", "area_name": "Boulder County", "bachelorsOrHigher": 58.5},
        {"fips": 8097, "state": "CO", "area_name": "Pitkin County", "bachelorsOrHigher": 61.3},
        {"fips": 13053, "state": "GA", "area_name": "Chattahoochee County", "bachelorsOrHigher": 15.2},
    ]


@pytest.fixture
def education_file(tmp_path, sample_records) -> Path:
    """Sample records written to a JSON file."""
    path = tmp_path / "for_user_education.json"
    path.write_text(json.dumps(sample_records))
    return path


@pytest.fixture
def education_df(sample_records):
    """Sample records as a validated DataFrame."""
    return records_to_dataframe(sample_records)
