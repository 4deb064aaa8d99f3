"""Tests for county education records."""

import json

import pandas as pd
import pytest

from attainment.data import (
    CountyEducation,
    attainment_by_fips,
    county_names_by_fips,
    load_education,
    records_to_dataframe,
    tooltip_text,
    validate_education,
)


class TestCountyEducation:
    """Tests for the record model."""

    def test_alias(self):
        """bachelorsOrHigher populates bachelors_or_higher."""
        record = CountyEducation.model_validate(
            {"fips": 1001, "state": "AL", "area_name": "Autauga County", "bachelorsOrHigher": 21.9}
        )
        assert record.bachelors_or_higher == 21.9

    def test_field_name_accepted(self):
        """Snake case field name also works."""
        record = CountyEducation(fips=1001, state="AL", area_name="Autauga County", bachelors_or_higher=21.9)
        assert record.fips == 1001

    def test_out_of_range(self):
        """Percentages above 100 are rejected."""
        with pytest.raises(ValueError):
            CountyEducation(fips=1, state="AL", area_name="X", bachelors_or_higher=120)


class TestRecordsToDataframe:
    """Tests for records_to_dataframe."""

    def test_columns(self, sample_records):
        """DataFrame has the expected columns and rows."""
        df = records_to_dataframe(sample_records)
        assert list(df.columns) == ["fips", "state", "area_name", "bachelors_or_higher"]
        assert len(df) == 6

    def test_empty(self):
        """No records gives an empty frame with the columns."""
        df = records_to_dataframe([])
        assert df.empty
        assert "bachelors_or_higher" in df.columns

    def test_invalid_record_index(self, sample_records):
        """Errors name the offending record."""
        sample_records[2] = {"fips": 1005, "state": "AL"}
        with pytest.raises(ValueError, match="index 2"):
            records_to_dataframe(sample_records)


class TestLoadEducation:
    """Tests for load_education."""

    def test_load(self, education_file):
        """Loads records from JSON."""
        df = load_education(education_file)
        assert len(df) == 6
        assert df.loc[df["fips"] == 8013, "area_name"].item() == "Boulder County"

    def test_accepts_str_path(self, education_file):
        """String paths work."""
        assert len(load_education(str(education_file))) == 6

    def test_missing_file(self, tmp_path):
        """Missing files raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_education(tmp_path / "missing.json")

    def test_malformed_json(self, tmp_path):
        """Malformed JSON raises ValueError."""
        path = tmp_path / "bad.json"
        path.write_text("[{")
        with pytest.raises(ValueError, match="Malformed JSON"):
            load_education(path)

    def test_not_a_list(self, tmp_path):
        """Top-level objects are rejected."""
        path = tmp_path / "obj.json"
        path.write_text(json.dumps({"fips": 1001}))
        with pytest.raises(ValueError, match="JSON array"):
            load_education(path)


class TestValidateEducation:
    """Tests for validate_education."""

    def test_valid(self, education_df):
        """Clean data passes with stats."""
        result = validate_education(education_df)
        assert result.valid
        assert result.total_rows == 6
        assert result.stats["counties"] == 6
        assert result.stats["states"] == 3
        assert result.stats["min_pct"] == 13.6
        assert result.stats["max_pct"] == 61.3

    def test_empty(self):
        """Empty data is invalid."""
        result = validate_education(records_to_dataframe([]))
        assert not result.valid
        assert result.missing_pct == 100.0

    def test_duplicate_fips(self, education_df):
        """Duplicate join keys are reported."""
        df = pd.concat([education_df, education_df.iloc[[0]]], ignore_index=True)
        result = validate_education(df)
        assert not result.valid
        assert any("Duplicate FIPS" in issue for issue in result.issues)

    def test_missing_values(self, education_df):
        """Missing values are reported."""
        education_df.loc[0, "bachelors_or_higher"] = None
        result = validate_education(education_df)
        assert not result.valid
        assert result.missing_pct > 0

    def test_outliers(self, education_df):
        """Out-of-range percentages are counted."""
        education_df.loc[0, "bachelors_or_higher"] = 140.0
        result = validate_education(education_df)
        assert not result.valid
        assert result.outliers_count == 1


class TestJoins:
    """Tests for FIPS lookups and tooltips."""

    def test_attainment_by_fips(self, education_df):
        """Maps FIPS to percent."""
        attainment = attainment_by_fips(education_df)
        assert attainment[1001] == 21.9
        assert len(attainment) == 6

    def test_county_names_by_fips(self, education_df):
        """Maps FIPS to "Area, ST"."""
        names = county_names_by_fips(education_df)
        assert names[13053] == "Chattahoochee County, GA"

    def test_tooltip_text(self, education_df):
        """Tooltip joins name and percent."""
        text = tooltip_text(
            1001,
            attainment_by_fips(education_df),
            county_names_by_fips(education_df),
        )
        assert text == "Autauga County, AL: 21.9%"

    def test_tooltip_unknown_county(self, education_df):
        """Unknown counties raise KeyError."""
        with pytest.raises(KeyError):
            tooltip_text(99999, attainment_by_fips(education_df), county_names_by_fips(education_df))
