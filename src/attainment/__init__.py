"""Educational attainment choropleth: color legends and county data joins."""

__version__ = "0.1.0"
