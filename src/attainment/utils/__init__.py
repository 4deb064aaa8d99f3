"""Shared utilities for attainment."""

from .base import ValidationResult
from .io import get_data_path, get_project_root

__all__ = [
    "get_data_path",
    "get_project_root",
    "ValidationResult",
]
