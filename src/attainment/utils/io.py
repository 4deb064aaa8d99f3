"""I/O utilities for data paths."""

from pathlib import Path

# Project root is 4 levels up from this file
_PROJECT_ROOT = Path(__file__).parent.parent.parent.parent

VALID_DATASETS = {"education"}
VALID_STAGES = {"raw", "processed"}


def get_data_path(dataset: str, stage: str = "raw") -> Path:
    """Get standardized data path for a dataset.

    Args:
        dataset: Dataset name ('education')
        stage: One of 'raw', 'processed'

    Returns:
        Path to the data directory (creates if doesn't exist)

    Example:
        >>> path = get_data_path("education", "raw")
        >>> path
        PosixPath('.../data/raw/education')
    """
    if dataset not in VALID_DATASETS:
        raise ValueError(f"Invalid dataset: {dataset}. Must be one of {VALID_DATASETS}")
    if stage not in VALID_STAGES:
        raise ValueError(f"Invalid stage: {stage}. Must be one of {VALID_STAGES}")

    path = _PROJECT_ROOT / "data" / stage / dataset
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_project_root() -> Path:
    """Get the project root directory."""
    return _PROJECT_ROOT
