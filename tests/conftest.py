"""Pytest configuration for device usage analysis tests.

This module configures the Python path for tests to find the application
modules and provides shared data fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add the repository root to the Python path for test imports
ROOT_DIR = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT_DIR))

from usage_analysis.domain.services import DatasetCleaner, SyntheticUsageGenerator  # noqa: E402
from usage_analysis.domain.value_objects import COLUMN_NAMES, CleanedDataset, UserRecord  # noqa: E402


@pytest.fixture
def raw_rows() -> list[dict[str, str]]:
    """700 synthetic raw rows, the size of the canonical dataset."""
    return SyntheticUsageGenerator(seed=7).generate(700)


@pytest.fixture
def dataset(raw_rows: list[dict[str, str]]) -> CleanedDataset:
    """Cleaned 700-row dataset."""
    return DatasetCleaner().clean(raw_rows)


@pytest.fixture
def valid_raw_row() -> dict[str, str]:
    """A single well-formed raw row."""
    c = COLUMN_NAMES
    return {
        c["user_id"]: "1",
        c["device_model"]: "Google Pixel 5",
        c["operating_system"]: "Android",
        c["app_usage_minutes"]: "393",
        c["screen_on_hours"]: "6.4",
        c["battery_drain_mah"]: "1872",
        c["num_apps_installed"]: "67",
        c["data_usage_mb"]: "1122",
        c["age"]: "40",
        c["gender"]: "Male",
        c["behavior_class"]: "4",
    }


def make_record(row_id: int, behavior_class: int = 1, **overrides) -> UserRecord:
    """Build a valid UserRecord with optional field overrides."""
    values = {
        "row_id": row_id,
        "user_id": row_id,
        "device_model": "OnePlus 9",
        "operating_system": "Android",
        "app_usage_minutes": 60.0 * behavior_class,
        "screen_on_hours": 2.0 * behavior_class,
        "battery_drain_mah": 500.0 * behavior_class,
        "num_apps_installed": 15 * behavior_class,
        "data_usage_mb": 300.0 * behavior_class,
        "age": 30,
        "gender": "Female",
        "behavior_class": behavior_class,
    }
    values.update(overrides)
    return UserRecord(**values)


@pytest.fixture
def record_factory():
    """Factory for valid UserRecords."""
    return make_record
