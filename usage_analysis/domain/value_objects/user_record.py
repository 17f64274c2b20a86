"""User record value object.

Immutable data structure for one device usage observation.
"""

import math
from dataclasses import dataclass

KNOWN_DEVICE_MODELS = (
    "Google Pixel 5",
    "OnePlus 9",
    "Xiaomi Mi 11",
    "iPhone 12",
    "Samsung Galaxy S21",
)
OPERATING_SYSTEMS = ("Android", "iOS")
GENDERS = ("Female", "Male")
BEHAVIOR_CLASSES = (1, 2, 3, 4, 5)

# Field name -> CSV header
COLUMN_NAMES = {
    "user_id": "User ID",
    "device_model": "Device Model",
    "operating_system": "Operating System",
    "app_usage_minutes": "App Usage Time",
    "screen_on_hours": "Screen On Time",
    "battery_drain_mah": "Battery Drain",
    "num_apps_installed": "Number of Apps Installed",
    "data_usage_mb": "Data Usage",
    "age": "Age",
    "gender": "Gender",
    "behavior_class": "User Behavior Class",
}
ROW_ID_COLUMN = "Row ID"

NUMERIC_FIELDS = (
    "app_usage_minutes",
    "screen_on_hours",
    "battery_drain_mah",
    "num_apps_installed",
    "data_usage_mb",
    "age",
)
CATEGORICAL_FIELDS = ("device_model", "operating_system", "gender")


@dataclass(frozen=True)
class UserRecord:
    """A single user's daily device usage.

    Attributes:
        row_id: Dense 1-based identifier assigned during cleaning
        user_id: Identifier from the source file, never used as a feature
        device_model: Phone model name
        operating_system: "iOS" or "Android"
        app_usage_minutes: Daily app usage in minutes
        screen_on_hours: Daily screen-on time in hours
        battery_drain_mah: Daily battery drain in mAh
        num_apps_installed: Number of installed apps
        data_usage_mb: Daily data usage in MB
        age: User age in years
        gender: "Male" or "Female"
        behavior_class: Label - usage intensity from 1 (light) to 5 (heavy)
    """

    row_id: int
    user_id: int
    device_model: str
    operating_system: str
    app_usage_minutes: float
    screen_on_hours: float
    battery_drain_mah: float
    num_apps_installed: int
    data_usage_mb: float
    age: int
    gender: str
    behavior_class: int

    def __post_init__(self) -> None:
        """Validate record values."""
        if self.row_id < 1:
            raise ValueError(f"row_id must be at least 1, got {self.row_id}")
        if self.user_id < 1:
            raise ValueError(f"user_id must be positive, got {self.user_id}")
        if not self.device_model:
            raise ValueError("device_model cannot be empty")
        if self.operating_system not in OPERATING_SYSTEMS:
            raise ValueError(
                f"operating_system must be one of {OPERATING_SYSTEMS}, "
                f"got {self.operating_system!r}"
            )
        if self.gender not in GENDERS:
            raise ValueError(f"gender must be one of {GENDERS}, got {self.gender!r}")
        for name in ("app_usage_minutes", "screen_on_hours", "battery_drain_mah", "data_usage_mb"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"{name} must be a non-negative number, got {value}")
        if self.num_apps_installed < 0:
            raise ValueError(
                f"num_apps_installed must be non-negative, got {self.num_apps_installed}"
            )
        if self.age < 1:
            raise ValueError(f"age must be positive, got {self.age}")
        if self.behavior_class not in BEHAVIOR_CLASSES:
            raise ValueError(
                f"behavior_class must be between 1 and 5, got {self.behavior_class}"
            )

    def to_row(self) -> dict[str, object]:
        """Return the record keyed by CSV header, with the row id first."""
        row: dict[str, object] = {ROW_ID_COLUMN: self.row_id}
        for field_name, header in COLUMN_NAMES.items():
            row[header] = getattr(self, field_name)
        return row
