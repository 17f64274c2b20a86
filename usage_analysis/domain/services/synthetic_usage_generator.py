"""Synthetic usage data generator for testing and dry runs.

Generates raw rows shaped like the mobile device usage CSV.
"""

import random

from usage_analysis.domain.value_objects import BEHAVIOR_CLASSES, COLUMN_NAMES, KNOWN_DEVICE_MODELS


class SyntheticUsageGenerator:
    """Generator for synthetic device usage rows.

    Rows are balanced across behavior classes. Each class draws its usage
    figures from its own non-overlapping band, heavier classes using more,
    which makes the classes close to linearly separable like the real
    dataset. Only "iPhone 12" runs iOS.
    """

    # class -> (app minutes, screen hours, battery mAh, apps, data MB)
    CLASS_BANDS = {
        1: ((30, 59), (1.0, 1.9), (302, 599), (10, 19), (102, 299)),
        2: ((60, 179), (2.0, 3.9), (600, 999), (20, 39), (300, 599)),
        3: ((180, 299), (4.0, 5.9), (1000, 1599), (40, 59), (600, 999)),
        4: ((300, 539), (6.0, 7.9), (1600, 1999), (60, 79), (1000, 1499)),
        5: ((540, 598), (8.0, 12.0), (2000, 2993), (80, 99), (1500, 2497)),
    }

    def __init__(self, seed: int | None = None) -> None:
        """Initialize the generator.

        Args:
            seed: Random seed for reproducibility
        """
        self._random = random.Random(seed)

    def generate(self, num_rows: int = 700) -> list[dict[str, str]]:
        """Generate raw rows keyed by CSV header, all values as strings.

        Args:
            num_rows: Number of rows to generate

        Returns:
            List of raw rows with user ids 1..num_rows
        """
        if num_rows < 1:
            raise ValueError("num_rows must be at least 1")

        labels = [BEHAVIOR_CLASSES[i % len(BEHAVIOR_CLASSES)] for i in range(num_rows)]
        self._random.shuffle(labels)
        return [self._generate_row(user_id, label) for user_id, label in enumerate(labels, 1)]

    def _generate_row(self, user_id: int, behavior_class: int) -> dict[str, str]:
        apps_band, screen_band, battery_band, installed_band, data_band = (
            self.CLASS_BANDS[behavior_class]
        )
        device_model = self._random.choice(KNOWN_DEVICE_MODELS)
        operating_system = "iOS" if device_model == "iPhone 12" else "Android"
        c = COLUMN_NAMES

        return {
            c["user_id"]: str(user_id),
            c["device_model"]: device_model,
            c["operating_system"]: operating_system,
            c["app_usage_minutes"]: str(self._random.randint(*apps_band)),
            c["screen_on_hours"]: f"{self._random.uniform(*screen_band):.1f}",
            c["battery_drain_mah"]: str(self._random.randint(*battery_band)),
            c["num_apps_installed"]: str(self._random.randint(*installed_band)),
            c["data_usage_mb"]: str(self._random.randint(*data_band)),
            c["age"]: str(self._random.randint(18, 59)),
            c["gender"]: self._random.choice(("Male", "Female")),
            c["behavior_class"]: str(behavior_class),
        }
