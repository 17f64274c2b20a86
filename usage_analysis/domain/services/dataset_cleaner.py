"""Dataset cleaning service.

Turns raw, untyped rows (as parsed from a delimited file) into validated
UserRecords. Bad rows are dropped and reported, never raised.
"""

import itertools
import logging
import math
from typing import Any, Iterable, Mapping, Sequence

from usage_analysis.domain.exceptions import RowValidationWarning, SchemaError
from usage_analysis.domain.value_objects import COLUMN_NAMES, CleanedDataset, UserRecord

_LOGGER = logging.getLogger(__name__)

_OPERATING_SYSTEMS = {"ios": "iOS", "android": "Android"}
_GENDERS = {"male": "Male", "female": "Female"}


class _CoercionError(ValueError):
    """A single field could not be coerced."""

    def __init__(self, column: str, reason: str) -> None:
        self.column = column
        super().__init__(reason)


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and math.isnan(value):
        return ""
    return str(value).strip()


def _to_float(column: str, value: Any) -> float:
    text = _text(value)
    if not text:
        raise _CoercionError(column, "value is missing")
    try:
        number = float(text)
    except ValueError:
        raise _CoercionError(column, f"{text!r} is not a number") from None
    if not math.isfinite(number):
        raise _CoercionError(column, f"{text!r} is not a finite number")
    return number


def _to_int(column: str, value: Any) -> int:
    number = _to_float(column, value)
    if not number.is_integer():
        raise _CoercionError(column, f"{number} is not an integer")
    return int(number)


def _to_choice(column: str, value: Any, choices: Mapping[str, str]) -> str:
    text = _text(value)
    try:
        return choices[text.lower()]
    except KeyError:
        raise _CoercionError(
            column, f"{text!r} is not one of {', '.join(sorted(choices.values()))}"
        ) from None


class DatasetCleaner:
    """Coerces raw usage rows into a CleanedDataset.

    Each field is coerced to its declared type. A row with any failing field,
    an out-of-range behavior class, or an already seen user id is excluded
    and reported as a RowValidationWarning. Kept rows get a dense 1-based
    row id in source order.
    """

    REQUIRED_COLUMNS = tuple(COLUMN_NAMES.values())

    def clean(
        self,
        raw_rows: Sequence[Mapping[str, Any]],
        columns: Iterable[str] | None = None,
        rejected: Sequence[RowValidationWarning] = (),
    ) -> CleanedDataset:
        """Clean raw rows.

        Args:
            raw_rows: Rows keyed by CSV header, values untyped
            columns: Header of the source; derived from the rows if omitted
            rejected: Rows the reader could not parse; counted as dropped and
                skipped when numbering the parsed rows

        Returns:
            CleanedDataset with the kept records and drop report

        Raises:
            SchemaError: If a required column is absent from the input
        """
        self._check_schema(raw_rows, columns)

        records: list[UserRecord] = []
        warnings: list[RowValidationWarning] = list(rejected)
        seen_user_ids: set[int] = set()

        rejected_numbers = {w.row_number for w in rejected}
        row_numbers = (n for n in itertools.count(1) if n not in rejected_numbers)
        for row_number, raw in zip(row_numbers, raw_rows):
            try:
                record = self._coerce_row(raw, row_id=len(records) + 1)
            except _CoercionError as e:
                warnings.append(RowValidationWarning(row_number, e.column, str(e)))
                continue
            except ValueError as e:
                warnings.append(RowValidationWarning(row_number, None, str(e)))
                continue

            if record.user_id in seen_user_ids:
                warnings.append(
                    RowValidationWarning(
                        row_number,
                        COLUMN_NAMES["user_id"],
                        f"duplicate user id {record.user_id}",
                    )
                )
                continue

            seen_user_ids.add(record.user_id)
            records.append(record)

        warnings.sort(key=lambda w: w.row_number)
        for warning in warnings:
            _LOGGER.warning("Dropped row: %s", warning)
        if warnings:
            _LOGGER.warning(
                "Cleaning dropped %d of %d rows",
                len(warnings),
                len(raw_rows) + len(rejected),
            )
        _LOGGER.info("Cleaned dataset has %d records", len(records))

        return CleanedDataset(
            records=tuple(records),
            dropped_rows=len(warnings),
            warnings=tuple(warnings),
        )

    def _check_schema(
        self,
        raw_rows: Sequence[Mapping[str, Any]],
        columns: Iterable[str] | None,
    ) -> None:
        """Raise SchemaError if required columns are entirely absent."""
        if columns is None:
            present: set[str] = set()
            for raw in raw_rows:
                present.update(str(key).strip() for key in raw.keys())
        else:
            present = {str(c).strip() for c in columns}

        missing = tuple(c for c in self.REQUIRED_COLUMNS if c not in present)
        if missing:
            raise SchemaError(missing)

    def _coerce_row(self, raw: Mapping[str, Any], row_id: int) -> UserRecord:
        """Coerce one raw row into a UserRecord.

        Raises:
            _CoercionError: If a field cannot be coerced
            ValueError: If the coerced values fail record validation
        """
        row = {str(key).strip(): value for key, value in raw.items()}
        c = COLUMN_NAMES

        device_model = _text(row.get(c["device_model"]))
        if not device_model:
            raise _CoercionError(c["device_model"], "value is missing")

        behavior_class = _to_int(c["behavior_class"], row.get(c["behavior_class"]))
        if not 1 <= behavior_class <= 5:
            raise _CoercionError(
                c["behavior_class"], f"class {behavior_class} is outside 1..5"
            )

        return UserRecord(
            row_id=row_id,
            user_id=_to_int(c["user_id"], row.get(c["user_id"])),
            device_model=device_model,
            operating_system=_to_choice(
                c["operating_system"], row.get(c["operating_system"]), _OPERATING_SYSTEMS
            ),
            app_usage_minutes=_to_float(c["app_usage_minutes"], row.get(c["app_usage_minutes"])),
            screen_on_hours=_to_float(c["screen_on_hours"], row.get(c["screen_on_hours"])),
            battery_drain_mah=_to_float(c["battery_drain_mah"], row.get(c["battery_drain_mah"])),
            num_apps_installed=_to_int(
                c["num_apps_installed"], row.get(c["num_apps_installed"])
            ),
            data_usage_mb=_to_float(c["data_usage_mb"], row.get(c["data_usage_mb"])),
            age=_to_int(c["age"], row.get(c["age"])),
            gender=_to_choice(c["gender"], row.get(c["gender"]), _GENDERS),
            behavior_class=behavior_class,
        )
