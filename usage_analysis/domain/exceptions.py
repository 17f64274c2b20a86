"""Domain errors and warnings.

Fatal conditions are exceptions and abort the run. Recoverable conditions
are warnings: they are collected and returned alongside results.
"""


class UsageAnalysisError(Exception):
    """Base class for fatal analysis errors."""


class SchemaError(UsageAnalysisError):
    """Raised when required columns are entirely absent from the input."""

    def __init__(self, missing_columns: tuple[str, ...]) -> None:
        self.missing_columns = tuple(missing_columns)
        super().__init__(
            f"Input is missing required columns: {', '.join(self.missing_columns)}"
        )


class EmptyPartitionError(UsageAnalysisError):
    """Raised when the training or test partition is empty."""

    def __init__(self, partition: str, total_rows: int) -> None:
        self.partition = partition
        self.total_rows = total_rows
        super().__init__(
            f"{partition} partition is empty (dataset has {total_rows} rows)"
        )


class ReportStorageError(UsageAnalysisError):
    """Raised when reading input or writing report files fails."""


class UsageAnalysisWarning(UserWarning):
    """Base class for recoverable conditions."""


class RowValidationWarning(UsageAnalysisWarning):
    """A raw row failed coercion or validation and was dropped."""

    def __init__(self, row_number: int, column: str | None, reason: str) -> None:
        self.row_number = row_number
        self.column = column
        self.reason = reason
        where = f" column '{column}'" if column else ""
        super().__init__(f"Row {row_number}{where}: {reason}")


class UnseenCategoryWarning(UsageAnalysisWarning):
    """A value was not seen when the encoding was fit."""

    def __init__(self, field: str, value: object) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Unseen value {value!r} for '{field}' mapped to unknown bucket")


class ConvergenceWarning(UsageAnalysisWarning):
    """A model fit did not converge or degenerated; best-effort fit is used."""

    def __init__(self, model_name: str, reason: str) -> None:
        self.model_name = model_name
        self.reason = reason
        super().__init__(f"{model_name}: {reason}")
