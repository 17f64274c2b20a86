"""Usage data reader interface.

Contract for loading raw usage rows from an external source.
"""

from abc import ABC, abstractmethod
from typing import Any

from usage_analysis.domain.exceptions import RowValidationWarning


class IUsageDataReader(ABC):
    """Contract for reading raw, untyped usage rows."""

    @abstractmethod
    def read_rows(
        self,
    ) -> tuple[list[str], list[dict[str, Any]], tuple[RowValidationWarning, ...]]:
        """Read every row of the source.

        Returns:
            Tuple of (column names, rows keyed by column name, rows the
            source could not parse). Values are left as parsed; the
            cleaning stage does the typing.

        Raises:
            ReportStorageError: If the source cannot be read
        """
        pass
