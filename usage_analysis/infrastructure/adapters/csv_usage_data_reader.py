"""CSV usage data reader adapter.

Infrastructure adapter that implements IUsageDataReader using pandas.
"""

import logging
import re
import warnings
from pathlib import Path
from typing import Any

import pandas as pd
from usage_analysis.domain.exceptions import ReportStorageError, RowValidationWarning
from usage_analysis.domain.interfaces import IUsageDataReader

_LOGGER = logging.getLogger(__name__)

# pandas reports each skipped line as "Skipping line 7: expected 11 fields, saw 12"
_SKIPPED_LINE = re.compile(r"Skipping line (\d+): (.+)")


class CsvUsageDataReader(IUsageDataReader):
    """Reads raw usage rows from a delimited file.

    Every cell is read as a string so that typing errors surface in the
    cleaning stage instead of failing the whole read. Lines with too many
    fields are skipped by pandas and returned as rejected rows.
    """

    def __init__(self, path: str | Path, delimiter: str = ",", encoding: str = "utf-8") -> None:
        """Initialize the reader.

        Args:
            path: Path of the delimited file
            delimiter: Field separator
            encoding: Text encoding of the file
        """
        self._path = Path(path)
        self._delimiter = delimiter
        self._encoding = encoding

    def read_rows(
        self,
    ) -> tuple[list[str], list[dict[str, Any]], tuple[RowValidationWarning, ...]]:
        if not self._path.exists():
            raise ReportStorageError(f"Usage data file not found: {self._path}")

        try:
            with warnings.catch_warnings(record=True) as caught:
                warnings.simplefilter("always", pd.errors.ParserWarning)
                df = pd.read_csv(
                    self._path,
                    sep=self._delimiter,
                    encoding=self._encoding,
                    dtype=str,
                    keep_default_na=False,
                    skipinitialspace=True,
                    on_bad_lines="warn",
                )
        except pd.errors.EmptyDataError:
            _LOGGER.warning("Usage data file is empty: %s", self._path)
            return [], [], ()
        except (OSError, UnicodeDecodeError, pd.errors.ParserError) as e:
            raise ReportStorageError(f"Failed to read {self._path}: {e}") from e

        rejected = self._rejected_lines(caught)
        for warning in rejected:
            _LOGGER.warning("Skipped malformed line: %s", warning)

        df.columns = [str(c).strip() for c in df.columns]
        _LOGGER.info("Read %d rows x %d columns from %s", len(df), len(df.columns), self._path)
        return list(df.columns), df.to_dict(orient="records"), rejected

    @staticmethod
    def _rejected_lines(caught: list[warnings.WarningMessage]) -> tuple[RowValidationWarning, ...]:
        rejected = []
        for message in caught:
            if not issubclass(message.category, pd.errors.ParserWarning):
                warnings.warn_explicit(
                    message.message, message.category, message.filename, message.lineno
                )
                continue
            for match in _SKIPPED_LINE.finditer(str(message.message)):
                line = int(match.group(1))
                # Line 1 is the header
                rejected.append(
                    RowValidationWarning(
                        line - 1, None, f"malformed line {line}: {match.group(2).strip()}"
                    )
                )
        return tuple(rejected)
