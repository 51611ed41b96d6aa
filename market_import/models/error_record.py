from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime

"""ErrorRecord model for row-level diagnostics.

Rows that are dropped during import (missing ID/name, or an exception while
mapping) are not fatal. They are reported as ErrorRecords so the CLI can write
them to a JSON Lines error log next to the warning output.
"""

__all__ = [
    "ErrorRecord",
    "MISSING_REQUIRED_FIELD",
    "ROW_PROCESSING_ERROR",
]

MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"
ROW_PROCESSING_ERROR = "ROW_PROCESSING_ERROR"


@dataclass(frozen=True)
class ErrorRecord:
    """Structured error record for JSON Lines logging.

    Attributes:
        timestamp: ISO8601 UTC timestamp with 'Z' suffix
        file: Name of the imported file
        row: Row number (1-based, header = 1)
        error_type: Error classification in UPPER_SNAKE_CASE format
        message: Human readable description
    """
    timestamp: str  # ISO8601 UTC
    file: str
    row: int
    error_type: str  # UPPER_SNAKE
    message: str

    @staticmethod
    def create(file: str, row: int, error_type: str, message: str) -> ErrorRecord:
        """Create a new ErrorRecord stamped with the current UTC time."""
        ts = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        return ErrorRecord(
            timestamp=ts,
            file=file,
            row=row,
            error_type=error_type,
            message=message,
        )

    def to_json_line(self) -> str:
        # 追加キー阻止: dataclass -> dict して json.dumps
        return json.dumps(asdict(self), ensure_ascii=False)
