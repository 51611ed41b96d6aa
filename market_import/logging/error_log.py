from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from ..models.error_record import ErrorRecord

"""Row error log for the CLI.

import_rows() reports every rejected row (ID or name missing) and every row
whose mapping raised as an ErrorRecord on ImportResult.errors. After the
import the CLI collects them here and writes them to
<error_log_dir>/errors-YYYYMMDD-HHMMSS.log (UTC), one JSON object per line.
The file is only created when at least one row was dropped, so a clean import
leaves no log behind.
"""

__all__ = [
    "ErrorRecord",
    "ErrorLogBuffer",
]

LOGS_DIR = Path("./logs")
TIMESTAMP_FMT = "%Y%m%d-%H%M%S"


class ErrorLogBuffer:
    """Collects the dropped-row records of one import run until flush().

    スレッド安全性不要 (1 回の import はシリアル実行)
    """
    def __init__(self, log_dir: Path = LOGS_DIR) -> None:
        self._records: list[ErrorRecord] = []
        self._log_dir = log_dir
        self._file_path: Path | None = None

    @property
    def file_path(self) -> Path:
        if self._file_path is None:
            self._log_dir.mkdir(parents=True, exist_ok=True)
            stamp = datetime.now(UTC).strftime(TIMESTAMP_FMT)
            self._file_path = self._log_dir / f"errors-{stamp}.log"
        return self._file_path

    def append(self, record: ErrorRecord) -> None:
        self._records.append(record)

    def extend(self, records: list[ErrorRecord]) -> None:
        self._records.extend(records)

    def __len__(self) -> int:  # pragma: no cover (trivial)
        return len(self._records)

    def flush(self) -> Path | None:
        """Append buffered records to the log file.

        Returns the log path, or None when nothing was buffered (no file is
        created for clean runs).
        """
        if not self._records:
            return None
        fp = self.file_path
        with fp.open("a", encoding="utf-8") as f:
            for r in self._records:
                f.write(r.to_json_line() + "\n")
        self._records.clear()
        return fp
