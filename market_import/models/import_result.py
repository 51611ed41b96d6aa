from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .error_record import ErrorRecord
from .imported_market import ImportedMarket

"""Result models for a single import run.

An import is modelled as one outer ImportResult (the file-level outcome) that
wraps one RowOutcome per data row. A RowOutcome either carries a market or is
discarded with a diagnostic; a discarded row never affects its neighbours.
"""

__all__ = [
    "RowStatus",
    "RowOutcome",
    "ImportResult",
]


class RowStatus(Enum):
    """Per-row mapping outcome.

    - IMPORTED: row produced a market
    - SKIPPED_BLANK: row absent/empty or first cell empty (not an error)
    - REJECTED: ID or name missing
    - FAILED: exception while mapping the row
    """
    IMPORTED = "imported"
    SKIPPED_BLANK = "skipped_blank"
    REJECTED = "rejected"
    FAILED = "failed"


@dataclass(frozen=True)
class RowOutcome:
    row_number: int  # 1-based (header = 1, first data row = 2)
    status: RowStatus
    market: ImportedMarket | None = None
    error: ErrorRecord | None = None


@dataclass(frozen=True)
class ImportResult:
    """Aggregated outcome of importing one file.

    ``markets`` keeps the original row order; rows are never sorted or
    deduplicated.
    """
    file_name: str
    outcomes: list[RowOutcome] = field(default_factory=list)

    @property
    def markets(self) -> list[ImportedMarket]:
        return [o.market for o in self.outcomes if o.market is not None]

    @property
    def errors(self) -> list[ErrorRecord]:
        return [o.error for o in self.outcomes if o.error is not None]

    def count(self, status: RowStatus) -> int:
        return sum(1 for o in self.outcomes if o.status is status)

    @property
    def data_rows(self) -> int:
        return len(self.outcomes)

    @property
    def imported(self) -> int:
        return self.count(RowStatus.IMPORTED)

    @property
    def skipped_blank(self) -> int:
        return self.count(RowStatus.SKIPPED_BLANK)

    @property
    def rejected(self) -> int:
        return self.count(RowStatus.REJECTED)

    @property
    def failed(self) -> int:
        return self.count(RowStatus.FAILED)

    @property
    def is_partial(self) -> bool:
        """True when at least one non-blank row was dropped."""
        return self.rejected > 0 or self.failed > 0
