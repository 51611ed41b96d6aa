from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from typing import Any

from ..config.loader import DEFAULT_CONFIG, ImporterConfig
from ..excel.reader import ImportFileError, ParseError, ReadError, read_workbook_rows
from ..messages import EMPTY_FILE, ROW_MISSING_ID_OR_NAME, ROW_PROCESSING_ERROR
from ..models import error_record
from ..models.error_record import ErrorRecord
from ..models.import_result import ImportResult, RowOutcome, RowStatus
from ..models.imported_market import ImportedMarket
from ..models.upload_file import UploadFile
from .progress import RowProgressTracker
from .row_mapper import is_empty_cell, parse_market_row

logger = logging.getLogger(__name__)

"""Import orchestration.

Coordinates one import: read bytes -> parse workbook -> map every data row.

Failure handling is two-tier:
- file level (read / parse / empty file): the whole import is rejected with an
  ImportFileError subclass
- row level (missing ID/name, any exception while mapping): the row is dropped
  with a warning and an ErrorRecord, and the next row is processed
"""

__all__ = [
    "EmptyFileError",
    "ImportFileError",
    "ParseError",
    "ReadError",
    "import_rows",
    "process_import_data",
    "import_market_file",
    "parse_market_file",
]


class EmptyFileError(ImportFileError):
    """Raised when the sheet has no data row below the header."""

    def __init__(self) -> None:
        super().__init__(EMPTY_FILE)


def _is_blank_row(row: Sequence[Any] | None) -> bool:
    """Absent row, zero-length row, or empty/falsy first cell."""
    if not row:
        return True
    return is_empty_cell(row[0])


def _map_row(row: Sequence[Any], row_index: int, file_name: str, config: ImporterConfig) -> RowOutcome:
    row_number = row_index + 1
    try:
        market = parse_market_row(row, row_index, default_frequency=config.default_frequency)
    except Exception as e:
        # 1 行の失敗でバッチ全体を止めない
        logger.warning(f"{ROW_PROCESSING_ERROR.format(n=row_number)} {e!r}")
        return RowOutcome(
            row_number=row_number,
            status=RowStatus.FAILED,
            error=ErrorRecord.create(file_name, row_number, error_record.ROW_PROCESSING_ERROR, repr(e)),
        )
    if market is None:
        return RowOutcome(
            row_number=row_number,
            status=RowStatus.REJECTED,
            error=ErrorRecord.create(
                file_name,
                row_number,
                error_record.MISSING_REQUIRED_FIELD,
                ROW_MISSING_ID_OR_NAME.format(n=row_number),
            ),
        )
    return RowOutcome(row_number=row_number, status=RowStatus.IMPORTED, market=market)


def import_rows(
    rows: Sequence[Sequence[Any] | None],
    file_name: str = "",
    *,
    config: ImporterConfig = DEFAULT_CONFIG,
) -> ImportResult:
    """Map a row matrix (header + data rows) to an ImportResult.

    Row 0 is the header and is never inspected. Outcomes keep the original row
    order.

    Raises:
        EmptyFileError: If the matrix has fewer than 2 rows
    """
    if len(rows) < 2:
        raise EmptyFileError()

    outcomes: list[RowOutcome] = []
    dropped = 0
    with RowProgressTracker(len(rows) - 1) as progress:
        for row_index in range(1, len(rows)):
            row = rows[row_index]
            progress.advance()
            if _is_blank_row(row):
                outcomes.append(RowOutcome(row_number=row_index + 1, status=RowStatus.SKIPPED_BLANK))
                continue
            outcome = _map_row(row, row_index, file_name, config)
            outcomes.append(outcome)
            if outcome.error is not None:
                dropped += 1
                progress.set_postfix(dropped=dropped)

    result = ImportResult(file_name=file_name, outcomes=outcomes)
    logger.debug(
        f"mapped file={file_name or '-'} rows={result.data_rows} imported={result.imported} "
        f"rejected={result.rejected} failed={result.failed}"
    )
    return result


def process_import_data(
    rows: Sequence[Sequence[Any] | None], *, config: ImporterConfig = DEFAULT_CONFIG
) -> list[ImportedMarket]:
    """Return the markets of a row matrix in original row order (see import_rows)."""
    return import_rows(rows, config=config).markets


async def import_market_file(file: UploadFile, config: ImporterConfig = DEFAULT_CONFIG) -> ImportResult:
    """Read, parse and map one uploaded file.

    The byte read and workbook parsing run in a worker thread; the call
    completes once, with the result or a file-level error. No retry.

    Raises:
        ReadError: The file bytes could not be read
        ParseError: The bytes are not a readable CSV/XLSX/XLS workbook
        EmptyFileError: No data row below the header
    """
    logger.info(f"Importing markets from: {file.name}")
    try:
        content = await asyncio.to_thread(file.read_bytes)
    except OSError as e:
        raise ReadError() from e

    rows = await asyncio.to_thread(read_workbook_rows, content, file.name)
    return import_rows(rows, file.name, config=config)


async def parse_market_file(file: UploadFile, config: ImporterConfig = DEFAULT_CONFIG) -> list[ImportedMarket]:
    """Return the markets of an uploaded file (see import_market_file)."""
    result = await import_market_file(file, config)
    return result.markets
