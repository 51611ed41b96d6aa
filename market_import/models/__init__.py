"""Domain models for the market spreadsheet importer.

This package contains the record, file-handle and result types shared by the
reader, the row mapper and the CLI.
"""

from .column_schema import COLUMN_SCHEMA, ColumnKind, ColumnSpec
from .error_record import ErrorRecord
from .import_result import ImportResult, RowOutcome, RowStatus
from .imported_market import ImportedMarket
from .upload_file import UploadFile
from .validation_result import ValidationResult

__all__ = [
    # Column layout
    "COLUMN_SCHEMA",
    "ColumnKind",
    "ColumnSpec",
    # Records
    "ImportedMarket",
    "ErrorRecord",
    # Processing models
    "ImportResult",
    "RowOutcome",
    "RowStatus",
    "UploadFile",
    "ValidationResult",
]
