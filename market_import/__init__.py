"""Market import: spreadsheet (CSV/XLSX/XLS) -> ImportedMarket records."""

from .excel.reader import ParseError, ReadError
from .models import ImportedMarket, ImportResult, UploadFile, ValidationResult
from .services.chain_normalizer import normalize_chain_name
from .services.importer import (
    EmptyFileError,
    ImportFileError,
    import_market_file,
    import_rows,
    parse_market_file,
    process_import_data,
)
from .services.row_mapper import generate_market_id, parse_market_row
from .services.validator import validate_import_file

__all__ = [
    "EmptyFileError",
    "ImportFileError",
    "ImportResult",
    "ImportedMarket",
    "ParseError",
    "ReadError",
    "UploadFile",
    "ValidationResult",
    "generate_market_id",
    "import_market_file",
    "import_rows",
    "normalize_chain_name",
    "parse_market_file",
    "parse_market_row",
    "process_import_data",
    "validate_import_file",
]
