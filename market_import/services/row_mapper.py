from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from typing import Any

from ..messages import ROW_MISSING_ID_OR_NAME
from ..models.column_schema import COLUMN_SCHEMA, ColumnKind, ColumnSpec
from ..models.imported_market import ImportedMarket
from .chain_normalizer import normalize_chain_name

"""Single-row mapper.

Maps one row of the market sheet (a sequence of cell values) to an
ImportedMarket using the positional COLUMN_SCHEMA. Returning None is a normal
outcome (row without ID or name); exceptions are left to the caller, which
isolates them per row.
"""

__all__ = [
    "ACTIVE_STATUS",
    "cell_text",
    "is_empty_cell",
    "extract_fields",
    "generate_market_id",
    "parse_frequency",
    "parse_market_row",
]

logger = logging.getLogger(__name__)

ACTIVE_STATUS = "aktiv"


def is_empty_cell(value: Any) -> bool:
    """Empty = missing, falsy ("" / 0 / None / False) or NaN."""
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return not value


def cell_text(value: Any) -> str:
    """Convert a cell to trimmed text; empty cells become ""."""
    if is_empty_cell(value):
        return ""
    # Excel 数値セル: 1010.0 -> "1010"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def parse_frequency(value: Any, default: int) -> int:
    """Parse the visit frequency cell.

    Empty, unparsable or non-finite cells fall back to ``default``. The result
    is rounded to the nearest integer (halves up) and is never below 1.
    """
    text = cell_text(value)
    if not text:
        parsed = float(default)
    else:
        try:
            parsed = float(text)
        except ValueError:
            parsed = float(default)
        if not math.isfinite(parsed):
            parsed = float(default)
    return max(1, _round_half_up(parsed))


def _cell(row: Sequence[Any], position: int) -> Any:
    return row[position] if position < len(row) else None


def _convert(spec: ColumnSpec, raw: Any, default_frequency: int | None) -> Any:
    if spec.kind is ColumnKind.NUMBER:
        default = default_frequency if default_frequency is not None else spec.default
        return parse_frequency(raw, int(default))  # type: ignore[call-overload]
    text = cell_text(raw)
    return text if text else spec.default


def extract_fields(row: Sequence[Any], default_frequency: int | None = None) -> dict[str, Any]:
    """Extract every COLUMN_SCHEMA field from a row (positions not listed are ignored)."""
    return {
        spec.field: _convert(spec, _cell(row, spec.position), default_frequency)
        for spec in COLUMN_SCHEMA
    }


def generate_market_id(internal_id: str, row_index: int) -> str:
    """Return the internal ID, or ``IMPORT-NNNN`` (0-based row index) if it is empty.

    Note: parse_market_row rejects rows without internal ID before calling this,
    so the IMPORT-NNNN branch is not reached from the import path. It stays for
    callers that build records without that validation.
    """
    return internal_id or f"IMPORT-{row_index:04d}"


def parse_market_row(
    row: Sequence[Any], row_index: int, *, default_frequency: int | None = None
) -> ImportedMarket | None:
    """Map one data row to an ImportedMarket.

    Args:
        row: Cell values of the row, in sheet column order
        row_index: 0-based index of the row in the sheet (header = 0)
        default_frequency: Frequency used for empty/unparsable cells
            (column default when None)

    Returns:
        The mapped market, or None if internal ID or name is missing
    """
    values = extract_fields(row, default_frequency)

    internal_id: str = values["internal_id"]
    name: str = values["name"]
    if not internal_id or not name:
        logger.warning(ROW_MISSING_ID_OR_NAME.format(n=row_index + 1))
        return None

    return ImportedMarket(
        id=generate_market_id(internal_id, row_index),
        internal_id=internal_id,
        name=name,
        address=values["address"],
        city=values["city"],
        postal_code=values["postal_code"],
        chain=normalize_chain_name(values["chain"]),
        frequency=values["frequency"],
        current_visits=0,
        is_active=values["status"].lower() == ACTIVE_STATUS,
        channel=values["channel"],
        banner=values["banner"],
        gebietsleiter_name=values["gebietsleiter_name"],
        gebietsleiter_email=values["gebietsleiter_email"],
        market_tel=values["market_tel"],
        market_email=values["market_email"],
    )
