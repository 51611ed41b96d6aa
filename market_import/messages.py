from __future__ import annotations

"""User-facing message catalog.

The admin tool displays these strings verbatim, so they must stay byte-identical
(German, including umlauts).
"""

__all__ = [
    "INVALID_EXTENSION",
    "FILE_TOO_LARGE",
    "EMPTY_FILE",
    "READ_ERROR",
    "PARSE_ERROR",
    "ROW_MISSING_ID_OR_NAME",
    "ROW_PROCESSING_ERROR",
]

INVALID_EXTENSION = (
    "Ungültiges Dateiformat. Bitte eine CSV- oder Excel-Datei (.csv, .xlsx, .xls) hochladen."
)
FILE_TOO_LARGE = "Die Datei ist zu groß. Maximum: 10MB"
EMPTY_FILE = "Die Datei enthält keine Daten"
READ_ERROR = "Fehler beim Lesen der Datei"
PARSE_ERROR = "Fehler beim Verarbeiten der Datei: {cause}"

# 行番号は 1 始まり (ヘッダ行 = 1)
ROW_MISSING_ID_OR_NAME = "Zeile {n}: ID oder Name fehlt"
ROW_PROCESSING_ERROR = "Fehler in Zeile {n}:"
