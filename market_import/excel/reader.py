from __future__ import annotations

import csv
import io
from pathlib import PurePath
from typing import Any

import pandas as pd

from ..messages import PARSE_ERROR, READ_ERROR

"""Workbook reader.

Turns raw upload bytes into a row matrix: the first sheet as a list of rows,
each row a list of cell values, with empty cells as "". No header handling and
no content validation happens here; the matrix is handed to the importer as-is.

Format handling is delegated to pandas:
- .csv  -> read_csv (delimiter sniffed from the data lines, utf-8 then latin-1,
           every cell as text, ragged and blank lines kept so row numbers
           match the file)
- other -> read_excel (openpyxl for .xlsx, xlrd for legacy .xls; detected from bytes)
"""

__all__ = [
    "ImportFileError",
    "ReadError",
    "ParseError",
    "read_workbook_rows",
]

CSV_DELIMITERS = ",;\t|"
CSV_SNIFF_LINES = 20


class ImportFileError(Exception):
    """Base class for file-level import failures (the whole file is rejected)."""


class ReadError(ImportFileError):
    """Raised when the upload bytes cannot be read."""

    def __init__(self) -> None:
        super().__init__(READ_ERROR)


class ParseError(ImportFileError):
    """Raised when the bytes are not a readable CSV/XLSX/XLS workbook.

    The underlying exception is kept in ``cause`` (and chained via ``from``).
    """

    def __init__(self, cause: BaseException | str) -> None:
        self.cause = cause
        super().__init__(PARSE_ERROR.format(cause=cause))


def _decode_csv(content: bytes) -> str:
    try:
        return content.decode("utf-8-sig")
    except UnicodeDecodeError:
        # Excel の「CSV (区切り文字)」保存は latin-1 系。latin-1 は全バイトを復号できる
        return content.decode("latin-1")


def _sniff_delimiter(lines: list[str]) -> str:
    """Guess the delimiter from the data lines (the first line is a header of any shape)."""
    data_lines = [line for line in lines[1:] if line.strip()] or [line for line in lines if line.strip()]
    sample = "\n".join(data_lines[:CSV_SNIFF_LINES])
    if not sample:
        return ","
    try:
        return csv.Sniffer().sniff(sample, delimiters=CSV_DELIMITERS).delimiter
    except csv.Error:
        # 行ごとに列数が揃わない場合は出現回数の多い区切り文字、無ければカンマ
        counts = {d: sample.count(d) for d in CSV_DELIMITERS}
        best = max(counts, key=counts.__getitem__)
        return best if counts[best] > 0 else ","


def _read_csv(content: bytes) -> pd.DataFrame:
    text = _decode_csv(content)
    sep = _sniff_delimiter(text.splitlines())
    # 行ごとに列数が異なってもよいよう、最も長い行の列数で names を与える
    width = max((len(r) for r in csv.reader(io.StringIO(text), delimiter=sep)), default=0)
    if width == 0:
        return pd.DataFrame()
    return pd.read_csv(
        io.StringIO(text),
        sep=sep,
        header=None,
        names=list(range(width)),
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=False,
    )


def _read_first_sheet(content: bytes) -> pd.DataFrame:
    # sheet_name=0: 先頭シートのみ対象
    return pd.read_excel(
        io.BytesIO(content),
        sheet_name=0,
        header=None,
        dtype=object,
        keep_default_na=False,
    )


def _to_matrix(df: pd.DataFrame) -> list[list[Any]]:
    if df.empty:
        return []
    # 欠損セルは "" に統一
    filled = df.astype(object).where(pd.notna(df), "")
    return filled.values.tolist()


def read_workbook_rows(content: bytes, file_name: str) -> list[list[Any]]:
    """Parse workbook bytes into the first sheet's row matrix.

    Parameters
    ----------
    content: raw file bytes
    file_name: upload name, only its extension is used to pick the CSV path

    Raises
    ------
    ParseError: the bytes are not a supported/readable tabular format
    """
    suffix = PurePath(file_name).suffix.lower()
    try:
        if suffix == ".csv":
            df = _read_csv(content)
        else:
            df = _read_first_sheet(content)
    except Exception as e:
        # pandas/openpyxl/xlrd は壊れたファイルで様々な例外 (ValueError, BadZipFile, XLRDError 等) を送出する
        raise ParseError(e) from e
    return _to_matrix(df)
