# Shared pytest fixtures
from __future__ import annotations
import tempfile
from pathlib import Path
from typing import Any, Callable

import pandas as pd
import pytest

from market_import.logging.init import reset_logging

# 19 列 (A..S) の見出し。内容は importer では参照されない
HEADER = [
    "ID", "Kunde", "Channel", "Vertrieb", "Banner", "Handelskette", "Region", "Name",
    "PLZ", "Stadt", "Strasse", "GL Name", "GL Email", "Status", "Typ", "Frequenz",
    "Tag", "Tel", "Email",
]


@pytest.fixture(autouse=True)
def _clean_logging():
    # setup_logging() は propagate=False にするため caplog と干渉しないよう毎回戻す
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        monkeypatch.chdir(p)
        monkeypatch.delenv("MARKET_IMPORT_CONFIG", raising=False)
        yield p


@pytest.fixture()
def sample_config_yaml() -> str:
    return """allowed_extensions: [".csv", ".xlsx", ".xls"]
max_file_size: 10485760
default_frequency: 12
error_log_dir: ./logs
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "import.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def market_row() -> Callable[..., list[Any]]:
    """Build a 19-cell data row; keyword arguments override single columns."""
    positions = {
        "internal_id": 0, "channel": 2, "banner": 4, "chain": 5, "name": 7,
        "postal_code": 8, "city": 9, "address": 10, "gl_name": 11, "gl_email": 12,
        "status": 13, "frequency": 15, "tel": 17, "email": 18,
    }
    defaults = {
        "internal_id": "1001", "channel": "Lebensmittel", "banner": "Spar Supermarkt",
        "chain": "SPAR", "name": "Spar Wien Mitte", "postal_code": "1030", "city": "Wien",
        "address": "Landstraßer Hauptstraße 1", "gl_name": "Maria Huber",
        "gl_email": "maria.huber@example.at", "status": "Aktiv", "frequency": "12",
        "tel": "+43 1 234567", "email": "wien.mitte@example.at",
    }

    def _build(**overrides: Any) -> list[Any]:
        row: list[Any] = [""] * len(HEADER)
        values = {**defaults, **overrides}
        for key, value in values.items():
            row[positions[key]] = value
        return row

    return _build


def make_excel(path: Path, rows: list[list[Any]], extra_sheets: dict[str, list[list[Any]]] | None = None) -> Path:
    """Write rows (header included) to the first sheet of an .xlsx file."""
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        pd.DataFrame(rows).to_excel(writer, sheet_name="Maerkte", header=False, index=False)
        for name, sheet_rows in (extra_sheets or {}).items():
            pd.DataFrame(sheet_rows).to_excel(writer, sheet_name=name, header=False, index=False)
    return path


def make_csv(path: Path, rows: list[list[Any]], sep: str = ";", encoding: str = "utf-8") -> Path:
    lines = [sep.join(str(c) for c in row) for row in rows]
    path.write_bytes(("\n".join(lines) + "\n").encode(encoding))
    return path


@pytest.fixture()
def header() -> list[str]:
    return list(HEADER)


@pytest.fixture()
def write_excel() -> Callable[..., Path]:
    return make_excel


@pytest.fixture()
def write_csv() -> Callable[..., Path]:
    return make_csv
