from __future__ import annotations
import json
from pathlib import Path
from market_import.logging.error_log import ErrorLogBuffer, ErrorRecord


def test_error_record_creation_and_json_line():
    rec = ErrorRecord.create(
        file="markets.xlsx",
        row=10,
        error_type="MISSING_REQUIRED_FIELD",
        message="Zeile 10: ID oder Name fehlt",
    )
    data = json.loads(rec.to_json_line())
    assert data["file"] == "markets.xlsx"
    assert data["row"] == 10
    assert data["error_type"] == "MISSING_REQUIRED_FIELD"
    assert data["message"] == "Zeile 10: ID oder Name fehlt"
    assert data["timestamp"].endswith("Z")
    assert set(data.keys()) == {"timestamp", "file", "row", "error_type", "message"}


def test_json_line_keeps_umlauts():
    rec = ErrorRecord.create("märkte.csv", 4, "ROW_PROCESSING_ERROR", "größer")
    assert "märkte.csv" in rec.to_json_line()
    assert "größer" in rec.to_json_line()


def test_error_log_buffer_flush(tmp_path: Path):
    buf = ErrorLogBuffer(tmp_path / "logs")
    buf.append(ErrorRecord.create("f1.xlsx", 3, "MISSING_REQUIRED_FIELD", "Zeile 3: ID oder Name fehlt"))
    buf.extend([ErrorRecord.create("f1.xlsx", 7, "ROW_PROCESSING_ERROR", "ValueError('x')")])
    path = buf.flush()
    assert path is not None and path.exists()
    assert path.parent == tmp_path / "logs"
    assert path.name.startswith("errors-") and path.suffix == ".log"
    lines = path.read_text(encoding="utf-8").strip().splitlines()
    assert [json.loads(raw)["row"] for raw in lines] == [3, 7]
    # flush 後バッファクリア
    assert len(buf) == 0


def test_flush_without_records_creates_no_file(tmp_path: Path):
    buf = ErrorLogBuffer(tmp_path / "logs")
    assert buf.flush() is None
    assert not (tmp_path / "logs").exists()
