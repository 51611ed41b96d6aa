from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from market_import.config.loader import ConfigError, ImporterConfig, resolve_config
from market_import.excel.reader import ImportFileError, read_workbook_rows
from market_import.logging.error_log import ErrorLogBuffer
from market_import.logging.init import log_summary, setup_logging
from market_import.models.import_result import ImportResult
from market_import.models.upload_file import UploadFile
from market_import.services.importer import import_market_file
from market_import.services.summary import render_summary_line
from market_import.services.validator import validate_import_file

"""CLI entrypoint.

Flow:
- Load .env and config (config/import.yml or $MARKET_IMPORT_CONFIG, else defaults)
- Validate the file (extension / size)
- Import, write records as JSON (stdout or --output)
- Flush row errors to the JSON Lines error log, print SUMMARY line

Log lines (INFO/WARN/ERROR/SUMMARY) go to stderr; stdout carries only the
JSON array (or the --inspect-data listing).
"""

EXIT_SUCCESS_ALL = 0
EXIT_PARTIAL_FAILURE = 2
EXIT_FATAL = 1

INSPECT_SAMPLE_ROWS = 3


def _load_env_file(path: Path, override: bool = False) -> None:
    """Load .env using python-dotenv (MARKET_IMPORT_CONFIG etc.).

    失敗時は警告を出すのみで続行。
    """
    try:
        if path.exists():
            load_dotenv(dotenv_path=path, override=override)
    except OSError as e:  # pragma: no cover
        print(f"WARNING: failed to load .env via python-dotenv: {e}", file=sys.stderr)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Market spreadsheet (CSV/XLSX/XLS) importer")
    p.add_argument("file", help="CSV/XLSX/XLS file to import")
    p.add_argument("-o", "--output", help="Write records as JSON to this path (default: stdout)")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--inspect-data", action="store_true", help="Print header & first rows then exit")
    return p.parse_args(argv)


def _inspect_data(upload: UploadFile) -> int:
    try:
        rows = read_workbook_rows(upload.read_bytes(), upload.name)
    except (OSError, ImportFileError) as e:
        print(f"inspect: read_error: {e}")
        return EXIT_FATAL
    print(f"FILE: {upload.name} rows={len(rows)}")
    if not rows:
        return EXIT_SUCCESS_ALL
    print(f"  header={rows[0]}")
    for i, row in enumerate(rows[1 : 1 + INSPECT_SAMPLE_ROWS], start=2):
        print(f"  row {i}: {row}")
    return EXIT_SUCCESS_ALL


def _write_output(result: ImportResult, output: str | None) -> None:
    payload = json.dumps([m.to_dict() for m in result.markets], ensure_ascii=False, indent=2)
    if output is None:
        print(payload)
        return
    out_path = Path(output)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(payload + "\n", encoding="utf-8")


def _flush_error_log(result: ImportResult, cfg: ImporterConfig, logger: logging.Logger) -> None:
    if not result.errors:
        return
    buffer = ErrorLogBuffer(Path(cfg.error_log_dir))
    buffer.extend(result.errors)
    log_path = buffer.flush()
    logger.info(f"row errors written to: {log_path}")


def main(argv: list[str] | None = None) -> int:
    # stdout は JSON レコード専用。ログ行は stderr へ
    logger = setup_logging(stream=sys.stderr)

    # 空リスト [] が与えられた場合に sys.argv[1:] が混入しないよう None のときのみ参照
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"))

    if args.debug:
        for h in logger.handlers:
            h.setLevel(logging.DEBUG)
        logger.setLevel(logging.DEBUG)
        logger.debug("debug mode enabled")

    try:
        cfg = resolve_config()
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    path = Path(args.file)
    if not path.is_file():
        logger.error(f"file not found: {path}")
        return EXIT_FATAL

    upload = UploadFile.from_path(path)
    validation = validate_import_file(upload, cfg)
    if not validation.valid:
        logger.error(f"{validation.error}")
        return EXIT_FATAL

    if args.inspect_data:
        return _inspect_data(upload)

    try:
        result = asyncio.run(import_market_file(upload, cfg))
    except ImportFileError as e:
        logger.error(f"{e}")
        return EXIT_FATAL

    _write_output(result, args.output)
    if args.output:
        logger.info(f"{result.imported} markets written to: {args.output}")
    _flush_error_log(result, cfg, logger)

    summary_line = render_summary_line(result)
    # log_summary が "SUMMARY " を付与するため除去
    log_summary(summary_line[len("SUMMARY "):])

    if result.is_partial:
        return EXIT_PARTIAL_FAILURE
    return EXIT_SUCCESS_ALL
