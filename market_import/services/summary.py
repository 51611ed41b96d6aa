from __future__ import annotations

from ..models.import_result import ImportResult

"""SUMMARY line rendering for the import CLI."""


def render_summary_line(result: ImportResult) -> str:
    """Render the SUMMARY line for one import.

    Format:
    SUMMARY file={name} rows={data_rows} imported={n} skipped_blank={n} rejected={n} failed={n}

    Examples:
        >>> render_summary_line(ImportResult(file_name="markets.xlsx"))
        'SUMMARY file=markets.xlsx rows=0 imported=0 skipped_blank=0 rejected=0 failed=0'
    """
    return (
        f"SUMMARY file={result.file_name or '-'} "
        f"rows={result.data_rows} "
        f"imported={result.imported} "
        f"skipped_blank={result.skipped_blank} "
        f"rejected={result.rejected} "
        f"failed={result.failed}"
    )
