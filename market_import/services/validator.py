from __future__ import annotations

from ..config.loader import DEFAULT_CONFIG, ImporterConfig
from ..messages import FILE_TOO_LARGE, INVALID_EXTENSION
from ..models.upload_file import UploadFile
from ..models.validation_result import ValidationResult


def validate_import_file(file: UploadFile, config: ImporterConfig = DEFAULT_CONFIG) -> ValidationResult:
    """Pre-flight check of an upload before any parsing.

    Only ``file.name`` and ``file.size`` are inspected; the file is never opened.
    The extension check runs first, so a wrong format is reported even for
    oversized files.
    """
    file_name = file.name.lower()
    if not any(file_name.endswith(ext) for ext in config.allowed_extensions):
        return ValidationResult(valid=False, error=INVALID_EXTENSION)

    if file.size > config.max_file_size:
        return ValidationResult(valid=False, error=FILE_TOO_LARGE)

    return ValidationResult(valid=True)
