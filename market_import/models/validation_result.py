from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of the pre-flight file check.

    ``error`` carries the user-facing message when ``valid`` is False.
    """
    valid: bool
    error: str | None = None
