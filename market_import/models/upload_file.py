from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

"""UploadFile: the file handle handed over by the upload UI or the CLI.

Only ``name`` and ``size`` are needed for pre-flight validation; the bytes are
read lazily from ``content`` (in-memory upload) or ``path`` (file on disk).
"""

__all__ = [
    "UploadFile",
]


@dataclass(frozen=True)
class UploadFile:
    name: str  # ファイル名 (拡張子判定に使用)
    size: int  # バイト数
    path: Path | None = None
    content: bytes | None = None

    @staticmethod
    def from_path(path: Path) -> UploadFile:
        """Create a handle for a file on disk (size taken from ``stat``)."""
        return UploadFile(name=path.name, size=path.stat().st_size, path=path)

    @staticmethod
    def from_bytes(name: str, content: bytes) -> UploadFile:
        return UploadFile(name=name, size=len(content), content=content)

    def read_bytes(self) -> bytes:
        """Return the raw file bytes.

        Raises:
            OSError: If the file cannot be read or no byte source is attached
        """
        if self.content is not None:
            return self.content
        if self.path is None:
            raise OSError(f"no content attached to upload: {self.name}")
        return self.path.read_bytes()
