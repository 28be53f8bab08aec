"""
Per-file cleanup outcome
"""

from dataclasses import dataclass
from typing import Optional

from ..core.constants import STASH_DIR_NAME


@dataclass
class FileCleanupResult:
    """Outcome of cleaning up one file"""
    file_path: str
    success: bool
    stash_filename: Optional[str] = None
    error_message: Optional[str] = None

    @classmethod
    def succeeded(cls, file_path: str, stash_filename: str) -> "FileCleanupResult":
        return cls(file_path=file_path, success=True, stash_filename=stash_filename)

    @classmethod
    def failed(cls, file_path: str, error_message: str) -> "FileCleanupResult":
        return cls(file_path=file_path, success=False, error_message=error_message)

    def render(self) -> str:
        if self.success:
            return f"{self.file_path} - cleaned up and backed up to {STASH_DIR_NAME}/{self.stash_filename}"
        return f"❌ {self.file_path} - failed: {self.error_message}"
