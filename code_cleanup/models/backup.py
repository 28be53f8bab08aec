"""
Stashed backup model
"""

import re
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..core.constants import BACKUP_SUFFIX, STASH_DIR_NAME
from ..utils.datetime_utils import from_timestamp_ms

# <original basename>.<epoch milliseconds>.bak
BACKUP_NAME_PATTERN = re.compile(r"^(?P<original>.+)\.(?P<timestamp>\d+)" + re.escape(BACKUP_SUFFIX) + r"$")


def build_backup_name(file_name: str, timestamp: int) -> str:
    """Stash filename for a backup of ``file_name`` captured at ``timestamp`` (ms)"""
    return f"{file_name}.{timestamp}{BACKUP_SUFFIX}"


@dataclass
class BackupEntry:
    """A single backup file in the stash"""
    stash_filename: str
    original_name: str
    timestamp_ms: int
    size_bytes: int = 0

    @property
    def captured_at(self) -> datetime:
        return from_timestamp_ms(self.timestamp_ms)

    @property
    def relative_path(self) -> str:
        """Path relative to the codebase root, as shown to clients"""
        return f"{STASH_DIR_NAME}/{self.stash_filename}"

    def describe(self) -> str:
        return (
            f"{self.stash_filename} - {self.original_name} captured "
            f"{self.captured_at.isoformat()} ({self.size_bytes} bytes)"
        )

    @classmethod
    def from_path(cls, path: Path) -> Optional["BackupEntry"]:
        """Parse a stash file; returns None for names that are not backups"""
        match = BACKUP_NAME_PATTERN.match(path.name)
        if not match:
            return None
        return cls(
            stash_filename=path.name,
            original_name=match.group("original"),
            timestamp_ms=int(match.group("timestamp")),
            size_bytes=path.stat().st_size,
        )
