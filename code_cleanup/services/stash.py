"""
Stash of timestamped file backups

Backups live flat in ``<codebase>/.stash`` and are named
``<basename>.<epoch ms>.bak``.
"""

from pathlib import Path
from typing import List, Optional, Union

from ..models.backup import BackupEntry, build_backup_name
from ..utils.datetime_utils import timestamp_ms
from ..utils.errors import StashError
from ..utils.logging_utils import get_logger

logger = get_logger(__name__)


class StashManager:
    """Creates, lists and purges backups in the stash directory"""

    def __init__(self, stash_path: Union[str, Path]):
        self.stash_path = Path(stash_path)

    def exists(self) -> bool:
        return self.stash_path.is_dir()

    def ensure(self) -> Path:
        """Create the stash directory (and missing parents) if needed"""
        try:
            self.stash_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Error creating stash directory {self.stash_path}: {e}")
            raise StashError("Failed to create stash directory", path=str(self.stash_path), original_exception=e)
        return self.stash_path

    def backup(self, file_name: str, content: str) -> str:
        """
        Write a backup of a file's content

        Args:
            file_name: Basename of the original file
            content: Original file text

        Returns:
            Stash filename of the new backup
        """
        self.ensure()

        timestamp = timestamp_ms()
        while True:
            stash_file = self.stash_path / build_backup_name(file_name, timestamp)
            try:
                # Exclusive create; line endings are written exactly as read
                with stash_file.open("x", encoding="utf-8", newline="") as f:
                    f.write(content)
                break
            except FileExistsError:
                # Same basename within the same millisecond: move to the next free timestamp
                timestamp += 1

        logger.debug(f"Backed up {file_name} to {stash_file}")
        return stash_file.name

    def list_backups(self) -> List[BackupEntry]:
        """All backups in the stash, newest first"""
        if not self.exists():
            return []

        entries = []
        for path in self.stash_path.iterdir():
            if not path.is_file():
                continue
            entry = BackupEntry.from_path(path)
            if entry is not None:
                entries.append(entry)

        entries.sort(key=lambda e: (e.timestamp_ms, e.stash_filename), reverse=True)
        return entries

    def find_latest_backup(self, file_name: str) -> Optional[BackupEntry]:
        """Most recent backup of a file basename, if any"""
        for entry in self.list_backups():
            if entry.original_name == file_name:
                return entry
        return None

    def get_backup(self, stash_filename: str) -> Optional[BackupEntry]:
        # Only plain names inside the stash are accepted
        if Path(stash_filename).name != stash_filename:
            return None
        path = self.stash_path / stash_filename
        if not path.is_file():
            return None
        return BackupEntry.from_path(path)

    def read_backup(self, entry: BackupEntry) -> str:
        return (self.stash_path / entry.stash_filename).read_bytes().decode("utf-8")

    def purge(self) -> str:
        """
        Remove every file from the stash

        Returns:
            Human-readable summary of what happened
        """
        if not self.exists():
            return "No stash directory found."

        try:
            files = [path for path in self.stash_path.iterdir() if path.is_file()]
            if not files:
                return "Stash directory is already empty."

            for path in files:
                path.unlink()

            logger.info(f"Removed {len(files)} file(s) from {self.stash_path}")
            return f"Cleaned up stash directory. Removed {len(files)} file(s)."

        except OSError as e:
            logger.error(f"Failed to clean up stash {self.stash_path}: {e}")
            return f"Failed to clean up stash: {e}"
