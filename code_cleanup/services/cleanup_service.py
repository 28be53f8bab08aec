"""
Cleanup orchestration: back up each file, send it to the model, write the result back
"""

from pathlib import Path
from typing import List, Optional, Sequence

from .gemini_client import GeminiCleanupClient
from .stash import StashManager
from ..models.cleanup import FileCleanupResult
from ..utils.errors import BackupNotFoundError, CodeCleanupError
from ..utils.logging_utils import get_logger

logger = get_logger(__name__)


class CodeCleanupService:
    """Runs the read -> backup -> generate -> overwrite sequence for each file"""

    def __init__(self, stash: StashManager, generator: GeminiCleanupClient):
        self.stash = stash
        self.generator = generator

    @staticmethod
    def resolve_path(file_path: str) -> Path:
        """Paths are used as given; relative ones are taken from the process working directory"""
        return Path(file_path)

    async def cleanup_files(self, file_paths: Sequence[str]) -> List[FileCleanupResult]:
        """
        Clean up files one at a time

        A failure on one file is recorded and the next file is processed.

        Raises:
            StashError: the stash directory could not be created
        """
        self.stash.ensure()
        results = []

        for file_path in file_paths:
            result = await self.cleanup_file(file_path)
            results.append(result)

        succeeded = sum(1 for r in results if r.success)
        logger.info(f"Cleaned up {succeeded}/{len(results)} file(s)")
        return results

    async def cleanup_file(self, file_path: str) -> FileCleanupResult:
        path = self.resolve_path(file_path)
        try:
            original_code = path.read_bytes().decode("utf-8")
            stash_filename = self.stash.backup(path.name, original_code)
            cleaned_code = await self.generator.cleanup_code(original_code, path.name)
            path.write_text(cleaned_code, encoding="utf-8", newline="")
        except Exception as e:
            message = e.message if isinstance(e, CodeCleanupError) else str(e)
            logger.warning(f"Cleanup failed for {file_path}: {message}")
            return FileCleanupResult.failed(file_path, message)

        logger.info(f"Cleaned up {path} (backup {stash_filename})")
        return FileCleanupResult.succeeded(file_path, stash_filename)

    def restore_file(self, file_path: str, backup_name: Optional[str] = None) -> str:
        """
        Copy a stashed backup back over a file

        Args:
            file_path: File to restore
            backup_name: Stash filename to use; latest backup of the file when omitted

        Returns:
            One result line in the same format as cleanup results
        """
        path = self.resolve_path(file_path)
        try:
            if backup_name:
                entry = self.stash.get_backup(backup_name)
                if entry is None:
                    raise BackupNotFoundError(backup_name)
            else:
                entry = self.stash.find_latest_backup(path.name)
                if entry is None:
                    raise BackupNotFoundError(path.name)

            path.write_text(self.stash.read_backup(entry), encoding="utf-8", newline="")
        except Exception as e:
            message = e.message if isinstance(e, CodeCleanupError) else str(e)
            logger.warning(f"Restore failed for {file_path}: {message}")
            return f"❌ {file_path} - failed: {message}"

        logger.info(f"Restored {path} from {entry.stash_filename}")
        return f"{file_path} - restored from {entry.relative_path}"


def render_results(results: Sequence[FileCleanupResult]) -> str:
    """One line per file, in request order"""
    if not results:
        return "No file paths provided."
    return "\n".join(result.render() for result in results)
