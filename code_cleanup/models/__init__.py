"""
Data models for cleanup results and stashed backups
"""

from .backup import BackupEntry
from .cleanup import FileCleanupResult

__all__ = ["BackupEntry", "FileCleanupResult"]
