"""
nuget.config backup utilities

Creates timestamped copies of a configuration file before it is modified.
"""

import logging
import shutil
from datetime import datetime
from pathlib import Path

logger = logging.getLogger(__name__)

BACKUP_MARKER = "nugetconf_backup"


class ConfigBackup:
    """Handles backup operations for nuget.config files"""

    @staticmethod
    def backup_pattern(config_name: str) -> str:
        """Glob pattern matching backups of a configuration file name."""
        return f"{config_name}.{BACKUP_MARKER}_*.bak"

    @staticmethod
    def create_backup(config_path: Path, file_store=None) -> Path:
        """
        Create a timestamped backup of a configuration file

        Args:
            config_path: Path to the file to back up
            file_store: Optional object providing read_text(path) and
                write_text(path, text); the file is copied through it
                instead of on disk

        Returns:
            Path to the backup file

        Raises:
            FileNotFoundError: If config_path doesn't exist
            ValueError: If config_path is not a file
            OSError: If the copy fails
        """
        config_path = Path(config_path)

        # Format: YYYYMMDD_HHMMSS_microseconds
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")

        backup_path = config_path.parent / f"{config_path.name}.{BACKUP_MARKER}_{timestamp}.bak"

        if file_store is not None:
            file_store.write_text(backup_path, file_store.read_text(config_path))
            logger.info(f"Backup created: {backup_path.name}")
            return backup_path

        if not config_path.exists():
            raise FileNotFoundError(f"NuGet configuration not found: {config_path}")

        if not config_path.is_file():
            raise ValueError(f"Path is not a file: {config_path}")

        try:
            shutil.copy2(config_path, backup_path)
        except OSError as e:
            logger.error(f"Failed to create backup of {config_path.name}: {e}")
            raise

        logger.info(f"Backup created: {backup_path.name}")
        return backup_path

    @staticmethod
    def list_backups(config_path: Path) -> list[Path]:
        """
        List backups of a configuration file

        Args:
            config_path: Path of the configuration file the backups belong to

        Returns:
            Backup file paths, newest first
        """
        config_path = Path(config_path)
        directory = config_path.parent
        if not directory.is_dir():
            return []

        backups = list(directory.glob(ConfigBackup.backup_pattern(config_path.name)))

        # Timestamps sort lexically; newest first
        backups.sort(key=lambda p: p.name, reverse=True)

        return backups

    @staticmethod
    def restore_backup(backup_path: Path, target_path: Path) -> Path:
        """
        Restore a backup file over a configuration file

        Raises:
            FileNotFoundError: If the backup doesn't exist
        """
        backup_path = Path(backup_path)
        if not backup_path.exists():
            raise FileNotFoundError(f"Backup file not found: {backup_path}")

        shutil.copy2(backup_path, target_path)
        logger.info(f"Restored {backup_path.name} to {target_path}")
        return Path(target_path)

    @staticmethod
    def cleanup_old_backups(config_path: Path, keep_count: int = 5) -> int:
        """
        Remove old backups, keeping only the most recent ones

        Args:
            config_path: Path of the configuration file the backups belong to
            keep_count: Number of recent backups to keep

        Returns:
            Number of backups deleted
        """
        backups = ConfigBackup.list_backups(config_path)

        if len(backups) <= keep_count:
            return 0

        deleted = 0
        for backup in backups[keep_count:]:
            try:
                backup.unlink()
                deleted += 1
            except OSError as e:
                logger.warning(f"Failed to delete old backup {backup.name}: {e}")

        if deleted > 0:
            logger.info(f"Cleaned up {deleted} old backup(s), kept {keep_count} most recent")

        return deleted
