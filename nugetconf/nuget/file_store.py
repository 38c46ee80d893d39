"""Whole-file access to configuration files."""

import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


class FileStore:
    """
    Reads and writes configuration files as a whole.

    Writes go to a temporary sibling file that is then renamed over the
    target, so readers see either the previous or the new content. No
    locking or directory creation is done here.
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def read_text(self, path: Union[str, Path]) -> str:
        """
        Read the full content of a file.

        Raises:
            FileNotFoundError: If the file doesn't exist
        """
        return Path(path).read_text(encoding=self.encoding)

    def write_text(self, path: Union[str, Path], text: str) -> None:
        """
        Replace the content of a file.

        Args:
            path: Target file
            text: New content
        """
        target = Path(path)
        temp_file = target.with_name(target.name + ".tmp")

        try:
            temp_file.write_text(text, encoding=self.encoding)
            # Atomic rename
            temp_file.replace(target)
        except OSError:
            if temp_file.exists():
                temp_file.unlink()
            raise

        logger.debug(f"Wrote {len(text)} characters to {target}")
