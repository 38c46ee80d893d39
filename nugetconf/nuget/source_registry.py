"""
Package source registry.

Adds, removes and lists package sources in a nuget.config file. Every
mutation loads the whole file, changes the in-memory document and writes
the whole file back.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from .backup import ConfigBackup
from .config_document import ConfigDocument
from .file_store import FileStore
from .name_encoder import encode_element_name
from .package_source import PackageSource, SourceCredential
from .parser import NuGetConfigParser
from .xml_writer import NuGetConfigWriter

logger = logging.getLogger(__name__)


class UnsupportedOperationError(NotImplementedError):
    """Raised for operations that are deliberately not supported."""
    pass


class SourceRegistry:
    """
    Edits the package sources of one nuget.config file.

    Collaborators are injected so callers (and tests) can substitute the
    file store without touching global state. Concurrent access to the same
    file is not coordinated here.
    """

    def __init__(
        self,
        config_path: Union[str, Path],
        file_store: Optional[FileStore] = None,
        parser: Optional[NuGetConfigParser] = None,
        writer: Optional[NuGetConfigWriter] = None,
        pretty_print: bool = False,
        backup: bool = False,
        backup_keep: int = 5,
    ):
        """
        Initialize source registry.

        Args:
            config_path: Path to the nuget.config file
            file_store: Object providing read_text(path) and write_text(path, text)
            parser: Parser used to load the document
            writer: Writer used to serialize the document
            pretty_print: Indent the written XML
            backup: Back up the file once before the first write
            backup_keep: Number of backups to retain when backing up
        """
        self.config_path = Path(config_path)
        self.file_store = file_store or FileStore()
        self.parser = parser or NuGetConfigParser()
        self.writer = writer or NuGetConfigWriter()
        self.pretty_print = pretty_print
        self.backup = backup
        self.backup_keep = backup_keep
        self._backed_up = False

    def load(self) -> ConfigDocument:
        """
        Load the configuration file.

        Raises:
            ParseError: If the file content is not a valid nuget.config
        """
        return self.parser.parse_text(self.file_store.read_text(self.config_path))

    def save(self, document: ConfigDocument) -> None:
        """Serialize the document and replace the file content."""
        if self.backup and not self._backed_up:
            ConfigBackup.create_backup(self.config_path, self.file_store)
            if isinstance(self.file_store, FileStore):
                # Old backups can only be pruned on disk
                ConfigBackup.cleanup_old_backups(self.config_path, self.backup_keep)
            self._backed_up = True

        text = self.writer.serialize(document, pretty_print=self.pretty_print)
        self.file_store.write_text(self.config_path, text)

    def add_source(
        self,
        name: str,
        uri: str,
        username: Optional[str] = None,
        password: Optional[str] = None
    ) -> None:
        """
        Add a package source, with credentials if both username and password
        are given.

        Existing sources with the same name are left in place; entries
        accumulate.

        Args:
            name: Source name (the key attribute)
            uri: Source URI (the value attribute)
            username: Optional feed username
            password: Optional feed password, stored as ClearTextPassword
        """
        document = self.load()

        document.add_source(PackageSource(feed_name=name, feed_uri=uri))

        if username and password:
            owner_tag = encode_element_name(name)
            document.add_credential(
                SourceCredential(
                    owner_tag=owner_tag,
                    username=username,
                    clear_text_password=password,
                )
            )
            logger.debug(f"Adding source '{name}' with credentials under <{owner_tag}>")
        else:
            logger.debug(f"Adding source '{name}'")

        self.save(document)

    def remove_source(self, name: str) -> None:
        """
        Remove a package source and its credentials.

        Removing a name that doesn't exist is a no-op.

        Args:
            name: Source name, matched exactly (not encoded)
        """
        document = self.load()

        removed_sources = document.remove_sources(name)
        removed_credentials = document.remove_credentials(encode_element_name(name))

        logger.debug(
            f"Removing source '{name}': {removed_sources} source(s), "
            f"{removed_credentials} credential block(s)"
        )

        self.save(document)

    def set_api_key(self, source: str, api_key: str) -> None:
        """
        Setting API keys is not supported.

        Raises:
            UnsupportedOperationError: Always
        """
        raise UnsupportedOperationError(
            "Setting an API key in nuget.config is intentionally not supported"
        )

    def list_sources(self) -> List[PackageSource]:
        """
        List package sources in document order.

        Entries missing a name or URI are excluded.
        """
        return self.load().addressable_sources()


def get_sources_from_config(
    config_path: Union[str, Path],
    file_store: Optional[FileStore] = None
) -> List[PackageSource]:
    """
    Read the package sources of a nuget.config file.

    Args:
        config_path: Path to the nuget.config file
        file_store: Object providing read_text(path)

    Returns:
        Addressable sources in document order

    Raises:
        ParseError: If the file content is not a valid nuget.config
    """
    return SourceRegistry(config_path, file_store=file_store).list_sources()
