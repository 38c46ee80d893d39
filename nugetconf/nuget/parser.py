"""
nuget.config XML parser.

Builds a ConfigDocument from the text of a nuget.config file.
"""

from copy import deepcopy
from typing import Dict, Optional, Tuple

from lxml import etree

from .config_document import ConfigDocument
from .package_source import PackageSource, SourceCredential

ROOT_TAG = "configuration"
SOURCES_TAG = "packageSources"
CREDENTIALS_TAG = "packageSourceCredentials"

USERNAME_KEY = "Username"
CLEAR_TEXT_PASSWORD_KEY = "ClearTextPassword"


class ParseError(Exception):
    """nuget.config parsing errors."""
    pass


class NuGetConfigParser:
    """
    Parses nuget.config documents.

    Only <packageSources> and <packageSourceCredentials> are interpreted;
    every other child of <configuration> is carried through untouched.
    """

    def parse_text(self, text: str) -> ConfigDocument:
        """
        Parse nuget.config content.

        Args:
            text: Full text of the configuration file

        Returns:
            ConfigDocument with sources and credentials in document order

        Raises:
            ParseError: If the text is not well-formed XML or the root
                element is not <configuration>
        """
        if not text or not text.strip():
            raise ParseError("NuGet configuration is empty")

        parser = etree.XMLParser(remove_blank_text=True, resolve_entities=False)
        try:
            root = etree.fromstring(text.encode("utf-8"), parser)
        except etree.XMLSyntaxError as e:
            raise ParseError(f"Invalid XML in NuGet configuration: {e}") from e

        if root.tag != ROOT_TAG:
            raise ParseError(
                f"Invalid root element: expected '{ROOT_TAG}', got '{root.tag}'"
            )

        document = ConfigDocument()

        for child in root:
            if child.tag == SOURCES_TAG:
                self._parse_sources(child, document)
            elif child.tag == CREDENTIALS_TAG:
                self._parse_credentials(child, document)
            else:
                document.extra_elements.append(deepcopy(child))

        return document

    def _parse_sources(self, section: etree.Element, document: ConfigDocument) -> None:
        """Collect <add> entries from a <packageSources> element."""
        document.has_sources_section = True

        for child in section:
            if child.tag == "clear":
                # Only the last <clear/> has any effect
                document.clear_index = len(document.sources)
                continue
            if child.tag != "add":
                continue

            feed_name = child.get("key")
            if feed_name is None:
                # Value-only entries cannot be addressed
                continue

            extra = {
                name: value
                for name, value in child.attrib.items()
                if name not in ("key", "value")
            }
            document.sources.append(
                PackageSource(
                    feed_name=feed_name,
                    feed_uri=child.get("value"),
                    extra_attributes=extra,
                )
            )

    def _parse_credentials(self, section: etree.Element, document: ConfigDocument) -> None:
        """Collect credential blocks from a <packageSourceCredentials> element."""
        document.has_credentials_section = True

        for block in section:
            if not isinstance(block.tag, str):
                # Comments and processing instructions
                continue

            username, password, extra = self._parse_credential_settings(block)
            document.credentials.append(
                SourceCredential(
                    owner_tag=block.tag,
                    username=username,
                    clear_text_password=password,
                    extra_settings=extra,
                )
            )

    def _parse_credential_settings(
        self,
        block: etree.Element
    ) -> Tuple[Optional[str], Optional[str], Dict[str, str]]:
        """Read the nested <add key=".." value=".."/> pairs of a credential block."""
        username = None
        password = None
        extra = {}

        for add_elem in block.findall("add"):
            key = add_elem.get("key")
            value = add_elem.get("value")
            if key == USERNAME_KEY:
                username = value
            elif key == CLEAR_TEXT_PASSWORD_KEY:
                password = value
            elif key is not None:
                extra[key] = value if value is not None else ""

        return username, password, extra
