"""
XML writer for nuget.config files.

Serializes a ConfigDocument back to the text of a nuget.config file.
"""

from copy import deepcopy

from lxml import etree

from .config_document import ConfigDocument
from .package_source import PackageSource, SourceCredential
from .parser import (
    ROOT_TAG,
    SOURCES_TAG,
    CREDENTIALS_TAG,
    USERNAME_KEY,
    CLEAR_TEXT_PASSWORD_KEY,
)


class NuGetConfigWriter:
    """
    Writes nuget.config documents.

    Features:
    - Sources and credentials in insertion order
    - Attribute escaping handled by lxml
    - Compact output by default, optional pretty printing
    - No XML declaration
    """

    def serialize(self, document: ConfigDocument, pretty_print: bool = False) -> str:
        """
        Serialize a document to nuget.config text.

        Args:
            document: Document to write
            pretty_print: Indent the output

        Returns:
            XML text
        """
        root = self.build_tree(document)
        return etree.tostring(root, encoding="unicode", pretty_print=pretty_print)

    def build_tree(self, document: ConfigDocument) -> etree.Element:
        """
        Build the <configuration> element for a document.

        Args:
            document: Document to convert

        Returns:
            <configuration> element
        """
        root = etree.Element(ROOT_TAG)

        if document.has_sources_section:
            root.append(self._create_sources_element(document))

        if document.has_credentials_section:
            root.append(self._create_credentials_element(document))

        for element in document.extra_elements:
            root.append(deepcopy(element))

        return root

    def _create_sources_element(self, document: ConfigDocument) -> etree.Element:
        """Create the <packageSources> element."""
        section = etree.Element(SOURCES_TAG)

        for index, source in enumerate(document.sources):
            if index == document.clear_index:
                etree.SubElement(section, "clear")
            self._add_source_element(section, source)

        if document.clear_index is not None and document.clear_index >= len(document.sources):
            etree.SubElement(section, "clear")

        return section

    def _add_source_element(self, section: etree.Element, source: PackageSource) -> None:
        add_elem = etree.SubElement(section, "add")
        add_elem.set("key", source.feed_name)
        if source.feed_uri is not None:
            add_elem.set("value", source.feed_uri)
        for name, value in source.extra_attributes.items():
            add_elem.set(name, value)

    def _create_credentials_element(self, document: ConfigDocument) -> etree.Element:
        """Create the <packageSourceCredentials> element."""
        section = etree.Element(CREDENTIALS_TAG)

        for credential in document.credentials:
            section.append(self._create_credential_element(credential))

        return section

    def _create_credential_element(self, credential: SourceCredential) -> etree.Element:
        """
        Create a credential block.

        Args:
            credential: SourceCredential whose owner_tag is already encoded

        Returns:
            Element named after the encoded source name
        """
        block = etree.Element(credential.owner_tag)

        if credential.username is not None:
            self._add_setting(block, USERNAME_KEY, credential.username)

        if credential.clear_text_password is not None:
            self._add_setting(block, CLEAR_TEXT_PASSWORD_KEY, credential.clear_text_password)

        for key, value in credential.extra_settings.items():
            self._add_setting(block, key, value)

        return block

    def _add_setting(self, parent: etree.Element, key: str, value: str) -> None:
        """
        Add an <add key="..." value="..."/> child.

        Args:
            parent: Parent element
            key: Setting name
            value: Setting value (will be XML-escaped by lxml)
        """
        add_elem = etree.SubElement(parent, "add")
        add_elem.set("key", key)
        add_elem.set("value", value)
