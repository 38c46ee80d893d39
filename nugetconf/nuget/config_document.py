"""
In-memory model of a nuget.config document.

A ConfigDocument is rebuilt from the file text on every load and written
back in full on every save; it is never patched incrementally.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional

from .package_source import PackageSource, SourceCredential


@dataclass
class ConfigDocument:
    """
    Package sources and credentials of one nuget.config file.

    Sections are created on first use and are never dropped by removals,
    so an emptied <packageSourceCredentials> is still written (self-closing).
    """
    sources: List[PackageSource] = field(default_factory=list)
    credentials: List[SourceCredential] = field(default_factory=list)

    # Whether <packageSources> / <packageSourceCredentials> exist
    has_sources_section: bool = False
    has_credentials_section: bool = False

    # Number of sources preceding <clear/> in <packageSources>, or None
    clear_index: Optional[int] = None

    # Other children of <configuration>, kept verbatim (lxml elements)
    extra_elements: List[Any] = field(default_factory=list)

    @property
    def clear_inherited_sources(self) -> bool:
        """Check if <packageSources> contains <clear/>."""
        return self.clear_index is not None

    def add_source(self, source: PackageSource) -> None:
        """Append a source; duplicates are allowed."""
        self.has_sources_section = True
        self.sources.append(source)

    def add_credential(self, credential: SourceCredential) -> None:
        """Append a credential block."""
        self.has_credentials_section = True
        self.credentials.append(credential)

    def remove_sources(self, feed_name: str) -> int:
        """
        Remove every source whose name matches exactly.

        Returns:
            Number of sources removed
        """
        kept = [s for s in self.sources if s.feed_name != feed_name]
        removed = len(self.sources) - len(kept)

        if self.clear_index is not None:
            # <clear/> stays between the same neighbours
            removed_before = sum(
                1 for s in self.sources[:self.clear_index] if s.feed_name == feed_name
            )
            self.clear_index -= removed_before

        self.sources = kept
        return removed

    def remove_credentials(self, owner_tag: str) -> int:
        """
        Remove credential blocks with the given element name.

        Returns:
            Number of credential blocks removed
        """
        kept = [c for c in self.credentials if c.owner_tag != owner_tag]
        removed = len(self.credentials) - len(kept)
        self.credentials = kept
        return removed

    def find_credential(self, owner_tag: str) -> Optional[SourceCredential]:
        """Return the first credential block with the given element name."""
        for credential in self.credentials:
            if credential.owner_tag == owner_tag:
                return credential
        return None

    def addressable_sources(self) -> List[PackageSource]:
        """Sources in document order, without malformed entries."""
        return [s for s in self.sources if s.is_addressable]
