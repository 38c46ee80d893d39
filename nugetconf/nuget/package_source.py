"""
Package source data structures.

Defines the entries stored in the <packageSources> and
<packageSourceCredentials> sections of nuget.config.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict


@dataclass
class PackageSource:
    """
    Represents an <add key="..." value="..."/> entry in <packageSources>.

    Entries without a value are kept so they survive a save, but they cannot
    be addressed and are left out of source listings.
    """
    feed_name: str
    feed_uri: Optional[str] = None

    # Attributes other than key/value (protocolVersion, etc.)
    extra_attributes: Dict[str, str] = field(default_factory=dict)

    @property
    def is_addressable(self) -> bool:
        """Check if the entry has both a name and a URI."""
        return bool(self.feed_name) and bool(self.feed_uri)


@dataclass
class SourceCredential:
    """
    Represents a credential block inside <packageSourceCredentials>.

    The block's element name is the encoded source name; it refers back to
    its PackageSource by string comparison only.
    """
    owner_tag: str
    username: Optional[str] = None
    clear_text_password: Optional[str] = None

    # Nested settings other than Username/ClearTextPassword
    # (Password, ValidAuthenticationTypes, ...)
    extra_settings: Dict[str, str] = field(default_factory=dict)

    def __repr__(self) -> str:
        password = "***" if self.clear_text_password else None
        return (
            f"SourceCredential(owner_tag={self.owner_tag!r}, "
            f"username={self.username!r}, clear_text_password={password!r})"
        )
