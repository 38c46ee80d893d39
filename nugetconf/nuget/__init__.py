"""
NuGet configuration package for nugetconf.

Handles parsing, editing and writing nuget.config package sources.
"""

from .package_source import PackageSource, SourceCredential
from .config_document import ConfigDocument
from .name_encoder import encode_element_name
from .parser import NuGetConfigParser, ParseError
from .xml_writer import NuGetConfigWriter
from .file_store import FileStore
from .backup import ConfigBackup
from .source_registry import SourceRegistry, UnsupportedOperationError, get_sources_from_config

__all__ = [
    'PackageSource',
    'SourceCredential',
    'ConfigDocument',
    'encode_element_name',
    'NuGetConfigParser',
    'ParseError',
    'NuGetConfigWriter',
    'FileStore',
    'ConfigBackup',
    'SourceRegistry',
    'UnsupportedOperationError',
    'get_sources_from_config',
]
