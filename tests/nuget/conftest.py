"""Shared fixtures for nuget module tests."""
import pytest

from nugetconf.nuget import SourceRegistry

# Source listing fixture with malformed entries mixed in
SOURCES_CONFIG = (
    '<configuration><packageSources><add key="NameOnly"/><add value="ValueOnly"/>'
    '<add key="SourceName" value="http://source/"/>'
    '<add key="SourceCredentials" value="http://credentials"/></packageSources>'
    '<packageSourceCredentials><SourceCredentials><add key="Username" value="foo"/>'
    '<add key="ClearTextPassword" value="bar"/></SourceCredentials>'
    '</packageSourceCredentials></configuration>'
)


@pytest.fixture
def fixture_path(data_dir):
    """Return path to nuget fixtures directory."""
    return data_dir / 'nuget'


@pytest.fixture
def sources_config_text():
    """nuget.config text with two valid and two malformed sources."""
    return SOURCES_CONFIG


@pytest.fixture
def empty_registry(memory_store):
    """SourceRegistry over an in-memory '<configuration/>' file."""
    memory_store.files["nuget.config"] = "<configuration/>"
    return SourceRegistry("nuget.config", file_store=memory_store)
