"""
Shared fixtures for config module tests.
"""
import pytest


@pytest.fixture
def valid_config(tmp_path):
    """Complete valid configuration."""
    return {
        'nuget': {
            'config_path': str(tmp_path / 'nuget.config'),
            'pretty_print': False,
            'backup': True,
            'backup_keep': 3,
        },
        'proxy': {
            'url': 'http://proxy.corp:8080/',
            'username': 'config-user',
            'password': 'config-pass',
        },
        'logging': {
            'level': 'DEBUG',
            'console': True,
            'file': None,
        },
    }
