"""
Flat settings lookup for proxy configuration.

Build agents expose their proxy as the AGENT_PROXYURL, AGENT_PROXYUSERNAME
and AGENT_PROXYPASSWORD variables; those take precedence over the proxy
section of the YAML config.
"""

import os
from typing import Any, Dict, Mapping, Optional

from nugetconf.config.loader import get_config_value
from nugetconf.proxy import PROXY_URL, PROXY_USERNAME, PROXY_PASSWORD

CONFIG_KEYS = {
    PROXY_URL: 'proxy.url',
    PROXY_USERNAME: 'proxy.username',
    PROXY_PASSWORD: 'proxy.password',
}

ENVIRONMENT_VARIABLES = {
    PROXY_URL: 'AGENT_PROXYURL',
    PROXY_USERNAME: 'AGENT_PROXYUSERNAME',
    PROXY_PASSWORD: 'AGENT_PROXYPASSWORD',
}


def build_settings(
    config: Dict[str, Any],
    environ: Optional[Mapping[str, str]] = None
) -> Dict[str, str]:
    """
    Build the settings lookup consumed by build_proxy_url.

    Args:
        config: Loaded configuration dictionary
        environ: Environment mapping (default: os.environ)

    Returns:
        Dict keyed by proxy-url, proxy-username, proxy-password; empty
        values are left out
    """
    if environ is None:
        environ = os.environ

    settings = {}

    for setting, path in CONFIG_KEYS.items():
        value = get_config_value(config, path)
        if value:
            settings[setting] = str(value)

    # Environment overrides config, key by key
    for setting, variable in ENVIRONMENT_VARIABLES.items():
        value = environ.get(variable)
        if value:
            settings[setting] = value

    return settings
