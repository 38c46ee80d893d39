"""
Proxy URL composition.

Builds the proxy URL handed to NuGet from the agent's proxy settings,
embedding the username and password as URL userinfo.
"""

import logging
import re
from typing import Mapping, Optional
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)

# Authority part of the URL: everything up to the path, query or fragment
_AUTHORITY = re.compile(r"[^/?#]*")

PROXY_URL = "proxy-url"
PROXY_USERNAME = "proxy-username"
PROXY_PASSWORD = "proxy-password"


def build_proxy_url(settings: Mapping[str, str]) -> Optional[str]:
    """
    Compose the proxy URL from a settings lookup.

    The username and password are inserted verbatim; they are expected to
    be URL-safe already. Any userinfo present in proxy-url is replaced.

    Args:
        settings: Lookup providing proxy-url, proxy-username, proxy-password

    Returns:
        Proxy URL, or None if no proxy is configured

    Examples:
        >>> build_proxy_url({"proxy-url": "http://proxy/"})
        'http://proxy/'
        >>> build_proxy_url({"proxy-url": "http://proxy/", "proxy-username": "user"})
        'http://user@proxy/'
    """
    proxy_url = settings.get(PROXY_URL)
    if not proxy_url:
        return None

    parts = urlsplit(proxy_url)

    username = settings.get(PROXY_USERNAME)
    if not username:
        return proxy_url

    if not parts.scheme or not parts.netloc:
        logger.debug("Proxy URL has no scheme or host, leaving it unchanged")
        return proxy_url

    password = settings.get(PROXY_PASSWORD)
    userinfo = f"{username}:{password}" if password else username

    # Splice after "scheme://" so the rest of the URL is kept byte for byte
    scheme, separator, rest = proxy_url.partition("://")
    authority = _AUTHORITY.match(rest).group(0)
    host = authority.rpartition("@")[2]

    return f"{scheme}{separator}{userinfo}@{host}{rest[len(authority):]}"
