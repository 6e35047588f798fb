"""
Proxy URL normalization and agent resolution.
"""
import logging
import re
from typing import Any, Optional

import httpx

from .agents import DEFAULT_AGENT_CONSTRUCTORS, AgentConstructors
from .errors import MalformedProxyConfigurationError, UnsupportedProxyProtocolError
from .types import AgentPair, ProxyDescriptor, ProxyProtocol

logger = logging.getLogger(__name__)

_SCHEME_PREFIX = re.compile(r"^([a-zA-Z][a-zA-Z0-9+.-]*)://")

def mask_proxy_url(url: Optional[str]) -> str:
    """Mask proxy URL for safe logging (hide credentials if present)."""
    if not url:
        return "None"
    if "@" in url:
        protocol_end = url.find("://")
        if protocol_end != -1:
            at_pos = url.rfind("@")
            return f"{url[:protocol_end + 3]}***@{url[at_pos + 1:]}"
    return url

def _with_scheme(raw: str) -> str:
    match = _SCHEME_PREFIX.match(raw)
    if not match:
        return f"https://{raw}"
    # schemes are case-insensitive; canonical form is lowercase
    return match.group(1).lower() + raw[len(match.group(1)):]

def normalize_proxy_url(descriptor: ProxyDescriptor) -> str:
    """Build the canonical proxy URL for a descriptor.

    Steps:
    1. Coerce the host/URL to a string and default the scheme to ``https://``
    2. Parse it (failure -> MalformedProxyConfigurationError)
    3. Apply the explicit port override
    4. Inject credentials through the URL's userinfo fields (percent-encoded)
    """
    raw = _with_scheme(descriptor.url or "")

    try:
        url = httpx.URL(raw)
        if not url.host:
            raise MalformedProxyConfigurationError(mask_proxy_url(raw), "missing host")

        if descriptor.port:
            url = url.copy_with(port=descriptor.port)

        if descriptor.username:
            url = url.copy_with(
                username=descriptor.username,
                password=descriptor.password_value(),
            )
    except (httpx.InvalidURL, ValueError, TypeError) as e:
        raise MalformedProxyConfigurationError(mask_proxy_url(raw), str(e)) from e

    return str(url)

def resolve_agent_pair(
    descriptor: ProxyDescriptor,
    constructors: Optional[AgentConstructors] = None,
    **transport_options: Any,
) -> AgentPair:
    """Resolve the forward/tunnel agents for a proxy descriptor.

    - ``http:``   -> HTTP proxy agent + CONNECT agent (two instances)
    - ``https:``  -> one HTTPS proxy agent for both
    - ``socks*``  -> one SOCKS agent for both

    Raises:
        MalformedProxyConfigurationError: URL cannot be parsed.
        UnsupportedProxyProtocolError: Any other scheme.
    """
    constructors = constructors or DEFAULT_AGENT_CONSTRUCTORS
    proxy_url = normalize_proxy_url(descriptor)
    scheme = f"{httpx.URL(proxy_url).scheme}:"
    protocol = ProxyProtocol.from_scheme(scheme)

    logger.debug(f"Resolving agents for {mask_proxy_url(proxy_url)} (protocol={scheme})")

    if protocol is ProxyProtocol.HTTP:
        forward_agent = constructors.http_proxy(proxy_url, **transport_options)
        tunnel_agent = constructors.https_proxy(proxy_url, **transport_options)
    elif protocol is ProxyProtocol.HTTPS:
        forward_agent = tunnel_agent = constructors.https_proxy(proxy_url, **transport_options)
    elif protocol is ProxyProtocol.SOCKS:
        forward_agent = tunnel_agent = constructors.socks_proxy(proxy_url, **transport_options)
    else:
        raise UnsupportedProxyProtocolError(scheme)

    return AgentPair(
        forward_agent=forward_agent,
        tunnel_agent=tunnel_agent,
        protocol=protocol,
        proxy_url=proxy_url,
    )
