"""
Default agent constructors.

Each constructor takes a canonical proxy URL plus transport options
(``verify``, ``cert``) and returns an httpx async transport.
"""
from dataclasses import dataclass
from typing import Any, Callable

import httpx
from httpx_socks import AsyncProxyTransport
from python_socks import ProxyType

from .errors import UnsupportedProxyProtocolError

AgentConstructor = Callable[..., Any]

DEFAULT_SOCKS_PORT = 1080

# scheme -> (proxy type, resolve DNS on the proxy)
_SOCKS_VARIANTS = {
    "socks": (ProxyType.SOCKS5, False),
    "socks5": (ProxyType.SOCKS5, False),
    "socks5h": (ProxyType.SOCKS5, True),
    "socks4": (ProxyType.SOCKS4, False),
    "socks4a": (ProxyType.SOCKS4, True),
}

def create_http_proxy_agent(proxy_url: str, **options: Any) -> httpx.AsyncHTTPTransport:
    """Agent for plain-HTTP targets through an HTTP proxy (absolute-form forwarding)."""
    return httpx.AsyncHTTPTransport(proxy=httpx.Proxy(proxy_url), **options)

def create_https_proxy_agent(proxy_url: str, **options: Any) -> httpx.AsyncHTTPTransport:
    """Agent that tunnels through the proxy with CONNECT.

    Also serves ``https://`` proxies, where the hop to the proxy itself is TLS.
    """
    return httpx.AsyncHTTPTransport(proxy=httpx.Proxy(proxy_url), **options)

def create_socks_proxy_agent(proxy_url: str, **options: Any) -> AsyncProxyTransport:
    """Agent for SOCKS4/4a/5/5h proxies."""
    url = httpx.URL(proxy_url)
    if url.scheme not in _SOCKS_VARIANTS:
        raise UnsupportedProxyProtocolError(f"{url.scheme}:")
    proxy_type, rdns = _SOCKS_VARIANTS[url.scheme]
    return AsyncProxyTransport(
        proxy_type=proxy_type,
        proxy_host=url.host,
        proxy_port=url.port or DEFAULT_SOCKS_PORT,
        username=url.username or None,
        password=url.password or None,
        rdns=rdns,
        **options,
    )

@dataclass(frozen=True)
class AgentConstructors:
    """The three agent constructors the resolver chooses between."""
    http_proxy: AgentConstructor = create_http_proxy_agent
    https_proxy: AgentConstructor = create_https_proxy_agent
    socks_proxy: AgentConstructor = create_socks_proxy_agent

DEFAULT_AGENT_CONSTRUCTORS = AgentConstructors()
