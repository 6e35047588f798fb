"""
Proxy descriptor normalization and agent resolution package.
"""
from .types import ProxyDescriptor, ProxyProtocol, AgentPair
from .errors import (
    ProxyConfigurationError,
    UnsupportedProxyProtocolError,
    MalformedProxyConfigurationError,
)
from .agents import (
    AgentConstructors,
    DEFAULT_AGENT_CONSTRUCTORS,
    create_http_proxy_agent,
    create_https_proxy_agent,
    create_socks_proxy_agent,
)
from .resolver import normalize_proxy_url, resolve_agent_pair, mask_proxy_url
from .config import load_descriptor_from_env

__all__ = [
    "ProxyDescriptor",
    "ProxyProtocol",
    "AgentPair",
    "ProxyConfigurationError",
    "UnsupportedProxyProtocolError",
    "MalformedProxyConfigurationError",
    "AgentConstructors",
    "DEFAULT_AGENT_CONSTRUCTORS",
    "create_http_proxy_agent",
    "create_https_proxy_agent",
    "create_socks_proxy_agent",
    "normalize_proxy_url",
    "resolve_agent_pair",
    "mask_proxy_url",
    "load_descriptor_from_env",
]
