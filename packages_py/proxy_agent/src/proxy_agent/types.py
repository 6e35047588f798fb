"""
Data models for proxy agent resolution.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

class ProxyProtocol(str, Enum):
    """Proxy protocol family.

    HTTP and HTTPS match the parsed URL scheme exactly (with colon); SOCKS
    matches any scheme starting with ``socks`` (socks4, socks4a, socks5, socks5h).
    """
    HTTP = "http:"
    HTTPS = "https:"
    SOCKS = "socks"

    @classmethod
    def from_scheme(cls, scheme: str) -> Optional["ProxyProtocol"]:
        if scheme == cls.HTTP.value:
            return cls.HTTP
        if scheme == cls.HTTPS.value:
            return cls.HTTPS
        if scheme.startswith(cls.SOCKS.value):
            return cls.SOCKS
        return None

class ProxyDescriptor(BaseModel):
    """Proxy settings for a single account.

    ``url`` may be a full proxy URL or a bare host/IP; a bare host is treated
    as an ``https://`` proxy endpoint. An explicit ``port`` overrides any port
    embedded in ``url``.
    """
    model_config = ConfigDict(frozen=True)

    url: Optional[str] = Field(default=None, description="Proxy URL or bare host/IP")
    port: Optional[int] = Field(default=None, ge=0, le=65535, description="Port override")
    username: Optional[str] = Field(default=None, description="Proxy username")
    password: Optional[SecretStr] = Field(default=None, description="Proxy password")
    proxy_enabled: bool = Field(default=True, description="Whether requests should go through the proxy")

    @field_validator("url", mode="before")
    @classmethod
    def _coerce_url(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        return str(value)

    @property
    def is_active(self) -> bool:
        return bool(self.proxy_enabled and self.url)

    def password_value(self) -> str:
        return self.password.get_secret_value() if self.password else ""

@dataclass(frozen=True)
class AgentPair:
    """Transport agents for plain-HTTP targets and HTTPS targets.

    Attributes:
        forward_agent: Transport used for ``http://`` targets.
        tunnel_agent: Transport used for ``https://`` targets.
        protocol: Protocol family the pair was built for.
        proxy_url: Canonical proxy URL, including credentials.
    """
    forward_agent: Any
    tunnel_agent: Any
    protocol: ProxyProtocol
    proxy_url: str = field(repr=False)

    def __post_init__(self):
        if self.forward_agent is None or self.tunnel_agent is None:
            raise ValueError("AgentPair requires both forward_agent and tunnel_agent")

    @property
    def is_shared(self) -> bool:
        """True when one agent instance serves both target schemes."""
        return self.forward_agent is self.tunnel_agent
