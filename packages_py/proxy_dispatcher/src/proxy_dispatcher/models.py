"""
Data models for proxy dispatcher.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Union

# Keyword arguments for httpx.AsyncClient.request (method, url, headers, ...)
RequestConfig = Mapping[str, Any]

@dataclass
class ClientConfig:
    """Settings shared by the proxied client and its direct fallbacks."""
    timeout: float = 30.0
    verify_ssl: Optional[bool] = None  # None = derive from environment
    follow_redirects: bool = True
    cert: Optional[Union[str, tuple]] = None  # Client cert: path or (cert, key) tuple
    ca_bundle: Optional[str] = None  # CA bundle path for SSL verification

class FailureKind(str, Enum):
    """How a failed request is treated."""
    NETWORK = "network"
    PROXY = "proxy"
    OTHER = "other"

    @property
    def is_recoverable(self) -> bool:
        return self is not FailureKind.OTHER
