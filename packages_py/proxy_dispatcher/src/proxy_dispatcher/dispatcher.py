"""
Convenience functions for proxy dispatcher.
"""
from typing import Any
from proxy_agent import ProxyDescriptor
from .client import ProxiedRequestClient
from .models import RequestConfig

def create_proxied_client(descriptor: ProxyDescriptor, **kwargs: Any) -> ProxiedRequestClient:
    """Create a ProxiedRequestClient for an account's proxy settings."""
    return ProxiedRequestClient.create(descriptor, **kwargs)

async def dispatch_request(
    descriptor: ProxyDescriptor,
    request_config: RequestConfig,
    bypass_proxy: bool = False,
    **kwargs: Any
) -> Any:
    """Send a single request through a short-lived client, closing it afterwards."""
    async with create_proxied_client(descriptor, **kwargs) as client:
        return await client.request(request_config, bypass_proxy=bypass_proxy)
