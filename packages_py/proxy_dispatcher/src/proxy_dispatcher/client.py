"""
Proxy-aware request client with direct fallback.
"""
import logging
from typing import Any, Optional

from proxy_agent import AgentConstructors, AgentPair, ProxyDescriptor, mask_proxy_url, resolve_agent_pair

from .adapters import BaseAdapter, get_adapter
from .classify import GATEWAY_ERROR_STATUSES, classify_failure
from .models import ClientConfig, RequestConfig

logger = logging.getLogger(__name__)

class ProxiedRequestClient:
    """HTTP client bound to one account's proxy, falling back to direct on proxy trouble.

    Agents are resolved once, at construction. A request that fails with a
    network- or proxy-related error, or that the proxy answers with 502/504,
    is retried exactly once on a fresh client with all proxying disabled;
    the retry's outcome is returned as-is.

    Example:
        >>> descriptor = ProxyDescriptor(url="10.0.0.5", port=3128, username="acct")
        >>> async with ProxiedRequestClient.create(descriptor) as client:
        ...     response = await client.request({"method": "GET", "url": "https://api.example.com"})
    """

    def __init__(
        self,
        descriptor: ProxyDescriptor,
        config: Optional[ClientConfig] = None,
        adapter: str = "httpx",
        agent_constructors: Optional[AgentConstructors] = None,
        fallback_enabled: bool = True,
    ):
        """
        Args:
            descriptor: Proxy settings of the account.
            config: Client settings shared with fallback clients.
            adapter: Registered adapter name.
            agent_constructors: Overrides for the proxy agent constructors.
            fallback_enabled: When False, failures are never retried directly.

        Raises:
            UnsupportedProxyProtocolError: Proxy scheme is not http, https or socks*.
            MalformedProxyConfigurationError: Proxy URL cannot be parsed.
        """
        self.descriptor = descriptor
        self.config = config or ClientConfig()
        self.fallback_enabled = fallback_enabled
        self._adapter: BaseAdapter = get_adapter(adapter)

        self._agents: Optional[AgentPair] = None
        if descriptor.is_active:
            self._agents = resolve_agent_pair(
                descriptor,
                constructors=agent_constructors,
                **self._adapter.transport_options(self.config),
            )

        self._client = self._adapter.create_client(self.config, self._agents)

        if self._agents is not None:
            logger.debug(f"ProxiedRequestClient initialized with proxy {mask_proxy_url(self._agents.proxy_url)}")
        else:
            logger.debug("ProxiedRequestClient initialized without proxy")

    @classmethod
    def create(cls, descriptor: ProxyDescriptor, **kwargs: Any) -> "ProxiedRequestClient":
        return cls(descriptor, **kwargs)

    @property
    def agents(self) -> Optional[AgentPair]:
        return self._agents

    @property
    def is_proxied(self) -> bool:
        return self._agents is not None

    async def request(self, request_config: RequestConfig, bypass_proxy: bool = False) -> Any:
        """Execute a request.

        Args:
            request_config: Keyword arguments for the underlying client's request().
            bypass_proxy: Go direct on a fresh, proxy-disabled client. No fallback applies.

        Returns:
            The response of the proxied attempt, or of the single direct retry.
        """
        if bypass_proxy:
            return await self._request_direct(request_config)

        try:
            response = await self._client.request(**request_config)
        except Exception as e:
            if not self.fallback_enabled:
                raise
            kind = classify_failure(e)
            if not kind.is_recoverable:
                raise
            logger.warning(
                f"Request to {request_config.get('url')} failed ({kind.value}: {type(e).__name__}: {e}); "
                f"retrying without proxy"
            )
            return await self._request_direct(request_config)

        if self.fallback_enabled and response.status_code in GATEWAY_ERROR_STATUSES:
            await response.aclose()
            logger.warning(
                f"Request to {request_config.get('url')} got {response.status_code} through proxy; "
                f"retrying without proxy"
            )
            return await self._request_direct(request_config)
        return response

    async def _request_direct(self, request_config: RequestConfig) -> Any:
        async with self._adapter.create_client(self.config) as client:
            return await client.request(**request_config)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "ProxiedRequestClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
