"""
Adapter for httpx library.
"""
import logging
import httpx
from typing import Any, Dict, Optional
from proxy_agent import AgentPair, mask_proxy_url
from .base import BaseAdapter
from ..config import resolve_verify_ssl
from ..models import ClientConfig

logger = logging.getLogger(__name__)

class HttpxAdapter(BaseAdapter):
    """Adapter for httpx.AsyncClient."""

    @property
    def name(self) -> str:
        return "httpx"

    def transport_options(self, config: ClientConfig) -> Dict[str, Any]:
        verify_ssl = resolve_verify_ssl(config.verify_ssl)
        options: Dict[str, Any] = {
            "verify": config.ca_bundle if (config.ca_bundle and verify_ssl) else verify_ssl,
        }
        if config.cert:
            options["cert"] = config.cert
        return options

    def get_client_kwargs(self, config: ClientConfig, agents: Optional[AgentPair] = None) -> Dict[str, Any]:
        """Build kwargs for httpx.AsyncClient."""
        kwargs: Dict[str, Any] = {
            "timeout": httpx.Timeout(config.timeout),
            "follow_redirects": config.follow_redirects,
            # Never read HTTP(S)_PROXY / NO_PROXY; agents are the only proxy source
            "trust_env": False,
            **self.transport_options(config),
        }

        if agents is not None:
            kwargs["mounts"] = {
                "http://": agents.forward_agent,
                "https://": agents.tunnel_agent,
            }

        return kwargs

    def create_client(self, config: ClientConfig, agents: Optional[AgentPair] = None) -> httpx.AsyncClient:
        """Create httpx.AsyncClient."""
        kwargs = self.get_client_kwargs(config, agents)
        if agents is not None:
            logger.debug(
                f"Creating httpx.AsyncClient via {agents.protocol.name} proxy "
                f"{mask_proxy_url(agents.proxy_url)}"
            )
        else:
            logger.debug("Creating direct httpx.AsyncClient")
        return httpx.AsyncClient(**kwargs)
