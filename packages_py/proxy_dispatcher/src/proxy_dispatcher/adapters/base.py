"""
Abstract base adapter for HTTP libraries.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
from proxy_agent import AgentPair
from ..models import ClientConfig

class BaseAdapter(ABC):
    """Abstract interface for HTTP library adapters."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of the adapter (e.g., 'httpx')."""
        pass

    @abstractmethod
    def transport_options(self, config: ClientConfig) -> Dict[str, Any]:
        """Options passed to agent constructors (TLS settings)."""
        pass

    @abstractmethod
    def get_client_kwargs(self, config: ClientConfig, agents: Optional[AgentPair] = None) -> Dict[str, Any]:
        """Get client constructor kwargs, with agents bound when given."""
        pass

    @abstractmethod
    def create_client(self, config: ClientConfig, agents: Optional[AgentPair] = None) -> Any:
        """Create a client; without agents it goes direct with proxy handling disabled."""
        pass
