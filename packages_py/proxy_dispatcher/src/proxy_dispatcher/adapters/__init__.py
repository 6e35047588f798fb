"""
Adapter registry.

Adapters build the proxied and direct clients; ProxiedRequestClient looks
them up by name.
"""
import logging
from typing import Dict, Type
from .base import BaseAdapter
from .adapter_httpx import HttpxAdapter

logger = logging.getLogger(__name__)

_adapters: Dict[str, Type[BaseAdapter]] = {}

def register_adapter(adapter_cls: Type[BaseAdapter], replace: bool = False) -> None:
    """Register an adapter class under its name.

    Raises:
        ValueError: Another adapter class already uses the name and replace is False.
    """
    name = adapter_cls().name
    existing = _adapters.get(name)
    if existing is not None and existing is not adapter_cls and not replace:
        raise ValueError(f"Adapter '{name}' is already registered by {existing.__name__}")
    _adapters[name] = adapter_cls
    logger.debug(f"Registered adapter: {name} ({adapter_cls.__name__})")

def get_adapter(name: str) -> BaseAdapter:
    """Get an adapter instance by name."""
    if name not in _adapters:
        raise KeyError(f"Adapter '{name}' not found. Available: {list(_adapters.keys())}")
    return _adapters[name]()

register_adapter(HttpxAdapter)

__all__ = ["BaseAdapter", "HttpxAdapter", "register_adapter", "get_adapter"]
