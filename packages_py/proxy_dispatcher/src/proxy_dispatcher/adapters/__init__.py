"""
Capability provider registry.

Maps an adapter name to the class that loads a transport library and builds
proxy agents from it. ``ProxyAgentFactory(adapter="httpx")`` resolves its
adapter here.
"""
import logging
from typing import Dict, List, Type
from .base import BaseAdapter
from .adapter_httpx import HttpxAdapter

logger = logging.getLogger(__name__)

_adapters: Dict[str, Type[BaseAdapter]] = {}

def register_adapter(adapter_cls: Type[BaseAdapter]) -> None:
    """Register a capability provider under its ``name``; replaces any existing entry."""
    name = adapter_cls().name
    if name in _adapters:
        logger.debug(f"Replacing proxy capability adapter: {name}")
    _adapters[name] = adapter_cls
    logger.debug(f"Registered proxy capability adapter: {name}")

def available_adapters() -> List[str]:
    """Names of registered capability providers, sorted."""
    return sorted(_adapters)

def get_adapter(name: str) -> BaseAdapter:
    """Get a fresh capability provider instance by name."""
    adapter_cls = _adapters.get(name)
    if adapter_cls is None:
        raise KeyError(f"No proxy capability adapter '{name}'. Available: {available_adapters()}")
    return adapter_cls()

register_adapter(HttpxAdapter)

__all__ = ["BaseAdapter", "HttpxAdapter", "register_adapter", "available_adapters", "get_adapter"]
