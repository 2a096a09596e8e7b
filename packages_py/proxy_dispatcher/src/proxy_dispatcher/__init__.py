"""
Proxy dispatcher package.
"""
from .models import AgentConfig, ProxyTransportConfig, DispatcherResult
from .config import is_ssl_verify_disabled_by_env
from .exceptions import ProxyDispatcherError, InvalidProxyURLError, CapabilityUnavailableError
from .factory import ProxyAgentFactory
from .dispatcher import (
    create_proxy_agent,
    get_proxy_dispatcher,
    create_proxy_agent_factory
)
from .adapters import register_adapter, available_adapters, get_adapter, BaseAdapter, HttpxAdapter

__all__ = [
    "AgentConfig",
    "ProxyTransportConfig",
    "DispatcherResult",
    "is_ssl_verify_disabled_by_env",
    "ProxyDispatcherError",
    "InvalidProxyURLError",
    "CapabilityUnavailableError",
    "ProxyAgentFactory",
    "create_proxy_agent",
    "get_proxy_dispatcher",
    "create_proxy_agent_factory",
    "register_adapter",
    "available_adapters",
    "get_adapter",
    "BaseAdapter",
    "HttpxAdapter"
]
