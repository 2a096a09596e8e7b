"""
Data models for proxy dispatcher.
"""
from dataclasses import dataclass
from typing import Any, Optional
from proxy_config import ProxyResolution

@dataclass
class AgentConfig:
    """Configuration for ProxyAgentFactory."""
    verify_ssl: Optional[bool] = None  # None: decided by environment
    trust_env: bool = False
    async_transport: bool = True

@dataclass
class ProxyTransportConfig:
    """Resolved settings for a single proxy agent."""
    proxy_url: str
    verify_ssl: bool = True
    trust_env: bool = False
    async_transport: bool = True

@dataclass
class DispatcherResult:
    """Resolved proxy URL and the agent built for it."""
    proxy_url: Optional[str]
    agent: Any  # Union[httpx.AsyncHTTPTransport, httpx.HTTPTransport], None without proxy
    resolution: ProxyResolution
