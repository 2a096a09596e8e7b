"""
Convenience functions for proxy dispatcher.
"""
from typing import Any, Mapping, Optional, Union
from proxy_config import ProxyDirective
from .factory import ProxyAgentFactory
from .models import AgentConfig, DispatcherResult
from .adapters import BaseAdapter

# Global default factory
_default_factory = ProxyAgentFactory()

async def create_proxy_agent(
    proxy_url: str,
    *,
    adapter: Optional[Union[str, BaseAdapter]] = None,
    env: Optional[Mapping[str, str]] = None,
    config: Optional[AgentConfig] = None
) -> Optional[Any]:
    """Create a proxy agent, or None if proxy support is unavailable."""
    factory = _default_factory
    if adapter is not None or config is not None:
        factory = ProxyAgentFactory(config=config, adapter=adapter or "httpx")
    return await factory.create_agent(proxy_url, env=env)

async def get_proxy_dispatcher(
    target_url: str,
    proxy: ProxyDirective = None,
    env: Optional[Mapping[str, str]] = None
) -> DispatcherResult:
    """Resolve the proxy for a request and build its agent using the default factory."""
    return await _default_factory.get_proxy_dispatcher(target_url, proxy=proxy, env=env)

def create_proxy_agent_factory(
    config: Optional[AgentConfig] = None,
    adapter: Union[str, BaseAdapter] = "httpx",
    env: Optional[Mapping[str, str]] = None
) -> ProxyAgentFactory:
    """Create a new ProxyAgentFactory instance."""
    return ProxyAgentFactory(config=config, adapter=adapter, env=env)
