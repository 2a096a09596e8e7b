"""
Factory for creating proxy agents.
"""
import logging
from typing import Any, Mapping, Optional, Union
from proxy_config import ProxyDirective, is_environment_available, resolve_env, resolve_proxy
from .models import AgentConfig, ProxyTransportConfig, DispatcherResult
from .config import is_ssl_verify_disabled_by_env
from .exceptions import CapabilityUnavailableError
from .adapters import get_adapter, BaseAdapter

logger = logging.getLogger(__name__)

class ProxyAgentFactory:
    """Factory for creating proxy agents.

    Every call builds a new agent; nothing is cached between calls.
    """

    def __init__(
        self,
        config: Optional[AgentConfig] = None,
        adapter: Union[str, BaseAdapter] = "httpx",
        env: Optional[Mapping[str, str]] = None
    ):
        self.config = config or AgentConfig()
        self.adapter: BaseAdapter = get_adapter(adapter) if isinstance(adapter, str) else adapter
        # None reads os.environ at call time
        self.env = env

        logger.debug(f"ProxyAgentFactory initialized with adapter '{self.adapter.name}'")

    def _transport_config(self, proxy_url: str, env: Mapping[str, str]) -> ProxyTransportConfig:
        # Precedence: config.verify_ssl > environment default
        if self.config.verify_ssl is not None:
            verify_ssl = self.config.verify_ssl
        else:
            verify_ssl = not is_ssl_verify_disabled_by_env(env)

        return ProxyTransportConfig(
            proxy_url=proxy_url,
            verify_ssl=verify_ssl,
            trust_env=self.config.trust_env,
            async_transport=self.config.async_transport
        )

    async def create_agent(
        self,
        proxy_url: str,
        env: Optional[Mapping[str, str]] = None
    ) -> Optional[Any]:
        """Create an agent that routes requests through ``proxy_url``.

        Returns None when there is no environment to proxy from or when the
        adapter's transport library cannot be loaded. Callers treat None as
        "connect directly".

        Raises:
            InvalidProxyURLError: If the adapter rejects ``proxy_url``.
        """
        snapshot = resolve_env(env if env is not None else self.env)
        if not is_environment_available(snapshot):
            logger.debug("No environment available, proxy agent not created")
            return None

        if self.config.async_transport and not self.adapter.supports_async():
            raise NotImplementedError(f"Adapter '{self.adapter.name}' does not support async")
        if not self.config.async_transport and not self.adapter.supports_sync():
            raise NotImplementedError(f"Adapter '{self.adapter.name}' does not support sync")

        try:
            module = await self.adapter.load()
        except CapabilityUnavailableError as e:
            logger.warning(f"{e.module_name} not available. Proxy support is disabled. ({e.cause})")
            return None

        transport_config = self._transport_config(proxy_url, snapshot)
        return self.adapter.build_agent(module, transport_config)

    async def get_proxy_dispatcher(
        self,
        target_url: str,
        proxy: ProxyDirective = None,
        env: Optional[Mapping[str, str]] = None
    ) -> DispatcherResult:
        """Resolve the proxy for ``target_url`` and build an agent for it."""
        snapshot = resolve_env(env if env is not None else self.env)
        resolution = resolve_proxy(target_url, proxy, snapshot)

        agent = None
        if resolution.proxy_url:
            agent = await self.create_agent(resolution.proxy_url, env=snapshot)

        logger.debug(f"Dispatcher for {target_url!r}: source={resolution.source}, agent={agent is not None}")
        return DispatcherResult(
            proxy_url=resolution.proxy_url,
            agent=agent,
            resolution=resolution
        )
