"""
Adapter for httpx library.
"""
import asyncio
import importlib
import logging
from typing import Any
from .base import BaseAdapter
from ..exceptions import CapabilityUnavailableError, InvalidProxyURLError
from ..models import ProxyTransportConfig

logger = logging.getLogger(__name__)

class HttpxAdapter(BaseAdapter):
    """Adapter for httpx library.

    Agents are httpx transports, used as
    ``httpx.AsyncClient(transport=agent)``.
    """

    module_name = "httpx"

    @property
    def name(self) -> str:
        return "httpx"

    def supports_sync(self) -> bool:
        return True

    def supports_async(self) -> bool:
        return True

    async def load(self) -> Any:
        """Import httpx off the event loop."""
        try:
            return await asyncio.to_thread(importlib.import_module, self.module_name)
        except ImportError as e:
            raise CapabilityUnavailableError(self.module_name, e) from e

    def build_agent(self, module: Any, config: ProxyTransportConfig) -> Any:
        """Create httpx.AsyncHTTPTransport or httpx.HTTPTransport."""
        transport_cls = module.AsyncHTTPTransport if config.async_transport else module.HTTPTransport
        logger.debug(f"Creating {transport_cls.__name__} with verify={config.verify_ssl}")

        try:
            return transport_cls(
                proxy=config.proxy_url,
                verify=config.verify_ssl,
                trust_env=config.trust_env,
            )
        except (module.InvalidURL, ValueError) as e:
            raise InvalidProxyURLError(config.proxy_url, e) from e
