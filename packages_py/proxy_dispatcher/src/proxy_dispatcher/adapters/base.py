"""
Abstract base adapter for HTTP libraries.
"""
from abc import ABC, abstractmethod
from typing import Any
from ..models import ProxyTransportConfig

class BaseAdapter(ABC):
    """Abstract interface for HTTP library adapters.

    An adapter loads its transport library lazily and builds proxy agents
    from it. Tests substitute a fake adapter to avoid real module loading.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of the adapter (e.g., 'httpx', 'requests')."""
        pass

    @abstractmethod
    def supports_sync(self) -> bool:
        """Whether the adapter can build agents for synchronous clients."""
        pass

    @abstractmethod
    def supports_async(self) -> bool:
        """Whether the adapter can build agents for asynchronous clients."""
        pass

    @abstractmethod
    async def load(self) -> Any:
        """Load the transport library.

        Raises:
            CapabilityUnavailableError: If the library cannot be loaded.
        """
        pass

    @abstractmethod
    def build_agent(self, module: Any, config: ProxyTransportConfig) -> Any:
        """Build an agent bound to ``config.proxy_url`` from the loaded library.

        Raises:
            InvalidProxyURLError: If the proxy URL is malformed.
        """
        pass
