class ProxyDispatcherError(Exception):
    """Base exception for proxy agent creation errors."""
    pass

class InvalidProxyURLError(ProxyDispatcherError, ValueError):
    """Raised when a proxy URL is rejected while building an agent."""
    def __init__(self, proxy_url: str, cause: Exception):
        msg = f"Invalid proxy URL '{proxy_url}': {cause}"
        super().__init__(msg)
        self.proxy_url = proxy_url
        self.cause = cause

class CapabilityUnavailableError(ProxyDispatcherError, ImportError):
    """Raised when the transport library backing an adapter cannot be loaded."""
    def __init__(self, module_name: str, cause: Exception):
        msg = f"Proxy capability '{module_name}' is not available: {cause}"
        super().__init__(msg)
        self.module_name = module_name
        self.cause = cause
