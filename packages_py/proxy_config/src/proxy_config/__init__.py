"""
Proxy configuration and resolution package.
"""
from .types import ProxyConfig, ProxyDirective, ProxyResolution, ProxySource
from .errors import ProxyConfigError, InvalidURLError
from .environment import (
    UNAVAILABLE_ENVIRONMENT,
    UnavailableEnvironment,
    get_env_var,
    is_environment_available,
    resolve_env,
)
from .bypass import parse_no_proxy, should_bypass_proxy
from .resolver import (
    get_proxy_from_environment,
    proxy_config_to_url,
    resolve_proxy,
    resolve_proxy_url,
)

__all__ = [
    "ProxyConfig",
    "ProxyDirective",
    "ProxyResolution",
    "ProxySource",
    "ProxyConfigError",
    "InvalidURLError",
    "UNAVAILABLE_ENVIRONMENT",
    "UnavailableEnvironment",
    "get_env_var",
    "is_environment_available",
    "resolve_env",
    "parse_no_proxy",
    "should_bypass_proxy",
    "get_proxy_from_environment",
    "proxy_config_to_url",
    "resolve_proxy",
    "resolve_proxy_url",
]
