"""
Proxy URL resolution logic.
"""
import logging
from typing import Mapping, Optional, Union
from urllib.parse import urlsplit
from .bypass import should_bypass_proxy
from .environment import (
    HTTP_PROXY_VARS,
    HTTPS_PROXY_VARS,
    get_first_env_var,
    is_environment_available,
    resolve_env,
)
from .errors import InvalidURLError
from .types import ProxyConfig, ProxyDirective, ProxyResolution

logger = logging.getLogger(__name__)

def _parse_target_url(target_url: str):
    try:
        parts = urlsplit(target_url)
        # Raises ValueError for non-numeric or out-of-range ports
        parts.port
    except (TypeError, ValueError) as e:
        raise InvalidURLError(str(target_url), str(e)) from e
    if not parts.scheme:
        raise InvalidURLError(target_url, "missing scheme")

    scheme = parts.scheme.lower()
    hostname = parts.hostname or ""
    if scheme in ("http", "https") and not hostname:
        raise InvalidURLError(target_url, "missing host")
    return scheme, hostname

def _resolve_from_environment(
    target_url: str,
    env: Optional[Mapping[str, str]] = None
) -> ProxyResolution:
    snapshot = resolve_env(env)
    if not is_environment_available(snapshot):
        logger.debug("No environment available, skipping proxy lookup")
        return ProxyResolution(proxy_url=None, source='none')

    scheme, hostname = _parse_target_url(target_url)

    # Bypass short-circuits the protocol-specific lookup
    if should_bypass_proxy(hostname, snapshot):
        logger.debug(f"Bypassing proxy for {hostname!r} due to NO_PROXY")
        return ProxyResolution(proxy_url=None, source='bypassed')

    if scheme == "https":
        found = get_first_env_var(HTTPS_PROXY_VARS + HTTP_PROXY_VARS, snapshot)
    elif scheme == "http":
        found = get_first_env_var(HTTP_PROXY_VARS, snapshot)
    else:
        logger.debug(f"Unsupported scheme {scheme!r}, no proxy lookup")
        found = None

    if not found:
        return ProxyResolution(proxy_url=None, source='none')

    env_var, proxy_url = found
    logger.debug(f"Using {env_var} env var for {scheme} target")
    return ProxyResolution(proxy_url=proxy_url, source='environment', env_var_used=env_var)

def get_proxy_from_environment(
    target_url: str,
    env: Optional[Mapping[str, str]] = None
) -> Optional[str]:
    """Get the proxy URL for a target from HTTPS_PROXY/HTTP_PROXY.

    HTTPS targets check HTTPS_PROXY then HTTP_PROXY, HTTP targets check
    HTTP_PROXY only; upper-case names win over lower-case ones. Returns None
    when NO_PROXY matches the target host or no variable is set.

    Raises:
        InvalidURLError: If the target URL cannot be parsed.
    """
    return _resolve_from_environment(target_url, env).proxy_url

def proxy_config_to_url(config: Union[ProxyConfig, Mapping[str, object]]) -> str:
    """Format a structured proxy config as ``protocol://[auth@]host:port``.

    Values are used verbatim; the protocol defaults to ``http``.
    """
    if isinstance(config, Mapping):
        protocol = config.get("protocol")
        auth = config.get("auth")
        host = config.get("host")
        port = config.get("port")
    else:
        protocol, auth, host, port = config.protocol, config.auth, config.host, config.port

    protocol = protocol or "http"
    auth_part = f"{auth}@" if auth else ""
    return f"{protocol}://{auth_part}{host}:{port}"

def resolve_proxy(
    target_url: str,
    proxy: ProxyDirective = None,
    env: Optional[Mapping[str, str]] = None
) -> ProxyResolution:
    """Resolve the effective proxy for a request, recording its source.

    Precedence:
    1. proxy is False -> no proxy, regardless of environment
    2. proxy is a URL string -> used verbatim
    3. proxy is a ProxyConfig/mapping -> formatted URL
    4. otherwise -> HTTPS_PROXY/HTTP_PROXY, honouring NO_PROXY

    Explicit directives (2, 3) are never subject to NO_PROXY.
    """
    if proxy is False:
        logger.debug("Proxy explicitly disabled via proxy=False")
        return ProxyResolution(proxy_url=None, source='disabled')

    if isinstance(proxy, str) and proxy:
        logger.debug("Using explicit proxy URL")
        return ProxyResolution(proxy_url=proxy, source='explicit_url')

    if isinstance(proxy, (ProxyConfig, Mapping)):
        logger.debug("Using explicit proxy config")
        return ProxyResolution(proxy_url=proxy_config_to_url(proxy), source='explicit_config')

    return _resolve_from_environment(target_url, env)

def resolve_proxy_url(
    target_url: str,
    proxy: ProxyDirective = None,
    env: Optional[Mapping[str, str]] = None
) -> Optional[str]:
    """Resolve the proxy URL to use for a request, or None for a direct connection."""
    resolution = resolve_proxy(target_url, proxy, env)
    logger.debug(f"Resolved proxy for {target_url!r}: source={resolution.source}")
    return resolution.proxy_url
