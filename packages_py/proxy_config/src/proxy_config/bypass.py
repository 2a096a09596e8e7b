"""
NO_PROXY bypass matching.
"""
import logging
from typing import List, Mapping, Optional
from .environment import NO_PROXY_VARS, get_first_env_var

logger = logging.getLogger(__name__)

def parse_no_proxy(value: Optional[str]) -> List[str]:
    """Split a comma-separated NO_PROXY value into lower-cased patterns."""
    if not value:
        return []
    patterns = [entry.strip().lower() for entry in value.split(",")]
    return [pattern for pattern in patterns if pattern]

def matches_bypass_pattern(hostname: str, pattern: str) -> bool:
    """Check a lower-cased hostname against one lower-cased pattern.

    Rules, in order:
    1. Exact match: ``api.example.com``
    2. Wildcard: ``*.example.com`` matches any hostname ending with
       ``example.com``, the bare domain included. A lone ``*`` matches all.
    3. Leading dot: ``.example.com`` matches hostnames ending with it.
    4. Bare domain: ``example.com`` matches ``*.example.com`` subdomains.
    """
    if hostname == pattern:
        return True

    if pattern.startswith("*"):
        domain = pattern[1:]
        if domain.startswith("."):
            domain = domain[1:]
        # Plain suffix comparison: "*.example.com" also matches "badexample.com"
        if hostname.endswith(domain):
            return True
    elif pattern.startswith("."):
        if hostname.endswith(pattern):
            return True

    return hostname.endswith("." + pattern)

def should_bypass_proxy(hostname: str, env: Optional[Mapping[str, str]] = None) -> bool:
    """Check if a hostname should skip the proxy based on NO_PROXY.

    The bypass list is read from the snapshot on every call.
    """
    found = get_first_env_var(NO_PROXY_VARS, env)
    if not found:
        return False

    env_var, value = found
    normalized_hostname = hostname.lower()

    for pattern in parse_no_proxy(value):
        if matches_bypass_pattern(normalized_hostname, pattern):
            logger.debug(f"should_bypass_proxy: {normalized_hostname!r} matched {env_var} pattern {pattern!r}")
            return True

    return False
