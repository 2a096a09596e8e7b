"""
Environment snapshot access.

Every lookup runs against an explicit key-value snapshot. Passing ``None``
reads the process environment at call time, so changes to ``os.environ``
take effect on the next call without any reset.
"""
import os
import logging
from typing import Iterator, Mapping, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

HTTPS_PROXY_VARS = ("HTTPS_PROXY", "https_proxy")
HTTP_PROXY_VARS = ("HTTP_PROXY", "http_proxy")
NO_PROXY_VARS = ("NO_PROXY", "no_proxy")

class UnavailableEnvironment(Mapping[str, str]):
    """Snapshot for an execution context that has no environment state.

    Behaves as an empty mapping, and is recognised by ``is_environment_available``.
    """

    def __getitem__(self, key: str) -> str:
        raise KeyError(key)

    def __iter__(self) -> Iterator[str]:
        return iter(())

    def __len__(self) -> int:
        return 0

    def __repr__(self) -> str:
        return "UNAVAILABLE_ENVIRONMENT"

UNAVAILABLE_ENVIRONMENT = UnavailableEnvironment()

def resolve_env(env: Optional[Mapping[str, str]] = None) -> Mapping[str, str]:
    """Return the snapshot to read from, defaulting to the process environment."""
    if env is None:
        return os.environ
    return env

def is_environment_available(env: Optional[Mapping[str, str]] = None) -> bool:
    """Check whether environment state can be resolved at all."""
    return not isinstance(resolve_env(env), UnavailableEnvironment)

def get_env_var(name: str, env: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Get a single variable from the snapshot."""
    snapshot = resolve_env(env)
    if not is_environment_available(snapshot):
        return None
    return snapshot.get(name)

def get_first_env_var(
    names: Sequence[str],
    env: Optional[Mapping[str, str]] = None
) -> Optional[Tuple[str, str]]:
    """Return ``(name, value)`` for the first variable with a non-empty value."""
    snapshot = resolve_env(env)
    for name in names:
        value = get_env_var(name, snapshot)
        if value:
            logger.debug(f"get_first_env_var: {name} is set")
            return name, value
    logger.debug(f"get_first_env_var: none of {list(names)} set")
    return None
