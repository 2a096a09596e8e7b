"""
Environment detection functions.
"""
import logging
from typing import Mapping, Optional
from proxy_config import get_env_var

logger = logging.getLogger(__name__)

def is_ssl_verify_disabled_by_env(env: Optional[Mapping[str, str]] = None) -> bool:
    """Check if SSL verification is disabled by environment variables."""
    # Node.js compatibility
    if get_env_var("NODE_TLS_REJECT_UNAUTHORIZED", env) == "0":
        logger.debug("SSL verification disabled by NODE_TLS_REJECT_UNAUTHORIZED")
        return True

    # Python convention
    if get_env_var("SSL_CERT_VERIFY", env) == "0":
        logger.debug("SSL verification disabled by SSL_CERT_VERIFY")
        return True

    return False
