"""
Data models for proxy configuration.
"""
from dataclasses import dataclass
from typing import Literal, Mapping, Optional, Union
from pydantic import BaseModel, Field

class ProxyConfig(BaseModel):
    """Structured proxy directive.

    Equivalent to a ``protocol://[auth@]host:port`` URL. Validation of host
    and port happens here, not when the URL is formatted.
    """
    host: str = Field(..., min_length=1, description="Proxy hostname or IP address")
    port: int = Field(..., ge=1, le=65535, description="Proxy port")
    protocol: str = Field(default="http", description="Proxy protocol, e.g. http or https")
    auth: Optional[str] = Field(default=None, description="Credentials in 'user:pass' form")

# None: absent, False: disabled, str: URL form, ProxyConfig/mapping: structured form
ProxyDirective = Optional[Union[bool, str, ProxyConfig, Mapping[str, object]]]

ProxySource = Literal['disabled', 'explicit_url', 'explicit_config', 'environment', 'bypassed', 'none']

@dataclass
class ProxyResolution:
    """Outcome of resolving the effective proxy for one request."""
    proxy_url: Optional[str]
    source: ProxySource
    env_var_used: Optional[str] = None
