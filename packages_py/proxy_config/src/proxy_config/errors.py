class ProxyConfigError(Exception):
    """Base exception for proxy resolution errors."""
    pass

class InvalidURLError(ProxyConfigError, ValueError):
    """Raised when the target URL of a request cannot be parsed."""
    def __init__(self, url: str, reason: str):
        msg = f"Invalid target URL '{url}': {reason}"
        super().__init__(msg)
        self.url = url
        self.reason = reason
