class ProxyConfigurationError(Exception):
    """Base exception for proxy descriptors that cannot be turned into agents."""
    pass

class UnsupportedProxyProtocolError(ProxyConfigurationError):
    def __init__(self, scheme: str):
        msg = f"Unsupported proxy protocol: {scheme}"
        super().__init__(msg)
        self.scheme = scheme

class MalformedProxyConfigurationError(ProxyConfigurationError):
    def __init__(self, url: str, reason: str):
        msg = f"Malformed proxy URL '{url}': {reason}"
        super().__init__(msg)
        self.url = url
        self.reason = reason
