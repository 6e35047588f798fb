"""
Proxy dispatcher package.
"""
from .models import ClientConfig, FailureKind, RequestConfig
from .config import is_ssl_verify_disabled_by_env, resolve_verify_ssl
from .classify import classify_failure, error_code, looks_like_proxy_error, NETWORK_ERROR_CODES, GATEWAY_ERROR_STATUSES
from .client import ProxiedRequestClient
from .dispatcher import create_proxied_client, dispatch_request
from .adapters import register_adapter, get_adapter, BaseAdapter

__all__ = [
    "ClientConfig",
    "FailureKind",
    "RequestConfig",
    "ProxiedRequestClient",
    "create_proxied_client",
    "dispatch_request",
    "classify_failure",
    "error_code",
    "looks_like_proxy_error",
    "NETWORK_ERROR_CODES",
    "GATEWAY_ERROR_STATUSES",
    "is_ssl_verify_disabled_by_env",
    "resolve_verify_ssl",
    "register_adapter",
    "get_adapter",
    "BaseAdapter",
]
