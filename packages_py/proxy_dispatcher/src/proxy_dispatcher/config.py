"""
Environment-driven client settings.
"""
import os
import logging
from typing import Optional

logger = logging.getLogger(__name__)

def is_ssl_verify_disabled_by_env() -> bool:
    """Check if SSL verification is disabled by environment variables."""
    # Node.js compatibility
    if os.getenv("NODE_TLS_REJECT_UNAUTHORIZED") == "0":
        return True

    # Python convention
    if os.getenv("SSL_CERT_VERIFY") == "0":
        return True

    return False

def resolve_verify_ssl(verify_ssl: Optional[bool] = None) -> bool:
    """Resolve SSL verification.

    Precedence: explicit verify_ssl > environment > True
    """
    if verify_ssl is not None:
        return verify_ssl
    if is_ssl_verify_disabled_by_env():
        logger.debug("SSL verification disabled by environment")
        return False
    return True
