"""
Build proxy descriptors from environment variables.
"""
import os
import logging
from typing import Mapping, Optional

from .types import ProxyDescriptor

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}

def _parse_flag(value: Optional[str], default: bool) -> bool:
    if value is None or not value.strip():
        return default
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")

def load_descriptor_from_env(
    prefix: str = "PROXY",
    environ: Optional[Mapping[str, str]] = None
) -> ProxyDescriptor:
    """Load a ProxyDescriptor from the environment.

    URL precedence:
    1. <PREFIX>_URL
    2. HTTPS_PROXY
    3. HTTP_PROXY

    <PREFIX>_ENABLED defaults to true when a URL was found.
    """
    env = os.environ if environ is None else environ

    url = None
    for key in (f"{prefix}_URL", "HTTPS_PROXY", "HTTP_PROXY"):
        if env.get(key):
            logger.debug(f"Using {key} env var")
            url = env[key]
            break

    if url is None:
        logger.debug("No proxy URL found")

    return ProxyDescriptor(
        url=url,
        port=env.get(f"{prefix}_PORT") or None,
        username=env.get(f"{prefix}_USERNAME") or None,
        password=env.get(f"{prefix}_PASSWORD") or None,
        proxy_enabled=_parse_flag(env.get(f"{prefix}_ENABLED"), default=url is not None),
    )
