"""
Failure classification for proxied requests.

A failure is recoverable (eligible for one direct retry) when it carries a
known connection error code, or when it looks proxy-related. The proxy check
is a case-insensitive substring match over the error message, so an
application error whose message happens to contain e.g. "proxy" is treated
as proxy-related too.
"""
import errno
import logging
import re
import socket
from typing import Iterator, Optional

import httpx

from .models import FailureKind

logger = logging.getLogger(__name__)

NETWORK_ERROR_CODES = frozenset({"ECONNREFUSED", "ETIMEDOUT", "ECONNRESET", "ENOTFOUND"})

# Gateway errors a proxy answers with when the upstream hop fails
GATEWAY_ERROR_STATUSES = frozenset({502, 504})

PROXY_ERROR_PATTERN = re.compile(r"proxy|tunnel|socks|agent|502|504", re.IGNORECASE)

_MAX_CHAIN_DEPTH = 16

def _exception_chain(exc: BaseException) -> Iterator[BaseException]:
    seen = set()
    current: Optional[BaseException] = exc
    while current is not None and id(current) not in seen and len(seen) < _MAX_CHAIN_DEPTH:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__

def _code_for(exc: BaseException) -> Optional[str]:
    code = getattr(exc, "code", None)
    if isinstance(code, str) and code:
        return code
    if isinstance(exc, socket.gaierror):
        return "ENOTFOUND"
    if isinstance(exc, ConnectionRefusedError):
        return "ECONNREFUSED"
    if isinstance(exc, ConnectionResetError):
        return "ECONNRESET"
    if isinstance(exc, (httpx.ConnectTimeout, TimeoutError)):
        return "ETIMEDOUT"
    if isinstance(exc, OSError) and exc.errno in errno.errorcode:
        return errno.errorcode[exc.errno]
    return None

def error_code(exc: BaseException) -> Optional[str]:
    """Return the low-level error code of a failure, looking through its causes."""
    for item in _exception_chain(exc):
        code = _code_for(item)
        if code:
            return code
    return None

def looks_like_proxy_error(exc: BaseException) -> bool:
    if isinstance(exc, httpx.ProxyError):
        return True
    return bool(PROXY_ERROR_PATTERN.search(str(exc)))

def classify_failure(exc: BaseException) -> FailureKind:
    """Classify a request failure as NETWORK, PROXY or OTHER."""
    code = error_code(exc)
    if code in NETWORK_ERROR_CODES:
        kind = FailureKind.NETWORK
    elif looks_like_proxy_error(exc):
        kind = FailureKind.PROXY
    else:
        kind = FailureKind.OTHER
    logger.debug(f"Classified {type(exc).__name__} (code={code}) as {kind.value}")
    return kind
