"""Cache key builders. Single place for key format.

Session cache keys are opaque: the raw cookie header when present, else a
fallback shared by every cookie-less request with the same forwarded-for
value.
"""

from collections.abc import Mapping

from app.core.constants import (
    CACHE_KEY_SEP,
    SESSION_CACHE_NO_COOKIE_PREFIX,
    SESSION_CACHE_UNKNOWN_ORIGIN,
)
from app.shared.utils.headers import get_header


def session_cache_key(headers: Mapping[str, str]) -> str:
    """Cache key for a session lookup.

    Uses the cookie header if present and non-empty; otherwise
    "no-cookie:<x-forwarded-for>" ("unknown" when that header is absent).
    Unauthenticated requests behind the same proxy address share an entry.
    """
    cookie = get_header(headers, "cookie") or ""
    if cookie:
        return cookie
    forwarded_for = get_header(headers, "x-forwarded-for")
    if forwarded_for is None:
        forwarded_for = SESSION_CACHE_UNKNOWN_ORIGIN
    return f"{SESSION_CACHE_NO_COOKIE_PREFIX}{CACHE_KEY_SEP}{forwarded_for}"
