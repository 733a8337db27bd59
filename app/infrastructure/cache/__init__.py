"""Cache: process-local session cache and cache key utilities.

Used by request dependencies to avoid redundant session lookups against
the auth service. Key format is in keys.py.
"""

from app.infrastructure.cache.keys import session_cache_key
from app.infrastructure.cache.session_cache import SessionCache

__all__ = [
    "SessionCache",
    "session_cache_key",
]
