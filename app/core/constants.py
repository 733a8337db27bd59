"""Core constants: session cache defaults and shared literal values."""

# Session cache: freshness window and capacity bound
DEFAULT_SESSION_CACHE_TTL_MS = 3000
DEFAULT_SESSION_CACHE_MAX_ENTRIES = 500

# Fallback cache key for requests without a cookie: "no-cookie:<x-forwarded-for>"
SESSION_CACHE_NO_COOKIE_PREFIX = "no-cookie"
SESSION_CACHE_UNKNOWN_ORIGIN = "unknown"
CACHE_KEY_SEP = ":"

# Request headers forwarded to the auth service on session lookup
SESSION_FORWARD_HEADERS = ("cookie", "authorization", "x-forwarded-for", "user-agent")

# Tag suggestions (GET /tags)
DEFAULT_TAG_SEARCH_LIMIT = 8
MAX_TAG_SEARCH_LIMIT = 50

ADMIN_ROLE = "admin"
