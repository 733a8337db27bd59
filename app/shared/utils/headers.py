"""Case-insensitive access to request header mappings."""

from collections.abc import Mapping


def get_header(headers: Mapping[str, str], name: str) -> str | None:
    """Return the value of header ``name`` or None.

    Starlette Headers are already case-insensitive; plain dicts (tests,
    background jobs) are scanned by lowercased key.

    Args:
        headers: Request headers (Starlette Headers or any str mapping).
        name: Header name in lowercase (e.g. "cookie").

    Returns:
        Header value, or None if absent.
    """
    value = headers.get(name)
    if value is not None:
        return value
    for key, candidate in headers.items():
        if key.lower() == name:
            return candidate
    return None
