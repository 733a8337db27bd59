"""Shared utilities: id generation and header access."""

from app.shared.utils.generators import generate_cuid
from app.shared.utils.headers import get_header

__all__ = [
    "generate_cuid",
    "get_header",
]
