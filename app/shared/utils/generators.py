"""Tag id generation."""

from cuid2 import cuid_wrapper

_next_cuid = cuid_wrapper()


def generate_cuid() -> str:
    """Return a new CUID2 tag id.

    Ids are assigned client-side so a batch insert knows every id before the
    round trip; rows skipped by ON CONFLICT simply discard theirs.
    """
    return str(_next_cuid())
