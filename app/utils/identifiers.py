"""
Store Identifiers

Every record in the store is keyed by a 24-character hexadecimal token:
a 4-byte creation timestamp followed by 8 random bytes. Identifiers that
arrive in a request path are checked against this shape before the store
is consulted.
"""

import re
import secrets
import time

OBJECT_ID_LENGTH = 24

_OBJECT_ID_PATTERN = re.compile(r"^[0-9a-fA-F]{24}$")


def generate_object_id() -> str:
    """
    Generate a new store identifier.

    Example:
        >>> len(generate_object_id())
        24
    """
    timestamp = int(time.time()).to_bytes(4, "big")
    return (timestamp + secrets.token_bytes(8)).hex()


def is_valid_object_id(value: object) -> bool:
    """Return True if value has the store's identifier shape."""
    return isinstance(value, str) and _OBJECT_ID_PATTERN.fullmatch(value) is not None
