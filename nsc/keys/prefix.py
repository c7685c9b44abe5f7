"""
Key categories and their prefix bytes.
"""

from enum import Enum
from typing import Union


class KeyCategory(str, Enum):
    """Leading character of an encoded public key for each kind of entity."""
    OPERATOR = "O"
    ACCOUNT = "A"
    USER = "U"
    SERVER = "N"
    CLUSTER = "C"
    CURVE = "X"

    def __str__(self) -> str:
        return self.value


SEED_MARKER = "S"

# first byte of the raw (base32-decoded) key, before the 5-bit shift
PREFIX_BYTE_SEED = 18 << 3
PREFIX_BYTE_PRIVATE = 15 << 3

PUBLIC_PREFIX_BYTES = {
    KeyCategory.OPERATOR: 14 << 3,
    KeyCategory.SERVER: 13 << 3,
    KeyCategory.CLUSTER: 2 << 3,
    KeyCategory.ACCOUNT: 0,
    KeyCategory.USER: 20 << 3,
    KeyCategory.CURVE: 23 << 3,
}


def prefix_char(prefix: Union[str, KeyCategory]) -> str:
    """Normalize a category or single character to the prefix character."""
    if isinstance(prefix, KeyCategory):
        return prefix.value
    if not isinstance(prefix, str) or len(prefix) != 1:
        raise ValueError(f"prefix must be a single character, got {prefix!r}")
    return prefix


def category_for_byte(b: int) -> KeyCategory:
    """Map a raw public prefix byte back to its category."""
    for category, value in PUBLIC_PREFIX_BYTES.items():
        if value == b:
            return category
    raise ValueError(f"unknown public key prefix byte {b}")
