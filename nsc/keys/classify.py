"""
Heuristic recognition and parsing of encoded keys.

Command arguments that name a key can also name a file, so ``looks_like_nkey``
only says yes to strings with the right length and prefix that contain no path
separator.
"""

import logging
import os
from typing import Union

from ..types.errors import InvalidKeyEncoding
from .encoding import decode_seed, decode_public_key
from .handle import KeyPairHandle
from .prefix import KeyCategory, SEED_MARKER, prefix_char

logger = logging.getLogger(__name__)

SEED_LENGTHS = (109, 58)
PUBLIC_KEY_LENGTH = 56


def _has_path_separator(s: str) -> bool:
    if os.sep in s:
        return True
    return bool(os.altsep) and os.altsep in s


def looks_like_nkey(s: str, prefix: Union[str, KeyCategory]) -> bool:
    """
    Tell whether ``s`` is shaped like a seed or public key of the given category.

    Seeds (length 109 or 58) must start with ``S<prefix>``, public keys
    (length 56) with ``<prefix>``. Nothing is decoded.
    """
    pre = prefix_char(prefix)
    if len(s) in SEED_LENGTHS:
        pre = SEED_MARKER + pre
    elif len(s) != PUBLIC_KEY_LENGTH:
        return False
    return s.startswith(pre) and not _has_path_separator(s)


def parse_nkey(s: str) -> KeyPairHandle:
    """
    Decode a seed (leading ``S``) or a public key into a handle.

    Raises InvalidKeyEncoding on any decoding failure.
    """
    if not s:
        raise InvalidKeyEncoding(s, "empty key")

    if s[0] == SEED_MARKER:
        try:
            keypair = decode_seed(s.encode('ascii'))
            public_key = keypair.public_key
            if isinstance(public_key, str):
                public_key = public_key.encode('ascii')
            category, verify_key = decode_public_key(public_key)
        except Exception as e:
            logger.warning("Failed to decode seed: %s", type(e).__name__)
            raise InvalidKeyEncoding(s, "seed", cause=e) from e
        return KeyPairHandle.from_keypair(keypair, category, verify_key)

    try:
        category, verify_key = decode_public_key(s.encode('ascii'))
    except Exception as e:
        logger.warning("Failed to decode public key %r: %s", s, e)
        raise InvalidKeyEncoding(s, "public key", cause=e) from e
    return KeyPairHandle.from_public(s, category, verify_key)
