"""
Recognition and decoding of encoded key material.

Protocol Usage Declaration:
  - NKEYS encoding: USED for seeds (via the nkeys library) and public keys
  - Ed25519:        USED for verification through PyNaCl
"""

from .prefix import KeyCategory, prefix_char
from .handle import KeyKind, KeyPairHandle
from .classify import looks_like_nkey, parse_nkey, SEED_LENGTHS, PUBLIC_KEY_LENGTH

__all__ = [
    'KeyCategory',
    'prefix_char',
    'KeyKind',
    'KeyPairHandle',
    'looks_like_nkey',
    'parse_nkey',
    'SEED_LENGTHS',
    'PUBLIC_KEY_LENGTH',
]
