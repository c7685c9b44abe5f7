"""
Adapter over the nkeys encoding library.

Seeds go straight to ``nkeys.from_seed``. nkeys has no public-key-only
constructor, so public keys are checked here against the same encoding
(base32, prefix byte, CRC16/XMODEM little-endian trailer) and turned into a
PyNaCl verify key.
"""

import base64
import binascii
import struct
from typing import Tuple

import nkeys
from nacl.signing import VerifyKey

from .prefix import KeyCategory, category_for_byte

PUBLIC_KEY_RAW_LEN = 35
ED25519_KEY_LEN = 32


def _b32decode(src: bytes) -> bytes:
    padding = b'=' * (-len(src) % 8)
    return base64.b32decode(src + padding)


def decode_seed(seed: bytes) -> 'nkeys.KeyPair':
    """Decode an encoded seed into an nkeys key pair."""
    return nkeys.from_seed(seed)


def decode_public_key(public_key: bytes) -> Tuple[KeyCategory, VerifyKey]:
    """
    Decode an encoded public key.

    Returns the key category and a verify key. Raises ValueError (or
    binascii.Error, a ValueError subclass) on any encoding problem.
    """
    raw = _b32decode(public_key)
    if len(raw) != PUBLIC_KEY_RAW_LEN:
        raise ValueError(f"public key decodes to {len(raw)} bytes, expected {PUBLIC_KEY_RAW_LEN}")

    body, trailer = raw[:-2], raw[-2:]
    (expected,) = struct.unpack('<H', trailer)
    if binascii.crc_hqx(body, 0) != expected:
        raise ValueError("public key checksum mismatch")

    category = category_for_byte(body[0])
    return category, VerifyKey(body[1:])
