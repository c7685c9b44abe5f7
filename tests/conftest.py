"""
Shared fixtures: a fixed clock and deterministic key material.
"""

import base64
import binascii
import struct
from datetime import datetime, timezone

import pytest
from nacl.signing import SigningKey

from nsc.keys.prefix import KeyCategory, PUBLIC_PREFIX_BYTES, PREFIX_BYTE_SEED


def _encode(raw: bytes) -> str:
    crc = struct.pack('<H', binascii.crc_hqx(raw, 0))
    return base64.b32encode(raw + crc).decode('ascii').rstrip('=')


def encode_public_key(category: KeyCategory, verify_key: bytes) -> str:
    return _encode(bytes([PUBLIC_PREFIX_BYTES[category]]) + verify_key)


def encode_seed(category: KeyCategory, raw_seed: bytes) -> str:
    prefix = PUBLIC_PREFIX_BYTES[category]
    b1 = PREFIX_BYTE_SEED | (prefix >> 5)
    b2 = (prefix & 31) << 3
    return _encode(bytes([b1, b2]) + raw_seed)


class KeyMaterial:
    """Encoded seed and public key generated from a fixed raw seed."""

    def __init__(self, category: KeyCategory, raw_seed: bytes):
        signing_key = SigningKey(raw_seed)
        self.category = category
        self.seed = encode_seed(category, raw_seed)
        self.public_key = encode_public_key(category, signing_key.verify_key.encode())


@pytest.fixture
def user_key():
    return KeyMaterial(KeyCategory.USER, bytes(range(32)))


@pytest.fixture
def operator_key():
    return KeyMaterial(KeyCategory.OPERATOR, bytes(range(32, 64)))


@pytest.fixture
def fixed_now():
    """End of January, so month arithmetic has to clamp."""
    return datetime(2025, 1, 31, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def curve_public_key():
    return encode_public_key(KeyCategory.CURVE, bytes(range(64, 96)))
