"""
nsc Python Package

Parsing and formatting core for NATS credential tooling: expiration, count and
data size arguments, delimited key/JWT blocks, and nkey recognition.
"""

__version__ = "0.1.0"

from .parse import parse_expiry, parse_number, parse_data_size
from .format import format_keys, format_jwt, extract_token, decode_jwt, DecodedJwt
from .keys import KeyCategory, KeyKind, KeyPairHandle, looks_like_nkey, parse_nkey
from .types import (
    NscError,
    InvalidExpirySyntax,
    UnknownIntervalUnit,
    InvalidNumberSyntax,
    InvalidKeyEncoding,
    InvalidJwtError,
    KeyCapabilityError,
    OutputError,
)

__all__ = [
    "parse_expiry",
    "parse_number",
    "parse_data_size",
    "format_keys",
    "format_jwt",
    "extract_token",
    "decode_jwt",
    "DecodedJwt",
    "KeyCategory",
    "KeyKind",
    "KeyPairHandle",
    "looks_like_nkey",
    "parse_nkey",
    "NscError",
    "InvalidExpirySyntax",
    "UnknownIntervalUnit",
    "InvalidNumberSyntax",
    "InvalidKeyEncoding",
    "InvalidJwtError",
    "KeyCapabilityError",
    "OutputError",
]
