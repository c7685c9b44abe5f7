"""
Formatting of key material and signed tokens into delimited text blocks, and
recovery of the payload from such blocks.
"""

from .blocks import format_keys, format_jwt, extract_token
from .claims import DecodedJwt, decode_jwt

__all__ = [
    'format_keys',
    'format_jwt',
    'extract_token',
    'DecodedJwt',
    'decode_jwt',
]
