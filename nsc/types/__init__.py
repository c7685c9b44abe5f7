"""
Package types provides the error taxonomy shared by the nsc parsers and formatters.

Parsing errors subclass both NscError and ValueError and carry the offending
input as ``value`` so the command layer can report it verbatim.
"""

from .errors import (
    ErrorCode,
    NscError,
    ParseError,
    InvalidExpirySyntax,
    UnknownIntervalUnit,
    InvalidNumberSyntax,
    InvalidKeyEncoding,
    InvalidJwtError,
    KeyCapabilityError,
    OutputError,
    ConfigurationError,
)

__all__ = [
    'ErrorCode',
    'NscError',
    'ParseError',
    'InvalidExpirySyntax',
    'UnknownIntervalUnit',
    'InvalidNumberSyntax',
    'InvalidKeyEncoding',
    'InvalidJwtError',
    'KeyCapabilityError',
    'OutputError',
    'ConfigurationError',
]
