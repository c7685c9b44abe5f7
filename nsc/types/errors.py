"""
Error types and error codes for the nsc parsing and formatting core.
Every parsing failure carries the offending input so callers can show it verbatim.
"""

from enum import Enum
from typing import Dict, Any, Optional


class ErrorCode(str, Enum):
    """Error codes used across nsc."""
    INVALID_EXPIRY_SYNTAX = "invalid_expiry_syntax"
    UNKNOWN_INTERVAL_UNIT = "unknown_interval_unit"
    INVALID_NUMBER_SYNTAX = "invalid_number_syntax"
    INVALID_KEY_ENCODING = "invalid_key_encoding"
    KEY_CAPABILITY = "key_capability"
    INVALID_JWT = "invalid_jwt"
    OUTPUT_ERROR = "output_error"
    CONFIGURATION_ERROR = "configuration_error"
    INTERNAL_ERROR = "internal_error"

    def __str__(self) -> str:
        return self.value


# Error code constants for easy import
INVALID_EXPIRY_SYNTAX = ErrorCode.INVALID_EXPIRY_SYNTAX
UNKNOWN_INTERVAL_UNIT = ErrorCode.UNKNOWN_INTERVAL_UNIT
INVALID_NUMBER_SYNTAX = ErrorCode.INVALID_NUMBER_SYNTAX
INVALID_KEY_ENCODING = ErrorCode.INVALID_KEY_ENCODING
KEY_CAPABILITY = ErrorCode.KEY_CAPABILITY
INVALID_JWT = ErrorCode.INVALID_JWT
OUTPUT_ERROR = ErrorCode.OUTPUT_ERROR
CONFIGURATION_ERROR = ErrorCode.CONFIGURATION_ERROR
INTERNAL_ERROR = ErrorCode.INTERNAL_ERROR


class NscError(Exception):
    """Base exception for all nsc errors."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            'error': self.error_code.value,
            'message': self.message,
            'details': self.details
        }

        if self.cause:
            result['cause'] = str(self.cause)

        return result

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"


class ParseError(NscError, ValueError):
    """Raised when a user-supplied string cannot be interpreted."""

    def __init__(
        self,
        message: str,
        value: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message, error_code, details, cause)
        self.value = value
        self.details['value'] = value


class InvalidExpirySyntax(ParseError):
    """Raised when an expiration expression is neither a date nor a relative interval."""

    def __init__(self, value: str, cause: Optional[Exception] = None):
        super().__init__(
            f"couldn't parse expiry: {value!r}", value, INVALID_EXPIRY_SYNTAX, cause=cause
        )


class UnknownIntervalUnit(ParseError):
    """Raised when a relative expiration uses a unit letter that isn't supported."""

    def __init__(self, value: str, unit: str):
        super().__init__(
            f"unknown interval {unit!r} in {value!r}", value, UNKNOWN_INTERVAL_UNIT,
            details={'unit': unit}
        )
        self.unit = unit


class InvalidNumberSyntax(ParseError):
    """Raised when a count or data size can't be parsed."""

    def __init__(self, value: str, kind: str = "number"):
        super().__init__(
            f"couldn't parse {kind}: {value!r}", value, INVALID_NUMBER_SYNTAX,
            details={'kind': kind}
        )
        self.kind = kind


class InvalidKeyEncoding(ParseError):
    """Raised when a seed or public key fails to decode."""

    def __init__(self, value: str, reason: str = "", cause: Optional[Exception] = None):
        message = f"invalid key encoding: {reason}" if reason else "invalid key encoding"
        super().__init__(message, value, INVALID_KEY_ENCODING, cause=cause)
        self.reason = reason

    def to_dict(self) -> Dict[str, Any]:
        # never echo key material back, it may be a seed
        result = super().to_dict()
        result['details'] = {k: v for k, v in result['details'].items() if k != 'value'}
        return result


class InvalidJwtError(ParseError):
    """Raised when a token can't be decoded as a JWT."""

    def __init__(self, value: str, cause: Optional[Exception] = None):
        reason = f": {cause}" if cause else ""
        super().__init__(f"invalid jwt{reason}", value, INVALID_JWT, cause=cause)


class KeyCapabilityError(NscError):
    """Raised when a key handle is asked for something its kind can't do."""

    def __init__(self, operation: str, kind: str):
        super().__init__(
            f"{operation} requires a seed, handle is {kind}", KEY_CAPABILITY,
            details={'operation': operation, 'kind': kind}
        )
        self.operation = operation
        self.kind = kind


class OutputError(NscError):
    """Raised when formatted output can't be written to its destination."""

    def __init__(self, message: str, path: str, cause: Optional[Exception] = None):
        super().__init__(message, OUTPUT_ERROR, details={'path': path}, cause=cause)
        self.path = path


class ConfigurationError(NscError):
    """Raised when there's a configuration error."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, CONFIGURATION_ERROR, details)
        self.config_key = config_key
        self.config_value = config_value

        if config_key:
            self.details['config_key'] = config_key
        if config_value is not None:
            self.details['config_value'] = str(config_value)
