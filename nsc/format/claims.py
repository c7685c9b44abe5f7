"""
Read-only inspection of signed tokens.

Tokens are decoded without verifying their signature: this is for showing a
user what a pasted token says, not for trusting it.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import jwt

from ..types.errors import InvalidJwtError
from .blocks import extract_token

logger = logging.getLogger(__name__)


@dataclass
class DecodedJwt:
    """Header and claims of an unverified token."""
    token: str
    header: Dict[str, Any] = field(default_factory=dict)
    claims: Dict[str, Any] = field(default_factory=dict)

    @property
    def subject(self) -> Optional[str]:
        return self.claims.get('sub')

    @property
    def issuer(self) -> Optional[str]:
        return self.claims.get('iss')

    @property
    def name(self) -> Optional[str]:
        return self.claims.get('name')

    @property
    def expires(self) -> Optional[datetime]:
        """
        Expiration as an aware UTC datetime.

        None when the token never expires or its ``exp`` isn't a usable timestamp.
        """
        exp = self.claims.get('exp')
        if not exp or isinstance(exp, bool) or not isinstance(exp, (int, float)):
            return None
        try:
            return datetime.fromtimestamp(exp, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            logger.warning("Ignoring out of range exp %r", exp)
            return None


def decode_jwt(text: str) -> DecodedJwt:
    """
    Decode a token, either bare or wrapped in a delimited block.

    Raises InvalidJwtError when the payload isn't a well-formed JWT.
    """
    token = extract_token(text).strip()
    try:
        header = jwt.get_unverified_header(token)
        claims = jwt.decode(token, options={'verify_signature': False})
    except jwt.PyJWTError as e:
        logger.warning("Failed to decode jwt: %s", e)
        raise InvalidJwtError(text, cause=e) from e

    logger.debug("Decoded %s token for subject %s", header.get('typ'), claims.get('sub'))
    return DecodedJwt(token=token, header=header, claims=claims)
