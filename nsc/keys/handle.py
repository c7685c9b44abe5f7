"""
Key-pair handles returned by the key classifier.

A handle is either seed-backed (can sign and derive its public key) or
public-only (can verify). The caller owns the handle and should ``wipe()`` it,
or use it as a context manager, once the seed is no longer needed.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from nacl.exceptions import BadSignatureError
from nacl.signing import VerifyKey

from ..types.errors import KeyCapabilityError
from .prefix import KeyCategory

logger = logging.getLogger(__name__)


class KeyKind(str, Enum):
    SEED = "seed"
    PUBLIC = "public"

    def __str__(self) -> str:
        return self.value


def _text(value: Any) -> str:
    return value.decode('ascii') if isinstance(value, (bytes, bytearray)) else value


@dataclass(repr=False)
class KeyPairHandle:
    """Opaque wrapper over decoded key material."""
    kind: KeyKind
    category: KeyCategory
    verify_key: VerifyKey
    public_key: str
    _keypair: Optional[Any] = None

    @classmethod
    def from_keypair(cls, keypair: Any, category: KeyCategory, verify_key: VerifyKey) -> 'KeyPairHandle':
        return cls(
            kind=KeyKind.SEED,
            category=category,
            verify_key=verify_key,
            public_key=_text(keypair.public_key),
            _keypair=keypair,
        )

    @classmethod
    def from_public(cls, public_key: str, category: KeyCategory, verify_key: VerifyKey) -> 'KeyPairHandle':
        return cls(
            kind=KeyKind.PUBLIC,
            category=category,
            verify_key=verify_key,
            public_key=public_key,
        )

    @property
    def is_seed(self) -> bool:
        return self.kind is KeyKind.SEED

    @property
    def wiped(self) -> bool:
        return self.is_seed and self._keypair is None

    def _require_seed(self, operation: str) -> Any:
        if self._keypair is None:
            kind = "wiped" if self.wiped else str(self.kind)
            raise KeyCapabilityError(operation, kind)
        return self._keypair

    @property
    def seed(self) -> str:
        return _text(self._require_seed("seed").seed)

    def sign(self, data: bytes) -> bytes:
        """Sign ``data`` with the seed. Public-only handles can't sign."""
        return self._require_seed("sign").sign(data)

    def verify(self, data: bytes, signature: bytes) -> bool:
        """Check an Ed25519 signature against this handle's public key."""
        try:
            self.verify_key.verify(data, signature)
        except (BadSignatureError, ValueError):
            return False
        return True

    def wipe(self) -> None:
        """Drop the seed. The public key stays available."""
        if self._keypair is not None:
            self._keypair.wipe()
            self._keypair = None
            logger.debug("Wiped seed for %s", self.public_key)

    def __enter__(self) -> 'KeyPairHandle':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.wipe()

    def __repr__(self) -> str:
        return f"KeyPairHandle(kind={self.kind.value}, category={self.category.name}, public_key={self.public_key!r})"
