"""Encryption protocol for stored API keys.

Defines the port for encrypting secrets at rest. The infrastructure
adapter (apihub/infrastructure/security/encryption_service.py) uses
AES-256-GCM.
"""

from dataclasses import dataclass
from typing import Protocol

from apihub.core.errors import DomainError
from apihub.core.result import Result


# =============================================================================
# Encryption Error Types (Domain Layer)
# =============================================================================


@dataclass(frozen=True, slots=True, kw_only=True)
class EncryptionError(DomainError):
    """Base encryption error.

    Does NOT inherit from Exception - used in Result types.
    """

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class EncryptionKeyError(EncryptionError):
    """Invalid encryption key (wrong length, unusable material)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class DecryptionError(EncryptionError):
    """Ciphertext could not be decrypted.

    Occurs when:
    - The key differs from the one used to encrypt
    - Data has been tampered with
    - Data is too short to contain IV and tag
    """

    pass


# =============================================================================
# Encryption Protocol (Port)
# =============================================================================


class EncryptionProtocol(Protocol):
    """Protocol for symmetric encryption of secret strings."""

    def encrypt(self, plaintext: str) -> Result[bytes, EncryptionError]:
        """Encrypt a secret.

        Args:
            plaintext: Secret to protect.

        Returns:
            Success(bytes) with IV || ciphertext || tag.
            Failure(EncryptionError) if encryption fails.
        """
        ...

    def decrypt(self, encrypted: bytes) -> Result[str, EncryptionError]:
        """Decrypt bytes produced by encrypt().

        Args:
            encrypted: Ciphertext.

        Returns:
            Success(str) with the original secret.
            Failure(DecryptionError) on wrong key or tampered data.
        """
        ...
