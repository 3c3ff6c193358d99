"""AES-256-GCM encryption for stored API keys.

Format of every ciphertext:
    IV (12 bytes) || encrypted UTF-8 secret || auth tag (16 bytes)

cryptography exceptions are caught here and returned as Failure values.
"""

import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from apihub.core.enums import ErrorCode
from apihub.core.result import Failure, Result, Success
from apihub.domain.protocols.encryption_protocol import (
    DecryptionError,
    EncryptionError,
    EncryptionKeyError,
)

KEY_SIZE = 32
IV_SIZE = 12
TAG_SIZE = 16


class EncryptionService:
    """Encrypt and decrypt secret strings.

    Construct through create(), which validates the key.

    Usage:
        >>> match EncryptionService.create(os.urandom(32)):
        ...     case Success(value=service):
        ...         ciphertext = service.encrypt("sk_live_123").value
        ...     case Failure(error=error):
        ...         ...
    """

    def __init__(self, aesgcm: AESGCM) -> None:
        self._aesgcm = aesgcm

    @classmethod
    def create(cls, key: bytes) -> Result["EncryptionService", EncryptionKeyError]:
        """Build a service from a 32-byte key.

        Args:
            key: Raw key material.

        Returns:
            Success(EncryptionService) or Failure(EncryptionKeyError).
        """
        if len(key) != KEY_SIZE:
            return Failure(
                error=EncryptionKeyError(
                    code=ErrorCode.ENCRYPTION_KEY_INVALID,
                    message=(
                        f"Encryption key must be exactly {KEY_SIZE} bytes, "
                        f"got {len(key)} bytes"
                    ),
                    details={
                        "expected_length": str(KEY_SIZE),
                        "actual_length": str(len(key)),
                    },
                )
            )
        return Success(value=cls(AESGCM(key)))

    def encrypt(self, plaintext: str) -> Result[bytes, EncryptionError]:
        """Encrypt a secret with a random IV.

        Args:
            plaintext: Secret to protect.

        Returns:
            Success(bytes) or Failure(EncryptionError).
        """
        try:
            iv = os.urandom(IV_SIZE)
            ciphertext = self._aesgcm.encrypt(iv, plaintext.encode("utf-8"), None)
        except (OverflowError, ValueError) as e:
            return Failure(
                error=EncryptionError(
                    code=ErrorCode.ENCRYPTION_FAILED,
                    message=f"Encryption failed: {e}",
                )
            )
        return Success(value=iv + ciphertext)

    def decrypt(self, encrypted: bytes) -> Result[str, EncryptionError]:
        """Decrypt bytes produced by encrypt().

        Args:
            encrypted: Stored ciphertext.

        Returns:
            Success(str) or Failure(DecryptionError).
        """
        if len(encrypted) < IV_SIZE + TAG_SIZE:
            return Failure(
                error=DecryptionError(
                    code=ErrorCode.DECRYPTION_FAILED,
                    message=f"Encrypted data too short: {len(encrypted)} bytes",
                )
            )

        try:
            plaintext = self._aesgcm.decrypt(
                encrypted[:IV_SIZE], encrypted[IV_SIZE:], None
            )
            return Success(value=plaintext.decode("utf-8"))
        except (InvalidTag, UnicodeDecodeError):
            return Failure(
                error=DecryptionError(
                    code=ErrorCode.DECRYPTION_FAILED,
                    message="Failed to decrypt API key: invalid key or tampered data",
                )
            )
