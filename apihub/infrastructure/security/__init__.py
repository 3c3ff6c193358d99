"""Security adapters."""

from apihub.infrastructure.security.encryption_service import EncryptionService

__all__ = ["EncryptionService"]
