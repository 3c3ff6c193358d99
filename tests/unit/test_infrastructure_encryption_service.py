"""Unit tests for EncryptionService (AES-256-GCM)."""

import os

import pytest

from apihub.core.enums import ErrorCode
from apihub.core.result import Failure, Success
from apihub.infrastructure.security.encryption_service import (
    IV_SIZE,
    TAG_SIZE,
    EncryptionService,
)


@pytest.fixture
def service():
    return EncryptionService.create(os.urandom(32)).value


@pytest.mark.unit
class TestEncryptionServiceCreate:
    """Key validation."""

    def test_accepts_32_byte_key(self):
        assert isinstance(EncryptionService.create(b"k" * 32), Success)

    @pytest.mark.parametrize("length", [0, 16, 31, 33, 64])
    def test_rejects_other_lengths(self, length):
        result = EncryptionService.create(b"k" * length)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.ENCRYPTION_KEY_INVALID
        assert result.error.details["actual_length"] == str(length)


@pytest.mark.unit
class TestEncryptDecrypt:
    """Ciphertext layout and tamper detection."""

    def test_round_trip_unicode(self, service):
        encrypted = service.encrypt("clé-🔑-123").value

        assert service.decrypt(encrypted).value == "clé-🔑-123"

    def test_layout_is_iv_ciphertext_tag(self, service):
        encrypted = service.encrypt("abcd").value

        assert len(encrypted) == IV_SIZE + len(b"abcd") + TAG_SIZE

    def test_random_iv_per_call(self, service):
        assert service.encrypt("same").value != service.encrypt("same").value

    def test_wrong_key_fails(self, service):
        encrypted = service.encrypt("secret").value
        other = EncryptionService.create(os.urandom(32)).value

        result = other.decrypt(encrypted)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.DECRYPTION_FAILED
        assert result.error.message == (
            "Failed to decrypt API key: invalid key or tampered data"
        )

    def test_truncated_data_fails(self, service):
        result = service.decrypt(b"short")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.DECRYPTION_FAILED
        assert "too short" in result.error.message
