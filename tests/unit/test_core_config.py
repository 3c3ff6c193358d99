"""Unit tests for Settings."""

import pytest
from pydantic import ValidationError

from apihub.core.config import Settings
from apihub.core.enums import Environment

REQUIRED = {
    "database_url": "sqlite+aiosqlite:///:memory:",
    "encryption_key": "k" * 32,
    "api_base_url": "https://apihub.example.com",
    "cors_origins": "http://localhost:3000",
}


def make_settings(**overrides) -> Settings:
    return Settings(**{**REQUIRED, **overrides})


@pytest.mark.unit
class TestSettings:
    """Tests for Settings validation and derived properties."""

    def test_defaults(self):
        settings = make_settings(environment="development")

        assert settings.api_v1_prefix == "/api/v1"
        assert settings.app_name == "APIHub"
        assert settings.test_request_follow_redirects is True
        assert settings.is_development is True
        assert settings.is_production is False

    @pytest.mark.parametrize("key", ["short", "k" * 31, "k" * 33])
    def test_encryption_key_must_be_32_bytes(self, key):
        with pytest.raises(ValidationError, match="exactly 32 bytes"):
            make_settings(encryption_key=key)

    def test_multibyte_key_counts_bytes(self):
        with pytest.raises(ValidationError):
            make_settings(encryption_key="é" * 32)

    def test_trailing_slash_stripped(self):
        settings = make_settings(api_base_url="https://apihub.example.com///")

        assert settings.api_base_url == "https://apihub.example.com"

    def test_cors_origin_list(self):
        settings = make_settings(cors_origins=" http://a.test , ,http://b.test")

        assert settings.cors_origin_list == ["http://a.test", "http://b.test"]

    def test_environment_from_string(self):
        settings = make_settings(environment="production")

        assert settings.environment is Environment.PRODUCTION
        assert settings.is_production is True

    def test_unknown_environment_rejected(self):
        with pytest.raises(ValidationError):
            make_settings(environment="staging")

    @pytest.mark.parametrize(
        ("environment", "json_logs"),
        [("development", False), ("testing", True), ("ci", True), ("production", True)],
    )
    def test_json_logs_outside_development(self, environment, json_logs):
        assert make_settings(environment=environment).environment.json_logs is json_logs
