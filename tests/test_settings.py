"""
==============================================================================
Settings Tests
==============================================================================

Tests for environment-based configuration.

==============================================================================
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from catalog_api.config import Settings


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Run each test away from any local .env file and catalog variables."""
    monkeypatch.chdir(tmp_path)
    for name in ("APP_ENV", "DEBUG", "PORT", "DEFAULT_LIMIT", "MAX_LIMIT", "PRODUCTS_FILE", "CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    """Tests for the Settings class."""

    def test_defaults(self):
        """Test default values."""
        settings = Settings()
        assert settings.app_name == "Product Catalog API"
        assert settings.default_limit == 20
        assert settings.max_limit == 100
        assert settings.products_path is None
        assert settings.app_env == "development"
        assert settings.docs_enabled

    def test_env_override(self, monkeypatch):
        """Test environment variables override defaults."""
        monkeypatch.setenv("DEFAULT_LIMIT", "5")
        monkeypatch.setenv("MAX_LIMIT", "10")
        monkeypatch.setenv("PRODUCTS_FILE", "data/products.json")
        settings = Settings()
        assert settings.default_limit == 5
        assert settings.max_limit == 10
        assert settings.products_path == Path("data/products.json")

    def test_blank_products_file_is_unset(self, monkeypatch):
        """Test an empty PRODUCTS_FILE means the built-in catalog."""
        monkeypatch.setenv("PRODUCTS_FILE", "  ")
        assert Settings().products_path is None

    def test_unknown_env_defaults_to_development(self, monkeypatch):
        """Test unknown environments fall back to development."""
        monkeypatch.setenv("APP_ENV", "qa")
        assert Settings().app_env == "development"

    def test_production_env(self, monkeypatch):
        """Test environment names are normalized."""
        monkeypatch.setenv("APP_ENV", " Production ")
        settings = Settings()
        assert settings.is_production
        assert not settings.docs_enabled

    def test_default_limit_above_max_rejected(self, monkeypatch):
        """Test default_limit may not exceed max_limit."""
        monkeypatch.setenv("DEFAULT_LIMIT", "50")
        monkeypatch.setenv("MAX_LIMIT", "10")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_port_rejected(self, monkeypatch):
        """Test port range validation."""
        monkeypatch.setenv("PORT", "70000")
        with pytest.raises(ValidationError):
            Settings()

    def test_cors_origins_list(self, monkeypatch):
        """Test CORS origins parsing with fallback."""
        monkeypatch.setenv("CORS_ORIGINS", '["http://localhost:3000"]')
        assert Settings().cors_origins_list == ["http://localhost:3000"]

        monkeypatch.setenv("CORS_ORIGINS", "not-json")
        assert Settings().cors_origins_list == ["*"]
