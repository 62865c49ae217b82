"""Tests for environment settings and the composition root."""

from pathlib import Path

import pytest

from recordshop.application.catalog_service import CatalogService
from recordshop.application.order_service import OrderService
from recordshop.infrastructure.bootstrap import build_services
from recordshop.infrastructure.config import Settings


class TestSettings:

    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings.cache_ttl_seconds == 60
        assert settings.cache_ttl_ms == 60_000
        assert settings.musicbrainz_base_url == "https://musicbrainz.org/ws/2"
        assert settings.data_dir.name == "data"

    def test_overrides(self):
        settings = Settings.from_env({
            "RECORDSHOP_DATA_DIR": "/tmp/shop",
            "RECORDSHOP_CACHE_TTL_SECONDS": "5",
            "MUSICBRAINZ_BASE_URL": "http://localhost:5000/ws/2",
            "MUSICBRAINZ_USER_AGENT": "shop/2.0",
            "MUSICBRAINZ_TIMEOUT_SECONDS": "2.5",
        })
        assert settings.data_dir == Path("/tmp/shop")
        assert settings.cache_ttl_ms == 5000
        assert settings.musicbrainz_base_url == "http://localhost:5000/ws/2"
        assert settings.musicbrainz_user_agent == "shop/2.0"
        assert settings.musicbrainz_timeout_seconds == 2.5

    def test_non_numeric_ttl_rejected(self):
        with pytest.raises(ValueError, match="RECORDSHOP_CACHE_TTL_SECONDS must be a number"):
            Settings.from_env({"RECORDSHOP_CACHE_TTL_SECONDS": "soon"})

    def test_negative_timeout_rejected(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            Settings.from_env({"MUSICBRAINZ_TIMEOUT_SECONDS": "-1"})

    @pytest.mark.parametrize("raw", ["0", "0.0", "nan"])
    def test_zero_timeout_rejected(self, raw):
        with pytest.raises(ValueError, match="MUSICBRAINZ_TIMEOUT_SECONDS must be positive"):
            Settings.from_env({"MUSICBRAINZ_TIMEOUT_SECONDS": raw})

    def test_zero_cache_ttl_allowed(self):
        assert Settings.from_env({"RECORDSHOP_CACHE_TTL_SECONDS": "0"}).cache_ttl_ms == 0


class TestBuildServices:

    def test_wires_services_over_data_dir(self, tmp_path):
        services = build_services(Settings(data_dir=tmp_path))

        assert isinstance(services.catalog, CatalogService)
        assert isinstance(services.orders, OrderService)
        assert (tmp_path / "records.json").exists()
        assert (tmp_path / "orders.json").exists()
