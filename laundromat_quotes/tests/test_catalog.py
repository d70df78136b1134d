"""
Tests: Price catalog defaults, regimes and loading.

Run with:
    pytest laundromat_quotes/tests/test_catalog.py -v
"""

import json

import pytest
from pydantic import ValidationError
from laundromat_quotes.config import Settings, get_settings
from laundromat_quotes.models.schemas import QuoteConfiguration
from laundromat_quotes.pricing.catalog import KioskPrices, MonthlyPrices, PriceCatalog, load_catalog


class TestPriceCatalog:
    def test_defaults(self):
        catalog = PriceCatalog()
        assert catalog.monthly.washer == 5.0
        assert catalog.one_time.qr_code_per_sheet == 110.0
        assert catalog.one_time.self_install == 500.0
        assert catalog.kiosks.front_load == 13500.0
        assert catalog.financing.term_months == 48

    def test_promotional_schedule_is_separate(self):
        catalog = PriceCatalog()
        assert catalog.promotional_one_time.network_package == 1300.0
        assert catalog.promotional_one_time.harness_per_machine == catalog.one_time.harness_per_machine
        assert catalog.one_time.network_package == 1875.0

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            KioskPrices(rear_load=-1)

    def test_immutable(self):
        catalog = PriceCatalog()
        with pytest.raises(ValidationError):
            catalog.monthly.washer = 1.0

    def test_resolve_standard(self):
        prices = PriceCatalog().resolve(discounted=False)
        assert prices.monthly == MonthlyPrices()
        assert prices.kiosk_factor == 1.0

    def test_resolve_discounted(self):
        prices = PriceCatalog().resolve(discounted=True, promotional=True)
        assert prices.monthly.ai_attendant == pytest.approx(40.0)
        assert prices.kiosk_factor == 0.7
        assert prices.one_time.sign_package == 100.0
        # Kiosk unit prices stay at list; the factor applies to the extended amount
        assert prices.kiosks.rear_load == 9925.0


class TestLoadCatalog:
    def test_partial_file_keeps_defaults(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps({"kiosks": {"rear_load": 6250}}))
        catalog = load_catalog(path)
        assert catalog.kiosks.rear_load == 6250.0
        assert catalog.kiosks.front_load == 13500.0
        assert catalog.monthly.washer == 5.0

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_catalog(tmp_path / "nope.json")

    def test_invalid_price_in_file(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps({"monthly": {"washer": -5}}))
        with pytest.raises(ValidationError):
            load_catalog(path)


class TestSettings:
    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("QUOTES_DEFAULT_INTEREST_RATE_PERCENT", "7.25")
        monkeypatch.setenv("QUOTES_QUOTE_VALIDITY_DAYS", "14")
        settings = Settings()
        assert settings.default_interest_rate_percent == 7.25
        assert settings.quote_validity_days == 14
        assert settings.default_quote_status == "New"

    def test_default_rate_comes_from_settings(self, monkeypatch):
        monkeypatch.setenv("QUOTES_DEFAULT_INTEREST_RATE_PERCENT", "6.5")
        get_settings.cache_clear()
        try:
            assert QuoteConfiguration().financing_interest_rate_percent == 6.5
            assert QuoteConfiguration(financing_interest_rate_percent="").financing_interest_rate_percent == 6.5
        finally:
            get_settings.cache_clear()

    def test_catalog_has_no_rate_of_its_own(self):
        assert "default_interest_rate_percent" not in PriceCatalog().financing.model_dump()
