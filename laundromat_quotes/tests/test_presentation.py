"""
Tests: Kiosk/service descriptions, the printed summary and the CLI run.

Run with:
    pytest laundromat_quotes/tests/test_presentation.py -v
"""

import json

from laundromat_quotes.main import run
from laundromat_quotes.models.enums import PricingOptionName
from laundromat_quotes.models.schemas import QuoteConfiguration
from laundromat_quotes.pricing.catalog import PriceCatalog
from laundromat_quotes.pricing.engine import compute_pricing
from laundromat_quotes.services.presentation import describe_kiosks, describe_services, render_summary


class TestDescriptions:
    def test_kiosks(self):
        config = QuoteConfiguration(kiosks={
            "rearLoad": {"selected": True, "quantity": 1},
            "creditOnly": {"selected": True, "quantity": 2},
            "frontLoad": {"selected": False, "quantity": 4},
        })
        assert describe_kiosks(config) == "1 Rear Load, 2 Credit Card Only"

    def test_no_kiosks(self):
        assert describe_kiosks(QuoteConfiguration()) == "None"

    def test_selected_zero_quantity_not_described(self):
        config = QuoteConfiguration(kiosks={
            "creditBill": {"selected": True, "quantity": 0},
            "rearLoad": {"selected": True, "quantity": 2},
        })
        assert describe_kiosks(config) == "2 Rear Load"

    def test_services(self):
        config = QuoteConfiguration(
            has_wdf=True,
            wdf_provider="FoldCo",
            wants_pickup_delivery=True,
            has_ai_attendant=True,
            has_ai_attendant_with_integration=True,
        )
        assert describe_services(config) == (
            "Current WDF (FoldCo), Laundry Boss Pickup & Delivery, AI Attendant with Integration"
        )

    def test_self_service_only(self):
        assert describe_services(QuoteConfiguration()) == "Self-service only"


class TestRenderSummary:
    def test_standard_summary(self):
        config = QuoteConfiguration(prospect_name="Suds", num_washers=10, num_dryers=10, monthly_base_revenue=20_000)
        result = compute_pricing(config, PriceCatalog())
        text = "\n".join(render_summary(config, result))
        assert text.startswith("Pricing Quote for Suds")
        assert "$5,475.00" in text
        assert "Option 2: Financed Solution" in text
        assert "Revenue:" in text

    def test_distributor_summary(self):
        config = QuoteConfiguration(distributor_name="Acme", num_washers=4)
        result = compute_pricing(config, PriceCatalog())
        lines = render_summary(config, result)
        assert lines[0] == "Distributor Pricing Quote for Prospect"
        assert any("Distributor: Acme" in line for line in lines)
        assert not any("Option 1" in line for line in lines)


class TestRun:
    def test_sample_store(self):
        result = run()
        assert result.option(PricingOptionName.TOTAL_PRICE).total > 0

    def test_questionnaire_file(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text(json.dumps({"numWashers": 10, "numDryers": 10}))
        result = run(str(path))
        assert result.one_time_charges_total == 5475.0
