"""
Tests: compute_pricing — option assembly, regimes and invariants.

Run with:
    pytest laundromat_quotes/tests/test_engine.py -v
"""

import pytest
from laundromat_quotes.models.enums import PricingOptionName, PricingRegime
from laundromat_quotes.models.schemas import QuoteConfiguration
from laundromat_quotes.pricing.catalog import PriceCatalog
from laundromat_quotes.pricing.engine import compute_pricing, price_charges
from laundromat_quotes.pricing.financing import loan_payment, present_value


@pytest.fixture
def catalog():
    return PriceCatalog()


@pytest.fixture
def store():
    return QuoteConfiguration(
        num_washers=18,
        num_dryers=22,
        wants_wdf=True,
        has_ai_attendant=True,
        kiosks={"rearLoad": {"selected": True, "quantity": 1}, "creditOnly": {"selected": True, "quantity": 2}},
        monthly_base_revenue=30_000,
    )


class TestStandardQuote:
    def test_four_options_in_order(self, store, catalog):
        result = compute_pricing(store, catalog)
        assert [o.name for o in result.options] == [
            PricingOptionName.TOTAL_PRICE,
            PricingOptionName.FINANCED,
            PricingOptionName.MONTHLY_PLAN,
            PricingOptionName.SPECIAL_PROMOTION,
        ]
        assert result.regime == PricingRegime.STANDARD
        assert result.selected_option == PricingOptionName.TOTAL_PRICE

    def test_totals_are_sums_of_line_items(self, store, catalog):
        result = compute_pricing(store, catalog)
        assert result.monthly_recurring_total == sum(i.amount for i in result.charges.monthly.items)
        assert result.one_time_charges_total == sum(i.amount for i in result.charges.one_time.items)

    def test_total_price_option(self, store, catalog):
        result = compute_pricing(store, catalog)
        option = result.option(PricingOptionName.TOTAL_PRICE)
        expected = result.monthly_recurring_total * 48 + result.one_time_charges_total
        assert option.total == pytest.approx(expected)
        assert option.upfront_payment == option.total

    def test_financed_option(self, store, catalog):
        result = compute_pricing(store, catalog)
        financing = result.financing
        pv = present_value(result.monthly_recurring_total, 48, 0.125)
        assert financing.present_value == pytest.approx(pv)
        assert financing.total_to_finance == pytest.approx(pv + result.one_time_charges_total)
        assert financing.monthly_payment == pytest.approx(loan_payment(financing.total_to_finance, 9.0, 48))
        assert result.option(PricingOptionName.FINANCED).total == financing.monthly_payment

    def test_monthly_plan_option(self, store, catalog):
        result = compute_pricing(store, catalog)
        option = result.option(PricingOptionName.MONTHLY_PLAN)
        assert option.monthly_payment == result.monthly_recurring_total
        assert option.upfront_payment == result.one_time_charges_total

    def test_promotion_is_cheaper_than_total_price(self, store, catalog):
        result = compute_pricing(store, catalog)
        promo = result.option(PricingOptionName.SPECIAL_PROMOTION)
        full = result.option(PricingOptionName.TOTAL_PRICE)
        assert promo.total < full.total

    def test_rate_change_moves_only_financed_figures(self, store, catalog):
        base = compute_pricing(store, catalog)
        higher = compute_pricing(store.model_copy(update={"financing_interest_rate_percent": 12.0}), catalog)
        assert higher.financing.monthly_payment > base.financing.monthly_payment
        assert higher.monthly_recurring_total == base.monthly_recurring_total
        assert higher.interest_rate_percent == 12.0

    def test_idempotent(self, store, catalog):
        assert compute_pricing(store, catalog) == compute_pricing(store, catalog)

    def test_json_dump_has_numbers(self, store, catalog):
        data = compute_pricing(store, catalog).model_dump(mode="json")
        assert isinstance(data["monthly_recurring_total"], float)
        assert data["selected_option"] == "total_price"

    def test_default_catalog_used_when_omitted(self, store, catalog):
        assert compute_pricing(store) == compute_pricing(store, catalog)


class TestSpecialPromotion:
    def test_top_level_totals_use_promotion(self, store, catalog):
        promo_store = store.model_copy(update={"is_special_promotion": True})
        result = compute_pricing(promo_store, catalog)
        promotion = price_charges(promo_store, catalog, discounted=True, promotional=True)
        assert result.regime == PricingRegime.PROMOTION
        assert result.selected_option == PricingOptionName.SPECIAL_PROMOTION
        assert result.monthly_recurring_total == promotion.monthly.total
        assert result.one_time_charges_total == promotion.one_time.total

    def test_financing_stays_on_standard_prices(self, store, catalog):
        plain = compute_pricing(store, catalog)
        promo = compute_pricing(store.model_copy(update={"is_special_promotion": True}), catalog)
        assert promo.financing == plain.financing


class TestDistributorQuote:
    def test_single_distributor_option(self, store, catalog):
        result = compute_pricing(store.model_copy(update={"distributor_name": "Acme Supply"}), catalog)
        assert result.regime == PricingRegime.DISTRIBUTOR
        assert result.is_distributor
        assert [o.name for o in result.options] == [PricingOptionName.DISTRIBUTOR]
        assert result.financing is None

    def test_whitespace_name_is_not_distributor(self, store, catalog):
        result = compute_pricing(store.model_copy(update={"distributor_name": "   "}), catalog)
        assert result.regime == PricingRegime.STANDARD

    def test_monthly_matches_promotion(self, store, catalog):
        distributor = compute_pricing(store.model_copy(update={"distributor_name": "Acme Supply"}), catalog)
        standard = compute_pricing(store, catalog)
        promo = standard.option(PricingOptionName.SPECIAL_PROMOTION)
        assert distributor.monthly_recurring_total == promo.charges.monthly.total

    def test_kiosks_discounted(self, store, catalog):
        result = compute_pricing(store.model_copy(update={"distributor_name": "Acme Supply"}), catalog)
        amounts = {i.name: i.amount for i in result.charges.one_time.items}
        assert amounts["Rear Load Kiosk"] == pytest.approx(9925 * 0.7)
        assert amounts["Credit Card Only Kiosk"] == pytest.approx(2295 * 2 * 0.7)
        # Non-kiosk one-time items keep the standard schedule
        assert amounts["Full Network Package"] == 1875.0

    def test_distributor_total(self, store, catalog):
        result = compute_pricing(store.model_copy(update={"distributor_name": "Acme Supply"}), catalog)
        expected = result.monthly_recurring_total * 48 + result.one_time_charges_total
        assert result.options[0].total == pytest.approx(expected)


class TestRevenueImpact:
    def test_projection(self, store, catalog):
        revenue = compute_pricing(store, catalog).revenue_impact
        assert revenue.baseline_monthly == 30_000
        assert revenue.added_monthly == pytest.approx(30_000 * 0.153)
        assert revenue.projected_monthly == pytest.approx(30_000 * 1.153)
        assert revenue.projected_weekly == pytest.approx(30_000 * 1.153 / 4.33)
        assert revenue.added_annual == pytest.approx(30_000 * 0.153 * 12)

    def test_operational_savings_scale_with_machines(self, store, catalog):
        revenue = compute_pricing(store, catalog).revenue_impact
        assert revenue.savings_annual == pytest.approx(5_500 / 30 * 40)
        assert revenue.savings_weekly == pytest.approx(revenue.savings_annual / 52)

    def test_no_revenue_given(self, catalog):
        revenue = compute_pricing(QuoteConfiguration(), catalog).revenue_impact
        assert revenue.projected_monthly == 0
        assert revenue.savings_annual == 0
