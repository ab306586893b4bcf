"""Tests for the pricing calculator."""

from decimal import Decimal

import pytest
from protean import current_domain

from storefront.ordering.pricing import PricingPolicy, line_total, price_lines, to_money


class TestWorkedExamples:
    def test_free_shipping_over_threshold(self):
        breakdown = price_lines([(20.00, 3)])
        assert breakdown.subtotal == Decimal("60.00")
        assert breakdown.shipping == Decimal("0.00")
        assert breakdown.tax == Decimal("4.80")
        assert breakdown.total == Decimal("64.80")

    def test_flat_fee_under_threshold(self):
        breakdown = price_lines([(10.00, 2)])
        assert breakdown.subtotal == Decimal("20.00")
        assert breakdown.shipping == Decimal("9.99")
        assert breakdown.tax == Decimal("1.60")
        assert breakdown.total == Decimal("31.59")


class TestRules:
    def test_threshold_is_inclusive(self):
        assert price_lines([(25.00, 2)]).shipping == Decimal("0.00")

    def test_just_under_threshold_pays_shipping(self):
        assert price_lines([(49.99, 1)]).shipping == Decimal("9.99")

    def test_multiple_lines_are_summed(self):
        breakdown = price_lines([(12.50, 2), (7.25, 1)])
        assert breakdown.subtotal == Decimal("32.25")

    def test_tax_rounds_half_up_to_cents(self):
        # subtotal is rounded first: 10.56 * 0.08 = 0.8448
        breakdown = price_lines([(10.5625, 1)])
        assert breakdown.subtotal == Decimal("10.56")
        assert breakdown.tax == Decimal("0.84")

    @pytest.mark.parametrize(
        "lines",
        [[(0.01, 1)], [(19.99, 3)], [(33.33, 3), (0.07, 7)], [(49.95, 1), (0.05, 1)]],
    )
    def test_total_is_sum_of_rounded_components(self, lines):
        breakdown = price_lines(lines)
        assert breakdown.total == breakdown.subtotal + breakdown.shipping + breakdown.tax
        assert breakdown.total == to_money(breakdown.total)

    def test_float_noise_does_not_leak(self):
        assert line_total(0.1, 3) == Decimal("0.30")


class TestPolicy:
    def test_custom_policy(self):
        policy = PricingPolicy(
            free_shipping_threshold=Decimal("100"),
            flat_shipping_fee=Decimal("5.00"),
            tax_rate=Decimal("0.10"),
        )
        breakdown = price_lines([(20.00, 3)], policy)
        assert breakdown.shipping == Decimal("5.00")
        assert breakdown.tax == Decimal("6.00")
        assert breakdown.total == Decimal("71.00")

    def test_policy_from_domain_config(self):
        policy = PricingPolicy.from_domain(current_domain)
        assert policy.free_shipping_threshold == Decimal("50.00")
        assert policy.flat_shipping_fee == Decimal("9.99")
        assert policy.tax_rate == Decimal("0.08")
