"""Tests for p2p_offer.domain.content: markdown body, title and summary."""

from dataclasses import replace
from decimal import Decimal

import pytest

from src.p2p_offer.domain.content import price_text, render_body, render_summary, render_title
from src.p2p_offer.domain.models import TradeOffer


class TestRenderTitle:
    def test_fixed_price(self, full_offer: TradeOffer) -> None:
        assert render_title(full_offer) == "Buying 0.5 BTC for 45000.50 EUR"

    def test_market_price_has_no_price(self, market_offer: TradeOffer) -> None:
        assert render_title(market_offer) == "Selling 1.5 BTC"

    def test_summary(self, full_offer: TradeOffer) -> None:
        assert render_summary(full_offer) == "Buying 0.5 BTC for 45000.50 EUR via Cash in Person"


class TestPriceText:
    @pytest.mark.parametrize("premium,expected", [
        (Decimal("0"), "Market price"),
        (Decimal("5"), "Market +5%"),
        (Decimal("-3"), "Market -3%"),
        (Decimal("1.25"), "Market +1.25%"),
    ])
    def test_market(self, market_offer: TradeOffer, premium: Decimal, expected: str) -> None:
        assert price_text(replace(market_offer, premium_percent=premium)) == expected

    def test_fixed(self, full_offer: TradeOffer) -> None:
        assert price_text(full_offer) == "45000.50 EUR"


class TestRenderBody:
    def test_full_body(self, full_offer: TradeOffer) -> None:
        assert render_body(full_offer) == (
            "## Buying 0.5 BTC\n"
            "\n"
            "**Amount:** 50,000,000 sats\n"
            "**Price:** 45000.50 EUR\n"
            "**Payment:** Cash in Person\n"
            "**Location:** Berlin\n"
            "\n"
            "Meet at the cafe near the station.\n"
            "\n"
            "### Terms\n"
            "ID required.\n"
        )

    def test_minimal_body(self, market_offer: TradeOffer) -> None:
        body = render_body(replace(market_offer, premium_percent=Decimal("0")))
        assert body == (
            "## Selling 1.5 BTC\n"
            "\n"
            "**Amount:** 150,000,000 sats\n"
            "**Price:** Market price\n"
            "**Payment:** Bank Transfer\n"
        )

    def test_empty_optional_fields_omitted(self, full_offer: TradeOffer) -> None:
        body = render_body(replace(full_offer, location="", description="", terms=None))
        assert "**Location:**" not in body
        assert "### Terms" not in body
        assert body.endswith("**Payment:** Cash in Person\n")

    def test_terms_without_description(self, full_offer: TradeOffer) -> None:
        body = render_body(replace(full_offer, description=None))
        assert body.endswith("**Location:** Berlin\n\n### Terms\nID required.\n")
