"""Shared test fixtures."""

from decimal import Decimal

import pytest

from src.p2p_common.enums import PaymentMethod, TradeOfferStatus, TradeOfferType
from src.p2p_offer.domain.models import TradeOffer

AUTHOR_KEY = "a" * 64


@pytest.fixture
def author_key() -> str:
    return AUTHOR_KEY


@pytest.fixture
def full_offer() -> TradeOffer:
    """Fixed-price offer with every optional field populated."""
    return TradeOffer(
        id="offer-1",
        type=TradeOfferType.BUY,
        amount_sats=50_000_000,
        currency="EUR",
        price=Decimal("45000.50"),
        use_market_price=False,
        min_trade_sats=1_000_000,
        max_trade_sats=40_000_000,
        payment_method=PaymentMethod.CASH_IN_PERSON,
        location="Berlin",
        description="Meet at the cafe near the station.",
        terms="ID required.",
        escrow_time_hours=48,
        creator_pubkey=AUTHOR_KEY,
        creator_display_name="satoshi",
        status=TradeOfferStatus.PAUSED,
    )


@pytest.fixture
def market_offer() -> TradeOffer:
    return TradeOffer(
        type=TradeOfferType.SELL,
        amount_sats=150_000_000,
        currency="USD",
        price=Decimal("0"),
        use_market_price=True,
        premium_percent=Decimal("5"),
        min_trade_sats=100_000,
        max_trade_sats=150_000_000,
        payment_method=PaymentMethod.BANK_TRANSFER,
    )
