"""Trade offer domain model: pure dataclass, no transport dependency."""
from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal

from src.p2p_common.datetime_utils import utc_now
from src.p2p_common.enums import PaymentMethod, TradeOfferStatus, TradeOfferType
from src.p2p_common.sats import SATS_PER_BTC, format_fiat

DEFAULT_OFFER_LIFETIME = timedelta(days=7)


@dataclass
class TradeOffer:
    type: TradeOfferType
    amount_sats: int
    currency: str  # USD, EUR, GBP, ...
    price: Decimal  # fiat per BTC; meaningless when use_market_price
    payment_method: PaymentMethod
    use_market_price: bool = False
    premium_percent: Decimal = Decimal("0")  # signed offset from market price
    min_trade_sats: int = 0
    max_trade_sats: int = 0
    location: str | None = None
    location_detail: str | None = None  # private, never published
    description: str | None = None
    terms: str | None = None
    escrow_time_hours: int = 24
    # Identity
    id: str | None = None
    creator_pubkey: str = ""
    creator_display_name: str = ""
    # Lifecycle
    status: TradeOfferStatus = TradeOfferStatus.DRAFT
    nostr_event_id: str | None = None
    created_at: datetime | None = None
    published_at: datetime | None = None
    expires_at: datetime | None = None
    completed_at: datetime | None = None

    @property
    def amount_btc(self) -> Decimal:
        return Decimal(self.amount_sats) / SATS_PER_BTC

    @property
    def min_trade_btc(self) -> Decimal:
        return Decimal(self.min_trade_sats) / SATS_PER_BTC

    @property
    def max_trade_btc(self) -> Decimal:
        return Decimal(self.max_trade_sats) / SATS_PER_BTC

    @property
    def total_fiat_value(self) -> Decimal:
        return self.amount_btc * self.price

    @property
    def effective_price(self) -> Decimal:
        """Price after premium; the caller supplies market price via ``price``."""
        if self.use_market_price:
            return self.price * (1 + self.premium_percent / 100)
        return self.price

    @property
    def is_active(self) -> bool:
        return self.status is TradeOfferStatus.ACTIVE

    def is_expired(self, now: datetime | None = None) -> bool:
        return self.expires_at is not None and (now or utc_now()) > self.expires_at

    @property
    def short_description(self) -> str:
        verb = "Buying" if self.type is TradeOfferType.BUY else "Selling"
        return f"{verb} {self.amount_btc:.8f} BTC for {self.currency} {format_fiat(self.price)}"

    @property
    def display_summary(self) -> str:
        parts = [self.short_description, self.payment_method.display_name]
        if self.location:
            parts.append(self.location)
        return " • ".join(parts)

    # --- lifecycle transitions (no-ops when the current status disallows them) ---

    def publish(self, now: datetime | None = None) -> None:
        if self.status is not TradeOfferStatus.DRAFT:
            return
        now = now or utc_now()
        self.status = TradeOfferStatus.ACTIVE
        self.published_at = now
        if self.expires_at is None:
            self.expires_at = now + DEFAULT_OFFER_LIFETIME

    def pause(self) -> None:
        if self.status is TradeOfferStatus.ACTIVE:
            self.status = TradeOfferStatus.PAUSED

    def cancel(self, now: datetime | None = None) -> None:
        self.status = TradeOfferStatus.CANCELLED
        self.completed_at = now or utc_now()

    def complete(self, now: datetime | None = None) -> None:
        self.status = TradeOfferStatus.COMPLETED
        self.completed_at = now or utc_now()
